"""Local execution: subprocess transport, docker CLI, systemd."""

from defender_installer.runtime.docker import (
    RUNTIME,
    check_prereqs,
    registry_host,
    registry_login,
    run_container,
)
from defender_installer.runtime.shell import make_run_cmd, make_write_file
from defender_installer.runtime.systemd import (
    SYSTEMD_RUN_DIR,
    UNIT_DIR,
    install_service,
    sudo_prefix,
    systemd_available,
)

__all__ = [
    "RUNTIME",
    "SYSTEMD_RUN_DIR",
    "UNIT_DIR",
    "check_prereqs",
    "install_service",
    "make_run_cmd",
    "make_write_file",
    "registry_host",
    "registry_login",
    "run_container",
    "sudo_prefix",
    "systemd_available",
]
