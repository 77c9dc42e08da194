"""systemd registration: write the unit, reload, enable and start it."""

import logging
import os

from defender_installer.render.systemd import generate_unit, unit_filename

logger = logging.getLogger(__name__)

SYSTEMD_RUN_DIR = "/run/systemd/system"
UNIT_DIR = "/etc/systemd/system"


def systemd_available(run_dir=SYSTEMD_RUN_DIR):
    """True when the host is booted with systemd."""
    return os.path.isdir(run_dir)


def sudo_prefix():
    """Privilege escalation prefix: empty when already root."""
    if os.geteuid() == 0:
        return []
    return ["sudo"]


def install_service(run_cmd, name, runtime_path, unit_dir=UNIT_DIR, sudo=None):
    """Write <name>.service, reload systemd and enable --now the unit.

    Each step needs root. Returns False at the first failing step.
    """
    if sudo is None:
        sudo = sudo_prefix()
    service = unit_filename(name)
    unit_path = os.path.join(unit_dir, service)

    logger.info(f"Writing systemd unit to {unit_path}")
    rc, _, stderr = run_cmd([*sudo, "tee", unit_path], stream=False, stdin_text=generate_unit(name, runtime_path))
    if rc != 0:
        logger.error(f"Failed to write {unit_path}: {stderr.strip()}")
        return False

    logger.info("Reloading systemd and enabling service...")
    rc, _, _ = run_cmd([*sudo, "systemctl", "daemon-reload"])
    if rc != 0:
        logger.error("systemctl daemon-reload failed")
        return False

    rc, _, _ = run_cmd([*sudo, "systemctl", "enable", "--now", service])
    if rc != 0:
        logger.error(f"Failed to enable {service}")
        return False

    logger.info(f"Service enabled. Use 'sudo systemctl status {service}' to check.")
    return True
