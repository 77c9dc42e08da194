"""Rendering: docker run command, cluster manifests, systemd unit."""

from defender_installer.render.docker import build_run_command, format_command
from defender_installer.render.manifests import generate_manifests, manifest_dir_name
from defender_installer.render.systemd import generate_unit, unit_filename

__all__ = [
    "build_run_command",
    "format_command",
    "generate_manifests",
    "generate_unit",
    "manifest_dir_name",
    "unit_filename",
]
