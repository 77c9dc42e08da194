"""Docker CLI collaboration: prerequisite check, registry login, container start."""

import logging
import shutil

from defender_installer.redact import register_secret

logger = logging.getLogger(__name__)

RUNTIME = "docker"


def check_prereqs(run_cmd, which=shutil.which):
    """Verify docker is on PATH and warn if the daemon does not answer.

    Returns:
        Resolved path of the docker executable, or None if it is missing.
    """
    path = which(RUNTIME)
    if path is None:
        logger.error(
            "Error: docker is not installed or not in PATH. "
            "Install Docker or enable Docker Desktop and re-run."
        )
        return None

    rc, _, _ = run_cmd([RUNTIME, "info"], stream=False)
    if rc != 0:
        logger.warning(
            "Warning: Docker appears not to be running or your user lacks permission. "
            "You may need to run this installer with sudo or start Docker."
        )
    return path


def registry_host(image):
    """Registry host of an image reference, or None for Docker Hub images."""
    first, sep, _ = image.partition("/")
    if sep and ("." in first or ":" in first or first == "localhost"):
        return first
    return None


def registry_login(run_cmd, credentials, image):
    """Log in to the image's registry, feeding the password on stdin."""
    register_secret(credentials.password)
    cmd = [RUNTIME, "login"]
    host = registry_host(image)
    if host is not None:
        cmd.append(host)
    cmd.extend(["--username", credentials.username, "--password-stdin"])

    logger.info("Logging in to registry...")
    rc, _, _ = run_cmd(cmd, stdin_text=credentials.password + "\n")
    return rc == 0


def run_container(run_cmd, command):
    """Execute an assembled docker run command. Output passes through to the terminal."""
    rc, _, _ = run_cmd(command)
    return rc == 0
