"""Local transport: run commands and write files on this host."""

import logging
import os
import shlex
import subprocess

logger = logging.getLogger(__name__)


def make_run_cmd(dry_run=False):
    """Create a run_cmd callable for local execution.

    run_cmd(command, stream=True, stdin_text=None) -> (returncode, stdout, stderr)

    With stream=True the child's output goes straight to the terminal and the
    returned stdout/stderr are empty.
    """

    def run_cmd(command, stream=True, stdin_text=None):
        if dry_run:
            logger.info(f"[dry-run] {shlex.join(command)}")
            return 0, "", ""

        try:
            result = subprocess.run(
                command,
                input=stdin_text,
                text=True,
                stdout=None if stream else subprocess.PIPE,
                stderr=None if stream else subprocess.PIPE,
            )
        except FileNotFoundError:
            logger.error(f"Error: '{command[0]}' not found. Is it installed and on PATH?")
            return 127, "", f"'{command[0]}' not found"
        except OSError as e:
            logger.error(f"Error running command: {e}")
            return 1, "", str(e)
        stdout = "" if stream else (result.stdout or "")
        stderr = "" if stream else (result.stderr or "")
        return result.returncode, stdout, stderr

    return run_cmd


def make_write_file(base_dir, dry_run=False):
    """Create a write_file callable for local file writes under base_dir."""

    def write_file(path, content):
        full_path = os.path.join(base_dir, path)
        if dry_run:
            logger.info(f"[dry-run] write {full_path}")
            return full_path
        os.makedirs(os.path.dirname(full_path) or ".", exist_ok=True)
        with open(full_path, "w") as f:
            f.write(content)
        return full_path

    return write_file
