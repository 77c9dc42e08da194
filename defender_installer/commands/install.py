"""Install command: interactive Defender deployment via docker run or cluster manifests."""

import logging
import os
import shutil
import sys

from defender_installer.intake import (
    ConsoleInput,
    collect,
    confirm,
    identity_fields,
    option_fields,
)
from defender_installer.render import (
    build_run_command,
    format_command,
    generate_manifests,
    manifest_dir_name,
)
from defender_installer.render.manifests import SCC_GRANTS_FILE
from defender_installer.runtime import (
    check_prereqs,
    install_service,
    make_run_cmd,
    make_write_file,
    registry_login,
    run_container,
    systemd_available,
)
from defender_installer.spec import (
    DeploymentSpec,
    Mode,
    Platform,
    RegistryCredentials,
    load_defaults,
)

logger = logging.getLogger(__name__)

HEADER = "----------------------------------------"


def _print_header():
    logger.info(HEADER)
    logger.info("Prisma Cloud Defender - Interactive Installer")
    logger.info(HEADER)


def _deploy_container(spec, source, run_cmd, runtime_path, systemd_present):
    """Show the docker run command, run it on confirmation, offer a systemd unit."""
    command = build_run_command(spec)

    logger.info("")
    logger.info("--- Generated docker run command ---")
    logger.info(format_command(command))
    logger.info("")

    if confirm(source, "Execute the above command now?", default=True):
        if not run_container(run_cmd, command):
            logger.error("docker run failed. Inspect Docker logs and the command above.")
            return False
        logger.info("Container started.")
    else:
        logger.info("Skipping execution. You can run the printed command manually.")

    if systemd_present and confirm(
        source, "Create a small systemd service to ensure the container starts on boot?", default=True
    ):
        # The container is already handled; a failed unit install does not fail the run.
        if not install_service(run_cmd, spec.name, runtime_path):
            logger.warning("systemd service was not installed. Re-run with sufficient privileges to add it.")
    return True


def _write_manifests(spec, source, write_file, output_dir):
    """Write the manifests and explain how to apply them. Never applies them itself."""
    dir_name = manifest_dir_name(spec)
    manifest_dir = os.path.join(output_dir, dir_name)
    docs = generate_manifests(spec)
    try:
        for filename, content in docs:
            write_file(os.path.join(dir_name, filename), content)
    except OSError as e:
        logger.error(f"Error: cannot write manifests to {manifest_dir}: {e}")
        return False

    logger.info("")
    logger.info(f"--- Generated {spec.cluster.platform.value} manifests in {manifest_dir} ---")
    for filename, _ in docs:
        logger.info(f"  {filename}")
    logger.info("")

    cli = spec.cluster.platform.cli
    if confirm(source, "Show the command to apply these manifests?", default=True):
        if spec.cluster.platform is Platform.OPENSHIFT:
            logger.info(f"Run the commands in {SCC_GRANTS_FILE} as a cluster administrator first, then:")
        logger.info(f"  {cli} apply -f {manifest_dir}")
        logger.info("The manifests are ready; this installer does not apply them.")
    else:
        logger.info(f"Skipping. Apply the manifests in {manifest_dir} with '{cli} apply -f' when ready.")
    return True


def run_install(source, run_cmd, write_file, defaults, output_dir=".", which=shutil.which, systemd_present=None):
    """Interactive install flow.

    Args:
        source: input source with read(prompt) / read_secret(prompt)
        run_cmd: callable(command, stream=True, stdin_text=None) -> (returncode, stdout, stderr)
        write_file: callable(path, content) - writes a file relative to output_dir
        defaults: InstallerDefaults used as prompt defaults
        output_dir: directory write_file is rooted at, for display
        which: executable lookup, shutil.which by default
        systemd_present: override systemd detection (None = detect)

    Returns:
        True on success or declined execution, False on any fatal error.
    """
    _print_header()
    runtime_path = check_prereqs(run_cmd, which=which)
    if runtime_path is None:
        return False

    logger.info("This installer builds and optionally runs a docker command to install a single-container Defender,")
    logger.info("or writes DaemonSet manifests for a Kubernetes or OpenShift cluster.")
    logger.info("If you're unsure what to enter, consult your Prisma Cloud admin docs for the exact image and tokens.")

    try:
        answers = collect(identity_fields(defaults), source)
    except ValueError as e:
        logger.error(f"{e} Exiting.")
        return False

    if answers["registry_login"]:
        credentials = RegistryCredentials(answers.pop("registry_username"), answers.pop("registry_password"))
        if not registry_login(run_cmd, credentials, answers["image"]):
            logger.error("Registry login failed")
            return False

    try:
        answers = collect(option_fields(defaults), source, answers)
    except ValueError as e:
        logger.error(f"{e} Exiting.")
        return False

    spec = DeploymentSpec.from_answers(answers)

    if spec.mode is Mode.CONTAINER:
        if systemd_present is None:
            systemd_present = systemd_available()
        ok = _deploy_container(spec, source, run_cmd, runtime_path, systemd_present)
    else:
        ok = _write_manifests(spec, source, write_file, output_dir)
    if not ok:
        return False

    logger.info("Done. If Defender requires additional registration steps, complete them in the Prisma Cloud UI.")
    return True


def handle_install(args):
    """Handle the installer invocation."""
    try:
        defaults = load_defaults(args.defaults)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    output_dir = os.path.abspath(args.output_dir)
    run_cmd = make_run_cmd(dry_run=args.dry_run)
    write_file = make_write_file(output_dir, dry_run=args.dry_run)

    try:
        success = run_install(ConsoleInput(), run_cmd, write_file, defaults, output_dir=output_dir)
    except (EOFError, KeyboardInterrupt):
        logger.info("")
        logger.error("Aborted.")
        sys.exit(1)

    if not success:
        sys.exit(1)


def register_install_arguments(parser):
    """Register the installer's optional flags. None are needed for an interactive run."""
    parser.add_argument("--defaults", default=None, help="YAML file overriding prompt defaults")
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory manifest output is written under (default: current directory)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print commands and file writes without executing")
    parser.set_defaults(func=handle_install)
