"""docker run command assembly."""

import shlex

from defender_installer.spec.types import DeploymentSpec


def build_run_command(spec: DeploymentSpec, runtime="docker") -> list[str]:
    """Build the docker run argument list from a container-mode spec.

    Order is fixed: base flags, --privileged, --network host, -v per mount,
    -e per environment entry (token first), image last.
    """
    cmd = [runtime, "run", "-d", "--name", spec.name, "--restart", spec.restart_policy]
    if spec.privileged:
        cmd.append("--privileged")
    if spec.host_network:
        cmd.extend(["--network", "host"])
    for mount in spec.mounts:
        cmd.extend(["-v", mount.volume_arg])
    for entry in spec.environment:
        cmd.extend(["-e", entry])
    cmd.append(spec.image)
    return cmd


def format_command(command) -> str:
    """Quote an argument list so it can be pasted back into a shell."""
    return shlex.join(command)
