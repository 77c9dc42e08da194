"""systemd unit generation."""

DEFAULT_RUNTIME_PATH = "/usr/bin/docker"


def unit_filename(name):
    return f"{name}.service"


def generate_unit(name, runtime_path=DEFAULT_RUNTIME_PATH):
    """Unit that restarts the existing container with docker start, preserving its state."""
    return f"""[Unit]
Description=Prisma Cloud Defender container ({name})
After=docker.service
Requires=docker.service

[Service]
Restart=always
ExecStart={runtime_path} start -a {name}
ExecStop={runtime_path} stop -t 30 {name}

[Install]
WantedBy=multi-user.target
"""
