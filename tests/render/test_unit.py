"""Unit tests for systemd unit generation."""

from defender_installer.render import generate_unit, unit_filename


def test_unit_filename():
    assert unit_filename("tw-defender") == "tw-defender.service"


def test_unit_sections():
    unit = generate_unit("tw-defender")
    assert unit.startswith("[Unit]\n")
    assert "[Service]" in unit
    assert "[Install]" in unit
    assert "WantedBy=multi-user.target" in unit


def test_unit_content():
    unit = generate_unit("edge")
    assert "Description=Prisma Cloud Defender container (edge)" in unit
    assert "After=docker.service" in unit
    assert "Requires=docker.service" in unit
    assert "Restart=always" in unit
    assert "ExecStart=/usr/bin/docker start -a edge" in unit
    assert "ExecStop=/usr/bin/docker stop -t 30 edge" in unit


def test_unit_runtime_path():
    unit = generate_unit("edge", runtime_path="/usr/local/bin/docker")
    assert "ExecStart=/usr/local/bin/docker start -a edge" in unit
    assert "/usr/bin/docker" not in unit
