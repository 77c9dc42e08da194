"""Shared pytest fixtures for all test modules."""

import os
import subprocess
import sys

import pytest

from defender_installer.intake import ScriptedInput
from defender_installer.spec import InstallerDefaults, load_defaults


PROJECT_ROOT = os.path.normpath(os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture(scope="session")
def project_root():
    """Absolute path to the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def run_cli(project_root):
    """Return a callable that invokes the installer CLI as a subprocess."""

    def _run(*args, stdin="", env=None):
        result = subprocess.run(
            [sys.executable, "-m", "defender_installer.installer", *args],
            input=stdin,
            capture_output=True,
            text=True,
            cwd=project_root,
            env=env,
        )
        return result.returncode, result.stdout, result.stderr

    return _run


# ── Unit-test fixtures ──────────────────────────────────────────────


class FakeRunner:
    """Records commands instead of running them.

    Return codes come from a mapping keyed by the command's first two
    arguments (e.g. ("docker", "run")); anything unmapped returns 0.
    """

    def __init__(self, returncodes=None):
        self.returncodes = returncodes or {}
        self.calls = []

    def __call__(self, command, stream=True, stdin_text=None):
        self.calls.append({"command": list(command), "stream": stream, "stdin_text": stdin_text})
        return self.returncodes.get(tuple(command[:2]), 0), "", ""

    @property
    def commands(self):
        return [c["command"] for c in self.calls]

    def find(self, *prefix):
        """Calls whose command starts with the given arguments."""
        return [c for c in self.calls if tuple(c["command"][: len(prefix)]) == prefix]


@pytest.fixture
def fake_runner():
    """A FakeRunner where every command succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Return a factory for FakeRunners with chosen return codes."""

    def _make(returncodes=None):
        return FakeRunner(returncodes)

    return _make


@pytest.fixture
def scripted():
    """Return a factory for ScriptedInput sources."""

    def _make(*responses):
        return ScriptedInput(responses)

    return _make


@pytest.fixture
def defaults():
    """Built-in installer defaults."""
    return load_defaults()


@pytest.fixture
def openshift_defaults():
    """Defaults preselecting manifest output for OpenShift."""
    return InstallerDefaults(mode="manifests", platform="openshift", namespace="twistlock")


@pytest.fixture
def docker_which():
    """Executable lookup that finds docker at the usual path."""
    return lambda name: f"/usr/bin/{name}" if name == "docker" else None
