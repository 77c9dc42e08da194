"""Deployment spec types and installer defaults."""

from defender_installer.spec.defaults import (
    BUILTIN_DEFAULTS,
    InstallerDefaults,
    deep_merge,
    load_defaults,
)
from defender_installer.spec.types import (
    DEFAULT_NAME,
    DEFAULT_NAMESPACE,
    DEFAULT_RESTART_POLICY,
    TOKEN_ENV_VAR,
    BindMount,
    ClusterTarget,
    DeploymentSpec,
    Mode,
    Platform,
    RegistryCredentials,
)

__all__ = [
    "BUILTIN_DEFAULTS",
    "DEFAULT_NAME",
    "DEFAULT_NAMESPACE",
    "DEFAULT_RESTART_POLICY",
    "TOKEN_ENV_VAR",
    "BindMount",
    "ClusterTarget",
    "DeploymentSpec",
    "InstallerDefaults",
    "Mode",
    "Platform",
    "RegistryCredentials",
    "deep_merge",
    "load_defaults",
]
