"""The installer's prompt sequence, split around the registry login."""

from defender_installer.intake.fields import CHOICE, CONFIRM, Field, RepeatableField
from defender_installer.spec.types import TOKEN_ENV_VAR, Mode, Platform


def _container_mode(answers):
    return answers.get("mode") == Mode.CONTAINER.value


def _manifest_mode(answers):
    return answers.get("mode") == Mode.MANIFESTS.value


def identity_fields(defaults):
    """Image, name, token and registry credentials: everything the login needs."""
    return [
        Field(
            "image",
            "Defender container image URI (example: registry.prismacloud.io/defender:latest)",
            required=True,
            error="You must provide the container image URI.",
        ),
        Field("name", "Container name", default=defaults.name),
        Field("token", "Prisma access token / Defender registration token (or leave empty to set later)"),
        Field("registry_login", "Do you need to login to a private registry?", default=False, kind=CONFIRM),
        Field("registry_username", "Registry username", when=lambda a: a["registry_login"]),
        Field("registry_password", "Registry password", secret=True, when=lambda a: a["registry_login"]),
    ]


def option_fields(defaults):
    """Deployment target and runtime options, asked after a successful login."""
    return [
        Field(
            "mode",
            "Deployment target",
            default=defaults.mode,
            kind=CHOICE,
            choices=tuple(m.value for m in Mode),
        ),
        Field(
            "privileged",
            "Run container with --privileged (required for some runtime protections)?",
            default=True,
            kind=CONFIRM,
            when=_container_mode,
        ),
        Field(
            "host_network",
            "Use host networking (--network host)?",
            default=True,
            kind=CONFIRM,
            when=_container_mode,
        ),
        RepeatableField(
            "mounts",
            "Add a bind mount (host path -> container path)?",
            parts=(
                Field("host_path", "Host path"),
                Field("container_path", "Container path"),
            ),
        ),
        Field(
            "token_now",
            f"Set {TOKEN_ENV_VAR} environment variable now?",
            default=False,
            kind=CONFIRM,
            when=lambda a: not a.get("token"),
        ),
        Field("late_token", TOKEN_ENV_VAR, when=lambda a: a.get("token_now", False)),
        RepeatableField(
            "env",
            "Add another environment variable (KEY=VALUE)?",
            parts=(Field("entry", "Env (KEY=VALUE)"),),
        ),
        Field("restart_policy", "Restart policy", default=defaults.restart_policy, when=_container_mode),
        Field(
            "platform",
            "Orchestrator platform",
            default=defaults.platform,
            kind=CHOICE,
            choices=tuple(p.value for p in Platform),
            when=_manifest_mode,
        ),
        Field("namespace", "Namespace", default=defaults.namespace, when=_manifest_mode),
    ]
