"""Secret redaction for console log output."""

import logging
import os
import re

# Env vars whose values should be redacted from all output
_SECRET_ENV_VARS = [
    "REGISTRY_PASSWORD",
    "DOCKER_PASSWORD",
]

_MIN_SECRET_LENGTH = 4  # skip trivially short values to avoid false positives

# Values handed in at runtime (e.g. the registry password typed at the prompt)
_registered: set[str] = set()


def _collect_secret_values() -> set[str]:
    values = {v for v in _registered if len(v) >= _MIN_SECRET_LENGTH}
    for var in _SECRET_ENV_VARS:
        val = os.environ.get(var, "")
        if len(val) >= _MIN_SECRET_LENGTH:
            values.add(val)
    return values


def _build_patterns(values: set[str]) -> list[re.Pattern]:
    # Sort by length descending so longer values match first
    return [re.compile(re.escape(v)) for v in sorted(values, key=len, reverse=True)]


# Lazy-initialized module cache
_patterns: list[re.Pattern] | None = None


def _get_patterns() -> list[re.Pattern]:
    global _patterns
    if _patterns is None:
        _patterns = _build_patterns(_collect_secret_values())
    return _patterns


def register_secret(value: str) -> None:
    """Add a value collected at runtime to the redaction set."""
    global _patterns
    if value:
        _registered.add(value)
        _patterns = None


def redact_secrets(text: str) -> str:
    """Replace known secret values with '***'."""
    for p in _get_patterns():
        text = p.sub("***", text)
    return text


class SecretRedactingFilter(logging.Filter):
    """Logging filter that replaces secret values in log records with '***'.

    Handles both f-string messages (msg is pre-formatted) and
    %-style messages (msg + args).
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if _get_patterns():
            record.msg = redact_secrets(str(record.msg))
            if record.args:
                if isinstance(record.args, dict):
                    record.args = {k: redact_secrets(v) if isinstance(v, str) else v for k, v in record.args.items()}
                elif isinstance(record.args, tuple):
                    record.args = tuple(redact_secrets(a) if isinstance(a, str) else a for a in record.args)
        return True
