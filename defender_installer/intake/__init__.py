"""Operator intake: prompt primitives, field descriptors, the installer's questions."""

from defender_installer.intake.fields import (
    CHOICE,
    CONFIRM,
    TEXT,
    Field,
    RepeatableField,
    collect,
)
from defender_installer.intake.prompts import (
    ConsoleInput,
    ScriptedInput,
    ask,
    confirm,
    format_prompt,
)
from defender_installer.intake.questions import identity_fields, option_fields

__all__ = [
    "CHOICE",
    "CONFIRM",
    "TEXT",
    "ConsoleInput",
    "Field",
    "RepeatableField",
    "ScriptedInput",
    "ask",
    "collect",
    "confirm",
    "format_prompt",
    "identity_fields",
    "option_fields",
]
