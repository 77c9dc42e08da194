"""Declarative field descriptors and the collector that walks them."""

from dataclasses import dataclass, field
from typing import Callable

from defender_installer.intake.prompts import ask, confirm

TEXT = "text"
CONFIRM = "confirm"
CHOICE = "choice"


@dataclass(frozen=True)
class Field:
    """One prompt in the intake sequence."""

    name: str
    prompt: str
    default: str | bool = ""
    required: bool = False
    secret: bool = False
    kind: str = TEXT
    choices: tuple[str, ...] = ()
    when: Callable[[dict], bool] | None = None  # skipped unless true for answers so far
    error: str = ""  # message for a missing required value


@dataclass(frozen=True)
class RepeatableField:
    """A yes/no question that captures one group of parts per affirmative answer."""

    name: str
    question: str
    parts: tuple[Field, ...] = field(default_factory=tuple)
    when: Callable[[dict], bool] | None = None


def _ask_field(f: Field, source):
    if f.kind == CONFIRM:
        return confirm(source, f.prompt, default=bool(f.default))

    if f.kind == CHOICE:
        message = f"{f.prompt} ({'/'.join(f.choices)})"
        value = ask(source, message, default=f.default).lower()
        if value not in f.choices:
            raise ValueError(f"Invalid choice '{value}' for {f.name}. Expected one of: {', '.join(f.choices)}.")
        return value

    value = ask(source, f.prompt, default=f.default, secret=f.secret)
    if f.required and not value:
        raise ValueError(f.error or f"A value for {f.name} is required.")
    return value


def collect(fields, source, answers=None):
    """Walk field descriptors in order and return the populated answers dict.

    Args:
        fields: sequence of Field / RepeatableField descriptors
        source: input source with read(prompt) and read_secret(prompt)
        answers: answers collected by an earlier pass; not mutated

    Raises:
        ValueError: a required field was left empty or a choice was invalid.
            Raised at that prompt, so no later prompt is shown.
    """
    answers = dict(answers or {})
    for f in fields:
        if f.when is not None and not f.when(answers):
            continue
        if isinstance(f, RepeatableField):
            entries = []
            while confirm(source, f.question, default=False):
                entry = {}
                for part in f.parts:
                    entry[part.name] = _ask_field(part, source)
                entries.append(entry)
            answers[f.name] = entries
        else:
            answers[f.name] = _ask_field(f, source)
    return answers
