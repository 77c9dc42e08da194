"""Line-oriented prompt primitives over a pluggable input source."""

import getpass

AFFIRMATIVE = ("y", "yes")


class ConsoleInput:
    """Reads operator responses from the terminal."""

    def read(self, prompt: str) -> str:
        return input(prompt)

    def read_secret(self, prompt: str) -> str:
        # getpass restores terminal echo on every exit path, including Ctrl-C
        return getpass.getpass(prompt)


class ScriptedInput:
    """Replays a fixed list of responses and records every prompt shown.

    Runs out with EOFError, the same way a closed stdin does.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.prompts: list[str] = []
        self.secret_prompts: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.responses:
            raise EOFError(f"No scripted response left for prompt: {prompt!r}")
        return self.responses.pop(0)

    def read_secret(self, prompt: str) -> str:
        self.secret_prompts.append(prompt)
        return self.read(prompt)


def format_prompt(message, default=None):
    """Render 'message [default]: ', omitting the brackets when there is no default."""
    if default:
        return f"{message} [{default}]: "
    return f"{message}: "


def ask(source, message, default="", secret=False):
    """Ask for one line of text; a blank response yields the default."""
    prompt = format_prompt(message, default)
    response = source.read_secret(prompt) if secret else source.read(prompt)
    response = response.strip()
    return response if response else default


def confirm(source, message, default=False):
    """Ask a yes/no question.

    Blank takes the default; otherwise only y/yes (any case) is affirmative.
    """
    suffix = "Y/n" if default else "y/N"
    response = source.read(f"{message} [{suffix}]: ").strip().lower()
    if not response:
        return default
    return response in AFFIRMATIVE
