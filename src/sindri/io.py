"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import Callable, NoReturn, Protocol, Sequence

import questionary

Validator = Callable[[str], bool | str]
Choice = tuple[str, str]
"""A ``(label, value)`` pair offered by :func:`select`."""


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def warn(message: str) -> None:
    """Print a warning message to stderr.

    Args:
        message: Warning text.

    Returns:
        None.
    """
    print(f"warning: {message}", file=sys.stderr)


def die(message: str, code: int = 1) -> NoReturn:
    """Print an error message and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.

    Returns:
        Never returns; exits the process via ``sys.exit``.
    """
    print(f"error: {message}", file=sys.stderr)
    sys.exit(code)


def _read_line(text: str) -> str:
    try:
        return input(text).strip()
    except EOFError:
        die("aborted")


def prompt(
    text: str,
    default: str | None = None,
    validate: Validator | None = None,
) -> str:
    """Prompt the user for free text until ``validate`` accepts it.

    Args:
        text: Prompt label shown to the user.
        default: Default value used when the user enters an empty string.
        validate: Callback returning ``True`` or a rejection reason.

    Returns:
        The accepted user-provided or default string.

    Example:
        Circuit Name: [my-circuit]:
    """
    if _use_questionary():
        value = questionary.text(text, default=default or "", validate=validate).ask()
        if value is None:
            die("aborted")
        return str(value)
    while True:
        if default is not None and default != "":
            value = _read_line(f"{text} [{default}]: ")
            if value == "":
                value = default
        else:
            value = _read_line(f"{text} ")
        verdict = validate(value) if validate is not None else True
        if verdict is True:
            return value
        warn(str(verdict))


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        text: Prompt label shown to the user.
        default: Default answer when the user presses enter.

    Returns:
        ``True`` when the user confirms.
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            die("aborted")
        return bool(response)
    suffix = "[Y/n]" if default else "[y/N]"
    response = _read_line(f"{text} {suffix}: ").lower()
    if response == "":
        return default
    return response in {"y", "yes"}


def select(text: str, choices: Sequence[Choice], default: str | None = None) -> str:
    """Prompt for a single choice and return the chosen value.

    Non-interactive input accepts either a choice's number, label, or value.
    """
    values = [value for _label, value in choices]
    if default is not None and default not in values:
        raise ValueError(f"default {default!r} is not one of {values}")
    if _use_questionary():
        response = questionary.select(
            text,
            choices=[questionary.Choice(title=label, value=value) for label, value in choices],
            default=default,
        ).ask()
        if response is None:
            die("aborted")
        return str(response)
    for index, (label, _value) in enumerate(choices, start=1):
        print(f"  {index}) {label}")
    while True:
        suffix = f" [{default}]" if default else ""
        response = _read_line(f"{text}{suffix} ")
        if response == "" and default is not None:
            return default
        if response.isdigit() and 1 <= int(response) <= len(choices):
            return choices[int(response) - 1][1]
        for label, value in choices:
            if response.lower() in {label.lower(), value.lower()}:
                return value
        warn(f"choose one of: {', '.join(values)}")


class Prompter(Protocol):
    """Interactive prompt primitives used by the init services."""

    def text(self, message: str, *, default: str, validate: Validator) -> str: ...

    def confirm(self, message: str, *, default: bool) -> bool: ...

    def select(self, message: str, *, choices: Sequence[Choice], default: str) -> str: ...


class ConsolePrompter:
    """Default prompter backed by the console helpers in this module."""

    def text(self, message: str, *, default: str, validate: Validator) -> str:
        return prompt(message, default=default, validate=validate)

    def confirm(self, message: str, *, default: bool) -> bool:
        return confirm(message, default=default)

    def select(self, message: str, *, choices: Sequence[Choice], default: str) -> str:
        return select(message, choices, default)
