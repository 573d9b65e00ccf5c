"""Field validators and default derivations for the init questions.

Validators return ``True`` for acceptable input or a rejection reason string;
malformed input is an expected outcome, so they never raise.
"""

from __future__ import annotations

import re

_CIRCUIT_NAME_RE = re.compile(r"[-a-zA-Z0-9_]+", re.ASCII)
_CIRCUIT_NAME_INVALID_CHAR_RE = re.compile(r"[^-a-zA-Z0-9_]", re.ASCII)
_PACKAGE_NAME_RE = re.compile(r"[a-z][a-z0-9]*", re.ASCII)
_NON_ALPHANUMERIC_RE = re.compile(r"[^a-zA-Z0-9]", re.ASCII)
_LEADING_NON_LOWER_RE = re.compile(r"^[^a-z]*", re.ASCII)

CIRCUIT_NAME_REQUIRED = "You must specify a circuit name."
CIRCUIT_NAME_INVALID = "Only alphanumeric characters, hyphens, and underscores are allowed."
PACKAGE_NAME_REQUIRED = "You must specify a package name."
PACKAGE_NAME_INVALID = (
    "Package names must begin with a lowercase letter and only be followed by "
    "alphanumeric characters."
)


def validate_circuit_name(value: str) -> bool | str:
    """Validate a circuit (project) name.

    Example:
        >>> validate_circuit_name("my_circuit-2")
        True
        >>> validate_circuit_name("my circuit")
        'Only alphanumeric characters, hyphens, and underscores are allowed.'
    """
    if len(value) == 0:
        return CIRCUIT_NAME_REQUIRED
    if _CIRCUIT_NAME_RE.fullmatch(value) is None:
        return CIRCUIT_NAME_INVALID
    return True


def validate_package_name(value: str) -> bool | str:
    """Validate a Go package name.

    Example:
        >>> validate_package_name("mycircuit2")
        True
        >>> validate_package_name("2circuit") == PACKAGE_NAME_INVALID
        True
    """
    if len(value) == 0:
        return PACKAGE_NAME_REQUIRED
    if _PACKAGE_NAME_RE.fullmatch(value) is None:
        return PACKAGE_NAME_INVALID
    return True


def default_circuit_name(directory_name: str) -> str:
    """Derive the default circuit name from the target directory's base name.

    Example:
        >>> default_circuit_name("my circuit.v2")
        'my-circuit-v2'
    """
    return _CIRCUIT_NAME_INVALID_CHAR_RE.sub("-", directory_name)


def default_package_name(circuit_name: str) -> str:
    """Derive the default package name from a circuit name.

    Non-alphanumerics are dropped, then any leading characters that are not
    lowercase letters.

    Example:
        >>> default_package_name("2-My_Circuit")
        'yCircuit'
        >>> default_package_name("hello-world")
        'helloworld'
    """
    stripped = _NON_ALPHANUMERIC_RE.sub("", circuit_name)
    return _LEADING_NON_LOWER_RE.sub("", stripped, count=1)
