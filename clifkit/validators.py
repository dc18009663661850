"""Parse callbacks that validate or transform parameter values.

A parse callback takes a parameter name and a value and returns the value to
use instead; it raises ValueError when the value is not acceptable.
"""

from __future__ import annotations

import re
from typing import Callable

ParseMethod = Callable[[str, str], str]

_INT = re.compile(r"[1-9][0-9]*")
_FLOAT = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def is_any(*validators: ParseMethod) -> ParseMethod:
    """Combine validators; the value is accepted if any one of them accepts it."""

    def check(name: str, value: str) -> str:
        error: ValueError | None = None
        for validator in validators:
            try:
                return validator(name, value)
            except ValueError as exc:
                error = exc
        if error is not None:
            raise error
        return ""

    return check


def is_all(*validators: ParseMethod) -> ParseMethod:
    """Combine validators; each one must accept the result of the one before."""

    def check(name: str, value: str) -> str:
        for validator in validators:
            value = validator(name, value)
        return value

    return check


def is_int(name: str, value: str) -> str:
    """Accept positive integers without leading zeros."""
    if not _INT.fullmatch(value):
        raise ValueError("Is not integer")
    return value


def is_float(name: str, value: str) -> str:
    """Accept non-negative decimal numbers."""
    if not _FLOAT.fullmatch(value):
        raise ValueError("Is not float")
    return value