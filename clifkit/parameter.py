"""Command line parameters: positional arguments and named options."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Pattern, Union

ParseMethod = Callable[[str, str], str]

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_INT = re.compile(r"[+-]?[0-9]+")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class ParameterError(ValueError):
    """Raised when a value cannot be assigned to a parameter."""


def _to_float(text: str) -> float:
    if _NUMBER.fullmatch(text):
        return float(text)
    if text in _TRUE:
        return 1.0
    return 0.0


def _to_int(text: str) -> int:
    if _INT.fullmatch(text):
        return int(text)
    return int(_to_float(text))


def _to_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return _to_float(text) != 0


def _to_time(text: str, fmt: str) -> datetime:
    parsed = datetime.strptime(text, fmt)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _to_json(text: str) -> dict[str, Any]:
    decoded = json.loads(text)
    if not isinstance(decoded, dict):
        raise ValueError("JSON value is not an object")
    return decoded


@dataclass
class Parameter:
    """A named command parameter holding the values given on the command line.

    ``values`` is None until a value has been assigned.
    """

    name: str = ""
    usage: str = ""
    default: str = ""
    required: bool = False
    multiple: bool = False
    description: str = ""
    env: str = ""
    parse: ParseMethod | None = None
    regex: Union[Pattern[str], str, None] = None
    values: list[str] | None = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.regex, str):
            self.regex = re.compile(self.regex)

    def assign(self, value: str) -> None:
        """Add a value, checking it against the regex and the parse callback.

        Raises ParameterError if the value is rejected or if a second value is
        given to a parameter that does not accept multiple values.
        """
        if self.values is None:
            self.values = []
        count = len(self.values)
        if count > 0 and not self.multiple:
            raise ParameterError(
                f'Parameter "{self.name}" does not support multiple values'
            )
        if count > 1:
            prefix = f'Parameter "{self.name}" ({count + 2}) is invalid: '
        else:
            prefix = f'Parameter "{self.name}" invalid: '
        if self.regex is not None and not self.regex.search(value):
            raise ParameterError(prefix + "Does not match criteria")
        if self.parse is not None:
            try:
                value = self.parse(self.name, value)
            except ValueError as exc:
                raise ParameterError(prefix + str(exc)) from exc
        self.values.append(value)

    def provided(self) -> bool:
        """Return whether any value was assigned."""
        return self.values is not None

    def count(self) -> int:
        """Return the number of assigned values."""
        return len(self.values or ())

    def as_string(self) -> str:
        """Return the first value, or an empty string."""
        return self.values[0] if self.values else ""

    def as_strings(self) -> list[str]:
        """Return all values."""
        return list(self.values or ())

    def as_int(self) -> int:
        """Return the first value as int (0 if missing or unparsable)."""
        return _to_int(self.values[0]) if self.values else 0

    def as_ints(self) -> list[int]:
        """Return all values as ints (0 where unparsable)."""
        return [_to_int(v) for v in self.values or ()]

    def as_float(self) -> float:
        """Return the first value as float (0.0 if missing or unparsable)."""
        return _to_float(self.values[0]) if self.values else 0.0

    def as_floats(self) -> list[float]:
        """Return all values as floats (0.0 where unparsable)."""
        return [_to_float(v) for v in self.values or ()]

    def as_bool(self) -> bool:
        """Return the first value as bool (False if missing or unparsable)."""
        return _to_bool(self.values[0]) if self.values else False

    def as_bools(self) -> list[bool]:
        """Return all values as bools (False where unparsable)."""
        return [_to_bool(v) for v in self.values or ()]

    def as_time(self, fmt: str = DEFAULT_TIME_FORMAT) -> datetime | None:
        """Parse the first value as a datetime; None if no value was given.

        Raises ValueError if the value does not match the format.
        """
        if not self.values:
            return None
        return _to_time(self.values[0], fmt)

    def as_times(self, fmt: str = DEFAULT_TIME_FORMAT) -> list[datetime]:
        """Parse all values as datetimes; raises ValueError on any mismatch."""
        return [_to_time(v, fmt) for v in self.values or ()]

    def as_json(self) -> dict[str, Any] | None:
        """Decode the first value as a JSON object; None if no value was given.

        Raises ValueError if it is not valid JSON or not an object.
        """
        if not self.values:
            return None
        return _to_json(self.values[0])

    def as_jsons(self) -> list[dict[str, Any]]:
        """Decode all values as JSON objects; raises ValueError on any failure."""
        return [_to_json(v) for v in self.values or ()]


@dataclass
class Argument(Parameter):
    """A positional parameter given right after the command, in order."""


@dataclass
class Option(Parameter):
    """A named parameter introduced with one or two dashes.

    A flag takes no value; when present it holds "true".
    """

    alias: str = ""
    flag: bool = False

    @classmethod
    def make_flag(
        cls, name: str, alias: str = "", usage: str = "", multiple: bool = False
    ) -> "Option":
        """Create an option that is a flag."""
        return cls(name=name, alias=alias, usage=usage, multiple=multiple, flag=True)