"""Word wrapping that is aware of ANSI colour sequences."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_ESC = "\x1b"
_WS = r"[\t\n\f\r ]"
_CTRL_SEQUENCE = re.compile(r"\x1b\[[0-9;]*m")
_CTRL_LEFT = re.compile(r"^" + _WS + r"+\x1b")
_CTRL_RIGHT = re.compile(_WS + r"+(\x1b\[[0-9]+(?:;[0-9]+)*m)\Z")
_EMPTY_LINE = re.compile(r"(?:" + _WS + r"|\x1b\[[0-9;]+m)*")
_RESET = "\x1b[0m"


class TrimMode(enum.Enum):
    """How wrapped lines are trimmed."""

    NONE = 0
    RIGHT = 1
    LEFT = 2
    BOTH = 3


class WhitespaceMode(enum.Enum):
    """Whether runs of in-line whitespace are contracted to one."""

    CONTRACT = 0
    KEEP = 1


def visible_length(text: str) -> int:
    """Return the number of characters shown, ignoring colour sequences."""
    return len(_CTRL_SEQUENCE.sub("", text))


def _is_space(char: str) -> bool:
    return char.isspace() and char not in "\x1c\x1d\x1e\x1f"


def _strip_before_ctrl(line: str) -> str:
    return _CTRL_RIGHT.sub(lambda m: m.group(0).lstrip(" \t"), line)


@dataclass
class Wrapper:
    """Turns text into lines of at most ``limit`` visible characters."""

    limit: int
    break_words: bool = False
    keep_empty_lines: bool = False
    trim_mode: TrimMode = TrimMode.RIGHT
    whitespace_mode: WhitespaceMode = WhitespaceMode.CONTRACT

    def _trim(self, line: str) -> str:
        if self.trim_mode is TrimMode.RIGHT:
            return _strip_before_ctrl(line.rstrip(" \t"))
        if self.trim_mode is TrimMode.LEFT:
            return _CTRL_LEFT.sub(_ESC, line).lstrip(" \t")
        if self.trim_mode is TrimMode.BOTH:
            line = _CTRL_LEFT.sub(_ESC, line.strip())
            return _strip_before_ctrl(line)
        return line

    def wrap(self, text: str) -> str:
        """Return ``text`` wrapped to the configured limit."""
        lines = [""]
        word = ""
        line_len = 0
        seq_state = 0
        last_segment = ""
        ctrl_buf = ""
        open_ctrl = ""
        last_char = ""

        def finish_line(add: str) -> None:
            nonlocal line_len
            has_open = bool(open_ctrl)
            lines[-1] += add
            if has_open:
                lines[-1] += _RESET
            lines[-1] = self._trim(lines[-1])
            lines.append(open_ctrl if has_open else "")
            line_len = 0

        def abort_sequence() -> None:
            nonlocal ctrl_buf, seq_state
            lines[-1] += ctrl_buf
            ctrl_buf = ""
            seq_state = 0

        for char in text:
            if char == _ESC:
                if word:
                    line_len += len(word)
                    lines[-1] += word
                    word = ""
                ctrl_buf += char
                seq_state = 1
            elif seq_state == 1:
                if char == "[":
                    ctrl_buf += char
                    seq_state = 2
                else:
                    abort_sequence()
            elif seq_state == 2:
                if "0" <= char <= "9":
                    ctrl_buf += char
                    last_segment = char
                    seq_state = 3
                else:
                    abort_sequence()
            elif seq_state == 3:
                if "0" <= char <= "9":
                    last_segment += char
                    ctrl_buf += char
                elif char == ";":
                    last_segment = ""
                    ctrl_buf += char
                    seq_state = 2
                elif char == "m":
                    ctrl_buf += char
                    lines[-1] += ctrl_buf
                    if last_segment == "0":
                        open_ctrl = ""
                    else:
                        open_ctrl += ctrl_buf
                    ctrl_buf = ""
                    last_segment = ""
                    seq_state = 0
                else:
                    abort_sequence()
            elif char == "\n":
                finish_line(word)
                word = ""
            elif _is_space(char):
                if word or self.whitespace_mode is WhitespaceMode.KEEP:
                    lines[-1] += word + char
                    line_len += len(word) + 1
                    word = ""
                    if line_len == self.limit:
                        finish_line("")
                elif line_len > 0 and _is_space(last_char):
                    pass
                else:
                    lines[-1] += char
                    line_len += 1
            else:
                if line_len + len(word) + 1 > self.limit:
                    if line_len > 0:
                        finish_line("")
                        word += char
                    elif self.break_words:
                        finish_line(word)
                        word = char
                    else:
                        word += char
                else:
                    word += char
            last_char = char

        if word:
            lines[-1] += word
        if open_ctrl:
            lines[-1] += _RESET
        lines[-1] = self._trim(lines[-1])

        rendered = "\n".join(lines).rstrip("\n")
        if not self.keep_empty_lines:
            rendered = "\n".join(
                line for line in rendered.split("\n") if not _EMPTY_LINE.fullmatch(line)
            )
        return rendered


def wrap(text: str, limit: int) -> str:
    """Wrap ``text`` to ``limit`` with the default wrapper settings."""
    return Wrapper(limit).wrap(text)