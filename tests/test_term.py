import io
import os
from unittest.mock import patch

import pytest

from clifkit import term


class _FakeStdin:
    def fileno(self):
        return 0


def test_term_width_applies_margin():
    size = os.terminal_size((120, 40))
    with patch.object(term.sys, "stdin", _FakeStdin()), patch.object(
        term.os, "get_terminal_size", return_value=size
    ):
        assert term.term_width() + term.TERM_MARGIN == 120


def test_term_width_raises_when_size_unknown():
    with patch.object(term.sys, "stdin", _FakeStdin()), patch.object(
        term.os, "get_terminal_size", side_effect=OSError("not a tty")
    ):
        with pytest.raises(OSError):
            term.term_width()


def test_term_width_raises_without_file_descriptor():
    with patch.object(term.sys, "stdin", io.StringIO("")):
        with pytest.raises(OSError):
            term.term_width()


def test_current_width_falls_back_to_default():
    with patch.object(term.sys, "stdin", io.StringIO("")):
        assert term.current_width() == 78
        assert term.current_width() == term.DEFAULT_WIDTH


def test_current_width_uses_terminal_size():
    size = os.terminal_size((90, 30))
    with patch.object(term.sys, "stdin", _FakeStdin()), patch.object(
        term.os, "get_terminal_size", return_value=size
    ):
        assert term.current_width() == term.term_width()
        assert term.current_width() + term.TERM_MARGIN == 90