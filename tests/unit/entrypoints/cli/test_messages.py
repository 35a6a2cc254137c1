"""Unit tests for :mod:`woofareyou.entrypoints.cli.helpers.messages`.

Checks that glyphs follow the encoding of Click's stderr stream and that the
feedback helpers write styled lines to stderr only.
"""

import io
import sys

import click
import pytest

from woofareyou.entrypoints.cli.helpers.messages import (
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"


class FakeTTY(io.StringIO):
    """A TTY-like text stream with a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding."""
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected"),
    [("ascii", ("[!]", "[OK]", "[X]")), ("utf-8", ("⚠️", "✅", "❌"))],
)
def test_glyphs_respect_stream_encoding(monkeypatch, encoding, expected):
    """Emoji are used only when stderr can encode them."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert (caution_glyph(), success_glyph(), error_glyph()) == expected


@pytest.mark.parametrize(
    ("func", "glyph", "color_code"),
    [(warn, "[!]", SET_YELLOW), (success, "[OK]", SET_GREEN), (error, "[X]", SET_RED)],
)
def test_messages_emit_styled_stderr(monkeypatch, func, glyph, color_code):
    """warn/success/error write bold, colored lines with their glyph."""
    stream = FakeTTY("ascii")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    func("Undo success!")

    out = stream.getvalue()
    assert f"{glyph}  Undo success!" in out
    assert SET_BOLD in out
    assert color_code in out


def test_feedback_goes_to_stderr_only(monkeypatch, capsys):
    """Feedback leaves stdout free for pet listings."""
    stream = FakeTTY("utf-8")
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    success("New pet added: Rex")
    captured = capsys.readouterr()
    assert "New pet added: Rex" in captured.err
    assert captured.out == ""
