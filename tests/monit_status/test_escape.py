"""
Tests for JSON string escaping.
"""

import json

import pytest

from monit_status.encoding.escape import escape_json


class TestEscapeJson:
    """Test escape_json."""

    @pytest.mark.parametrize(
        "raw",
        [
            'say "hi"',
            "C:\\temp\\file",
            '\\"',
            'trailing backslash \\',
            "line1\nline2\ttab",
            "bell\x07and\x1fus",
            "ünïcödé ✓",
        ],
    )
    def test_round_trip_through_decoder(self, raw):
        """Escaped text decodes back to the original string."""
        assert json.loads(f'"{escape_json(raw)}"') == raw

    def test_plain_text_unchanged(self):
        """Text without special characters passes through."""
        assert escape_json("plain text 123 /path-to/x_y") == "plain text 123 /path-to/x_y"

    def test_backslash_and_quote(self):
        assert escape_json('a\\b"c') == 'a\\\\b\\"c'

    def test_control_characters(self):
        """Control characters use short forms where JSON has them."""
        assert escape_json("\n") == "\\n"
        assert escape_json("\r\t") == "\\r\\t"
        assert escape_json("\x00") == "\\u0000"
        assert escape_json("\x1b") == "\\u001b"

    def test_non_ascii_passes_through(self):
        assert escape_json("café") == "café"

    def test_empty_and_none(self):
        assert escape_json("") == ""
        assert escape_json(None) == ""

    def test_bytes_input(self):
        assert escape_json(b'out "put"') == 'out \\"put\\"'

    def test_lone_surrogates_replaced(self):
        """Undecodable bytes smuggled in via surrogateescape still yield UTF-8."""
        raw = b"exit \xff\xfe".decode("utf-8", "surrogateescape")
        escaped = escape_json(raw)
        assert escaped == "exit \ufffd\ufffd"
        assert json.loads(f'"{escaped}"'.encode("utf-8")) == "exit \ufffd\ufffd"
