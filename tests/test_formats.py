"""
Tests for structdiff.formats — loading documents and presenting results.
"""

import json
import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from structdiff.core import DiffType, diff_json
from structdiff.errors import ParseError
from structdiff.formats import load_json, render, to_json, summarize


class TestLoadJson:

    @pytest.mark.parametrize("raw,expected", [
        ('{"a": 1}', {"a": 1}),
        (b'[1, 2.5, "x"]', [1, 2.5, "x"]),
        (bytearray(b"null"), None),
        ('"\\u00e9"', "é"),
        ("  true  ", True),
    ])
    def test_valid(self, raw, expected):
        assert load_json(raw) == expected

    def test_utf16_bytes(self):
        assert load_json('{"k": "v"}'.encode("utf-16")) == {"k": "v"}

    @pytest.mark.parametrize("raw", [
        "", b"", None, "{x}", "[1,", '{"a" 1}', "NaN", "-Infinity", "1 2",
    ])
    def test_invalid(self, raw):
        with pytest.raises(ParseError) as info:
            load_json(raw)
        assert info.value.side is None

    def test_nested_too_deeply(self):
        with pytest.raises(ParseError) as info:
            load_json("[" * 100000 + "]" * 100000)
        assert str(info.value) == "document nested too deeply"
        assert info.value.side is None

    def test_wrong_type(self):
        with pytest.raises(ParseError):
            load_json(42)


class TestPresentation:

    RESULT = {
        "/b": DiffType.MISSING_B,
        "": DiffType.DIFFERENT,
        "/a": DiffType.MISSING_A,
    }

    def test_render(self):
        assert render(self.RESULT) == [
            "(root): different value",
            "/a: missing a",
            "/b: missing b",
        ]

    def test_render_empty(self):
        assert render({}) == []

    def test_to_json(self):
        out = json.loads(to_json(self.RESULT))
        assert out == {"/b": "missing b", "": "different value", "/a": "missing a"}

    def test_to_json_kwargs(self):
        assert to_json({"/a": DiffType.DIFFERENT}, sort_keys=True, indent=None) == (
            '{"/a": "different value"}'
        )

    def test_summarize(self):
        result = diff_json('{"a": 2, "b": 3.2, "c": [1]}', '{"a": 3, "c": [1, 2]}')
        assert summarize(result) == {
            "different value": 1,
            "missing b": 1,
            "missing a": 1,
        }
