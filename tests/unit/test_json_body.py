"""
Unit tests for parse_json_body.
"""

import pytest

from awpaki.errors import BadRequest
from awpaki.parsers import parse_json_body


class TestParseJsonBody:
    """Test cases for parse_json_body."""

    def test_object(self):
        assert parse_json_body('{"name": "John Doe", "age": 30}') == {"name": "John Doe", "age": 30}

    def test_array_and_scalars(self):
        assert parse_json_body("[1, 2]") == [1, 2]
        assert parse_json_body("42") == 42

    def test_bytes(self):
        assert parse_json_body(b'{"a": 1}') == {"a": 1}

    @pytest.mark.parametrize("body", [None, "", "   "])
    def test_empty_body_returns_empty_dict(self, body):
        assert parse_json_body(body) == {}

    def test_empty_body_returns_default(self):
        assert parse_json_body(None, default_value=[]) == []
        assert parse_json_body("", default_value=None) is None

    @pytest.mark.parametrize("body", [None, ""])
    def test_required_body(self, body):
        with pytest.raises(BadRequest, match="Request body is required"):
            parse_json_body(body, required=True)

    def test_invalid_json(self):
        with pytest.raises(BadRequest) as exc_info:
            parse_json_body("x")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message.startswith("Invalid JSON format: ")

    def test_invalid_utf8_bytes(self):
        """Bytes that are not UTF-8 are a client error, not a crash."""
        with pytest.raises(BadRequest) as exc_info:
            parse_json_body(b'{"a": "\xff"}')

        assert exc_info.value.status_code == 400
        assert exc_info.value.message.startswith("Invalid JSON format: ")
