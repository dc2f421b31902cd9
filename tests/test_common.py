"""Tests for common utilities."""

import json
import logging

import pytest
from tinylink.common.validators import is_valid_url, is_valid_short_code
from tinylink.common.pagination import normalize_pagination
from tinylink.common.url_builder import build_short_url
from tinylink.common.logging_config import redact_store_url, setup_logging


class TestValidators:
    """Test validation utilities."""

    def test_valid_urls(self):
        """Test valid URL validation."""
        valid, _ = is_valid_url("https://example.com")
        assert valid

        valid, _ = is_valid_url("http://example.com/path")
        assert valid

        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value")
        assert valid

    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url(None)
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url("not-a-url")
        assert not valid

        valid, error = is_valid_url("ftp://example.com")
        assert not valid
        assert "http" in error.lower()

        valid, error = is_valid_url("https://")
        assert not valid
        assert "host" in error.lower()

        valid, error = is_valid_url("https://example.com:99999/")
        assert not valid

        valid, error = is_valid_url("https://exa mple.com")
        assert not valid

        valid, error = is_valid_url("https://example.com/" + "a" * 2048)
        assert not valid
        assert "too long" in error.lower()

    def test_valid_short_codes(self):
        """Test valid short code validation."""
        for code in ("abc123", "ABCdef", "a1B2c3d4"):
            valid, _ = is_valid_short_code(code)
            assert valid, code

    def test_invalid_short_codes(self):
        """Codes outside 6-8 alphanumerics are rejected, including the looser client rule."""
        valid, error = is_valid_short_code("ab")
        assert not valid
        assert "6-8" in error

        valid, error = is_valid_short_code("Ab3_9")
        assert not valid

        valid, error = is_valid_short_code("my-link1")
        assert not valid

        valid, error = is_valid_short_code("abcdefghi")
        assert not valid

        valid, error = is_valid_short_code("")
        assert not valid
        assert "required" in error.lower()


class TestPagination:
    """Test limit/offset normalization."""

    @pytest.mark.parametrize(
        "limit, offset, expected",
        [
            (None, None, (50, 0)),
            ("", "", (50, 0)),
            ("abc", "xyz", (50, 0)),
            ("10", "20", (10, 20)),
            (5, 0, (5, 0)),
            ("1000", None, (100, 0)),
            ("0", None, (1, 0)),
            ("-3", "-7", (1, 0)),
            (" 7 ", " 2 ", (7, 2)),
            ("2.5", None, (50, 0)),
        ],
    )
    def test_normalize_pagination(self, limit, offset, expected):
        assert normalize_pagination(limit, offset) == expected


class TestURLBuilder:
    """Test URL builder."""

    def test_build_short_url(self):
        assert build_short_url("abc1234", "https://tiny.link") == "https://tiny.link/abc1234"

    def test_build_short_url_trailing_slash(self):
        assert build_short_url("abc1234", "https://tiny.link//") == "https://tiny.link/abc1234"


class TestLoggingConfig:
    """Test TinyLink log formatting and redaction."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            (
                "connect failed: postgresql://tiny:s3cret@db:5432/links",
                "connect failed: postgresql://tiny:***@db:5432/links",
            ),
            ("redis://:hunter2@cache:6379/0 refused", "redis://:***@cache:6379/0 refused"),
            ("postgresql://tiny@db/links", "postgresql://tiny@db/links"),
            ("no url here", "no url here"),
        ],
    )
    def test_redact_store_url(self, text, expected):
        assert redact_store_url(text) == expected

    def test_handlers_mask_store_passwords(self, capsys):
        logger = setup_logging(level="INFO")

        logger.error("Error checking code existence: %s", "postgresql://tiny:s3cret@db/links")

        out = capsys.readouterr().out
        assert "s3cret" not in out
        assert "postgresql://tiny:***@db/links" in out

    def test_json_format_carries_code_and_status(self, capsys):
        setup_logging(level="INFO", json_format=True)

        logging.getLogger("tinylink.web").info(
            'GET /abc1234 302 (3xx) redirect abc1234 -> https://example.com/?q="x"',
            extra={"code": "abc1234", "status": 302},
        )

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["logger"] == "tinylink.web"
        assert payload["code"] == "abc1234"
        assert payload["status"] == 302
        assert payload["message"].endswith('q="x"')
