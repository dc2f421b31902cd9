"""Tests for short code generation."""

import pytest
from tinylink.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_random(self):
        """Generated codes use the default length and satisfy the code rule."""
        generator = ShortCodeGenerator()

        code = generator.generate_random()
        assert len(code) == 7
        assert code.isalnum()
        assert generator.is_valid_format(code)

    def test_generate_random_custom_length(self):
        """Test random code with explicit length."""
        generator = ShortCodeGenerator(default_length=6)

        assert len(generator.generate_random(length=8)) == 8

    def test_generated_codes_vary(self):
        """Codes are drawn randomly, not derived from anything."""
        generator = ShortCodeGenerator()

        codes = {generator.generate_random() for _ in range(200)}
        assert len(codes) > 190

    def test_alphabet(self):
        """Alphabet is the 62 case-sensitive alphanumerics."""
        assert len(ShortCodeGenerator.BASE62_CHARS) == 62
        assert len(set(ShortCodeGenerator.BASE62_CHARS)) == 62

    @pytest.mark.parametrize("length", [5, 9])
    def test_rejects_length_outside_code_rule(self, length):
        with pytest.raises(ValueError):
            ShortCodeGenerator(default_length=length)

    def test_is_valid_format(self):
        """Test format validation."""
        assert ShortCodeGenerator.is_valid_format("abc123")
        assert ShortCodeGenerator.is_valid_format("ABCdef12")

        # Invalid formats
        assert not ShortCodeGenerator.is_valid_format("ab")
        assert not ShortCodeGenerator.is_valid_format("Ab3_9")
        assert not ShortCodeGenerator.is_valid_format("test-code")
        assert not ShortCodeGenerator.is_valid_format("abcdefghi")
        assert not ShortCodeGenerator.is_valid_format("abc 123")
        assert not ShortCodeGenerator.is_valid_format("abc123\n")
        assert not ShortCodeGenerator.is_valid_format(None)
