"""Tests for slug derivation."""

import pytest

from jotter.core.slug import InvalidSlugError, require_slug, slugify


class TestSlugify:
    """Tests for slugify()."""

    def test_downcases(self):
        assert slugify("Test_Post_With_Uppercase") == "test_post_with_uppercase"

    def test_spaces_become_underscores(self):
        assert slugify("Test Post with Spaces") == "test_post_with_spaces"

    def test_whitespace_runs_collapse(self):
        assert slugify("a \t\n b") == "a_b"

    def test_removes_non_word_characters(self):
        assert slugify("On (function() {}()) in JavaScript") == "on_function_in_javascript"

    def test_drops_non_ascii_letters(self):
        assert slugify("(stupid] {slüg/") == "stupid_slg"

    def test_strips_edge_underscores(self):
        assert slugify("__hello world__") == "hello_world"

    def test_keeps_digits(self):
        assert slugify("Top 10 Tips") == "top_10_tips"

    def test_hyphens_are_dropped(self):
        assert slugify("well-known") == "wellknown"

    def test_empty_when_nothing_eligible(self):
        assert slugify("¿¡!?") == ""
        assert slugify("") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "On (function() {}()) in JavaScript",
            "(stupid] {slüg/",
            "  Mixed CASE__and   spaces ",
            "already_a_slug",
            "ümlaut _ _ edge",
        ],
    )
    def test_idempotent(self, text):
        once = slugify(text)
        assert slugify(once) == once


class TestRequireSlug:
    """Tests for require_slug()."""

    def test_returns_slug(self):
        assert require_slug("Hello World") == "hello_world"

    def test_raises_on_empty_result(self):
        with pytest.raises(InvalidSlugError):
            require_slug("ßüé")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            require_slug("   ")


class TestNonAsciiLetters:
    """Non-ASCII letters vanish even when lowercasing would make them ASCII."""

    def test_dotted_capital_i_dropped(self):
        assert slugify("İstanbul") == "stanbul"

    def test_kelvin_sign_dropped(self):
        assert slugify("100 K") == "100"

    def test_non_ascii_whitespace_still_separates(self):
        assert slugify("a b") == "a_b"
