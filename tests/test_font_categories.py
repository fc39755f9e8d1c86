"""Tests for the static font category table."""

import pytest

from font_categories import CATEGORIES, FONT_CATEGORIES, classify


class TestClassify:

    @pytest.mark.parametrize("name,expected", [
        ("Inter", "sans-serif"),
        ("Lobster", "cursive"),
        ("Caveat", "handwriting"),
        ("Roboto Slab", "serif"),
        ("Builder Mono", "monospace"),
        ("Rubik Wet Paint", "special"),
    ])
    def test_known_names(self, name, expected):
        assert classify(name) == expected

    def test_unknown_name(self):
        assert classify("XYZ Unknown Font") == "unknown"

    def test_placeholder_name_is_unknown(self):
        assert classify("Font 12345") == "unknown"

    def test_exact_match_only(self):
        assert classify("inter") == "unknown"
        assert classify(" Inter") == "unknown"

    def test_same_name_same_category(self):
        assert classify("Pacifico") == classify("Pacifico") == "cursive"


class TestCategoryTable:

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FONT_CATEGORIES["Inter"] = "serif"

    def test_values_are_known_categories(self):
        assert set(FONT_CATEGORIES.values()) <= set(CATEGORIES)
        assert "unknown" not in FONT_CATEGORIES.values()

    def test_category_set(self):
        assert set(CATEGORIES) == {
            "sans-serif", "serif", "cursive", "monospace", "handwriting", "special", "unknown",
        }
