"""
Unit tests for the space-delimited tokenizer.
"""

import pytest
from src.search_engine.tokenizer import split_into_words


class TestSplitIntoWords:
    """Test tokenization rules"""

    def test_basic_split(self):
        """Test words separated by single spaces"""
        assert split_into_words("white cat fashionable collar") == [
            "white", "cat", "fashionable", "collar"
        ]

    def test_repeated_spaces_collapse(self):
        """Test that runs of spaces produce no empty tokens"""
        assert split_into_words("fluffy   cat") == ["fluffy", "cat"]

    def test_leading_and_trailing_spaces(self):
        """Test that surrounding spaces are ignored"""
        assert split_into_words("   cat   ") == ["cat"]

    def test_empty_string(self):
        """Test empty and blank input"""
        assert split_into_words("") == []
        assert split_into_words("     ") == []

    def test_order_and_duplicates_preserved(self):
        """Test that duplicates are kept in original order"""
        assert split_into_words("fluffy cat fluffy tail") == [
            "fluffy", "cat", "fluffy", "tail"
        ]

    def test_case_preserved(self):
        """Test that tokens are case-sensitive (no lowercasing)"""
        assert split_into_words("Cat cat CAT") == ["Cat", "cat", "CAT"]

    def test_only_space_is_separator(self):
        """Test that tabs and punctuation stay inside tokens"""
        assert split_into_words("cat,\tdog") == ["cat,\tdog"]

    @pytest.mark.parametrize("text,expected", [
        ("-paw", ["-paw"]),
        ("cat -paw", ["cat", "-paw"]),
        ("-", ["-"]),
    ])
    def test_minus_prefix_kept(self, text, expected):
        """Test that the tokenizer does not interpret minus prefixes"""
        assert split_into_words(text) == expected

    def test_unicode_words(self):
        """Test non-ASCII words split on spaces like any other"""
        assert split_into_words("пушистый кот") == ["пушистый", "кот"]
