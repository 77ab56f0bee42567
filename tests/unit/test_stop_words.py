"""
Unit tests for StopWordSet.
"""

from src.search_engine.stop_words import StopWordSet


class TestStopWordSet:
    """Test stop-word configuration and lookup"""

    def test_empty_by_default(self):
        stop_words = StopWordSet()
        assert len(stop_words) == 0
        assert not stop_words.contains("the")

    def test_configure_from_text(self):
        """Test that every token of the text becomes a stop word"""
        stop_words = StopWordSet()
        stop_words.configure("in  the and")

        assert len(stop_words) == 3
        assert "in" in stop_words
        assert "the" in stop_words
        assert "and" in stop_words

    def test_configure_is_union(self):
        """Test repeated configure calls only add words"""
        stop_words = StopWordSet("in the")
        stop_words.configure("the with")

        assert len(stop_words) == 3
        assert stop_words.contains("in")
        assert stop_words.contains("with")

    def test_configure_idempotent(self):
        stop_words = StopWordSet("in the")
        stop_words.configure("in the")
        assert len(stop_words) == 2

    def test_case_sensitive(self):
        """Test that lookup does not lowercase"""
        stop_words = StopWordSet("the")
        assert "the" in stop_words
        assert "The" not in stop_words

    def test_filter_keeps_order_and_duplicates(self):
        stop_words = StopWordSet("and")
        assert stop_words.filter(["cat", "and", "dog", "cat", "and"]) == ["cat", "dog", "cat"]
