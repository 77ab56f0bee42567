"""
Unit tests for the plus/minus query parser.
"""

import pytest
from src.search_engine.errors import InvalidQueryError
from src.search_engine.query_parser import Query, QueryParser
from src.search_engine.stop_words import StopWordSet


@pytest.fixture
def parser():
    return QueryParser(StopWordSet("and the"))


class TestQueryParser:
    """Test query term classification"""

    def test_plus_and_minus_terms(self, parser):
        query = parser.parse("fluffy cat -paw")

        assert query.plus_terms == {"fluffy", "cat"}
        assert query.minus_terms == {"paw"}

    def test_duplicates_collapse(self, parser):
        query = parser.parse("cat cat -paw -paw")

        assert query.plus_terms == {"cat"}
        assert query.minus_terms == {"paw"}

    def test_stop_words_dropped(self, parser):
        """Test stop words are dropped as plus and as minus terms"""
        query = parser.parse("the cat and -the -and")

        assert query.plus_terms == {"cat"}
        assert query.minus_terms == frozenset()

    def test_empty_query(self, parser):
        query = parser.parse("")

        assert query == Query()
        assert query.is_empty()

    def test_only_stop_words(self, parser):
        assert parser.parse("the and").is_empty()

    def test_same_term_plus_and_minus(self, parser):
        """Test a term can be both plus and minus (exclusion wins at ranking)"""
        query = parser.parse("cat -cat")

        assert query.plus_terms == {"cat"}
        assert query.minus_terms == {"cat"}

    def test_inner_hyphen_is_plus_term(self, parser):
        """Test only a leading '-' marks a minus term"""
        query = parser.parse("blue-green")

        assert query.plus_terms == {"blue-green"}
        assert query.minus_terms == frozenset()

    @pytest.mark.parametrize("raw_query", ["-", "cat -", "--paw", "cat --"])
    def test_malformed_minus_terms_rejected(self, parser, raw_query):
        with pytest.raises(InvalidQueryError):
            parser.parse(raw_query)

    def test_stop_words_shared_with_owner(self):
        """Test that stop words added later apply to later parses"""
        stop_words = StopWordSet()
        parser = QueryParser(stop_words)
        assert parser.parse("the cat").plus_terms == {"the", "cat"}

        stop_words.configure("the")
        assert parser.parse("the cat").plus_terms == {"cat"}
