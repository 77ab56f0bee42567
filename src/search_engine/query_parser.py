"""
Query parser - raw query string to plus/minus term sets.

Syntax:
    word     plus term: contributes to relevance
    -word    minus term: any document containing it is excluded

Rules:
- Tokens are split exactly like documents (see tokenizer.py)
- Stop words are dropped, with or without the leading "-"
- Duplicates collapse (set semantics)
- "-" alone and "--word" are rejected with InvalidQueryError

Examples:
    "fluffy cat -paw"       -> plus={"fluffy", "cat"}, minus={"paw"}
    "cat cat -and"          -> plus={"cat"}, minus={} (if "and" is a stop word)
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from .errors import InvalidQueryError
from .stop_words import StopWordSet
from .tokenizer import split_into_words

MINUS_PREFIX = "-"


@dataclass(frozen=True)
class Query:
    """Structured query, built fresh for every search"""
    plus_terms: FrozenSet[str] = field(default_factory=frozenset)
    minus_terms: FrozenSet[str] = field(default_factory=frozenset)

    def is_empty(self) -> bool:
        return not self.plus_terms and not self.minus_terms


class QueryParser:
    """Parses queries against the engine's current stop words."""

    def __init__(self, stop_words: StopWordSet):
        # Shared with SearchServer, so later set_stop_words() calls apply here too
        self.stop_words = stop_words

    def parse(self, raw_query: str) -> Query:
        """
        Parse a raw query.

        Args:
            raw_query: Space-separated terms, minus terms prefixed with "-"

        Returns:
            Query with plus/minus term sets. A term may be in both
            ("cat -cat"); exclusion wins at ranking time.

        Raises:
            InvalidQueryError: for "-" alone or a term starting with "--"
        """
        plus_terms = set()
        minus_terms = set()

        for token in split_into_words(raw_query):
            is_minus = token.startswith(MINUS_PREFIX)
            term = token[len(MINUS_PREFIX):] if is_minus else token

            if is_minus and (not term or term.startswith(MINUS_PREFIX)):
                raise InvalidQueryError(token)

            if term in self.stop_words:
                continue

            if is_minus:
                minus_terms.add(term)
            else:
                plus_terms.add(term)

        return Query(plus_terms=frozenset(plus_terms), minus_terms=frozenset(minus_terms))
