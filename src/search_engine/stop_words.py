"""
Stop-word set shared by indexing and query parsing.

Stop words are configured from plain text (space-separated) and only ever
grow: there is no removal. A stop word is never indexed and never becomes a
plus or minus term of a parsed query.
"""

from typing import Iterable, List

from .tokenizer import split_into_words


class StopWordSet:
    """Union-only set of case-sensitive stop words."""

    def __init__(self, text: str = ""):
        self._words = set()
        if text:
            self.configure(text)

    def configure(self, text: str) -> None:
        """
        Add every token of text to the set.

        Calling it again with the same text is a no-op.

        Args:
            text: Space-separated stop words, e.g. "a the and"
        """
        self._words.update(split_into_words(text))

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def filter(self, words: Iterable[str]) -> List[str]:
        """Drop stop words, keeping order and duplicates of the rest."""
        return [word for word in words if word not in self._words]
