"""
Tokenizer for the search engine.

Tokenization rules:
1. Split on the space character only (tabs and newlines are part of a word)
2. Runs of spaces collapse into a single separator
3. Leading/trailing spaces never produce empty tokens
4. Case is preserved: "Cat" and "cat" are different terms

No normalization happens here (no lowercasing, no stemming). Stop-word
filtering is a separate step, see stop_words.py.
"""

from typing import List


def split_into_words(text: str) -> List[str]:
    """
    Split text into space-delimited tokens.

    Args:
        text: Raw document or query text

    Returns:
        Ordered list of non-empty tokens

    Examples:
        >>> split_into_words("white cat  and fashionable collar")
        ['white', 'cat', 'and', 'fashionable', 'collar']

        >>> split_into_words("  -paw ")
        ['-paw']

        >>> split_into_words("   ")
        []
    """
    if not text:
        return []

    # str.split(" ") keeps empty strings between repeated separators
    return [word for word in text.split(" ") if word]
