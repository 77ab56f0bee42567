"""Utility functions for the search server surfaces (CLI, HTTP)"""

from typing import List, Tuple

from .search_engine import RankedDocument


def format_ranked_document(document: RankedDocument) -> str:
    """
    Render a search result the way the console driver prints it

    Examples:
        >>> format_ranked_document(RankedDocument(id=1, relevance=0.650672, rating=5))
        '{ document_id = 1, relevance = 0.650672, rating = 5 }'
    """
    return (
        f"{{ document_id = {document.id}, "
        f"relevance = {document.relevance:g}, "
        f"rating = {document.rating} }}"
    )


def parse_ratings_line(line: str) -> List[int]:
    """
    Parse a ratings line "k r1 r2 ... rk" into [r1, ..., rk]

    The leading count is authoritative: extra numbers are ignored.

    Raises:
        ValueError: empty line, non-integer values, or fewer than k ratings

    Examples:
        >>> parse_ratings_line("3 7 2 7")
        [7, 2, 7]

        >>> parse_ratings_line("0")
        []
    """
    values = [int(value) for value in line.split()]
    if not values:
        raise ValueError("Ratings line is empty, expected 'k r1 ... rk'")

    count, ratings = values[0], values[1:]
    if count < 0 or len(ratings) < count:
        raise ValueError(f"Ratings line declares {count} ratings, got {len(ratings)}")

    return ratings[:count]


def split_header(lines: List[str]) -> Tuple[str, int, List[str]]:
    """
    Split console input into (stop words, document count, remaining lines)

    Raises:
        ValueError: missing lines or a non-integer document count
    """
    if len(lines) < 2:
        raise ValueError("Input must start with a stop-words line and a document count line")

    stop_words = lines[0]
    document_count = int(lines[1].strip())
    if document_count < 0:
        raise ValueError(f"Document count must be >= 0, got {document_count}")

    return stop_words, document_count, lines[2:]
