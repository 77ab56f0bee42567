#!/usr/bin/env python3
"""
Console driver for the search engine.

Reads standard input:
    line 1          stop words
    line 2          document count N
    next 2*N lines  document text, then its ratings "k r1 ... rk"
    last line       query

Documents get ids 0..N-1. Prints one line per result:
    { document_id = 1, relevance = 0.650672, rating = 5 }

Usage:
    search-server-cli < input.txt
    search-server-cli --status BANNED < input.txt
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .logging_config import setup_logging
from .config import load_environment, load_settings
from .search_engine import DocumentStatus, SearchServer, SearchServerError
from .utils import format_ranked_document, parse_ratings_line, split_header

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-server-cli",
        description="Index documents from stdin and print the top results for a query",
    )
    parser.add_argument(
        "--status",
        choices=[s.value for s in DocumentStatus],
        default=DocumentStatus.ACTUAL.value,
        help="Status given to every document (default: ACTUAL)",
    )
    parser.add_argument(
        "--query-status",
        choices=[s.value for s in DocumentStatus],
        default=DocumentStatus.ACTUAL.value,
        help="Only return documents with this status (default: ACTUAL)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for stderr (default: WARNING)",
    )
    return parser


def run(lines: List[str], status: DocumentStatus, query_status: DocumentStatus,
        max_results: int, out: TextIO) -> int:
    """
    Index the documents described by `lines` and print results for the query.

    Returns:
        Number of results printed

    Raises:
        ValueError: malformed input
        SearchServerError: rejected document or query
    """
    stop_words, document_count, rest = split_header(lines)

    expected = 2 * document_count + 1
    if len(rest) < expected:
        raise ValueError(f"Expected {expected} lines after the header, got {len(rest)}")

    server = SearchServer(stop_words=stop_words, max_results=max_results)
    for document_id in range(document_count):
        text = rest[2 * document_id]
        ratings = parse_ratings_line(rest[2 * document_id + 1])
        server.add_document(document_id, text, status, ratings)

    query = rest[2 * document_count]
    logger.info(f"Indexed {server.get_document_count()} documents, searching {query!r}")

    results = server.find_top_documents(query, query_status)
    for document in results:
        print(format_ranked_document(document), file=out)

    return len(results)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_environment()

    log_level = (args.log_level or "WARNING").upper()
    setup_logging(
        log_file=None,
        console_level=getattr(logging, log_level, logging.WARNING),
        console_stream=sys.stderr,
    )

    lines = sys.stdin.read().splitlines()

    try:
        settings = load_settings()
        run(
            lines,
            status=DocumentStatus(args.status),
            query_status=DocumentStatus(args.query_status),
            max_results=settings.max_result_document_count,
            out=sys.stdout,
        )
    except (ValueError, SearchServerError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
