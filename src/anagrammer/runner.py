"""Run a single anagram query: load the word list, search, print and log the results."""

import hashlib
import os
import sys
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from anagrammer.config import AnagramConfig
from anagrammer.config import config as default_config
from anagrammer.keys import Signature
from anagrammer.query import Query
from anagrammer.search import SearchEngine, SearchStats
from anagrammer.util import count_str, duration_str
from anagrammer.wordlist import load_index

MAX_LOG_NAME_BYTES = 64
"""Longest pool prefix (in UTF-8 bytes) used in a log file name."""


def format_result(words: list[str]) -> str:
    """Format a result received from the search engine (reverse phrase order) as a line."""
    return " ".join(reversed(words))


def log_path(log_dir: str, pool: Signature) -> Path:
    """Return the log file path for a query with the given letter pool.

    Pools whose UTF-8 encoding is too long for a file name are cut to a prefix that fits,
    followed by a digest of the whole pool so that different pools keep different logs.
    """
    encoded = pool.encode("utf-8")
    if len(encoded) <= MAX_LOG_NAME_BYTES:
        return Path(log_dir) / f"{pool or '_'}.log"
    prefix = encoded[:MAX_LOG_NAME_BYTES].decode("utf-8", errors="ignore")
    digest = hashlib.sha256(encoded).hexdigest()[:12]
    return Path(log_dir) / f"{prefix}-{digest}.log"


def run(
    query: Query,
    *,
    settings: AnagramConfig | None = None,
    out: TextIO | None = None,
) -> SearchStats:
    """Run a query and print each result on its own line.

    Args:
        query (Query): The query to run.
        settings (AnagramConfig | None): Settings to use.  Defaults to the global config.
        out (TextIO | None): Where to print results.  Defaults to stdout.

    Raises:
        UnsupportedInputError: If the phrase is rejected by the normalization policy.
            Raised before anything is loaded or logged.
        SourceUnavailableError: If the word list cannot be read.
    """
    if settings is None:
        settings = default_config
    if out is None:
        out = sys.stdout
    pool = query.signature(ascii_only=settings.ascii_only)

    if settings.log_dir is None:
        logfile = Path(os.devnull)
    else:
        logfile = log_path(settings.log_dir, pool)
        logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            return solve_one(query, pool, settings=settings, out=out, logf=logf)
        except KeyboardInterrupt:
            print("Search interrupted by user.", file=logf, flush=True)
            raise


def solve_one(
    query: Query,
    pool: Signature,
    *,
    settings: AnagramConfig,
    out: TextIO,
    logf: TextIO,
) -> SearchStats:
    """Search for anagrams of `pool`, printing results to `out` and progress to `logf`.

    Args:
        query (Query): The query, for its word and letter bounds.
        pool (Signature): The normalized letters of the query phrase.
        settings (AnagramConfig): Settings for this run.
        out: File object receiving one line per result.
        logf: File object to log the run.
    """
    start = time()
    print(f"Query: {query}", file=logf, flush=True)
    pprint(query.to_dict(), stream=logf, width=120)
    print(f"Letter pool: {pool} ({count_str(len(pool), 'letter')})", file=logf, flush=True)
    print("Settings:", file=logf, flush=True)
    pprint(settings.model_dump(), stream=logf, width=120)
    print("", file=logf, flush=True)

    index = load_index(settings.word_list_path, ascii_only=settings.ascii_only)
    build_stats = index.build_stats
    print(
        f"Word list: {settings.word_list_path or 'bundled'}, "
        f"{count_str(build_stats.lines_read, 'line')}, "
        f"{count_str(build_stats.words_indexed, 'word')}, "
        f"{count_str(len(index), 'signature')}",
        file=logf,
        flush=True,
    )
    if build_stats.skipped_unsupported or build_stats.skipped_empty:
        print(
            f"Skipped {build_stats.skipped_unsupported:,} unsupported and "
            f"{build_stats.skipped_empty:,} empty words",
            file=logf,
            flush=True,
        )

    if query.has_length_bounds:
        index.restrict_by_length(query.min_letters, query.max_letters)
        print(
            f"Within letter bounds: {count_str(len(index), 'signature')}",
            file=logf,
            flush=True,
        )

    engine = SearchEngine(
        index,
        allow_repeats=settings.allow_repeated_words,
        max_words_cap=settings.max_words_cap,
    )

    def print_result(words: list[str]) -> None:
        print(format_result(words), file=out)

    stats = engine.find_anagrams(
        pool,
        print_result,
        min_words=query.min_words,
        max_words=query.max_words,
    )
    out.flush()

    print(
        f"Reachable from pool: {count_str(stats.signatures_considered, 'signature')}",
        file=logf,
    )
    print(f"Visited: {count_str(stats.nodes_visited, 'node')}", file=logf)
    print(f"Maximum depth: {count_str(stats.max_depth_reached, 'word')}", file=logf)
    print(f"Found: {count_str(stats.results_emitted, 'result')}", file=logf)
    print(f"Time taken: {duration_str(time() - start)}", file=logf, flush=True)
    return stats
