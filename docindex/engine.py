"""Query an inverted index and report the best-matching documents."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .indexer import IndexLayout, InvertedIndex
from .textutils import split_words, timestamp, unique

RESULT_LIMIT = 10


@dataclass(frozen=True)
class SearchResult:
    """A document matched by a query and its summed word frequency."""

    document: str
    frequency: int


def _next_int(tokens: Iterable[str], what: str) -> int:
    token = next(iter(tokens), None)
    if token is None:
        raise ValueError(f"index ended while reading {what}")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def _next_token(tokens: Iterable[str], what: str) -> str:
    token = next(iter(tokens), None)
    if token is None:
        raise ValueError(f"index ended while reading {what}")
    return token


def parse_index(text: str, layout: IndexLayout = IndexLayout.TREE) -> InvertedIndex:
    """Rebuild an index from the text that ``InvertedIndex.dumps`` produces."""
    tokens = iter(text.split())
    index = InvertedIndex(layout)
    word_count = _next_int(tokens, "the word count")
    if word_count < 0:
        raise ValueError(f"negative word count {word_count}")
    for _ in range(word_count):
        word = _next_token(tokens, "a word")
        doc_count = _next_int(tokens, f"the document count of {word!r}")
        if doc_count < 0:
            raise ValueError(f"negative document count for {word!r}")
        for _ in range(doc_count):
            document = _next_token(tokens, f"a document of {word!r}")
            frequency = _next_int(tokens, f"the frequency of {word!r} in {document!r}")
            index.set_posting(word, document, frequency)
    return index


def load_index(path: str | Path, layout: IndexLayout = IndexLayout.TREE) -> InvertedIndex:
    """Read an index file written by the indexer."""
    with open(path, encoding="utf-8") as handle:
        return parse_index(handle.read(), layout)


def search(index: InvertedIndex, query: str) -> list[SearchResult]:
    """Sum, per document, the frequencies of the distinct query words.

    With the tree layout the results come sorted by document name; with
    the vector layout they come in the order documents were first met.
    """
    totals: dict[str, int] = {}
    for word in unique(split_words(query)):
        if word not in index:
            continue
        for document, frequency in index.postings(word):
            totals[document] = totals.get(document, 0) + frequency

    items = totals.items()
    if index.layout is IndexLayout.TREE:
        items = sorted(items)
    return [SearchResult(document, frequency) for document, frequency in items]


def rank(results: Iterable[SearchResult], limit: int = RESULT_LIMIT) -> list[SearchResult]:
    """Return up to ``limit`` results by descending frequency, ties kept in order."""
    ordered = sorted(results, key=lambda result: -result.frequency)
    return ordered[: max(limit, 0)]


def format_results(results: Iterable[SearchResult], duration: float) -> str:
    """Render the search time and the top results as the output file text."""
    lines = [f"Tempo de busca: {duration:f}"]
    lines.extend(f"{result.document}: {result.frequency}" for result in rank(results))
    return "\n".join(lines) + "\n"


def write_results(results: Iterable[SearchResult], path: str | Path, duration: float) -> None:
    """Write the formatted results to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_results(results, duration))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a query from standard input, search INDEX and write the ranking to OUTPUT."""
    parser = argparse.ArgumentParser(prog="docindex-search", description=main.__doc__)
    parser.add_argument("index", help="index file written by the indexer")
    parser.add_argument("output", help="file to write the results to")
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in IndexLayout],
        default=IndexLayout.TREE.value,
        help="storage layout used while searching",
    )
    args = parser.parse_args(argv)

    try:
        index = load_index(args.index, IndexLayout(args.layout))
    except OSError as exc:
        print(f"Erro ao abrir o arquivo {exc.filename}", file=sys.stderr)
        return 1

    print("Query: ", end="", flush=True)
    line = sys.stdin.readline()
    query = line.rstrip("\n")

    start = timestamp()
    results = search(index, query)
    end = timestamp()

    try:
        write_results(results, args.output, end - start)
    except OSError as exc:
        print(f"Erro ao abrir o arquivo {exc.filename}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())