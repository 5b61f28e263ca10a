"""Inverted index from words to the documents that contain them."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .bst import BinarySearchTree
from .textutils import read_file_list, read_words, timestamp

FILE_LIST_NAME = "files.txt"


class IndexLayout(Enum):
    """How words and postings are stored, which fixes their saved order.

    ``TREE`` keeps words and documents in binary search trees and writes
    them in level order. ``VECTOR`` keeps them in first-seen order.
    """

    TREE = "tree"
    VECTOR = "vector"


class InvertedIndex:
    """Maps each word to the documents it appears in and how often."""

    def __init__(self, layout: IndexLayout = IndexLayout.TREE) -> None:
        self.layout = IndexLayout(layout)
        if self.layout is IndexLayout.TREE:
            self._words: BinarySearchTree | dict[str, dict[str, int]] = BinarySearchTree()
        else:
            self._words = {}

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"{type(self).__name__}(layout={self.layout.value!r}, words={len(self)})"

    def _collection(self, word: str, create: bool) -> BinarySearchTree | dict[str, int] | None:
        collection = self._words.get(word)
        if collection is None and create:
            collection = BinarySearchTree() if self.layout is IndexLayout.TREE else {}
            if isinstance(self._words, BinarySearchTree):
                self._words.add(word, collection)
            else:
                self._words[word] = collection
        return collection

    def add_occurrence(self, word: str, document: str) -> None:
        """Record one more occurrence of ``word`` in ``document``."""
        collection = self._collection(word, create=True)
        if isinstance(collection, BinarySearchTree):
            current = collection.get(document)
            if current is None:
                collection.add(document, 1)
            else:
                collection.set_value(document, current + 1)
        else:
            collection[document] = collection.get(document, 0) + 1

    def set_posting(self, word: str, document: str, frequency: int) -> None:
        """Store ``frequency`` as the count of ``word`` in ``document``."""
        collection = self._collection(word, create=True)
        if isinstance(collection, BinarySearchTree):
            if document in collection:
                collection.set_value(document, frequency)
            else:
                collection.add(document, frequency)
        else:
            collection[document] = frequency

    def add_document(self, document: str | Path) -> None:
        """Read ``document`` and record every word in it."""
        name = str(document)
        for word in read_words(name):
            self.add_occurrence(word, name)

    def _word_entries(self) -> Iterator[tuple[str, BinarySearchTree | dict[str, int]]]:
        if isinstance(self._words, BinarySearchTree):
            yield from self._words.items_level_order()
        else:
            yield from self._words.items()

    @staticmethod
    def _collection_items(collection: BinarySearchTree | dict[str, int]) -> list[tuple[str, int]]:
        if isinstance(collection, BinarySearchTree):
            return list(collection.items_level_order())
        return list(collection.items())

    def words(self) -> list[str]:
        """Return the indexed words in their stored order."""
        return [word for word, _ in self._word_entries()]

    def postings(self, word: str) -> list[tuple[str, int]]:
        """Return (document, frequency) pairs for ``word``; raise KeyError if absent."""
        collection = self._collection(word, create=False)
        if collection is None:
            raise KeyError(word)
        return self._collection_items(collection)

    def dumps(self) -> str:
        """Render the index in its text file format."""
        lines = [str(len(self))]
        for word, collection in self._word_entries():
            items = self._collection_items(collection)
            lines.append(word)
            lines.append(str(len(items)))
            lines.extend(f"{document} {frequency}" for document, frequency in items)
        return "\n".join(lines) + "\n"

    def save(self, path: str | Path) -> None:
        """Write the index to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.dumps())


def build_index(
    files: Iterable[str | Path], layout: IndexLayout = IndexLayout.TREE
) -> InvertedIndex:
    """Build an index over every file in ``files``."""
    index = InvertedIndex(layout)
    for document in files:
        index.add_document(document)
    return index


def main(argv: Sequence[str] | None = None) -> int:
    """Index the documents listed in DIRECTORY/files.txt and save to OUTPUT."""
    parser = argparse.ArgumentParser(prog="docindex-index", description=main.__doc__)
    parser.add_argument("directory", help="directory holding files.txt and the documents")
    parser.add_argument("output", help="file to write the index to")
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in IndexLayout],
        default=IndexLayout.TREE.value,
        help="storage layout, which fixes the order of the saved index",
    )
    args = parser.parse_args(argv)

    try:
        files = read_file_list(args.directory, FILE_LIST_NAME)
        start = timestamp()
        index = build_index(files, IndexLayout(args.layout))
        end = timestamp()
    except OSError as exc:
        print(f"Erro ao abrir o arquivo {exc.filename}", file=sys.stderr)
        return 1

    print(f"TEMPO DE CONSTRUÇÃO DO ÍNDICE = {end - start:f}")

    try:
        index.save(args.output)
    except OSError as exc:
        print(f"Erro ao abrir o arquivo {exc.filename}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())