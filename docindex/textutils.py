"""Helpers for splitting text and reading the document collection."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


def split_words(text: str) -> list[str]:
    """Split ``text`` at space characters, dropping empty pieces.

    Only the space character separates words; other whitespace such as
    newlines stays inside the words.
    """
    return [word for word in text.split(" ") if word]


def unique(items: Iterable[T]) -> list[T]:
    """Return the items without repeats, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def timestamp() -> float:
    """Return the current UTC time in seconds since the epoch."""
    return time.time()


def read_file_list(directory: str | Path, list_name: str) -> list[str]:
    """Read ``directory/list_name`` and return each listed file as a path under ``directory``."""
    directory = str(directory)
    list_path = f"{directory}/{list_name}"
    with open(list_path, encoding="utf-8") as handle:
        return [f"{directory}/{line.removesuffix(chr(10))}" for line in handle]


def read_words(path: str | Path) -> list[str]:
    """Read a whole file and split its contents into words."""
    with open(path, encoding="utf-8") as handle:
        return split_words(handle.read())