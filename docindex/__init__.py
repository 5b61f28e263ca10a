"""Inverted word index over text documents, with frequency-ranked search."""

__version__ = "0.1.0"