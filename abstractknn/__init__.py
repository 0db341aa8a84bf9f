"""Corpus parsing, stopword removal, and word and byte-pair count vectors for labelled abstracts."""

__version__ = "0.1.0"