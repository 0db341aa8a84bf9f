"""Reading a labelled corpus of abstracts and cleaning its text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from abstractknn.ascii import is_alpha, is_decimal, is_whitespace
from abstractknn.stopwords import is_stopword

__all__ = [
    "CORPUS_FILE_NAME",
    "MAX_CORPUS_BYTES",
    "CorpusError",
    "Document",
    "clean_abstract",
    "remove_stopwords",
    "parse_corpus",
    "load_corpus",
]

CORPUS_FILE_NAME = "raw.txt"
MAX_CORPUS_BYTES = 2**32 - 1


class CorpusError(Exception):
    """The corpus could not be read or is malformed."""


@dataclass(frozen=True)
class Document:
    """One labelled abstract, with stopwords already removed."""

    label: str
    text: str
    words: tuple[str, ...]


def _as_text(raw: bytes | bytearray | str) -> str:
    if isinstance(raw, str):
        return raw
    return bytes(raw).decode("latin-1")


def clean_abstract(raw: bytes | bytearray | str) -> str:
    """Keep ASCII letters, digits, spaces and newlines, lower-casing the letters."""
    kept = []
    for char in _as_text(raw):
        if is_alpha(char):
            kept.append(chr(ord(char) | 0x20))
        elif is_decimal(char) or char in " \n":
            kept.append(char)
    return "".join(kept)


def remove_stopwords(text: str) -> tuple[str, tuple[str, ...]]:
    """Drop stopwords from cleaned text.

    Returns the remaining text, where each kept word carries the whitespace
    that preceded it, and the kept words in order.
    """
    kept_text = []
    words = []
    position = 0
    end = len(text)
    while position < end:
        start_with_whitespace = position
        while position < end and is_whitespace(text[position]):
            position += 1
        if position == end:
            break
        start = position
        while position < end and not is_whitespace(text[position]):
            position += 1
        word = text[start:position]
        if is_stopword(word):
            continue
        words.append(word)
        kept_text.append(text[start_with_whitespace:position])
    return "".join(kept_text), tuple(words)


def parse_corpus(data: bytes | bytearray | str) -> list[Document]:
    """Parse 'label:abstract' records, one per line."""
    raw = data.encode("utf-8", errors="surrogateescape") if isinstance(data, str) else bytes(data)
    documents = []
    position = 0
    while position < len(raw):
        colon = raw.find(b":", position)
        if colon < 0:
            raise CorpusError(f"record starting at byte {position} has no ':' separator")
        label = raw[position:colon].decode("utf-8", errors="surrogateescape")
        newline = raw.find(b"\n", colon + 1)
        if newline < 0:
            newline = len(raw)
        text, words = remove_stopwords(clean_abstract(raw[colon + 1:newline]))
        documents.append(Document(label=label, text=text, words=words))
        position = newline + 1
    return documents


def load_corpus(directory: str | Path) -> list[Document]:
    """Read and parse the corpus file inside a directory."""
    path = Path(directory) / CORPUS_FILE_NAME
    try:
        size = path.stat().st_size
        if size > MAX_CORPUS_BYTES:
            raise CorpusError(
                f"file '{path}' is {size} bytes, which is greater than the "
                f"supplied maximum of {MAX_CORPUS_BYTES} bytes"
            )
        data = path.read_bytes()
    except OSError as error:
        raise CorpusError(f"unable to open file '{path}'") from error
    if not data:
        raise CorpusError(f"file '{path}' is empty")
    return parse_corpus(data)