"""Bag-of-words and byte-pair token vectors."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from abstractknn.corpus import Document

__all__ = [
    "MAX_COUNT",
    "Vector",
    "BytePairModel",
    "word_frequencies",
    "build_word_vocabulary",
    "word_vector",
    "learn_byte_pairs",
    "token_vector",
]

MAX_COUNT = 0xFFFF
_ASCII_TOKENS = 128


@dataclass(frozen=True)
class Vector:
    """Feature counts together with their Euclidean length."""

    items: tuple[int, ...]
    length: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(
            self, "length", math.sqrt(sum(float(v) * float(v) for v in self.items))
        )

    def cosine(self, other: Vector) -> float:
        """Cosine similarity; NaN when either vector is all zeros."""
        if len(self.items) != len(other.items):
            raise ValueError("vectors have different dimensions")
        dot = sum(float(a) * float(b) for a, b in zip(self.items, other.items))
        denominator = self.length * other.length
        if denominator == 0:
            return math.nan
        return dot / denominator


def word_frequencies(documents: Iterable[Document]) -> dict[str, int]:
    """Count each word over all documents, in order of first appearance, capped at 65535."""
    counts: dict[str, int] = {}
    for document in documents:
        for word in document.words:
            counts[word] = min(counts.get(word, 0) + 1, MAX_COUNT)
    return counts


def build_word_vocabulary(documents: Iterable[Document], size: int) -> dict[str, int]:
    """The most frequent words, mapped to their counts, most frequent first.

    Ties keep the order of first appearance.
    """
    if size < 0:
        raise ValueError(f"vocabulary size must not be negative, got {size}")
    ranked = sorted(word_frequencies(documents).items(), key=lambda item: -item[1])
    return dict(ranked[:size])


def word_vector(words: Iterable[str], vocabulary: Mapping[str, object]) -> Vector:
    """Count words by vocabulary position; the final slot counts unknown words."""
    positions = {word: index for index, word in enumerate(vocabulary)}
    unknown = len(positions)
    counts = Counter(positions.get(word, unknown) for word in words)
    return Vector(tuple(counts[index] for index in range(unknown + 1)))


@dataclass(frozen=True)
class BytePairModel:
    """Learned byte-pair merges and the token sequences they produced.

    Token i is pairs[i]; tokens 1 to 127 are single ASCII characters,
    stored as (code, 0). Index 0 is unused.
    """

    pairs: tuple[tuple[int, int], ...]
    vocabulary: tuple[int, ...]
    counts: tuple[int, ...]
    encoded: tuple[tuple[int, ...], ...]

    def _pair(self, index: int) -> tuple[int, int]:
        if not 0 < index < len(self.pairs):
            raise IndexError(f"no token with index {index}")
        return self.pairs[index]

    def expand(self, index: int) -> str:
        """The text a token stands for."""
        left, right = self._pair(index)
        if right == 0:
            return chr(left)
        return self.expand(left) + self.expand(right)

    def describe(self, index: int) -> str:
        """The text a token stands for, with each merge shown in parentheses."""
        left, right = self._pair(index)
        if right == 0:
            return chr(left)
        return f"({self.describe(left)})({self.describe(right)})"


def _merge(tokens: list[int], pair: tuple[int, int], replacement: int) -> list[int]:
    merged = []
    last = len(tokens) - 1
    position = 0
    while position + 1 < len(tokens):
        current = (tokens[position], tokens[position + 1])
        if current == pair:
            merged.append(replacement)
            position += 2
            continue
        merged.append(current[0])
        if position + 1 == last:
            merged.append(current[1])
        position += 1
    return merged


def _encode(text: str) -> list[int]:
    tokens = []
    for char in text:
        code = ord(char)
        if not 0 < code < _ASCII_TOKENS:
            raise ValueError(f"character {char!r} is not a non-null ASCII character")
        tokens.append(code)
    return tokens


def learn_byte_pairs(texts: Iterable[str], vocabulary_size: int) -> BytePairModel:
    """Repeatedly merge the most frequent adjacent token pair.

    Stops after vocabulary_size merges or when no pair occurs twice.
    """
    if vocabulary_size < 0:
        raise ValueError(f"vocabulary size must not be negative, got {vocabulary_size}")
    documents = [_encode(text) for text in texts]
    pairs: list[tuple[int, int]] = [(code, 0) for code in range(_ASCII_TOKENS)]
    pairs[0] = (0, 0)
    index_of = {pair: index for index, pair in enumerate(pairs) if index > 0}

    vocabulary: list[int] = []
    vocabulary_counts: list[int] = []
    while len(vocabulary) < vocabulary_size:
        counts = [0] * len(pairs)
        for tokens in documents:
            for pair in zip(tokens, tokens[1:]):
                index = index_of.get(pair)
                if index is None:
                    index = len(pairs)
                    pairs.append(pair)
                    index_of[pair] = index
                    counts.append(0)
                counts[index] = min(counts[index] + 1, MAX_COUNT)

        best = max(range(len(counts)), key=counts.__getitem__)
        if counts[best] < 2:
            break
        vocabulary.append(best)
        vocabulary_counts.append(counts[best])
        documents = [_merge(tokens, pairs[best], best) for tokens in documents]

    return BytePairModel(
        pairs=tuple(pairs),
        vocabulary=tuple(vocabulary),
        counts=tuple(vocabulary_counts),
        encoded=tuple(tuple(tokens) for tokens in documents),
    )


def token_vector(indices: Iterable[int], vocabulary: Sequence[int]) -> Vector:
    """Count tokens by vocabulary position; the final slot counts other tokens."""
    positions: dict[int, int] = {}
    for position, token in enumerate(vocabulary):
        positions.setdefault(token, position)
    unknown = len(vocabulary)
    counts = Counter(positions.get(token, unknown) for token in indices)
    return Vector(tuple(counts[index] for index in range(unknown + 1)))