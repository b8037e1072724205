"""Reading embedding files and bilingual test dictionaries."""

from __future__ import annotations

import itertools
import re
import warnings
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from .vectors import EMBEDDING_DIM, normalize_vector

MAX_WORDS = 300_000
MAX_WORD_LEN = 100
MAX_TEST_PAIRS = 10_000

_HEADER = re.compile(r"\s*([+-]?\d+)\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_VECTOR_SEPARATORS = re.compile(r"[ \t\n\r]+")
_PAIR_SEPARATORS = re.compile(r"[\t\n ]+")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass(frozen=True)
class Embedding:
    """A word and its unit-length vector."""

    word: str
    vector: tuple[float, ...]


@dataclass(frozen=True)
class TranslationPair:
    """A source word and its expected translation."""

    source: str
    target: str


class EmbeddingTable(Sequence[Embedding]):
    """An ordered collection of embeddings with lookup by word."""

    def __init__(self, embeddings: Iterable[Embedding] = ()) -> None:
        self._items = tuple(embeddings)
        self._by_word: dict[str, Embedding] = {}
        for embedding in self._items:
            self._by_word.setdefault(embedding.word, embedding)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Embedding]:
        return iter(self._items)

    def find(self, word: str) -> tuple[float, ...] | None:
        """Return the vector of the first entry for ``word``, or None."""
        embedding = self._by_word.get(word)
        return embedding.vector if embedding is not None else None


def clean_word(token: str) -> str:
    """Keep only the ASCII letters of ``token``, lower-cased and length-limited."""
    letters = (ch.lower() for ch in token if ch in _ASCII_LETTERS)
    return "".join(itertools.islice(letters, MAX_WORD_LEN - 1))


def _atof(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group()) if match else 0.0


def _split(pattern: re.Pattern[str], text: str) -> list[str]:
    return [part for part in pattern.split(text) if part]


def read_embeddings(lines: Iterable[str], dim: int = EMBEDDING_DIM) -> EmbeddingTable:
    """Parse embedding lines, with an optional ``count dim`` header, into a table.

    Words are cleaned to lower-case ASCII letters; entries whose word is empty
    are skipped and entries with fewer than ``dim`` components are skipped with
    a warning. Vectors are normalized to unit length.
    """
    if dim < 1:
        raise ValueError("embedding dimension must be positive")

    rows = iter(lines)
    first = next(rows, None)
    if first is not None:
        header = _HEADER.match(first)
        if header:
            declared = int(header.group(2))
            if declared != dim:
                warnings.warn(
                    f"Embedding dimension mismatch ({declared} vs {dim})",
                    stacklevel=2,
                )
        else:
            rows = itertools.chain([first], rows)

    embeddings: list[Embedding] = []
    for line in rows:
        if len(embeddings) >= MAX_WORDS:
            break
        word_token, _, rest = line.lstrip(" ").partition(" ")
        word = clean_word(word_token)
        if not word:
            continue
        values = _split(_VECTOR_SEPARATORS, rest)[:dim]
        if len(values) < dim:
            warnings.warn(f"Invalid vector dimension for word '{word}'", stacklevel=2)
            continue
        embeddings.append(Embedding(word, normalize_vector([_atof(v) for v in values])))
    return EmbeddingTable(embeddings)


def load_embeddings(path: str | Path, dim: int = EMBEDDING_DIM) -> EmbeddingTable:
    """Read an embedding file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return read_embeddings(handle, dim)


def read_test_pairs(lines: Iterable[str]) -> list[TranslationPair]:
    """Parse lines holding a source word and a target word each."""
    pairs: list[TranslationPair] = []
    for line in lines:
        if len(pairs) >= MAX_TEST_PAIRS:
            break
        tokens = _split(_PAIR_SEPARATORS, line)
        if len(tokens) >= 2:
            pairs.append(
                TranslationPair(
                    tokens[0][: MAX_WORD_LEN - 1],
                    tokens[1][: MAX_WORD_LEN - 1],
                )
            )
    return pairs


def load_test_pairs(path: str | Path) -> list[TranslationPair]:
    """Read a test dictionary file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return read_test_pairs(handle)