"""Nearest-neighbour translation between two aligned embedding spaces."""

from __future__ import annotations

import enum
import heapq
import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from .loading import EmbeddingTable, clean_word
from .vectors import cosine_similarity

TOP_K = 5
MIN_SIMILARITY = 0.4
_SCORE_FLOOR = -2.0
_SENTENCE_SEPARATORS = re.compile(r"[ \t\n\r]+")


class Outcome(enum.Enum):
    """How a word translation was resolved."""

    TRANSLATED = "translated"
    PASSTHROUGH = "passthrough"
    UNKNOWN = "unknown"
    SAME = "same"


@dataclass(frozen=True)
class Candidate:
    """A target word, its position in the target table and its similarity."""

    word: str
    index: int
    score: float


@dataclass(frozen=True)
class WordTranslation:
    """The result of translating one word.

    ``text`` holds the translation for TRANSLATED, the input itself for
    PASSTHROUGH, and None for UNKNOWN and SAME.
    """

    source: str
    outcome: Outcome
    text: str | None = None
    candidates: tuple[Candidate, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Translator:
    """Translates words from the source embedding space into the target one."""

    source: EmbeddingTable
    target: EmbeddingTable
    min_similarity: float = MIN_SIMILARITY

    def find_top_k(self, vector: Sequence[float], k: int = TOP_K) -> list[Candidate]:
        """Return the ``k`` most similar target words, best first; ties keep table order."""
        if k <= 0:
            return []
        scored = (
            (index, cosine_similarity(vector, embedding.vector))
            for index, embedding in enumerate(self.target)
        )
        best = heapq.nlargest(
            k,
            ((index, score) for index, score in scored if score > _SCORE_FLOOR),
            key=lambda item: item[1],
        )
        return [Candidate(self.target[index].word, index, score) for index, score in best]

    def translate_word(self, word: str, top_k: int = TOP_K) -> WordTranslation:
        """Translate one word.

        Capitalised words pass through unchanged. The first candidate that
        differs from the cleaned input and reaches the similarity threshold
        wins; otherwise the best candidate is used, or SAME when it equals the
        input.
        """
        if word[:1] and "A" <= word[0] <= "Z":
            return WordTranslation(word, Outcome.PASSTHROUGH, word)

        cleaned = clean_word(word)
        vector = self.source.find(cleaned)
        if vector is None:
            return WordTranslation(word, Outcome.UNKNOWN)

        candidates = tuple(self.find_top_k(vector, top_k))
        for candidate in candidates:
            if candidate.word != cleaned and candidate.score >= self.min_similarity:
                return WordTranslation(word, Outcome.TRANSLATED, candidate.word, candidates)

        if candidates:
            best = candidates[0]
            if best.word == cleaned:
                return WordTranslation(word, Outcome.SAME, None, candidates)
            return WordTranslation(word, Outcome.TRANSLATED, best.word, candidates)

        return WordTranslation(word, Outcome.UNKNOWN, None, candidates)

    def translate_sentence(self, text: str) -> str:
        """Translate word by word, keeping unknown or unchanged words as typed.

        The result holds the translated words separated by single spaces.
        """
        words = []
        for token in _SENTENCE_SEPARATORS.split(text):
            if not token:
                continue
            result = self.translate_word(token)
            if result.outcome in (Outcome.UNKNOWN, Outcome.SAME):
                words.append(token)
            else:
                words.append(result.text)
        return " ".join(words)