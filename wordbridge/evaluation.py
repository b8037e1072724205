"""Accuracy of a translator against a bilingual test dictionary."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .loading import TranslationPair
from .translate import TOP_K, Outcome, Translator


@dataclass(frozen=True)
class EvaluationResult:
    """Counts of correct translations over a set of test pairs."""

    total: int
    correct_top1: int
    correct_top5: int

    @property
    def top1_accuracy(self) -> float:
        """Percentage of pairs whose chosen translation was the target."""
        return 100.0 * self.correct_top1 / self.total

    @property
    def top5_accuracy(self) -> float:
        """Percentage of pairs whose target was among the candidates."""
        return 100.0 * self.correct_top5 / self.total


def evaluate(
    translator: Translator,
    pairs: Iterable[TranslationPair],
    top_k: int = TOP_K,
) -> EvaluationResult:
    """Translate every source word and count top-1 and top-k hits.

    A word whose best match equals itself counts as a top-1 hit only when the
    expected target is the source word. Raises ValueError for no pairs.
    """
    pairs = list(pairs)
    if not pairs:
        raise ValueError("No test pairs loaded for evaluation.")

    correct_top1 = 0
    correct_top5 = 0
    for pair in pairs:
        result = translator.translate_word(pair.source, top_k)
        if result.outcome is Outcome.SAME:
            hit = pair.source == pair.target
        else:
            hit = result.text is not None and result.text == pair.target
        correct_top1 += hit
        correct_top5 += any(c.word == pair.target for c in result.candidates)

    return EvaluationResult(len(pairs), correct_top1, correct_top5)


def format_report(result: EvaluationResult) -> str:
    """Render the evaluation summary as printable lines."""
    return "\n".join(
        [
            "Evaluation Results:",
            f"Test pairs processed: {result.total}",
            f"Top-1 Accuracy: {result.top1_accuracy:.2f}% "
            f"({result.correct_top1}/{result.total})",
            f"Top-5 Accuracy: {result.top5_accuracy:.2f}% "
            f"({result.correct_top5}/{result.total})",
        ]
    )