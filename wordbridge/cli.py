"""Command-line front end: load embeddings, evaluate, then translate interactively."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .evaluation import evaluate, format_report
from .loading import EmbeddingTable, load_embeddings, load_test_pairs
from .translate import TOP_K, Outcome, Translator


class Language(enum.Enum):
    """Target languages that can be chosen."""

    FRENCH = "french"
    SPANISH = "spanish"

    @property
    def code(self) -> str:
        return {"french": "fr", "spanish": "es"}[self.value]

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @property
    def banner(self) -> str:
        if self is Language.FRENCH:
            return "Translate(type 'quit' to exit):"
        return "Interactive translation (type 'quit' to exit):"


_SAME_MESSAGE = "No suitable translation found (best match was same as input)"


def _show_word(translator: Translator, text: str, out: TextIO, language: Language) -> None:
    result = translator.translate_word(text, TOP_K)
    candidates = result.candidates

    if result.outcome is Outcome.SAME:
        if language is Language.SPANISH and len(candidates) > 1:
            print(f"Translation: {candidates[1].word}", file=out)
        else:
            print(_SAME_MESSAGE, file=out)
    elif result.outcome is Outcome.UNKNOWN:
        print("Translation: <unk>", file=out)
    else:
        print(f"Translation: {result.text}", file=out)

    print(f"Top {TOP_K} candidates:", file=out)
    for rank, candidate in enumerate(candidates, start=1):
        marker = " <same as input>" if candidate.word == text else ""
        print(f"{rank}. {candidate.word} (score: {candidate.score:.4f}){marker}", file=out)


def interactive_session(
    translator: Translator,
    lines: Iterable[str],
    out: TextIO,
    language: Language | str = Language.FRENCH,
) -> None:
    """Translate each input line until 'quit' or the input runs out.

    Lines holding a space are translated as sentences, others as single words
    with their candidate list.
    """
    language = Language(language)
    rows = iter(lines)
    while True:
        print("Enter English word or sentence: ", end="", file=out)
        line = next(rows, None)
        if line is None:
            break
        text = line.split("\n", 1)[0]
        if text == "quit":
            break
        if " " in text:
            sentence = translator.translate_sentence(text)
            print(f"Translation: {sentence + ' ' if sentence else ''}", file=out)
        else:
            _show_word(translator, text, out, language)


def _load_table(path: Path) -> EmbeddingTable:
    try:
        return load_embeddings(path)
    except OSError:
        print(f"Error opening file: {path}")
        return EmbeddingTable()


def _read_language(stdin: TextIO) -> str:
    print("Which language do you want to Translate to: ")
    print("1.For English to French \tEnter french\t\t\t", end="")
    print("2.For English to Spanish \tEnter spanish")
    tokens = stdin.readline().split()
    return tokens[0] if tokens else ""


def main(argv: list[str] | None = None) -> int:
    """Run the translator; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="wordbridge",
        description="Translate English words with aligned word embeddings.",
    )
    parser.add_argument("language", nargs="?", help="french or spanish")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data"),
        help="directory holding the embedding and test files",
    )
    args = parser.parse_args(argv)

    stdin = sys.stdin
    choice = args.language if args.language is not None else _read_language(stdin)
    try:
        language = Language(choice.lower())
    except ValueError:
        print("Invalid language selection.")
        return 1

    data_dir: Path = args.data_dir
    print("Loading English embeddings...")
    source = _load_table(data_dir / "wiki.en.align.vec")
    print(f"Loaded {len(source)} English words.")

    print(f"Loading {language.title} embeddings...")
    target = _load_table(data_dir / f"wiki.{language.code}.align.vec")
    print(f"Loaded {len(target)} {language.title} words.")

    if not source or not target:
        print("Failed to load embeddings.")
        return 1

    translator = Translator(source, target)

    print("Loading test pairs...")
    test_path = data_dir / f"test_data_{language.code}.txt"
    try:
        pairs = load_test_pairs(test_path)
    except OSError:
        print(f"Error opening test file: {test_path}")
        pairs = []

    if pairs:
        print(f"Loaded {len(pairs)} test pairs.")
        print()
        print(format_report(evaluate(translator, pairs, TOP_K)))
    else:
        print("No test pairs loaded. Continuing without evaluation.")

    print()
    print(language.banner)
    interactive_session(translator, stdin, sys.stdout, language)
    return 0


if __name__ == "__main__":
    sys.exit(main())