# wordbridge

wordbridge translates English words and simple sentences into French or
Spanish with aligned word embeddings. It looks each English word up in an
English embedding table. It then takes the closest word in the
target-language table as the translation. Closeness is the dot product of
unit-length vectors, that is, cosine similarity.

It is pure Python and needs only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
wordbridge [french|spanish] [--data-dir DIR]
```

If no language is given, the command asks for one and reads it from
standard input. The answer is not case-sensitive. Any answer other than
`french` or `spanish` prints `Invalid language selection.` and the command
exits with status 1.

The command reads its files from `--data-dir`, which defaults to `data`:

- `wiki.en.align.vec` holds the English embeddings.
- `wiki.fr.align.vec` or `wiki.es.align.vec` holds the target-language
  embeddings.
- `test_data_fr.txt` or `test_data_es.txt` holds the test pairs. This file
  is optional.

If either embedding table is missing or comes out empty, the command prints
`Failed to load embeddings.` and exits with status 1. If test pairs are
found, it prints the top-1 and top-5 accuracy over them before the session
starts.

The session then reads standard input one line at a time:

- **A single word.** The command prints `Translation: ...`, followed by the
  five best candidates with their scores to four decimals. A candidate that
  is identical to the input is marked `<same as input>`. A word with no
  English embedding prints `Translation: <unk>`. Sometimes the best match is
  the input word itself. In that case French prints a
  "No suitable translation found" notice, and Spanish shows the second
  candidate as the translation.
- **A line containing a space.** The line is translated word by word. Words
  that are unknown, or whose best match is themselves, are kept as typed.
- **`quit`**, or the end of input, ends the session.

## File formats

**Embeddings** are plain text in the usual `.vec` layout.

- An optional first line gives the word count and the dimension. If that
  dimension differs from the expected one (300 by default), a warning is
  issued.
- Every other line holds a word followed by its vector components,
  separated by spaces.
- Words are reduced to their lower-case ASCII letters, at most 99 of them.
  Lines whose word has no letters are skipped.
- Lines with fewer components than the dimension are skipped with a
  warning. Extra components are ignored.
- Each vector is scaled to unit length. A vector of near-zero length
  becomes the uniform unit vector.
- At most 300,000 entries are read.

**Test pairs** hold one pair per line: an English word and its expected
translation, separated by spaces or tabs. Further words on the line are
ignored. At most 10,000 pairs are read.

## Using it as a library

- `wordbridge.vectors`
  - `cosine_similarity(a, b)` returns the dot product of two vectors. It
    raises `ValueError` if their lengths differ.
  - `normalize_vector(vec)` returns a unit-length tuple.
- `wordbridge.loading`
  - `read_embeddings(lines, dim)` and `load_embeddings(path, dim)` return an
    `EmbeddingTable`. The table is a sequence of `Embedding(word, vector)`
    entries, and its `find(word)` returns the first matching vector or
    `None`.
  - `read_test_pairs(lines)` and `load_test_pairs(path)` return a list of
    `TranslationPair(source, target)`.
  - `clean_word(token)` applies the loader's word cleaning.
- `wordbridge.translate`
  - `Translator(source, target, min_similarity=0.4)` is built from two
    tables.
  - `find_top_k(vector, k)` returns up to `k` `Candidate(word, index, score)`
    entries, best first.
  - `translate_word(word, top_k)` returns a
    `WordTranslation(source, outcome, text, candidates)`. Its `outcome` is
    one of the `Outcome` values `TRANSLATED`, `PASSTHROUGH`, `UNKNOWN` or
    `SAME`.
  - `translate_sentence(text)` returns the translated words joined by
    single spaces.
- `wordbridge.evaluation`
  - `evaluate(translator, pairs, top_k)` returns an
    `EvaluationResult(total, correct_top1, correct_top5)`, which has the
    properties `top1_accuracy` and `top5_accuracy` as percentages. It raises
    `ValueError` when there are no pairs.
  - `format_report(result)` renders the result as text.
- `wordbridge.cli`
  - `interactive_session(translator, lines, out, language)` runs the
    translation loop over any iterable of lines and writes to any text
    stream. `language` is `"french"` or `"spanish"`.
  - `main(argv)` runs the command and returns its exit status.

Translation follows these rules:

- A word that begins with a capital ASCII letter is treated as a name and
  passed through unchanged.
- Otherwise the first candidate that differs from the cleaned word and
  scores at least the threshold is chosen.
- Failing that, the best candidate is used.