import math
import warnings

import pytest

from wordbridge.loading import (
    MAX_TEST_PAIRS,
    MAX_WORD_LEN,
    Embedding,
    EmbeddingTable,
    TranslationPair,
    clean_word,
    load_embeddings,
    load_test_pairs,
    read_embeddings,
    read_test_pairs,
)


def _norm(vec):
    return math.sqrt(sum(x * x for x in vec))


def test_clean_word_keeps_lowercase_letters_only():
    assert clean_word("Hello,World!") == "helloworld"


def test_clean_word_drops_non_ascii_letters():
    assert clean_word("caf\u00e9") == "caf"


def test_clean_word_is_length_limited():
    assert len(clean_word("a" * 500)) == MAX_WORD_LEN - 1


def test_read_embeddings_with_header():
    table = read_embeddings(["2 3\n", "cat 1 0 0\n", "dog 0 2 0\n"], dim=3)
    assert [e.word for e in table] == ["cat", "dog"]
    for embedding in table:
        assert math.isclose(_norm(embedding.vector), 1.0)


def test_matching_header_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        table = read_embeddings(["1 3\n", "cat 1 0 0\n"], dim=3)
    assert len(table) == 1


def test_read_embeddings_without_header_keeps_first_line():
    table = read_embeddings(["cat 1 0 0\n", "dog 0 1 0\n"], dim=3)
    assert [e.word for e in table] == ["cat", "dog"]


def test_header_dimension_mismatch_warns():
    with pytest.warns(UserWarning, match="dimension mismatch"):
        table = read_embeddings(["1 5\n", "cat 1 0 0\n"], dim=3)
    assert len(table) == 1


def test_short_vector_is_skipped_with_warning():
    with pytest.warns(UserWarning, match="cat"):
        table = read_embeddings(["cat 1 0\n", "dog 0 1 0\n"], dim=3)
    assert [e.word for e in table] == ["dog"]


def test_extra_components_are_ignored():
    table = read_embeddings(["cat 3 4 99 99\n"], dim=2)
    vector = table[0].vector
    assert len(vector) == 2
    assert math.isclose(vector[0] * 4.0, vector[1] * 3.0)


def test_words_are_cleaned_and_empty_words_skipped():
    table = read_embeddings(["Cat! 1 0\n", "123 0 1\n", "\n"], dim=2)
    assert [e.word for e in table] == ["cat"]


def test_find_returns_first_occurrence():
    table = read_embeddings(["cat 1 0\n", "cat 0 1\n"], dim=2)
    assert table.find("cat") == table[0].vector
    assert table.find("dog") is None


def test_table_from_embeddings():
    table = EmbeddingTable([Embedding("sun", (1.0,)), Embedding("moon", (-1.0,))])
    assert len(table) == 2
    assert table.find("moon") == (-1.0,)


def test_rejects_non_positive_dimension():
    with pytest.raises(ValueError):
        read_embeddings(["cat 1\n"], dim=0)


def test_load_embeddings_from_file(tmp_path):
    path = tmp_path / "vectors.vec"
    path.write_text("2 2\nhello 1 1\nworld -1 1\n", encoding="utf-8")
    table = load_embeddings(path, dim=2)
    assert [e.word for e in table] == ["hello", "world"]
    assert math.isclose(_norm(table.find("world")), 1.0)


def test_load_embeddings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_embeddings(tmp_path / "absent.vec", dim=2)


def test_read_test_pairs_takes_first_two_tokens():
    pairs = read_test_pairs(["cat\tchat\n", "single\n", "dog chien extra\n", "\n"])
    assert pairs == [TranslationPair("cat", "chat"), TranslationPair("dog", "chien")]


def test_read_test_pairs_truncates_long_words():
    pairs = read_test_pairs(["a" * 150 + " " + "b" * 150 + "\n"])
    assert len(pairs[0].source) == MAX_WORD_LEN - 1
    assert len(pairs[0].target) == MAX_WORD_LEN - 1


def test_read_test_pairs_is_limited():
    lines = [f"w{i} t{i}\n" for i in range(MAX_TEST_PAIRS + 5)]
    pairs = read_test_pairs(lines)
    assert len(pairs) == MAX_TEST_PAIRS
    assert pairs[-1].source == f"w{MAX_TEST_PAIRS - 1}"


def test_load_test_pairs_keeps_accents(tmp_path):
    path = tmp_path / "pairs.txt"
    path.write_text("coffee caf\u00e9\nsummer \u00e9t\u00e9\n", encoding="utf-8")
    pairs = load_test_pairs(path)
    assert [p.target for p in pairs] == ["caf\u00e9", "\u00e9t\u00e9"]


def test_load_test_pairs_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_test_pairs(tmp_path / "absent.txt")