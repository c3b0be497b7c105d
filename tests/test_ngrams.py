# tests/test_ngrams.py
import pytest

from markov_text_generator.core.ngrams import generate_n_grams


def test_bigrams_in_order():
    assert generate_n_grams(["a", "b", "c"], 2) == [(("a",), "b"), (("b",), "c")]


def test_trigrams_keep_duplicates():
    toks = ["a", "b", "a", "b", "a"]
    assert generate_n_grams(toks, 3) == [
        (("a", "b"), "a"),
        (("b", "a"), "b"),
        (("a", "b"), "a"),
    ]


def test_unigrams_share_empty_context():
    assert generate_n_grams(["x", "y"], 1) == [((), "x"), ((), "y")]


def test_too_few_tokens():
    assert generate_n_grams(["a"], 2) == []
    assert generate_n_grams([], 1) == []


def test_tokens_with_spaces_stay_distinct():
    # tuple contexts cannot collide the way space-joined keys do
    pairs = generate_n_grams(["a b", "c", "x", "a", "b c", "y"], 3)
    contexts = [ctx for ctx, _ in pairs]
    assert ("a b", "c") in contexts and ("a", "b c") in contexts


def test_invalid_order():
    with pytest.raises(ValueError):
        generate_n_grams(["a", "b"], 0)
