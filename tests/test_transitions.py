# tests/test_transitions.py
import math
from collections import Counter

import pytest

from markov_text_generator.core.ngrams import generate_n_grams
from markov_text_generator.core.transitions import (
    MarkovModel,
    build_punctuation_table,
    build_transition_table,
)


def test_probabilities_are_grouped_frequencies():
    pairs = [(("a",), "b"), (("a",), "c"), (("a",), "b"), (("b",), "a")]
    table = build_transition_table(pairs)
    assert dict(table[("a",)]) == {"b": pytest.approx(2 / 3), "c": pytest.approx(1 / 3)}
    assert table[("b",)] == (("a", 1.0),)


def test_entry_order_is_first_appearance():
    pairs = [(("a",), "z"), (("a",), "b"), (("a",), "z")]
    assert [tok for tok, _ in build_transition_table(pairs)[("a",)]] == ["z", "b"]


def test_unseen_pairs_have_no_entry():
    table = build_transition_table([(("a",), "b")])
    assert ("b",) not in table


def test_probability_mass_sums_to_one(bigram_model):
    for dist in list(bigram_model.transitions.values()) + list(bigram_model.punctuation.values()):
        assert math.fsum(p for _, p in dist) == pytest.approx(1.0, abs=1e-8)


def test_counts_match_raw_ngrams():
    toks = "the cat the dog the cat a cat the".split()
    pairs = generate_n_grams(toks, 2)
    raw = Counter(pairs)
    totals = Counter(ctx for ctx, _ in pairs)
    table = build_transition_table(pairs)
    for ctx, dist in table.items():
        for tok, p in dist:
            assert round(p * totals[ctx]) == raw[(ctx, tok)]


def test_punctuation_table_keyed_on_last_word():
    sentences = ["he left.", "she left!", "they left.", "who left?", "no mark", "!"]
    table = build_punctuation_table(sentences)
    assert dict(table["left"]) == {".": pytest.approx(0.5), "!": pytest.approx(0.25), "?": pytest.approx(0.25)}
    assert "mark" not in table
    assert len(table) == 1


def test_model_is_read_only(bigram_model):
    with pytest.raises(TypeError):
        bigram_model.transitions[("x",)] = (("y", 1.0),)
    with pytest.raises(AttributeError):
        bigram_model.order = 3


def test_model_dict_round_trip(bigram_model):
    again = MarkovModel.from_dict(bigram_model.to_dict())
    assert again.order == bigram_model.order
    assert dict(again.transitions) == dict(bigram_model.transitions)
    assert dict(again.punctuation) == dict(bigram_model.punctuation)
    assert again.contexts() == bigram_model.contexts()


def test_equal_models_hash_equal(bigram_model):
    again = MarkovModel.from_dict(bigram_model.to_dict())
    reordered = MarkovModel(
        order=bigram_model.order,
        transitions=dict(reversed(list(bigram_model.transitions.items()))),
        punctuation=dict(bigram_model.punctuation),
    )
    assert hash(again) == hash(bigram_model) == hash(reordered)
    assert len({bigram_model, again, reordered}) == 1
