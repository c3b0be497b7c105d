# tests/test_model_store.py
import pytest

from markov_text_generator.core.generator import generate_text
from markov_text_generator.errors import ModelStoreError
from markov_text_generator.utils.model_store import (
    deserialize_model,
    list_models,
    load_model,
    model_path,
    save_model,
    serialize_model,
)


def test_bytes_round_trip_keeps_probabilities_exact(bigram_model):
    again = deserialize_model(serialize_model(bigram_model))
    assert again.order == 2
    assert dict(again.transitions) == dict(bigram_model.transitions)
    assert dict(again.punctuation) == dict(bigram_model.punctuation)


def test_reloaded_model_generates_identically(bigram_model, tmp_path):
    path = save_model(bigram_model, tmp_path / "models" / "demo.json")
    again = load_model(path)
    assert generate_text(again, 20, seed=11) == generate_text(bigram_model, 20, seed=11)


def test_list_models(bigram_model, tmp_path):
    save_model(bigram_model, model_path(tmp_path, "beta"))
    save_model(bigram_model, model_path(tmp_path, "alpha.json"))
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    assert list_models(tmp_path) == ["alpha", "beta"]
    assert list_models(tmp_path / "nope") == []


@pytest.mark.parametrize("blob", [b"not json", b'{"order": 2}', b"\xff\xfe", b'{"order": 2, "transitions": 5, "punctuation": {}}'])
def test_bad_snapshot(blob):
    with pytest.raises(ModelStoreError):
        deserialize_model(blob)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_model(tmp_path / "absent.json")
