# tests/conftest.py
# shared corpora and trained models

import pytest

from markov_text_generator.core.ngrams import SENTENCE_END
from markov_text_generator.core.trainer import train_text
from markov_text_generator.core.transitions import MarkovModel

CORPUS = (
    "The cat sat on the mat. The dog sat on the log! "
    "Did the cat see the dog? The dog saw the cat."
)


@pytest.fixture
def corpus_text():
    return CORPUS


@pytest.fixture
def bigram_model():
    return train_text(CORPUS, 2)


@pytest.fixture
def corpus_dir(tmp_path):
    d = tmp_path / "corpus"
    d.mkdir()
    (d / "a.txt").write_text("The cat sat on the mat. The dog sat on the log!", encoding="utf-8")
    (d / "b.txt").write_text("Did the cat see the dog? The dog saw the cat.", encoding="utf-8")
    return d


@pytest.fixture
def loop_model():
    """Deterministic chain: a -> b -> END -> a ..., 'b' always closes with '.'"""
    return MarkovModel(
        order=2,
        transitions={
            ("a",): (("b", 1.0),),
            ("b",): ((SENTENCE_END, 1.0),),
            (SENTENCE_END,): (("a", 1.0),),
        },
        punctuation={"b": ((".", 1.0),)},
    )
