# markov_text_generator/core/trainer.py
# training pipeline: text -> sentences -> punctuation table -> tokens -> n-grams -> model

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from ..context.normalizer import normalize_text
from ..context.tokenizer import split_terminal, tokenize_sentences, tokenize_words
from ..utils.corpus_loader import load_corpus
from ..utils.logger_utils import time_block
from .ngrams import SENTENCE_END, generate_n_grams
from .transitions import MarkovModel, build_punctuation_table, build_transition_table

logger = logging.getLogger(__name__)


def substitute_end_markers(sentences: Iterable[str]) -> str:
    """
    Replace each sentence's final mark with SENTENCE_END as its own token.
    Sentences that are punctuation only are dropped, so the marker always
    follows a word.
    """
    out = []
    for sentence in sentences:
        body, mark = split_terminal(sentence)
        if not body:
            continue
        out.append(f"{body} {SENTENCE_END}" if mark is not None else body)
    return " ".join(out)


def train_text(text: str, n: int) -> MarkovModel:
    """Train a model of order n from raw (not yet normalized) text."""
    if n < 1:
        raise ValueError(f"n-gram order must be >= 1, got {n}")
    with time_block(f"training order-{n} model", logger):
        normalized = normalize_text(text)
        sentences = tokenize_sentences(normalized)
        # punctuation must be read before the markers erase it
        punctuation = build_punctuation_table(sentences)
        tokens = tokenize_words(substitute_end_markers(sentences))
        pairs = generate_n_grams(tokens, n)
        transitions = build_transition_table(pairs)

    logger.info(
        "Model built: %d sentences, %d tokens, %d contexts, %d punctuation keys",
        len(sentences), len(tokens), len(transitions), len(punctuation),
    )
    if not transitions:
        logger.warning("Corpus too short for order %d: transition table is empty", n)
    return MarkovModel(order=n, transitions=transitions, punctuation=punctuation)


def train(corpus_source: Union[str, Path], n: int) -> MarkovModel:
    """Load the corpus at corpus_source and train an order-n model on it."""
    return train_text(load_corpus(corpus_source), n)
