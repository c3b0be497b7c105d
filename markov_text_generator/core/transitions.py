# markov_text_generator/core/transitions.py
"""
Transition and punctuation tables of the Markov text model.

Both tables are built with the same grouped count-and-normalize step:
count every (key, value) pair, then divide by the number of pairs sharing
the key. Probabilities are therefore always count(key, value) / count(key)
and sum to 1.0 per key by construction. There is no smoothing: a pair never
seen in training has no entry at all.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, TypeVar

from ..context.tokenizer import split_terminal, tokenize_words
from .ngrams import Context, NGramPair, Token

K = TypeVar("K", bound=Hashable)

Distribution = Tuple[Tuple[str, float], ...]
TransitionTable = Mapping[Context, Distribution]
PunctuationTable = Mapping[str, Distribution]


def _normalize_groups(pairs: Iterable[Tuple[K, str]]) -> Dict[K, Distribution]:
    """Group (key, value) pairs by key and turn counts into probabilities."""
    pair_counts: Counter = Counter(pairs)
    key_totals: Counter = Counter()
    for (key, _), c in pair_counts.items():
        key_totals[key] += c

    grouped: Dict[K, List[Tuple[str, float]]] = {}
    # Counter keeps first-appearance order, so the tables are deterministic
    for (key, value), c in pair_counts.items():
        grouped.setdefault(key, []).append((value, c / key_totals[key]))
    return {k: tuple(v) for k, v in grouped.items()}


def build_transition_table(ngram_pairs: Iterable[NGramPair]) -> Dict[Context, Distribution]:
    return _normalize_groups((tuple(ctx), nxt) for ctx, nxt in ngram_pairs)


def build_punctuation_table(sentences: Iterable[str]) -> Dict[str, Distribution]:
    """
    Learn which mark closes a sentence given its last word. Needs the
    literal punctuation, so it runs before end markers replace it.
    """
    pairs = []
    for sentence in sentences:
        body, mark = split_terminal(sentence)
        words = tokenize_words(body)
        if mark is None or not words:
            continue
        pairs.append((words[-1], mark))
    return _normalize_groups(pairs)


@dataclass(frozen=True)
class MarkovModel:
    """
    Trained model: n-gram order plus the two read-only tables.
    Created once by training (or loading) and never mutated.
    """
    order: int
    transitions: TransitionTable = field(default_factory=dict)
    punctuation: PunctuationTable = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "transitions", MappingProxyType(dict(self.transitions)))
        object.__setattr__(self, "punctuation", MappingProxyType(dict(self.punctuation)))

    def __hash__(self) -> int:
        # tables are read-only, so a model can key caches and sets
        return hash((self.order, frozenset(self.transitions.items()), frozenset(self.punctuation.items())))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def contexts(self) -> List[Context]:
        return list(self.transitions.keys())

    def next_tokens(self, context: Iterable[Token]) -> Optional[Distribution]:
        return self.transitions.get(tuple(context))

    def punctuation_for(self, word: str) -> Optional[Distribution]:
        return self.punctuation.get(word)

    def vocabulary_size(self) -> int:
        vocab = set()
        for ctx, dist in self.transitions.items():
            vocab.update(ctx)
            vocab.update(tok for tok, _ in dist)
        return len(vocab)

    # ------------------------------------------------------------------
    # Snapshot helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "order": self.order,
            "transitions": [
                [list(ctx), [[tok, p] for tok, p in dist]]
                for ctx, dist in self.transitions.items()
            ],
            "punctuation": {
                word: [[mark, p] for mark, p in dist]
                for word, dist in self.punctuation.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MarkovModel":
        transitions = {
            tuple(ctx): tuple((str(tok), float(p)) for tok, p in dist)
            for ctx, dist in data["transitions"]
        }
        punctuation = {
            str(word): tuple((str(mark), float(p)) for mark, p in dist)
            for word, dist in data["punctuation"].items()
        }
        return cls(order=int(data["order"]), transitions=transitions, punctuation=punctuation)
