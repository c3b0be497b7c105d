# markov_text_generator/core/generator.py
"""
Random-walk text generation over a trained MarkovModel.

A run moves through SEEDING -> WALKING -> TERMINATED, or ends in FAILED
when a GenerationError is raised. Generation stops once at least `length`
words have been emitted AND the last token is the end marker, so the text
always closes on real punctuation. Each end marker is then replaced by a
punctuation mark sampled from the punctuation table.

Only the sampling draws are random; pass `seed` (or an explicit
random.Random) for reproducible output.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..errors import (
    GenerationError,
    LengthError,
    NoTerminationError,
    OutOfVocabularyError,
    PunctuationNotFoundError,
    SeedTooShortError,
)
from .ngrams import SENTENCE_END, Token
from .transitions import Distribution, MarkovModel

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 100_000


class GenerationState(enum.Enum):
    SEEDING = "seeding"
    WALKING = "walking"
    TERMINATED = "terminated"
    FAILED = "failed"


@dataclass(frozen=True)
class GeneratorConfig:
    """
    max_steps bounds consecutive walk steps that make no progress (marker
    draws before `length` words are out, any draw after), so a model whose
    chains never reach an end marker fails with NoTerminationError instead of
    looping forever. Long happy-path runs are not limited. None removes the bound.
    """
    max_steps: Optional[int] = DEFAULT_MAX_STEPS


class MarkovGenerator:
    """Samples token sequences from a MarkovModel. Never mutates the model."""

    def __init__(self,
                 model: MarkovModel,
                 config: Optional[GeneratorConfig] = None,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None) -> None:
        self.model = model
        self.cfg = config or GeneratorConfig()
        self.rng = rng if rng is not None else random.Random(seed)
        self.state: Optional[GenerationState] = None

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def _draw(self, dist: Distribution) -> str:
        values = [v for v, _ in dist]
        weights = [p for _, p in dist]
        return self.rng.choices(values, weights=weights, k=1)[0]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def generate(self, length: int, feed: str = "", n: Optional[int] = None) -> List[Token]:
        """
        Generate at least `length` words (end markers excluded) and return
        the tokens with punctuation substituted in.

        feed: optional seed text; its tokens start the output and count
              toward `length`.
        n: n-gram order, defaults to the model's own order.
        """
        order = self.model.order if n is None else n
        try:
            self.state = GenerationState.SEEDING
            out = self._seed(length, feed, order)

            self.state = GenerationState.WALKING
            self._walk(out, length, order)

            self.state = GenerationState.TERMINATED
            result = self._punctuate(out)
        except GenerationError as e:
            self.state = GenerationState.FAILED
            logger.debug("generation failed: %s", e)
            raise
        logger.debug("generated %d tokens", len(result))
        return result

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------
    def _seed(self, length: int, feed: str, order: int) -> List[Token]:
        if length < 1:
            raise LengthError(f"length must be positive, got {length}")
        feed_tokens = feed.split() if feed else []
        if not feed_tokens:
            contexts = self.model.contexts()
            if not contexts:
                raise OutOfVocabularyError(())
            return list(self.rng.choice(contexts))
        if len(feed_tokens) >= length:
            raise LengthError(
                f"seed text has {len(feed_tokens)} words, requested length is {length}"
            )
        if len(feed_tokens) < order - 1:
            raise SeedTooShortError(
                f"seed text has {len(feed_tokens)} words, order {order} needs at least {order - 1}"
            )
        return feed_tokens

    def _walk(self, out: List[Token], length: int, order: int) -> None:
        width = order - 1
        emitted = sum(1 for t in out if t != SENTENCE_END)
        # steps without progress: marker draws before `length` is reached,
        # and every draw after it while waiting for the closing marker
        stalled = 0
        while emitted < length or not out or out[-1] != SENTENCE_END:
            if self.cfg.max_steps is not None and stalled >= self.cfg.max_steps:
                raise NoTerminationError(self.cfg.max_steps)
            context = tuple(out[len(out) - width:]) if width else ()
            dist = self.model.next_tokens(context)
            if not dist:
                raise OutOfVocabularyError(context)
            tok = self._draw(dist)
            out.append(tok)
            if tok != SENTENCE_END:
                emitted += 1
            if tok != SENTENCE_END and emitted <= length:
                stalled = 0
            else:
                stalled += 1

    def _punctuate(self, tokens: Sequence[Token]) -> List[Token]:
        result: List[Token] = []
        for i, tok in enumerate(tokens):
            if tok != SENTENCE_END:
                result.append(tok)
                continue
            prev = tokens[i - 1] if i else None
            if prev is None or prev == SENTENCE_END:
                # a marker that opens the output (random start context) or
                # repeats one (unigram models) closes no sentence
                continue
            dist = self.model.punctuation_for(prev)
            if not dist:
                raise PunctuationNotFoundError(prev)
            result.append(self._draw(dist))
        return result


def generate_text(model: MarkovModel,
                  length: int,
                  feed: str = "",
                  n: Optional[int] = None,
                  seed: Optional[int] = None,
                  rng: Optional[random.Random] = None,
                  max_steps: Optional[int] = DEFAULT_MAX_STEPS) -> List[Token]:
    """One-shot convenience wrapper around MarkovGenerator.generate."""
    gen = MarkovGenerator(model, GeneratorConfig(max_steps=max_steps), rng=rng, seed=seed)
    return gen.generate(length, feed=feed, n=n)
