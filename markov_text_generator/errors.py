# markov_text_generator/errors.py
# exception hierarchy for training and generation failures

from __future__ import annotations

from typing import Optional, Tuple


class MarkovTextError(Exception):
    """Base class for every error raised by the package."""


class CorpusError(MarkovTextError):
    """Corpus directory held no usable text."""


class ModelStoreError(MarkovTextError):
    """Model snapshot could not be decoded."""


class ConfigError(MarkovTextError):
    """Config file is not valid JSON."""


class GenerationError(MarkovTextError):
    """
    Aborts a generation call. `code` is a stable identifier the CLI prints
    next to the message (LENGTH_ERROR, OUT_OF_VOCABULARY, ...).
    """

    code = "GENERATION_ERROR"

    def __str__(self) -> str:
        msg = super().__str__()
        return f"[{self.code}] {msg}" if msg else self.code


class LengthError(GenerationError):
    code = "LENGTH_ERROR"


class SeedTooShortError(GenerationError):
    code = "SEED_TOO_SHORT"


class OutOfVocabularyError(GenerationError):
    code = "OUT_OF_VOCABULARY"

    def __init__(self, context: Tuple[str, ...]):
        self.context = tuple(context)
        super().__init__(f"context not seen during training: {' '.join(self.context)!r}")


class PunctuationNotFoundError(GenerationError):
    code = "PUNCTUATION_NOT_FOUND"

    def __init__(self, word: Optional[str]):
        self.word = word
        super().__init__(f"no sentence-final punctuation recorded after {word!r}")


class NoTerminationError(GenerationError):
    code = "NO_TERMINATION"

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"no sentence end reached within {max_steps} steps without progress")
