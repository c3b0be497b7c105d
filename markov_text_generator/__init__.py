"""
markov_text_generator

Learns an n-gram Markov model from a text corpus and samples new text from it.

    from markov_text_generator import train, generate_text, make_readable

    model = train("corpus/", n=2)
    print(make_readable(generate_text(model, length=40, seed=7)))
"""

from .errors import (
    MarkovTextError,
    CorpusError,
    ModelStoreError,
    ConfigError,
    GenerationError,
    LengthError,
    SeedTooShortError,
    OutOfVocabularyError,
    PunctuationNotFoundError,
    NoTerminationError,
)
from .context import normalize_text, tokenize_words, tokenize_sentences, make_readable
from .core import (
    SENTENCE_END,
    MarkovModel,
    MarkovGenerator,
    GeneratorConfig,
    generate_n_grams,
    build_transition_table,
    build_punctuation_table,
    train,
    train_text,
    generate_text,
)

__all__ = [
    "MarkovTextError",
    "CorpusError",
    "ModelStoreError",
    "ConfigError",
    "GenerationError",
    "LengthError",
    "SeedTooShortError",
    "OutOfVocabularyError",
    "PunctuationNotFoundError",
    "NoTerminationError",
    "normalize_text",
    "tokenize_words",
    "tokenize_sentences",
    "make_readable",
    "SENTENCE_END",
    "MarkovModel",
    "MarkovGenerator",
    "GeneratorConfig",
    "generate_n_grams",
    "build_transition_table",
    "build_punctuation_table",
    "train",
    "train_text",
    "generate_text",
]

__version__ = "0.1.0"
