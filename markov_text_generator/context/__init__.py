# markov_text_generator/context/__init__.py
# text preparation: normalization, tokenization and display formatting

from .normalizer import normalize_text  # lowercases and strips unsupported characters
from .tokenizer import (
    tokenize_words,
    tokenize_sentences,
    split_terminal,
)  # word/sentence splitting used by training
from .readability import make_readable  # capitalization and spacing for generated tokens

__all__ = [
    "normalize_text",
    "tokenize_words",
    "tokenize_sentences",
    "split_terminal",
    "make_readable",
]
