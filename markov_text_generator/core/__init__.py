"""
markov_text_generator.core

The n-gram Markov engine.
Contains:
 - n-gram extraction (generate_n_grams) and the reserved SENTENCE_END token
 - transition/punctuation table builders and the immutable MarkovModel
 - the training pipeline (train, train_text)
 - the random-walk generator (MarkovGenerator, generate_text)
"""

from .ngrams import SENTENCE_END, generate_n_grams
from .transitions import MarkovModel, build_transition_table, build_punctuation_table
from .trainer import train, train_text, substitute_end_markers
from .generator import GenerationState, GeneratorConfig, MarkovGenerator, generate_text

__all__ = [
    "SENTENCE_END",
    "generate_n_grams",
    "MarkovModel",
    "build_transition_table",
    "build_punctuation_table",
    "train",
    "train_text",
    "substitute_end_markers",
    "GenerationState",
    "GeneratorConfig",
    "MarkovGenerator",
    "generate_text",
]
