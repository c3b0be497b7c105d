# markov_text_generator/cli/__init__.py
from .cli import main, build_parser, generate_readable

__all__ = ["main", "build_parser", "generate_readable"]
