# markov_text_generator/core/ngrams.py
# sliding-window n-gram extraction

from __future__ import annotations

from typing import List, Sequence, Tuple

Token = str
Context = Tuple[Token, ...]
NGramPair = Tuple[Context, Token]

# reserved token standing in for sentence-final punctuation. Upper case so it
# can never collide with normalized (lower-cased) corpus text.
SENTENCE_END = "SENTENCE_END"


def generate_n_grams(tokens: Sequence[Token], n: int) -> List[NGramPair]:
    """
    Emit (context, next_token) for every window of n consecutive tokens.

    The context is the first n-1 tokens of the window as a tuple; for n=1
    it is the empty tuple, so every pair shares one unconditional context.
    Duplicates are kept since their frequency is what the model learns.
    """
    if n < 1:
        raise ValueError(f"n-gram order must be >= 1, got {n}")
    width = n - 1
    return [
        (tuple(tokens[i:i + width]), tokens[i + width])
        for i in range(len(tokens) - width)
    ]
