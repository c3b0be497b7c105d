# markov_text_generator/context/readability.py
# turns a generated token list into display text

from typing import Iterable, List

from .tokenizer import SENTENCE_MARKS


def _is_punct(tok: str) -> bool:
    return bool(tok) and all(ch in SENTENCE_MARKS for ch in tok)


def _capitalize(word: str) -> str:
    # upper-case the first letter, skipping leading quotes
    for i, ch in enumerate(word):
        if ch.isalpha():
            return word[:i] + ch.upper() + word[i + 1:]
    return word


def make_readable(tokens: Iterable[str]) -> str:
    """
    Capitalize sentence starts and join tokens with single spaces,
    without a space before punctuation tokens.
    """
    out: List[str] = []
    cap_next = True
    for tok in tokens:
        if not tok:
            continue
        if _is_punct(tok):
            if out:
                out[-1] = out[-1] + tok
            else:
                out.append(tok)
            cap_next = True
            continue
        out.append(_capitalize(tok) if cap_next else tok)
        cap_next = False
    return " ".join(out)
