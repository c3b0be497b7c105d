# markov_text_generator/context/tokenizer.py
# word and sentence tokenizers used by training

import re
from typing import List, Optional, Tuple

SENTENCE_MARKS = ".!?"

# split on whitespace that follows a terminal mark, unless the mark closes an
# abbreviation like "Mr." or follows a digit as in "3.14."
_sentence_split_re = re.compile(
    r"(?<![A-Z][a-z][.!?])"
    r"(?<!\d[.!?])"
    r"(?<=[.!?])\s+"
)


def tokenize_words(text: str) -> List[str]:
    """Maximal runs of non-whitespace characters."""
    if not text:
        return []
    return text.split()


def tokenize_sentences(text: str) -> List[str]:
    """
    Split text into sentences. The end of text always closes the last
    sentence, whether or not it carries punctuation.
    """
    if not text:
        return []
    parts = _sentence_split_re.split(text.strip())
    return [p for p in parts if p]


def split_terminal(sentence: str) -> Tuple[str, Optional[str]]:
    """
    Return (body, mark) where mark is the sentence's final . ! or ?
    (None if it has none) and body is the text before it.
    """
    sentence = sentence.strip()
    if sentence and sentence[-1] in SENTENCE_MARKS:
        return sentence[:-1].rstrip(), sentence[-1]
    return sentence, None
