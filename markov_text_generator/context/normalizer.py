# markov_text_generator/context/normalizer.py
import re

# anything that is not alphanumeric or simple sentence punctuation
_strip_re = re.compile(r"(?:[^\w,.!?\"']|_)+")


def normalize_text(s: str) -> str:
    if not s:
        return ""
    s = s.lower()
    # collapse every rejected run (whitespace included) to one space
    s = _strip_re.sub(" ", s)
    return s.strip()
