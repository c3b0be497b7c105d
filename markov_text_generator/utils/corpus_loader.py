# corpus_loader.py - reads the training corpus from disk

import logging
import os
from pathlib import Path
from typing import List, Union

from ..errors import CorpusError

logger = logging.getLogger(__name__)


def corpus_files(path: Union[str, Path], pattern: str = "*.txt") -> List[Path]:
    """Files making up the corpus, in a stable (sorted) order."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"corpus path does not exist: {p}")
    if p.is_file():
        return [p]
    return sorted(f for f in p.glob(pattern) if f.is_file())


def load_corpus(path: Union[str, Path], pattern: str = "*.txt") -> str:
    """
    Concatenate every matching file under `path` into one string.
    Args:
        path: a directory of text files, or a single file
        pattern: glob used to pick files inside a directory
    Raises:
        FileNotFoundError: path is missing
        CorpusError: no text was found
    """
    files = corpus_files(path, pattern)
    chunks = []
    for f in files:
        with open(f, "r", encoding="utf-8") as fh:
            chunks.append(fh.read())
    text = "\n".join(chunks)
    if not text.strip():
        raise CorpusError(f"no text found in {os.fspath(path)!r}")
    logger.info("Loaded corpus (%d files, %d chars)", len(files), len(text))
    return text
