# model_store.py — persistence layer for trained Markov text models

# - models are stored as JSON snapshots: {"order", "transitions", "punctuation"}
# - transitions are a list of [context_tokens, [[token, probability], ...]]
#   since tuple contexts cannot be JSON object keys
# - json writes floats with repr(), so probabilities round-trip exactly

import json
import logging
from pathlib import Path
from typing import List, Union

from ..core.transitions import MarkovModel
from ..errors import ModelStoreError

logger = logging.getLogger(__name__)

MODEL_SUFFIX = ".json"
FORMAT_VERSION = 1

PathLike = Union[str, Path]


# Serialization ---------------------------------
def serialize_model(model: MarkovModel) -> bytes:
    """Encode a model as UTF-8 JSON bytes."""
    data = {"format": FORMAT_VERSION, **model.to_dict()}
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


def deserialize_model(blob: bytes) -> MarkovModel:
    """
    Decode bytes produced by serialize_model.
    Raises:
        ModelStoreError: the blob is not a valid model snapshot
    """
    try:
        data = json.loads(blob.decode("utf-8"))
        return MarkovModel.from_dict(data)
    except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise ModelStoreError(f"invalid model snapshot: {e}") from e


# Files -------------------------------------------
def model_path(directory: PathLike, name: str) -> Path:
    name = name[: -len(MODEL_SUFFIX)] if name.endswith(MODEL_SUFFIX) else name
    return Path(directory) / f"{name}{MODEL_SUFFIX}"


def save_model(model: MarkovModel, path: PathLike) -> Path:
    """
    Save the model to `path`, creating parent directories as needed.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(serialize_model(model))
    logger.info("Saved model to %s (%d contexts)", p, len(model.transitions))
    return p


def load_model(path: PathLike) -> MarkovModel:
    """Load a model saved with save_model. Missing files raise FileNotFoundError."""
    p = Path(path)
    model = deserialize_model(p.read_bytes())
    logger.info("Loaded model %s (order %d, %d contexts)", p, model.order, len(model.transitions))
    return model


def list_models(directory: PathLike) -> List[str]:
    """Names (without suffix) of the saved models in `directory`, sorted."""
    d = Path(directory)
    if not d.is_dir():
        return []
    return sorted(f.stem for f in d.glob(f"*{MODEL_SUFFIX}") if f.is_file())
