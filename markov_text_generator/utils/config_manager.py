# config_manager.py - JSON config manager

import json
import logging
import os

from ..errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS = {
    "order": 2,            # n-gram order used for training
    "length": 30,          # default number of words to generate
    "max_steps": 100000,   # walk step cap, 0 disables it
    "models_dir": "models",
    "corpus_dir": "corpus",
    "seed": -1,            # -1 means unseeded
    "log_level": "INFO",
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf8") as f:
                try:
                    stored = json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigError(f"invalid config file {self.path}: {e}") from e
            if not isinstance(stored, dict):
                raise ConfigError(f"config file {self.path} must hold a JSON object")
            unknown = set(stored) - set(DEFAULTS)
            if unknown:
                logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
            self.data.update({k: v for k, v in stored.items() if k in DEFAULTS})
        else:
            self.save()

    def save(self):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        return self.data[key]

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        self.data[key] = type(DEFAULTS[key])(val)
        self.save()

    # derived values used by the CLI
    @property
    def max_steps(self):
        steps = int(self.data["max_steps"])
        return steps if steps > 0 else None

    @property
    def seed(self):
        seed = int(self.data["seed"])
        return seed if seed >= 0 else None

    def items(self):
        return self.data.items()
