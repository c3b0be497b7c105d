# tests/test_config.py
import json

import pytest

from markov_text_generator.errors import ConfigError
from markov_text_generator.utils.config_manager import DEFAULTS, Config


def test_creates_file_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULTS
    assert cfg.get("order") == 2


def test_set_coerces_and_persists(tmp_path):
    path = str(tmp_path / "config.json")
    cfg = Config(path)
    cfg.set("order", "3")
    assert Config(path).get("order") == 3


def test_unknown_key(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    with pytest.raises(KeyError):
        cfg.set("colour", "blue")
    with pytest.raises(KeyError):
        cfg.get("colour")


def test_disabled_values(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert cfg.seed is None
    cfg.set("max_steps", 0)
    cfg.set("seed", 42)
    assert cfg.max_steps is None
    assert cfg.seed == 42


def test_stored_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"length": 12, "bogus": 1}), encoding="utf-8")
    cfg = Config(str(path))
    assert cfg.get("length") == 12
    assert "bogus" not in dict(cfg.items())


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_malformed_file_raises_config_error(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        Config(str(path))
