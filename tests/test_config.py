import json

import pytest

from clippub import config as config_store
from clippub.errors import ConfigError
from clippub.models.config import Config

STORED = {
    "r2BucketName": "clips",
    "r2AccountId": "acc123",
    "cfAccessKeyId": "key",
    "cfSecretAccessKey": "secret",
    "publicDomainUrl": "https://cdn.example.com",
}


def test_missing_file_loads_as_none(config_dir):
    assert config_store.load_config() is None


def test_save_then_load_round_trip(config_dir):
    path = config_store.save_config(Config.model_validate(STORED))

    assert path == config_dir / "config.json"
    assert json.loads(path.read_text()) == STORED
    assert config_store.load_config() == Config.model_validate(STORED)


def test_invalid_json_raises(config_dir):
    config_dir.mkdir()
    (config_dir / "config.json").write_text("{not json")

    with pytest.raises(ConfigError):
        config_store.load_config()


@pytest.mark.parametrize("missing", sorted(STORED))
def test_partial_config_is_rejected(config_dir, missing):
    config_dir.mkdir()
    partial = {k: v for k, v in STORED.items() if k != missing}
    (config_dir / "config.json").write_text(json.dumps(partial))

    with pytest.raises(ConfigError):
        config_store.load_config()


def test_empty_field_is_rejected(config_dir):
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps(dict(STORED, r2BucketName="")))

    with pytest.raises(ConfigError):
        config_store.load_config()


def test_default_path_is_under_home(monkeypatch, tmp_path):
    monkeypatch.delenv("CLIPPUB_CONFIG_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))

    assert config_store.get_config_path() == tmp_path / ".config" / "clippub" / "config.json"


def test_prompt_collects_all_fields(monkeypatch):
    answers = iter(["clips", "acc123", "key", "https://cdn.example.com"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    monkeypatch.setattr(config_store.getpass, "getpass", lambda prompt: "secret")

    assert config_store.prompt_for_config() == Config.model_validate(STORED)


def test_prompt_rejects_empty_answer(monkeypatch):
    answers = iter(["clips", "", "key", "https://cdn.example.com"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    monkeypatch.setattr(config_store.getpass, "getpass", lambda prompt: "secret")

    with pytest.raises(ConfigError):
        config_store.prompt_for_config()


def test_public_url_for_adds_slash():
    config = Config.model_validate(STORED)

    assert config.public_url_for("clip-abc123.txt") == "https://cdn.example.com/clip-abc123.txt"
