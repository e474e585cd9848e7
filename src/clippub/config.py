import getpass
import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from clippub.errors import ConfigError
from clippub.models.config import Config

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_dir() -> Path:
    override = os.getenv("CLIPPUB_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "clippub"


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def load_config() -> Optional[Config]:
    path = get_config_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ConfigError(f"Error loading configuration from {path}: {e}", cause=e)

    try:
        return Config.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}", cause=e)


def save_config(config: Config) -> Path:
    path = get_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(config.model_dump(by_alias=True), indent=2),
            encoding="utf-8",
        )
    except OSError as e:
        raise ConfigError(f"Error saving configuration to {path}: {e}", cause=e)
    logger.info(f"Configuration saved to {path}")
    return path


def prompt_for_config() -> Config:
    answers = {
        "r2BucketName": input("Enter Cloudflare R2 Bucket Name: ").strip(),
        "r2AccountId": input("Enter Cloudflare Account ID: ").strip(),
        "cfAccessKeyId": input("Enter Cloudflare Access Key ID: ").strip(),
        "cfSecretAccessKey": getpass.getpass(
            "Enter Cloudflare Secret Access Key (input hidden): ").strip(),
        "publicDomainUrl": input(
            "Enter R2 Public Custom Domain URL (e.g., https://cdn.example.com): ").strip(),
    }

    if not all(answers.values()):
        raise ConfigError("All configuration fields are required.")
    return Config.model_validate(answers)
