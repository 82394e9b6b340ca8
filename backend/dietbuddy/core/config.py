"""
Configuration for the DietBuddy service.
Centralizes tunable parameters for storage, the chat-completion client and
the genetic upload pipeline.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "DIETBUDDY_CONFIG"

# Load .env file (walks up directories to find it)
load_dotenv(find_dotenv())


class StorageConfig(BaseModel):
    """Location of the persisted key/value state."""

    data_dir: str = Field(
        default_factory=lambda: os.environ.get("DIETBUDDY_DATA_DIR", "data/state"),
        description="Directory holding one JSON file per stored key"
    )


class ChatClientConfig(BaseModel):
    """Settings for the OpenAI-compatible chat-completion endpoint."""

    api_key: str = Field(
        default_factory=lambda: os.environ.get("CHAT_API_KEY", ""),
        description="Bearer credential; empty disables outbound calls"
    )

    api_url: str = Field(
        default_factory=lambda: os.environ.get(
            "CHAT_API_URL", "https://api.openai.com/v1/chat/completions"
        ),
        description="Chat-completion endpoint URL"
    )

    model: str = Field(
        default_factory=lambda: os.environ.get("CHAT_MODEL", "gpt-4o-mini"),
        description="Model name sent with every request"
    )

    max_tokens: int = Field(default=4000, ge=1, description="Completion token cap")

    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")

    timeout_seconds: float = Field(default=60.0, gt=0.0, description="HTTP timeout")

    max_tries: int = Field(
        default_factory=lambda: int(os.environ.get("CHAT_MAX_TRIES", "1")),
        ge=1,
        description="Total attempts per chat turn (1 = no retry)"
    )


class GeneticUploadConfig(BaseModel):
    """Limits applied to genetic CSV uploads."""

    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024,
        ge=1,
        description="Largest accepted upload (5 MB)"
    )

    allowed_extensions: Tuple[str, ...] = Field(
        default=(".csv",),
        description="Accepted file name suffixes"
    )


class DietBuddyConfig(BaseModel):
    """Main configuration for the DietBuddy service."""

    storage: StorageConfig = Field(default_factory=StorageConfig)

    chat: ChatClientConfig = Field(default_factory=ChatClientConfig)

    genetics: GeneticUploadConfig = Field(default_factory=GeneticUploadConfig)

    log_level: str = Field(
        default_factory=lambda: os.environ.get("DIETBUDDY_LOG_LEVEL", "INFO"),
        description="Root log level"
    )


# Global configuration instance
_config: DietBuddyConfig = DietBuddyConfig()


def get_config() -> DietBuddyConfig:
    """Get the global configuration instance."""
    return _config



def _set_dotted(data: Dict[str, Any], key: str, value: Any) -> None:
    *sections, leaf = key.split('.')
    current = data
    for section in sections:
        if not isinstance(current.get(section), dict):
            raise KeyError(f"Unknown configuration section: {section}")
        current = current[section]
    if leaf not in current:
        raise KeyError(f"Unknown configuration key: {key}")
    current[leaf] = value


def update_config(**overrides: Any) -> DietBuddyConfig:
    """
    Replace the global configuration with ``overrides`` applied.

    Nested settings use dotted keys passed through a dict, e.g.
    ``update_config(**{"chat.max_tries": 3})``. The result is validated as a
    whole, so a bad value leaves the current configuration untouched.
    """
    global _config
    data = _config.model_dump()
    for key, value in overrides.items():
        _set_dotted(data, key, value)

    _config = DietBuddyConfig.model_validate(data)
    return _config


def load_config_from_file(path: Union[str, Path]) -> DietBuddyConfig:
    """
    Load the global configuration from a JSON file. Settings missing from the
    file (including the chat API key) fall back to environment defaults.
    """
    global _config
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    _config = DietBuddyConfig.model_validate(raw)
    logger.info("Loaded configuration from %s", path)
    return _config


def save_config_to_file(path: Union[str, Path]) -> None:
    """Write the current configuration as JSON, without the chat API key."""
    data = _config.model_dump(exclude={"chat": {"api_key"}})
    Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_config_from_env() -> Optional[DietBuddyConfig]:
    """Load the file named by DIETBUDDY_CONFIG, if set."""
    path = os.environ.get(CONFIG_PATH_ENV)
    if not path:
        return None
    return load_config_from_file(path)


def get_data_dir() -> Path:
    return Path(_config.storage.data_dir)
