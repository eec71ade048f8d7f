# faq_chat/core/config.py - Configuration management
import copy
import os
from dataclasses import dataclass
from typing import Any

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .logging_config import LOG_FORMATS, LOG_LEVELS

# Load environment variables from .env file
load_dotenv()

CONFIG_FILE = "config.yml"


def get_default_config() -> dict[str, Any]:
    """Return default configuration"""
    return {
        "documents": {
            "path": "data/faq.json",
            "reload_per_request": False,
        },
        "retrieval": {
            "mode": "containment",
            "title_weight": None,
            "body_weight": None,
            "min_token_length": 2,
            "filter_zero_scores": True,
        },
        "api": {
            "topk_default": 3,
            "topk_max": 10,
        },
        "answer": {
            "snippet_length": 120,
            "max_chars": None,
            "max_suggestions": 6,
            "categories": ["계정", "결제", "배송", "고객센터", "오류"],
        },
        "logging": {
            "level": "INFO",
            "format": "json",
        },
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | None = None) -> dict[str, Any]:
    """
    Load configuration from a YAML file layered over the defaults

    Args:
        path: Config file path. Defaults to env FAQ_CONFIG_FILE or config.yml

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file exists but is not a YAML mapping
    """
    path = path or os.getenv("FAQ_CONFIG_FILE", CONFIG_FILE)
    config = get_default_config()

    if os.path.exists(path):
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}", {"path": path}) from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping", {"path": path})
        config = _merge(config, loaded)

    data_path = os.getenv("FAQ_DATA_PATH")
    if data_path:
        config["documents"]["path"] = data_path

    # LOG_LEVEL / LOG_FORMAT win over the file, as for FAQ_DATA_PATH
    for env_name, key in (("LOG_LEVEL", "level"), ("LOG_FORMAT", "format")):
        value = os.getenv(env_name)
        if value:
            config["logging"][key] = value

    return config


def get_config_value(path: str, default: Any = None) -> Any:
    """Get configuration value by dot-separated path (e.g., 'retrieval.mode')"""
    keys = path.split(".")
    value = get_config()

    try:
        for key in keys:
            value = value[key]
        return value
    except (KeyError, TypeError):
        return default


# Global config instance
_config = None


def get_config() -> dict[str, Any]:
    """Get global config instance (cached)"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next access reloads it"""
    global _config
    _config = None


@dataclass(frozen=True)
class Settings:
    """Typed view over the configuration dictionary"""

    data_path: str
    reload_per_request: bool
    mode: str
    title_weight: int | None
    body_weight: int | None
    min_token_length: int
    filter_zero_scores: bool
    topk_default: int
    topk_max: int
    snippet_length: int | None
    answer_max_chars: int | None
    max_suggestions: int
    categories: tuple[str, ...]
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self):
        if self.topk_default < 1 or self.topk_max < self.topk_default:
            raise ConfigurationError(
                "api.topk_default must be >= 1 and <= api.topk_max",
                {"topk_default": self.topk_default, "topk_max": self.topk_max},
            )
        if self.snippet_length is not None and self.snippet_length < 1:
            raise ConfigurationError("answer.snippet_length must be positive or null")
        if self.answer_max_chars is not None and self.answer_max_chars < 1:
            raise ConfigurationError("answer.max_chars must be positive or null")
        if self.max_suggestions < 0:
            raise ConfigurationError("answer.max_suggestions cannot be negative")
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}", {"level": self.log_level}
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                "logging.format must be json or text", {"format": self.log_format}
            )

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> "Settings":
        """
        Build settings from a configuration dictionary.

        Args:
            config: Configuration dictionary. Defaults to the cached global config

        Returns:
            New Settings instance
        """
        config = _merge(get_default_config(), config if config is not None else get_config())
        documents = config["documents"]
        retrieval = config["retrieval"]
        api = config["api"]
        answer = config["answer"]
        logging_config = config["logging"]

        try:
            return cls(
                data_path=str(documents["path"]),
                reload_per_request=bool(documents["reload_per_request"]),
                mode=str(retrieval["mode"]),
                title_weight=retrieval["title_weight"],
                body_weight=retrieval["body_weight"],
                min_token_length=int(retrieval["min_token_length"]),
                filter_zero_scores=bool(retrieval["filter_zero_scores"]),
                topk_default=int(api["topk_default"]),
                topk_max=int(api["topk_max"]),
                snippet_length=answer["snippet_length"],
                answer_max_chars=answer["max_chars"],
                max_suggestions=int(answer["max_suggestions"]),
                categories=tuple(answer["categories"]),
                log_level=str(logging_config["level"]).upper(),
                log_format=str(logging_config["format"]).lower(),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration value: {e}") from e
