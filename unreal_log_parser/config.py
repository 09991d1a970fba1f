"""Configuration loading from env vars and an optional YAML file."""

import codecs
import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value: str | bool | None, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def _parse_log_level(value: str | None) -> str:
    if value is None:
        return "INFO"
    level = str(value).strip().upper()
    if level not in VALID_LOG_LEVELS:
        logger.warning("Invalid log level '%s', falling back to 'INFO'", value)
        return "INFO"
    return level


def _parse_encoding(value) -> str:
    if value is None:
        return "utf-8"
    encoding = str(value).strip()
    try:
        codecs.lookup(encoding)
    except LookupError:
        logger.warning("Unknown encoding '%s', falling back to 'utf-8'", value)
        return "utf-8"
    return encoding


def _optional_str(value) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Config:
    encoding: str = "utf-8"
    log_level: str = "INFO"
    report_failures: bool = True
    default_verbosity: str | None = None
    default_category: str | None = None


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring it", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_path: str | None = None) -> Config:
    """Build Config from env vars, overlaid with the YAML file if one is given.

    The YAML path falls back to ``UNREAL_LOG_PARSER_CONFIG``.
    """
    yaml_data = load_yaml_config(yaml_path or os.environ.get("UNREAL_LOG_PARSER_CONFIG"))

    def setting(key: str, env_var: str, default=None):
        if key in yaml_data:
            return yaml_data[key]
        return os.environ.get(env_var, default)

    return Config(
        encoding=_parse_encoding(setting("encoding", "UNREAL_LOG_ENCODING")),
        log_level=_parse_log_level(setting("log_level", "UNREAL_LOG_LEVEL")),
        report_failures=_parse_bool(
            setting("report_failures", "UNREAL_LOG_REPORT_FAILURES"), True
        ),
        default_verbosity=_optional_str(setting("verbosity", "UNREAL_LOG_VERBOSITY")),
        default_category=_optional_str(setting("category", "UNREAL_LOG_CATEGORY")),
    )
