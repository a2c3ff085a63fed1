"""
Configuration Loader for FOM

Reads from config.json and provides a simple interface for accessing settings.
Environment variables (optionally from a .env file) override both the
defaults and config.json.

Usage:
    from fom.config import get_config
    config = get_config()
    url = config.get("service.url")
"""

# ============================================================================
# 1) IMPORTS
# ============================================================================
import copy
import hashlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from fom.constants import MAIN_URL, REQUEST_TIMEOUT_SECONDS

# ============================================================================
# 2) MODULE LOGGER
# ============================================================================
logger = logging.getLogger(__name__)


# ============================================================================
# 3) CONFIG WRAPPER (DOT-NOTATION ACCESS)
# ============================================================================
class Config:
    """Simple config wrapper with dot-notation access."""

    def __init__(self, data: dict):
        self._data = data
        self._hash = config_hash(self._data)

    # 3.1) Dot-notation getter
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.

        Examples:
            config.get("service.url")
            config.get("service.timeout_seconds")
            config.get("nonexistent.key", "default_value")
        """
        value = self._data
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    # 3.2) Dict-style getter
    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    # 3.3) Config hash
    @property
    def hash(self) -> str:
        return self._hash


# ============================================================================
# 4) DEFAULT CONFIGURATION (FALLBACK)
# ============================================================================
_DEFAULT_CONFIG = {
    "system": {
        "log_level": "INFO",
    },
    "service": {
        "url": MAIN_URL,
        "username": "",
        "password": "",
        "timeout_seconds": REQUEST_TIMEOUT_SECONDS,
    },
}

# Environment variable -> dot-notation key
_ENV_OVERRIDES = {
    "FLUIDDB_URL": "service.url",
    "FLUIDDB_USERNAME": "service.username",
    "FLUIDDB_PASSWORD": "service.password",
    "FLUIDDB_TIMEOUT": "service.timeout_seconds",
    "FOM_LOG_LEVEL": "system.log_level",
}

# ============================================================================
# 5) CONFIG SINGLETON
# ============================================================================
_config_instance: Optional[Config] = None


# ============================================================================
# 6) LOAD / GET CONFIG
# ============================================================================
def load_config(config_path: str = "config.json", env_file: Optional[str] = None) -> Config:
    """
    Load configuration from JSON file, then apply environment overrides.

    Falls back to defaults if file not found or on error.

    Args:
        config_path: Path to config.json
        env_file: Optional .env file (defaults to .env beside config_path)

    Returns:
        Config instance
    """
    global _config_instance

    config_data = copy.deepcopy(_DEFAULT_CONFIG)

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)
                _merge_dicts(config_data, user_config)
                logger.info(f"[Config] Loaded from {config_path}")
        except (OSError, ValueError) as e:
            logger.warning(f"[Config] Failed to load {config_path}: {e}, using defaults")
    else:
        logger.debug(f"[Config] No config file at {config_path}, using defaults")

    if env_file is None:
        env_file = str(Path(config_path).resolve().parent / ".env")
    load_dotenv(env_file)
    _apply_env_overrides(config_data)

    _config_instance = Config(config_data)
    return _config_instance


def get_config() -> Config:
    """Get current config instance (lazy load if needed)."""
    global _config_instance
    if _config_instance is None:
        load_config()
    return _config_instance


# ============================================================================
# 7) HELPERS
# ============================================================================
def config_hash(cfg: dict) -> str:
    return hashlib.sha256(json.dumps(cfg, sort_keys=True).encode()).hexdigest()


def get_config_hash() -> str:
    return get_config().hash


def _apply_env_overrides(config_data: dict) -> None:
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is None or value == "":
            continue
        section, name = key.split(".")
        if name == "timeout_seconds":
            try:
                value = float(value)
            except ValueError:
                logger.warning(f"[Config] Ignoring non-numeric {env_name}={value!r}")
                continue
        config_data.setdefault(section, {})[name] = value
        logger.debug(f"[Config] {key} overridden by {env_name}")


def _merge_dicts(base: dict, override: dict) -> None:
    """
    Deep merge override dict into base dict (modifies base in place).
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value
