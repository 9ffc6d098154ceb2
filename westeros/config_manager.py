"""Centralized Configuration Manager for the Westeros Graph API.

Loads cfg/config.json once and exposes hierarchical access with defaults.
Environment variables (read through python-dotenv) override the server and
data locations so a deployment never has to edit the JSON file.

Usage:
    from westeros.config_manager import ConfigManager

    ConfigManager.load("cfg/config.json")
    port = ConfigManager.get("server", "port", default=8000)
    paths = ConfigManager.get_paths()
"""

import json
import os
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "cfg/config.json"

DEFAULTS: Dict[str, Any] = {
    "paths": {
        "data_dir": "data",
        "characters_file": "characters.json",
        "houses_file": "houses.json",
    },
    "server": {
        "host": "127.0.0.1",
        "port": 4000,
        "graphiql": True,
    },
    "audit": {
        "max_examples_per_kind": 10,
    },
}


class ConfigManager:
    """Class-level configuration holder with hierarchical key access."""

    _config: Optional[Dict[str, Any]] = None
    _config_path: Optional[str] = None

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
        """Load configuration from a JSON file, merged over the built-in defaults.

        Args:
            config_path: Path to configuration file. Defaults to cfg/config.json.

        Returns:
            Dictionary containing the entire configuration.

        Raises:
            json.JSONDecodeError: If the configuration file is invalid JSON.
        """
        if cls._config is not None and cls._config_path == config_path:
            logger.debug(f"Using cached configuration from {config_path}")
            return cls._config

        file_cfg: Dict[str, Any] = {}
        if os.path.exists(config_path):
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    file_cfg = json.load(f)
                logger.info(f"✅ Configuration loaded from {config_path}")
            except json.JSONDecodeError as e:
                logger.error(f"Invalid JSON in configuration file: {e}")
                raise
        else:
            logger.warning(f"⚠️ Config file not found at {config_path}. Using defaults.")

        cls._config = _merge(DEFAULTS, file_cfg)
        cls._config_path = config_path
        cls._apply_env_overrides()
        return cls._config

    @classmethod
    def _apply_env_overrides(cls) -> None:
        load_dotenv()

        server = cls._config.setdefault("server", {})
        paths = cls._config.setdefault("paths", {})

        if os.getenv("WESTEROS_HOST"):
            server["host"] = os.getenv("WESTEROS_HOST")
        if os.getenv("WESTEROS_PORT"):
            try:
                server["port"] = int(os.getenv("WESTEROS_PORT"))
            except ValueError:
                logger.warning(f"Ignoring non-numeric WESTEROS_PORT={os.getenv('WESTEROS_PORT')!r}")
        if os.getenv("WESTEROS_DATA_DIR"):
            paths["data_dir"] = os.getenv("WESTEROS_DATA_DIR")

    @classmethod
    def get(cls, *keys: str, default: Any = None) -> Any:
        """Get a configuration value using hierarchical keys.

        Examples:
            >>> ConfigManager.get("server", "port")
            4000

            >>> ConfigManager.get("nonexistent", "key", default="fallback")
            "fallback"
        """
        if cls._config is None:
            cls.load()

        value = cls._config
        for key in keys:
            if not isinstance(value, dict):
                logger.warning(f"Cannot traverse non-dict value at key: {key}")
                return default
            value = value.get(key)
            if value is None:
                logger.debug(f"Key path not found: {' -> '.join(keys)}. Using default: {default}")
                return default

        return value

    @classmethod
    def get_section(cls, section: str) -> Dict[str, Any]:
        """Get an entire configuration section, or an empty dict."""
        if cls._config is None:
            cls.load()

        return cls._config.get(section, {})

    @classmethod
    def reset(cls) -> None:
        """Drop the cached configuration."""
        cls._config = None
        cls._config_path = None

    @classmethod
    def get_paths(cls) -> Dict[str, Any]:
        return cls.get_section("paths")

    @classmethod
    def get_server_config(cls) -> Dict[str, Any]:
        return cls.get_section("server")

    @classmethod
    def get_data_files(cls) -> Dict[str, str]:
        """Resolve the character and house data files from the `paths` section."""
        paths = cls.get_paths()
        data_dir = paths.get("data_dir", "data")
        return {
            "characters": os.path.join(data_dir, paths.get("characters_file", "characters.json")),
            "houses": os.path.join(data_dir, paths.get("houses_file", "houses.json")),
        }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = {k: (dict(v) if isinstance(v, dict) else v) for k, v in base.items()}
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out
