"""
Configuration loading from config.yaml and the environment.
"""

import os

import yaml


DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_DB_PATH = "data/zeus_fitness.db"

GENERATION_DEFAULTS = {
    "level": "Beginner",
    "equipment": "None",
    "duration": 30,
    "max_exercises": 5,
}


def load_config(config_path=DEFAULT_CONFIG_PATH):
    """Load configuration from a YAML file; an empty file yields an empty dict."""
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_db_path(config=None):
    """Resolve DB path from config with fallback."""
    return ((config or {}).get("database", {}) or {}).get("path") or DEFAULT_DB_PATH


def generation_defaults(config=None):
    """Generation parameters from config merged over the built-in defaults."""
    defaults = dict(GENERATION_DEFAULTS)
    defaults.update(((config or {}).get("generation", {}) or {}))
    return defaults


def get_api_key(config=None):
    """Read the Anthropic API key from the env var named in config."""
    api_key_env = ((config or {}).get("claude", {}) or {}).get("api_key_env", "ANTHROPIC_API_KEY")
    return os.getenv(api_key_env)
