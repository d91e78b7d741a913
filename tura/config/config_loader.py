import json
import os
from datetime import datetime

from rich.console import Console

from tura.errors import ConfigError, TuraIOError

DEFAULT_CONFIG = {
    "default_tape": ["1", "1", "0", "1"],
    "log_enabled": False,
    "output_directory": "logs/",
    "log_file_prefix": "tura_",
    "show_config": False
}

# Expected types for validation
CONFIG_SCHEMA = {
    "default_tape": list,
    "log_enabled": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "show_config": bool
}

console = Console(stderr=True)


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ConfigError(f"Missing required configuration key: {key}")
        if not isinstance(config[key], expected_type):
            raise ConfigError(f"Config key '{key}' expected {expected_type.__name__}, got {type(config[key]).__name__}.")

    # The fixed tape must hold symbols the lexer could have produced
    tape = config["default_tape"]
    if not tape:
        raise ConfigError("Config key 'default_tape' must not be empty.")
    for symbol in tape:
        if not isinstance(symbol, str) or not symbol or " " in symbol or "\n" in symbol:
            raise ConfigError(f"Config key 'default_tape' holds an invalid symbol: {symbol!r}")


def load_config(path=None):
    config = dict(DEFAULT_CONFIG)
    config["default_tape"] = list(DEFAULT_CONFIG["default_tape"])

    if path is not None:
        if not os.path.exists(path):
            raise TuraIOError(path, "configuration file not found")
        try:
            with open(path, "r", encoding="utf-8") as f:
                user_config = json.load(f)
        except OSError as e:
            raise TuraIOError(path, e) from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(user_config, dict):
            raise ConfigError(f"Configuration in {path} must be a JSON object.")
        # Merge defaults with overrides
        config.update(user_config)

    validate_config(config)

    if config["log_enabled"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    if config["show_config"]:
        console.print(f"[{datetime.now()}] Loaded config:", markup=False)
        for key, value in config.items():
            console.print(f"  {key}: {value}", markup=False)

    return config
