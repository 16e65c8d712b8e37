"""Configuration loading for yakuake-session."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from yakuake_session.models import SessionConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".yakuake-session"
CONFIG_FILE = CONFIG_DIR / "config.json"


def config_path() -> Path:
    """Return the config file path, honouring YAKUAKE_SESSION_CONFIG."""
    override = os.environ.get("YAKUAKE_SESSION_CONFIG", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_FILE


def load_config(path: Path | None = None) -> SessionConfig:
    """Load the user configuration, falling back to defaults."""
    path = config_path() if path is None else path
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("no config file at %s, using defaults", path)
        return SessionConfig()
    except (OSError, json.JSONDecodeError) as e:
        log.warning("could not read %s: %s", path, e)
        return SessionConfig()

    if not isinstance(data, dict):
        log.warning("ignoring %s: expected a JSON object", path)
        return SessionConfig()

    try:
        config = SessionConfig(**data)
    except ValidationError as e:
        log.warning("ignoring invalid config %s: %s", path, e)
        return SessionConfig()
    log.debug("loaded config from %s", path)
    return config


def login_shell_is_fish() -> bool:
    """Return whether $SHELL names the fish shell."""
    shell = os.environ.get("SHELL", "").strip()
    return os.path.basename(shell).lower() == "fish"


def default_fish(config: SessionConfig) -> bool:
    """Return the dialect to use when neither --fish nor --nofish is given."""
    if config.fish is not None:
        return config.fish
    return login_shell_is_fish()
