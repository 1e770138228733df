"""
Config defaults kept minimal. The default canteen list lives in a TOML file:

    [locations]
    canteens = [1, 2, 3]

See https://openmensa.org/api/v2/canteens for available canteen ids.
"""

import os
import tomllib
from dataclasses import dataclass

from errors import ConfigError

OPENMENSA_API_URL = "https://openmensa.org/api/v2"
MEME_API_URL = "https://meme-api.com/gimme"
FACTS_API_URL = "https://uselessfacts.jsph.pl/api/v2/facts"

REQUEST_TIMEOUT = 10  # seconds
PAGE_LIMIT = 100

# Trivia facts are only requested in German
FACT_LANGUAGE = "de"

CONFIG_PATH = os.environ.get("MENSABOT_CONFIG", "~/.config/mensabot/config.toml")

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(message)s"


@dataclass(frozen=True)
class Configs:
    canteens: tuple[int, ...]


def load_config(path: str | None = None) -> Configs:
    """Read the default canteen ids from the TOML config file."""
    expanded = os.path.expanduser(path or CONFIG_PATH)
    try:
        with open(expanded, "rb") as fh:
            data = tomllib.load(fh)
    except OSError as e:
        raise ConfigError(f"Error reading config file: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse the TOML: {e}") from e

    locations = data.get("locations")
    canteens = locations.get("canteens") if isinstance(locations, dict) else None
    if not isinstance(canteens, list):
        raise ConfigError(f"Missing [locations] canteens list in {expanded}")
    # bool is an int subclass; reject it explicitly
    if not all(isinstance(c, int) and not isinstance(c, bool) for c in canteens):
        raise ConfigError(f"Canteen ids must be integers, got {canteens!r}")
    return Configs(canteens=tuple(canteens))
