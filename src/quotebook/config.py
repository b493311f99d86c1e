"""Configuration loading for quotebook.

Reads settings from environment variables (with .env support via python-dotenv).
Every setting is optional; command-line flags override what is loaded here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATABASE_PATH = Path("~/.quotebook/database.json")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        database_path: Location of the JSON quote database
            (default ``~/.quotebook/database.json``).
        log_level: Logging level (default ``"WARNING"``).
        plain: Disable terminal styling when ``True``.
    """

    database_path: Path = field(default_factory=DEFAULT_DATABASE_PATH.expanduser)
    log_level: str = "WARNING"
    plain: bool = False


def _parse_bool(env_var: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value for {env_var}: {raw!r}")


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.

    Recognised variables:

    - ``QUOTEBOOK_DATABASE`` -- path to the database file (``~`` expanded).
    - ``LOG_LEVEL`` -- logging level name.
    - ``QUOTEBOOK_PLAIN`` -- ``1``/``true``/``yes``/``on`` to disable styling.

    Returns:
        A :class:`Settings` instance; unset or blank variables keep their
        defaults.

    Raises:
        ConfigError: If ``QUOTEBOOK_PLAIN`` is not a recognised boolean.
    """
    load_dotenv()

    values: dict[str, object] = {}

    database = os.environ.get("QUOTEBOOK_DATABASE", "").strip()
    log_level = os.environ.get("LOG_LEVEL", "").strip()
    plain = os.environ.get("QUOTEBOOK_PLAIN", "").strip()

    if database:
        values["database_path"] = Path(database).expanduser()
    if log_level:
        values["log_level"] = log_level
    if plain:
        values["plain"] = _parse_bool("QUOTEBOOK_PLAIN", plain)

    return Settings(**values)
