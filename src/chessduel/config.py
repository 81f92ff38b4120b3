"""Application settings loaded from TOML and the environment."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

_LOGGER = logging.getLogger(__name__)

CONFIG_ENV = "CHESSDUEL_CONFIG"
LOG_LEVEL_ENV = "CHESSDUEL_LOG_LEVEL"
DEFAULT_CONFIG_PATH = "chessduel.toml"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"

    def apply(self, raw: dict[str, Any]) -> None:
        """Overlay known keys from *raw*; unknown keys are ignored."""
        known = {f.name for f in fields(self)}
        for key, value in raw.items():
            if key in known:
                setattr(self, key, value)
            else:
                _LOGGER.warning("Ignoring unknown setting: %s", key)


def _check_log_level(level: object) -> str:
    """Normalise *level* to an upper-case name known to :mod:`logging`."""
    if not isinstance(level, str):
        raise ValueError(f"Invalid log level: {level!r}")
    name = level.upper()
    if name not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level: {level!r}")
    return name


def load_settings(
    path: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppSettings:
    """Build settings from defaults, an optional TOML file, then env vars.

    The file path comes from *path*, else ``$CHESSDUEL_CONFIG``, else
    ``chessduel.toml`` in the working directory. A missing file is fine.
    """
    env = os.environ if environ is None else environ
    settings = AppSettings()

    config_path = Path(path or env.get(CONFIG_ENV, DEFAULT_CONFIG_PATH))
    if config_path.is_file():
        with config_path.open("rb") as fh:
            try:
                raw = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise ValueError(f"Invalid config file {config_path}: {exc}") from exc
        table = raw.get("chessduel", {})
        if not isinstance(table, dict):
            raise ValueError(
                f"Invalid config file {config_path}: [chessduel] must be a table"
            )
        settings.apply(table)

    level = env.get(LOG_LEVEL_ENV)
    if level:
        settings.log_level = level
    settings.log_level = _check_log_level(settings.log_level)
    return settings
