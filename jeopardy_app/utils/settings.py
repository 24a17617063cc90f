"""User configuration read once at startup.

Values come from, in order of precedence: the process environment, an optional
environment file (``KEY=value`` lines, e.g. ``JPDY_BORDER_COLOR=#003366``),
and the built-in defaults.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

from jeopardy_app.constants.config_constants import BORDER_COLOR_KEY, DEFAULT_VALUES
from jeopardy_app.core.errors import ConfigurationError

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration values."""

    border_color: str
    values: Mapping[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)


def load_settings(env_file: Path | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Resolve settings from defaults, an optional env file and the environment."""
    environment = os.environ if environ is None else environ
    values: dict[str, str] = dict(DEFAULT_VALUES)

    if env_file is not None:
        values.update(_read_env_file(env_file))

    for key in DEFAULT_VALUES:
        if key in environment:
            values[key] = environment[key]

    return Settings(border_color=parse_hex_color(values[BORDER_COLOR_KEY]), values=values)


def parse_hex_color(value: str) -> str:
    """Validate a ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` colour and lowercase it."""
    cleaned = value.strip()
    if not _HEX_COLOR.match(cleaned):
        raise ConfigurationError(f"'{value}' is not a hex color such as #b31b1b")
    return cleaned.lower()


def _read_env_file(env_file: Path) -> dict[str, str]:
    if not env_file.is_file():
        raise ConfigurationError(f"Environment file not found: {env_file}")
    try:
        raw_values = dotenv_values(env_file, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Could not read environment file {env_file}: {exc}") from exc
    return {key: value for key, value in raw_values.items() if value is not None}
