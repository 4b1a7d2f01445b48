#!/usr/bin/env python
"""
Status line configuration - per-segment color and icon overrides.

Each segment (cost, duration, model, percentage, tokens) can override its
palette color and icon. Values are layered, highest precedence first:

- ``CLAUDE_STATUSLINE_<FIELD>_<ATTRIBUTE>`` environment variables
- ``~/.claude/statusline.toml``
- built-in defaults from ``claude_statusline.config.defaults``

Example ``statusline.toml``::

    [tokens]
    color = 213
    icon = "T"
"""
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from claude_statusline.config.defaults import (
    ENV_PREFIX,
    FIELD_ATTRIBUTES,
    FIELD_DEFAULTS,
    FIELD_NAMES,
)
from claude_statusline.config.paths import get_config_path

logger = logging.getLogger(__name__)


class FieldConfig(BaseModel):
    """Color/icon override pair for a single segment."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    color: Optional[int] = Field(None, ge=0, le=255, description="256-color palette index")
    icon: Optional[str] = Field(None, description="Glyph shown before the segment")

    def get_color_or(self, default: int) -> int:
        return default if self.color is None else self.color

    def get_icon_or(self, default: str) -> str:
        return default if self.icon is None else self.icon


class StatusLineConfig(BaseModel):
    """Resolved overrides for every segment of the status line."""

    model_config = ConfigDict(frozen=True)

    cost: FieldConfig = Field(default_factory=FieldConfig)
    duration: FieldConfig = Field(default_factory=FieldConfig)
    model: FieldConfig = Field(default_factory=FieldConfig)
    percentage: FieldConfig = Field(default_factory=FieldConfig)
    tokens: FieldConfig = Field(default_factory=FieldConfig)

    def field(self, field_name: str) -> FieldConfig:
        """Return the override pair for ``field_name``."""
        if field_name not in FIELD_NAMES:
            raise KeyError(f"Unknown status line field: {field_name}")
        return getattr(self, field_name)

    def resolve(self, field_name: str) -> tuple[Optional[int], str]:
        """
        Return the effective (color, icon) for a segment.

        Args:
            field_name: One of ``FIELD_NAMES``

        Returns:
            The configured values, or the built-in defaults where unset.
            The default color for ``percentage`` is ``None``; that segment
            picks its color from the context thresholds.
        """
        default_color, default_icon = FIELD_DEFAULTS[field_name]
        config = self.field(field_name)
        color = config.color if default_color is None else config.get_color_or(default_color)
        return color, config.get_icon_or(default_icon)


def env_var_name(field_name: str, attribute: str) -> str:
    """Name of the environment variable overriding ``attribute`` of ``field_name``."""
    return "_".join((ENV_PREFIX, field_name, attribute)).upper()


def read_config_file(path: Path) -> dict[str, Any]:
    """Read the TOML config file, returning an empty dict if it is unusable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.debug("Ignoring config file %s: %s", path, e)
        return {}


def read_env_overrides(environ: Mapping[str, str]) -> dict[str, dict[str, str]]:
    """Collect ``CLAUDE_STATUSLINE_*`` overrides, keyed by field then attribute."""
    overrides: dict[str, dict[str, str]] = {}
    for field_name in FIELD_NAMES:
        for attribute in FIELD_ATTRIBUTES:
            key = env_var_name(field_name, attribute)
            if key in environ:
                overrides.setdefault(field_name, {})[attribute] = environ[key]
    return overrides


def _validate_field(field_name: str, data: Any, source: str) -> FieldConfig:
    """Validate one layer of a field's settings, dropping invalid attributes."""
    if data is None:
        return FieldConfig()
    if not isinstance(data, Mapping):
        logger.debug("Ignoring [%s] from %s: expected a table, got %r", field_name, source, data)
        return FieldConfig()

    values = dict(data)
    try:
        return FieldConfig.model_validate(values)
    except ValidationError as e:
        for error in e.errors():
            if error["loc"]:
                dropped = error["loc"][0]
                logger.debug(
                    "Ignoring %s.%s from %s: %s", field_name, dropped, source, error["msg"]
                )
                values.pop(dropped, None)
    return FieldConfig.model_validate(values)


def load_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> StatusLineConfig:
    """
    Build the status line config from the config file and environment.

    Never raises: a missing or broken file and invalid values fall back to
    the next layer down.

    Args:
        path: TOML file to read (default: ``~/.claude/statusline.toml``)
        environ: Environment mapping (default: ``os.environ``)
    """
    if path is None:
        path = get_config_path()
    if environ is None:
        environ = os.environ

    file_values = read_config_file(path)
    env_values = read_env_overrides(environ)

    fields: dict[str, FieldConfig] = {}
    for field_name in FIELD_NAMES:
        from_file = _validate_field(field_name, file_values.get(field_name), str(path))
        from_env = _validate_field(field_name, env_values.get(field_name), "environment")
        merged = {
            **from_file.model_dump(exclude_none=True),
            **from_env.model_dump(exclude_none=True),
        }
        fields[field_name] = FieldConfig(**merged)
        if merged:
            logger.debug("Resolved %s overrides: %s", field_name, merged)

    return StatusLineConfig(**fields)
