"""Settings loader for the command line tool.

Reads parsing defaults from a JSON file and validates it against the schema
below with ``jsonschema``. Example::

    {
      "loose": false,
      "options": ["allow-version-prefix", "optional-patch"],
      "includePrerelease": true
    }

``loose`` switches on every parsing option; ``options`` adds individual
ones by name (see :class:`~npm_semver.options.SemanticOptions`).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .options import SemanticOptions

CONFIG_PATH_ENV_VAR = "NPM_SEMVER_CONFIG"

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "loose": {"type": "boolean"},
        "options": {
            "type": "array",
            "items": {
                "type": "string",
                "enum": sorted(
                    {
                        variant
                        for member in SemanticOptions.__members__
                        for variant in (member.lower(), member.lower().replace("_", "-"))
                    }
                ),
            },
            "uniqueItems": True,
        },
        "includePrerelease": {"type": "boolean"},
    },
}


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Parsing defaults shared by every command."""

    options: SemanticOptions = SemanticOptions.STRICT
    include_pre_releases: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        errors = sorted(Draft202012Validator(SETTINGS_SCHEMA).iter_errors(data), key=lambda e: list(e.path))
        if errors:
            raise ConfigError("Invalid settings:\n" + _format_errors(errors))

        options = SemanticOptions.from_names(data.get("options", []))
        if data.get("loose", False):
            options |= SemanticOptions.LOOSE
        return cls(options=options, include_pre_releases=data.get("includePrerelease", False))

    def to_dict(self) -> dict[str, object]:
        return {
            "options": [
                member.name.lower().replace("_", "-")
                for member in SemanticOptions.__members__.values()
                if _is_single_flag(member) and member in self.options
            ],
            "includePrerelease": self.include_pre_releases,
        }


def _is_single_flag(member: SemanticOptions) -> bool:
    value = int(member)
    return value != 0 and value & (value - 1) == 0


def _format_errors(errors) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. NPM_SEMVER_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Args:
        path: Optional path to the settings file. If not provided, uses the
            NPM_SEMVER_CONFIG env var or falls back to the defaults.

    Returns:
        The validated settings.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    return Settings.from_dict(data)
