"""Settings storage for placeholder option defaults.

The values here seed the ``defaults()`` constructors of the option groups
until the surrounding installer detects or asks for the real ones. A
deployment can override them through a JSON file; the file is only read.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


SETTINGS_PATH = Path(
    os.environ.get(
        "INSTALLER_OPTIONS_SETTINGS_PATH",
        Path.home() / ".config" / "installer-options" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_TIMEZONE = "Europe/Vienna"
DEFAULT_KB_LAYOUT = "en_US"
DEFAULT_EMAIL = "mail@example.invalid"
DEFAULT_FQDN = "pve.example.invalid"
DEFAULT_IFNAME = ""

DEFAULT_SETTINGS: dict[str, Any] = {
    "timezone": DEFAULT_TIMEZONE,
    "kb_layout": DEFAULT_KB_LAYOUT,
    "email": DEFAULT_EMAIL,
    "fqdn": DEFAULT_FQDN,
    "ifname": DEFAULT_IFNAME,
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def load_settings() -> None:
    settings_store.values = dict(DEFAULT_SETTINGS)
    if not SETTINGS_PATH.exists():
        return
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return
    if isinstance(data, dict):
        settings_store.values.update(data)


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    settings_store.values[key] = value


def get_str(key: str) -> str:
    """Return a string setting, falling back to its built-in default."""
    value = get_setting(key, DEFAULT_SETTINGS.get(key, ""))
    return "" if value is None else str(value)


load_settings()
