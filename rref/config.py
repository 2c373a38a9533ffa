"""
Reduction settings.

``ReduceConfig`` is the frozen value handed to the engine and the
renderers.  Settings can also be kept in a small JSON file (the CLI's
``--settings`` option); ``load_settings`` merges such a file over
``DEFAULT_SETTINGS`` so new keys are always present.
"""

import json
import os
from dataclasses import dataclass, asdict

# ── Default settings (used when no settings file is given) ──────────────
DEFAULT_SETTINGS = {
    "show_all_steps": False,   # one step per row elimination
    "number_format": "%.3f",   # printf style or a format() spec
}


def _check_number_format(number_format: str) -> None:
    """Raise ValueError unless *number_format* can render a float."""
    if not isinstance(number_format, str) or not number_format:
        raise ValueError("Number format must be a non-empty string.")
    try:
        if "%" in number_format:
            number_format % 1.0
        else:
            format(1.0, number_format)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid number format: '{number_format}'. Error: {e}")


@dataclass(frozen=True)
class ReduceConfig:
    """Options for one reduction."""

    show_all_steps: bool = False
    number_format: str = "%.3f"

    def __post_init__(self):
        _check_number_format(self.number_format)

    @classmethod
    def from_settings(cls, settings: dict) -> "ReduceConfig":
        merged = dict(DEFAULT_SETTINGS)
        merged.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
        return cls(
            show_all_steps=bool(merged["show_all_steps"]),
            number_format=merged["number_format"],
        )

    def to_settings(self) -> dict:
        return asdict(self)


def load_settings(path: str) -> dict:
    """Return the settings stored at *path* merged over the defaults.

    A missing or unreadable file yields the defaults.
    """
    settings = dict(DEFAULT_SETTINGS)
    if path and os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError):
            return settings
        if isinstance(stored, dict):
            settings.update({k: v for k, v in stored.items() if k in DEFAULT_SETTINGS})
    return settings


def save_settings(settings: dict, path: str) -> None:
    """Persist *settings* to *path* as indented JSON."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)
