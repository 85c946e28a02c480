"""
JSON file settings backend.

Persists small non-secret values (the last GitHub username) between runs.
"""

from __future__ import annotations

import json
import pathlib
from typing import Any


class JsonSettingsStore:
    """Key/value settings kept in a single JSON document."""

    def __init__(self, path: pathlib.Path) -> None:
        """
        Initialize settings store.

        Args:
            path: JSON file to read from and write to (created on first set)
        """
        self.path = path

    def _load(self) -> dict[str, Any]:
        # A missing or unreadable file behaves like an empty one
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True) + '\n', encoding='utf-8')
