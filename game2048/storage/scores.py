"""
Key-value stores for the best score.

The session only needs to read and write one integer, so any backend exposing ``get`` and ``set``
on string keys can be injected. Persistence is best effort: failures are logged and read as "no value".
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """Storage capability for string-keyed integers."""

    def get(self, key: str) -> int | None:
        """Read a value, or None when the key is missing."""

    def set(self, key: str, value: int) -> None:
        """Write a value."""


class MemoryScoreStore:
    """
    Score store kept in memory.

    Parameters
    ----------
    initial : dict[str, int], optional
        Values to start with.
    """

    def __init__(self, initial: dict[str, int] | None = None):
        self._values: dict[str, int] = dict(initial or {})

    def get(self, key: str) -> int | None:
        return self._values.get(key)

    def set(self, key: str, value: int) -> None:
        self._values[key] = int(value)


class JsonScoreStore:
    """
    Score store backed by a JSON object file.

    Parameters
    ----------
    path : Path
        Location of the JSON file. Missing parent directories are created on write.

    Notes
    -----
    - A missing, unreadable or malformed file reads as empty.
    - Write failures are logged and ignored.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as handle:
                content = json.load(handle)
        except (OSError, ValueError) as error:
            _logger.warning('Could not read scores from %s: %s', self.path, error)
            return {}

        if not isinstance(content, dict):
            _logger.warning('Ignoring scores file %s: expected a JSON object', self.path)
            return {}
        return content

    def get(self, key: str) -> int | None:
        value = self._read().get(key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            _logger.warning('Ignoring invalid value %r for %s in %s', value, key, self.path)
            return None

    def set(self, key: str, value: int) -> None:
        content = self._read()
        content[key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('w', encoding='utf-8') as handle:
                json.dump(content, handle)
        except OSError as error:
            _logger.warning('Could not write scores to %s: %s', self.path, error)


def load_best_score(store: ScoreStore, key: str) -> int:
    """
    Read the best score from a store.

    Parameters
    ----------
    store : ScoreStore
        The score store.
    key : str
        Key of the best score.

    Returns
    -------
    int
        The stored best score, or 0 when missing or negative.
    """
    value = store.get(key)
    if value is None or value < 0:
        return 0
    return value
