"""
Persisted aggregate win/loss stats.
"""

import json
import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .constants import STATS_NAMESPACE

logger = logging.getLogger(__name__)


class GameStats(BaseModel):
    """Aggregate results across sessions."""
    games: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)


class StatsStore:
    """
    Win/loss counters stored under a namespace key in a JSON file.

    With no path the counters live in memory only.
    """

    def __init__(self, path: Optional[str] = None, namespace: str = STATS_NAMESPACE):
        self.path = path
        self.namespace = namespace
        self._stats = self.load()

    @property
    def stats(self) -> GameStats:
        return self._stats.model_copy()

    def _read_file(self) -> dict:
        if not self.path or not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read stats file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Stats file {self.path} does not hold a JSON object")
            return {}
        return data

    def load(self) -> GameStats:
        """Load stats, falling back to zeros when absent or malformed."""
        record = self._read_file().get(self.namespace)
        if record is None:
            return GameStats()
        try:
            return GameStats.model_validate(record)
        except ValidationError as e:
            logger.error(f"Failed to parse stats: {e}")
            return GameStats()

    def save(self) -> bool:
        """Write the counters back; a failed write is logged and kept in memory."""
        if not self.path:
            return False
        data = self._read_file()
        data[self.namespace] = self._stats.model_dump()
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f)
        except OSError as e:
            logger.error(f"Failed to write stats file {self.path}: {e}")
            return False
        return True

    def record(self, is_win: bool) -> GameStats:
        """Count a finished game and persist the new totals."""
        self._stats = GameStats(
            games=self._stats.games + 1,
            wins=self._stats.wins + 1 if is_win else self._stats.wins,
            losses=self._stats.losses if is_win else self._stats.losses + 1,
        )
        self.save()
        logger.info(f"Stats updated: {self._stats.model_dump()}")
        return self.stats
