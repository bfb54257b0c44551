"""Current-player marker and top-N leaderboard on top of a key-value store."""
from __future__ import annotations

import logging
from typing import Any, List

from memory_match.components.leaderboard import LeaderboardEntry
from memory_match.constants import (
    LEADERBOARD_SIZE,
    PLAYER_NAME_MAX_LENGTH,
    STORE_KEY_CURRENT_PLAYER,
    STORE_KEY_LEADERBOARD,
)
from memory_match.events.bus import (
    EVENT_LEADERBOARD_UPDATED,
    EVENT_PLAYER_CHANGED,
    EVENT_PLAYER_NAME_SUBMITTED,
    EventBus,
)
from memory_match.utils.store import KeyValueStore

logger = logging.getLogger(__name__)


class SessionBridge:
    """Reads and writes the persisted player name and leaderboard.

    The leaderboard is kept sorted by score, highest first, and never holds
    more than ``limit`` entries. Ties keep insertion order.
    """

    def __init__(
        self,
        store: KeyValueStore,
        event_bus: EventBus | None = None,
        *,
        limit: int = LEADERBOARD_SIZE,
    ) -> None:
        if limit <= 0:
            raise ValueError("leaderboard limit must be positive")
        self._store = store
        self._event_bus = event_bus
        self._limit = limit
        if event_bus is not None:
            event_bus.subscribe(EVENT_PLAYER_NAME_SUBMITTED, self._on_name_submitted)

    @property
    def limit(self) -> int:
        return self._limit

    # ------------------------------------------------------------------
    # Current player
    # ------------------------------------------------------------------

    def current_player_name(self) -> str | None:
        name = self._store.get(STORE_KEY_CURRENT_PLAYER)
        if not isinstance(name, str) or not name.strip():
            return None
        return name

    def set_current_player(self, name: str) -> str | None:
        """Store a trimmed player name; blank names are refused."""
        cleaned = (name or "").strip()[:PLAYER_NAME_MAX_LENGTH].strip()
        if not cleaned:
            return None
        self._store.set(STORE_KEY_CURRENT_PLAYER, cleaned)
        logger.info("Current player set to %r", cleaned)
        self._emit(EVENT_PLAYER_CHANGED, name=cleaned)
        return cleaned

    def clear_current_player(self) -> None:
        self._store.delete(STORE_KEY_CURRENT_PLAYER)
        self._emit(EVENT_PLAYER_CHANGED, name=None)

    # ------------------------------------------------------------------
    # Leaderboard
    # ------------------------------------------------------------------

    def leaderboard(self) -> List[LeaderboardEntry]:
        raw = self._store.get(STORE_KEY_LEADERBOARD, [])
        if not isinstance(raw, list):
            logger.warning("Discarding malformed leaderboard of type %s", type(raw).__name__)
            return []
        entries: List[LeaderboardEntry] = []
        for record in raw:
            entry = self._parse_record(record)
            if entry is not None:
                entries.append(entry)
        return entries

    def append_score(self, name: str, score: int) -> List[LeaderboardEntry]:
        entries = self.leaderboard()
        entries.append(LeaderboardEntry(name=name, score=int(score)))
        entries.sort(key=lambda entry: entry.score, reverse=True)
        entries = entries[: self._limit]
        self._store.set(STORE_KEY_LEADERBOARD, [entry.to_record() for entry in entries])
        logger.info("Recorded score %d for %r", score, name)
        self._emit(EVENT_LEADERBOARD_UPDATED, entries=list(entries))
        return entries

    @staticmethod
    def _parse_record(record: Any) -> LeaderboardEntry | None:
        if not isinstance(record, dict):
            return None
        name = record.get("name")
        score = record.get("score")
        if not isinstance(name, str) or isinstance(score, bool):
            return None
        try:
            return LeaderboardEntry(name=name, score=int(score))
        except (TypeError, ValueError):
            return None

    # ------------------------------------------------------------------
    # Event plumbing
    # ------------------------------------------------------------------

    def _on_name_submitted(self, sender, **payload) -> None:
        name = payload.get("name")
        if isinstance(name, str):
            self.set_current_player(name)

    def _emit(self, event_name: str, /, **payload) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(event_name, **payload)
