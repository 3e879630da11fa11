"""Ranking stores for submitted scores."""
import json
import logging
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..config import get_settings
from ..utils.helpers import truncate_nickname

logger = logging.getLogger(__name__)

MAX_NICKNAME_LENGTH = 20
DEFAULT_MAX_ENTRIES = 100


@dataclass
class RankingEntry:
    """One submitted score."""
    id: str
    nickname: str
    score: int
    level: int
    time: int
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "nickname": self.nickname,
            "score": self.score,
            "level": self.level,
            "time": self.time,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RankingEntry":
        return cls(
            id=str(data["id"]),
            nickname=str(data["nickname"]),
            score=int(data["score"]),
            level=int(data.get("level", 1)),
            time=int(data.get("time", 0)),
            created_at=str(data.get("createdAt", "")),
        )


def _new_entry(nickname: str, score: int, level: int, time: int) -> RankingEntry:
    return RankingEntry(
        id=uuid.uuid4().hex,
        nickname=truncate_nickname(nickname, MAX_NICKNAME_LENGTH),
        score=score,
        level=level,
        time=time,
        created_at=datetime.now(timezone.utc).isoformat(),
    )


def _insert_ranked(
    entries: List[RankingEntry], entry: RankingEntry, max_entries: int
) -> Tuple[List[RankingEntry], Optional[int]]:
    """Add entry, sort by score descending and cut to max_entries."""
    ranked = sorted(entries + [entry], key=lambda e: e.score, reverse=True)[:max_entries]
    for position, candidate in enumerate(ranked, start=1):
        if candidate.id == entry.id:
            return ranked, position
    return ranked, None


class RankingStore:
    """Base class for ranking storage backends."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self.max_entries = max_entries
        self._lock = threading.Lock()

    def _load(self) -> List[RankingEntry]:
        raise NotImplementedError

    def _save(self, entries: List[RankingEntry]) -> None:
        raise NotImplementedError

    def list(self) -> List[RankingEntry]:
        """Entries, best score first."""
        with self._lock:
            return list(self._load())

    def add(
        self, nickname: str, score: int, level: int = 1, time: int = 0
    ) -> Tuple[RankingEntry, Optional[int]]:
        """
        Record a score.

        Returns:
            The stored entry and its 1-based rank, or None for the rank if
            the score did not make the board.
        """
        entry = _new_entry(nickname, score, level, time)
        with self._lock:
            ranked, rank = _insert_ranked(self._load(), entry, self.max_entries)
            self._save(ranked)
        logger.info("Score %d by %r recorded, rank %s", score, entry.nickname, rank)
        return entry, rank

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._save([])


class MemoryRankingStore(RankingStore):
    """Keeps the ranking in process memory."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        super().__init__(max_entries)
        self._entries: List[RankingEntry] = []

    def _load(self) -> List[RankingEntry]:
        return self._entries

    def _save(self, entries: List[RankingEntry]) -> None:
        self._entries = list(entries)


class JsonFileRankingStore(RankingStore):
    """Keeps the ranking in a JSON array on disk."""

    def __init__(self, path: str, max_entries: int = DEFAULT_MAX_ENTRIES):
        super().__init__(max_entries)
        self.path = Path(path)

    def _load(self) -> List[RankingEntry]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        except json.JSONDecodeError as e:
            logger.warning("Ranking file %s is not valid JSON, starting empty: %s", self.path, e)
            return []
        return [RankingEntry.from_dict(item) for item in raw]

    def _save(self, entries: List[RankingEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [entry.to_dict() for entry in entries]
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def create_ranking_store(
    backend: str, max_entries: int = DEFAULT_MAX_ENTRIES, path: Optional[str] = None
) -> RankingStore:
    """Build a store for the backend name ('memory' or 'file')."""
    if backend == "memory":
        return MemoryRankingStore(max_entries)
    if backend == "file":
        if not path:
            raise ValueError("File ranking backend needs a path")
        return JsonFileRankingStore(path, max_entries)
    raise ValueError(f"Unknown ranking backend: {backend}")


# Singleton instance
_store: Optional[RankingStore] = None


def get_ranking_store() -> RankingStore:
    """Get or create the ranking store configured in settings."""
    global _store
    if _store is None:
        settings = get_settings()
        _store = create_ranking_store(
            settings.ranking_backend,
            max_entries=settings.ranking_max_entries,
            path=settings.ranking_file,
        )
    return _store
