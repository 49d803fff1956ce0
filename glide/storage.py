"""JSON-backed high scores and player preferences."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

MAX_ENTRIES = 10
MAX_NAME_LENGTH = 16
DEFAULT_NAME = "Player"


@dataclass(frozen=True)
class ScoreEntry:
    name: str
    score: int
    date: float  # unix seconds

    @classmethod
    def from_dict(cls, data: dict) -> "ScoreEntry":
        return cls(
            name=str(data["name"]),
            score=int(data["score"]),
            date=float(data.get("date", 0.0)),
        )


def clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()[:MAX_NAME_LENGTH].strip()
    return cleaned or DEFAULT_NAME


class ScoreStore:
    """Leaderboard, last used name and sound preference in a single file.

    Unreadable or malformed files fall back to defaults; failed writes are
    logged and otherwise ignored so a read-only disk never stops play.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.entries: list[ScoreEntry] = []
        self.last_name = DEFAULT_NAME
        self.sound_enabled = True
        self.load()

    def load(self) -> None:
        if not self.path.exists():
            return
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
            entries = [ScoreEntry.from_dict(item) for item in data.get("highscores", [])]
        except (OSError, json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("could not read scores from %s: %s", self.path, exc)
            return
        self.entries = sorted(entries, key=lambda e: e.score, reverse=True)[:MAX_ENTRIES]
        self.last_name = clean_name(data.get("last_name"))
        self.sound_enabled = bool(data.get("sound", True))

    def save(self) -> None:
        payload = {
            "highscores": [asdict(entry) for entry in self.entries],
            "last_name": self.last_name,
            "sound": self.sound_enabled,
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
        except OSError as exc:
            logger.warning("could not write scores to %s: %s", self.path, exc)

    def add_score(self, name: Optional[str], score: int, when: Optional[float] = None) -> ScoreEntry:
        entry = ScoreEntry(name=clean_name(name), score=int(score), date=when if when is not None else time.time())
        self.last_name = entry.name
        self.entries.append(entry)
        self.entries.sort(key=lambda e: e.score, reverse=True)
        del self.entries[MAX_ENTRIES:]
        self.save()
        return entry

    def best(self) -> int:
        return self.entries[0].score if self.entries else 0

    def clear(self) -> None:
        self.entries = []
        self.save()

    def set_sound(self, enabled: bool) -> None:
        self.sound_enabled = enabled
        self.save()
