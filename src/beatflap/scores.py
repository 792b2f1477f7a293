"""Best-score persistence in SQLite."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Protocol, runtime_checkable

DEFAULT_DB_PATH = Path.home() / ".beatflap" / "scores.db"


@runtime_checkable
class BestScoreStore(Protocol):
    def load_best_score(self) -> int: ...
    def save_best_score(self, score: int) -> None: ...


class InMemoryScoreStore:
    """Non-persistent store used when no database is available."""

    def __init__(self, best_score: int = 0) -> None:
        self.best_score = best_score
        self.saves = 0

    def load_best_score(self) -> int:
        return self.best_score

    def save_best_score(self, score: int) -> None:
        self.best_score = score
        self.saves += 1


class ScoreStore:
    """Keeps the single best score in a one-row table."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH) -> None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(db_path))
        self._init_db()

    def _init_db(self) -> None:
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS best_score (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                score INTEGER NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        self.conn.commit()

    def load_best_score(self) -> int:
        row = self.conn.execute("SELECT score FROM best_score WHERE id = 1").fetchone()
        return int(row[0]) if row else 0

    def save_best_score(self, score: int) -> None:
        self.conn.execute(
            """INSERT INTO best_score (id, score) VALUES (1, ?)
               ON CONFLICT(id) DO UPDATE SET score = excluded.score,
                                             updated_at = CURRENT_TIMESTAMP""",
            (score,),
        )
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()
