"""Tests for best-score persistence."""

from beatflap.scores import BestScoreStore, InMemoryScoreStore, ScoreStore


def test_empty_db_has_zero_best(tmp_path):
    store = ScoreStore(tmp_path / "scores.db")
    assert store.load_best_score() == 0
    store.close()


def test_best_score_survives_reopen(tmp_path):
    db = tmp_path / "nested" / "scores.db"
    store = ScoreStore(db)
    store.save_best_score(7)
    store.save_best_score(9)
    store.close()

    reopened = ScoreStore(db)
    assert reopened.load_best_score() == 9
    reopened.close()


def test_only_a_single_best_score_row_is_kept(tmp_path):
    store = ScoreStore(tmp_path / "scores.db")
    store.save_best_score(3)
    store.save_best_score(5)
    tables = [r[0] for r in store.conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")]
    assert tables == ["best_score"]
    assert store.conn.execute("SELECT COUNT(*) FROM best_score").fetchone()[0] == 1
    store.close()


def test_stores_satisfy_protocol(tmp_path):
    store = ScoreStore(tmp_path / "scores.db")
    assert isinstance(store, BestScoreStore)
    assert isinstance(InMemoryScoreStore(), BestScoreStore)
    store.close()


def test_in_memory_store():
    store = InMemoryScoreStore(best_score=5)
    store.save_best_score(8)
    assert store.load_best_score() == 8
    assert store.saves == 1
