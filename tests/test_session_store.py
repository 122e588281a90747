"""Tests for per-day session persistence."""

import json
from pathlib import Path

from worldle.adapters.json_file_session_repository import JsonFileSessionRepository
from worldle.domain.errors import CorruptPersistedStateError
from worldle.domain.guesses import Guess
from worldle.services.session_store import SessionStore
from tests.conftest import InMemorySessionRepository

GUESSES = (
    Guess(raw_text="Bravo", distance_meters=111_319, direction_bucket=270),
    Guess(raw_text="Charlie", distance_meters=157_249, direction_bucket=225),
)


class BrokenRepository(InMemorySessionRepository):
    def get_record(self, day_id: str) -> dict[str, object] | None:
        raise CorruptPersistedStateError("disk full of garbage")


def test_save_then_load_roundtrip() -> None:
    store = SessionStore(InMemorySessionRepository())

    store.save("2024-01-01", GUESSES, hide_image_mode=True, rotation_mode=False)
    stored = store.load("2024-01-01")

    assert stored is not None
    assert stored.guesses == GUESSES
    assert stored.hide_image_mode is True
    assert stored.rotation_mode is False


def test_records_are_isolated_per_day() -> None:
    repository = InMemorySessionRepository()
    store = SessionStore(repository)

    store.save("2024-01-01", GUESSES, hide_image_mode=False, rotation_mode=False)

    assert store.load("2024-01-02") is None
    assert list(repository.records) == ["2024-01-01"]


def test_load_mode_falls_back_to_default() -> None:
    store = SessionStore(InMemorySessionRepository())

    assert store.load_mode("2024-01-01", "rotation_mode", True) is True

    store.save("2024-01-01", (), hide_image_mode=False, rotation_mode=False)
    assert store.load_mode("2024-01-01", "rotation_mode", True) is False
    assert store.load_mode("2024-01-01", "hide_image_mode", True) is False


def test_load_mode_uses_default_for_missing_flag() -> None:
    repository = InMemorySessionRepository()
    repository.records["2024-01-01"] = {"guesses": []}
    store = SessionStore(repository)

    assert store.load_mode("2024-01-01", "hide_image_mode", True) is True


def test_malformed_records_are_treated_as_absent() -> None:
    repository = InMemorySessionRepository()
    store = SessionStore(repository)
    valid = GUESSES[0].to_record()
    win = {"raw_text": "Alpha", "distance_meters": 0, "direction_bucket": 0}

    repository.records["a"] = "not a record"
    repository.records["b"] = {"guesses": [{**valid, "direction_bucket": 30}]}
    repository.records["c"] = {"guesses": [{**valid, "distance_meters": -4}]}
    repository.records["d"] = {"guesses": [valid] * 7}
    repository.records["e"] = {"guesses": [win, valid]}
    repository.records["f"] = {"guesses": [valid], "rotation_mode": "maybe"}

    for day_id in "abcdef":
        assert store.load(day_id) is None


def test_unreadable_storage_is_treated_as_absent() -> None:
    store = SessionStore(BrokenRepository())

    assert store.load("2024-01-01") is None
    assert store.load_mode("2024-01-01", "hide_image_mode", False) is False


def test_json_file_repository_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "state" / "sessions.json"
    store = SessionStore(JsonFileSessionRepository(path))

    store.save("2024-01-01", GUESSES, hide_image_mode=True, rotation_mode=True)
    store.save("2024-01-02", GUESSES[:1], hide_image_mode=False, rotation_mode=True)

    reopened = SessionStore(JsonFileSessionRepository(path))
    first = reopened.load("2024-01-01")
    second = reopened.load("2024-01-02")

    assert first is not None
    assert first.guesses == GUESSES
    assert second is not None
    assert second.guesses == GUESSES[:1]
    assert set(json.loads(path.read_text(encoding="utf-8"))) == {
        "2024-01-01",
        "2024-01-02",
    }


def test_json_file_repository_recovers_from_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "sessions.json"
    path.write_text("{not json", encoding="utf-8")
    store = SessionStore(JsonFileSessionRepository(path))

    assert store.load("2024-01-01") is None

    store.save("2024-01-01", GUESSES, hide_image_mode=False, rotation_mode=False)
    stored = store.load("2024-01-01")
    assert stored is not None
    assert stored.guesses == GUESSES


def test_json_file_repository_prune_keeps_listed_days(tmp_path: Path) -> None:
    repository = JsonFileSessionRepository(tmp_path / "sessions.json")
    for day_id in ("2024-01-01", "2024-01-02", "2024-01-03"):
        repository.put_record(day_id, {"guesses": []})

    removed = repository.prune(["2024-01-03"])

    assert removed == 2
    assert repository.get_record("2024-01-01") is None
    assert repository.get_record("2024-01-03") == {"guesses": []}
