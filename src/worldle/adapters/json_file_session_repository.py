"""Local JSON file session repository."""

import json
import os
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from worldle.domain.errors import CorruptPersistedStateError
from worldle.services.session_store import SessionRepository


@dataclass
class JsonFileSessionRepository(SessionRepository):
    """Stores all day records in a single JSON document on disk."""

    path: Path

    def get_record(self, day_id: str) -> dict[str, object] | None:
        """Return the record stored for a day."""
        return self._read().get(day_id)

    def put_record(self, day_id: str, record: dict[str, object]) -> None:
        """Write the record for a day, keeping other days untouched."""
        try:
            records = self._read()
        except CorruptPersistedStateError:
            records = {}
        records[day_id] = record
        self._write(records)

    def prune(self, keep_day_ids: Iterable[str]) -> int:
        """Drop records for days not listed and return how many were removed."""
        keep = set(keep_day_ids)
        try:
            records = self._read()
        except CorruptPersistedStateError:
            records = {}
        kept = {day_id: value for day_id, value in records.items() if day_id in keep}
        self._write(kept)
        return len(records) - len(kept)

    def _read(self) -> dict[str, dict[str, object]]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CorruptPersistedStateError(f"Unreadable {self.path}") from exc
        if not isinstance(payload, dict):
            raise CorruptPersistedStateError(f"{self.path} is not a JSON object")
        return payload

    def _write(self, records: dict[str, dict[str, object]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(records, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
