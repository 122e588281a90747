"""Per-day persistence of guesses and display-mode flags."""

import logging
from dataclasses import dataclass
from typing import Literal, Protocol

from pydantic import BaseModel, Field, ValidationError, field_validator

from worldle.domain.errors import CorruptPersistedStateError
from worldle.domain.guesses import DIRECTION_BUCKETS, Guess
from worldle.domain.sessions import MAX_TRIES

ModeFlag = Literal["hide_image_mode", "rotation_mode"]

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for per-day session records."""

    def get_record(self, day_id: str) -> dict[str, object] | None:
        """Return the raw record for a day, if present."""

    def put_record(self, day_id: str, record: dict[str, object]) -> None:
        """Replace the raw record for a day."""


class StoredGuess(BaseModel):
    """Persisted guess payload."""

    raw_text: str
    distance_meters: int = Field(ge=0)
    direction_bucket: int

    @field_validator("direction_bucket")
    @classmethod
    def _check_bucket(cls, value: int) -> int:
        if value not in DIRECTION_BUCKETS:
            raise ValueError(f"invalid direction bucket {value}")
        return value


class StoredSessionRecord(BaseModel):
    """Persisted session payload for one day."""

    guesses: list[StoredGuess] = Field(default_factory=list)
    hide_image_mode: bool | None = None
    rotation_mode: bool | None = None


@dataclass(frozen=True)
class StoredSession:
    """Session state restored from the repository."""

    day_id: str
    guesses: tuple[Guess, ...]
    hide_image_mode: bool | None
    rotation_mode: bool | None


@dataclass
class SessionStore:
    """Loads and saves session records keyed strictly by day identifier."""

    repository: SessionRepository
    max_tries: int = MAX_TRIES

    def load(self, day_id: str) -> StoredSession | None:
        """Return the stored session for a day, treating bad records as absent."""
        try:
            raw = self.repository.get_record(day_id)
        except CorruptPersistedStateError:
            _logger.warning("Unreadable session storage: day_id=%s", day_id)
            return None
        if raw is None:
            return None
        try:
            return self._parse(day_id, raw)
        except CorruptPersistedStateError as exc:
            _logger.warning("Discarding corrupt session: day_id=%s (%s)", day_id, exc)
            return None

    def save(
        self,
        day_id: str,
        guesses: list[Guess] | tuple[Guess, ...],
        hide_image_mode: bool,
        rotation_mode: bool,
    ) -> None:
        """Persist the guesses and mode flags for a day."""
        self.repository.put_record(
            day_id,
            {
                "guesses": [guess.to_record() for guess in guesses],
                "hide_image_mode": hide_image_mode,
                "rotation_mode": rotation_mode,
            },
        )

    def load_mode(self, day_id: str, flag_name: ModeFlag, default: bool) -> bool:
        """Return a stored mode flag for the day or the caller's default."""
        stored = self.load(day_id)
        if stored is None:
            return default
        value = getattr(stored, flag_name)
        return default if value is None else value

    def _parse(self, day_id: str, raw: dict[str, object]) -> StoredSession:
        try:
            record = StoredSessionRecord.model_validate(raw)
        except ValidationError as exc:
            raise CorruptPersistedStateError(str(exc)) from exc
        guesses = tuple(
            Guess(
                raw_text=item.raw_text,
                distance_meters=item.distance_meters,
                direction_bucket=item.direction_bucket,
            )
            for item in record.guesses
        )
        if len(guesses) > self.max_tries:
            raise CorruptPersistedStateError(
                f"{len(guesses)} guesses exceed the limit of {self.max_tries}"
            )
        if any(guess.is_correct for guess in guesses[:-1]):
            raise CorruptPersistedStateError("guesses recorded after a win")
        return StoredSession(
            day_id=day_id,
            guesses=guesses,
            hide_image_mode=record.hide_image_mode,
            rotation_mode=record.rotation_mode,
        )
