"""Domain models for daily game sessions."""

from dataclasses import dataclass, field
from enum import Enum

from worldle.domain.countries import Country
from worldle.domain.guesses import Guess

MAX_TRIES = 6


class GameStatus(Enum):
    """Lifecycle of a daily game."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_ended(self) -> bool:
        return self is not GameStatus.PLAYING


@dataclass(frozen=True)
class DailyPuzzle:
    """Deterministic puzzle parameters for one day."""

    day_id: str
    target_index: int
    angle: int
    scale: float


@dataclass
class Session:
    """Mutable per-day game record owned by a single state machine."""

    day_id: str
    target: Country
    puzzle: DailyPuzzle
    guesses: list[Guess] = field(default_factory=list)
    hide_image_mode: bool = False
    rotation_mode: bool = False


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session handed to callers.

    ``target`` is only populated once the game has ended.
    """

    day_id: str
    status: GameStatus
    guesses: tuple[Guess, ...]
    max_tries: int
    hide_image_mode: bool
    rotation_mode: bool
    angle: int
    scale: float
    target: Country | None


def derive_status(
    guesses: list[Guess] | tuple[Guess, ...], max_tries: int
) -> GameStatus:
    """Derive the game status from the ordered guesses."""
    if guesses and guesses[-1].is_correct:
        return GameStatus.WON
    if len(guesses) >= max_tries:
        return GameStatus.LOST
    return GameStatus.PLAYING
