"""Daily game state machine."""

import logging
from dataclasses import dataclass

from worldle.domain.errors import GameNotFinishedError
from worldle.domain.guesses import Guess
from worldle.domain.sessions import (
    MAX_TRIES,
    GameStatus,
    Session,
    SessionSnapshot,
    derive_status,
)
from worldle.services.catalog import CountryCatalog
from worldle.services.days import current_day_id
from worldle.services.guesses import GuessEvaluator
from worldle.services.puzzles import DailyPuzzleSelector
from worldle.services.session_store import SessionStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of a guess submission."""

    accepted: bool
    status: GameStatus
    guess: Guess | None = None


@dataclass(frozen=True)
class ShareData:
    """Finalized guesses handed to the share collaborator."""

    day_id: str
    guesses: tuple[Guess, ...]
    status: GameStatus
    max_tries: int
    hide_image_mode: bool
    rotation_mode: bool


@dataclass
class GameStateMachine:
    """Owns one day's session and applies guesses to it.

    The status is always derived from the guesses: ``WON`` once the last guess
    hit the target, ``LOST`` once ``max_tries`` misses were recorded.
    """

    session: Session
    evaluator: GuessEvaluator
    store: SessionStore
    max_tries: int = MAX_TRIES

    @property
    def status(self) -> GameStatus:
        return derive_status(self.session.guesses, self.max_tries)

    def submit(self, raw_text: str, locale: str) -> SubmitResult:
        """Evaluate a guess and record it if the game is still running.

        Raises UnknownCountryError without consuming an attempt when the text
        matches no country.
        """
        status = self.status
        if status.is_ended:
            _logger.info(
                "Ignoring guess for finished game: day_id=%s status=%s",
                self.session.day_id,
                status.value,
            )
            return SubmitResult(accepted=False, status=status)

        guess = self.evaluator.evaluate(raw_text, locale, self.session.target)
        self.session.guesses.append(guess)
        self._persist()
        status = self.status
        _logger.info(
            "Guess recorded: day_id=%s attempt=%s/%s status=%s",
            self.session.day_id,
            len(self.session.guesses),
            self.max_tries,
            status.value,
        )
        return SubmitResult(accepted=True, status=status, guess=guess)

    def disable_hide_image(self) -> SessionSnapshot:
        """Reveal the country image for the rest of the day."""
        if not self.status.is_ended and self.session.hide_image_mode:
            self.session.hide_image_mode = False
            self._persist()
        return self.snapshot()

    def disable_rotation(self) -> SessionSnapshot:
        """Stop rotating the country image for the rest of the day."""
        if not self.status.is_ended and self.session.rotation_mode:
            self.session.rotation_mode = False
            self._persist()
        return self.snapshot()

    def snapshot(self) -> SessionSnapshot:
        """Return a read-only view; the target stays hidden while playing."""
        status = self.status
        return SessionSnapshot(
            day_id=self.session.day_id,
            status=status,
            guesses=tuple(self.session.guesses),
            max_tries=self.max_tries,
            hide_image_mode=self.session.hide_image_mode,
            rotation_mode=self.session.rotation_mode,
            angle=self.session.puzzle.angle,
            scale=self.session.puzzle.scale,
            target=self.session.target if status.is_ended else None,
        )

    def share_data(self) -> ShareData:
        """Return the finalized guesses once the game has ended."""
        status = self.status
        if not status.is_ended:
            raise GameNotFinishedError(
                f"Game for {self.session.day_id} is still in progress"
            )
        return ShareData(
            day_id=self.session.day_id,
            guesses=tuple(self.session.guesses),
            status=status,
            max_tries=self.max_tries,
            hide_image_mode=self.session.hide_image_mode,
            rotation_mode=self.session.rotation_mode,
        )

    def _persist(self) -> None:
        self.store.save(
            self.session.day_id,
            self.session.guesses,
            hide_image_mode=self.session.hide_image_mode,
            rotation_mode=self.session.rotation_mode,
        )


@dataclass
class GameService:
    """Creates state machines for a day, restoring any stored progress."""

    catalog: CountryCatalog
    selector: DailyPuzzleSelector
    evaluator: GuessEvaluator
    store: SessionStore
    default_hide_image_mode: bool = False
    default_rotation_mode: bool = False
    timezone: str = "UTC"
    max_tries: int = MAX_TRIES

    def today(self) -> str:
        """Return the current day identifier."""
        return current_day_id(timezone=self.timezone)

    def open(self, day_id: str | None = None) -> GameStateMachine:
        """Open the session for a day, seeding it from defaults if new."""
        resolved_day = day_id or self.today()
        puzzle = self.selector.select(resolved_day, len(self.catalog))
        stored = self.store.load(resolved_day)
        if stored is None:
            session = Session(
                day_id=resolved_day,
                target=self.catalog.at(puzzle.target_index),
                puzzle=puzzle,
                hide_image_mode=self.default_hide_image_mode,
                rotation_mode=self.default_rotation_mode,
            )
            self.store.save(
                resolved_day,
                session.guesses,
                hide_image_mode=session.hide_image_mode,
                rotation_mode=session.rotation_mode,
            )
            _logger.info("Started new session: day_id=%s", resolved_day)
        else:
            session = Session(
                day_id=resolved_day,
                target=self.catalog.at(puzzle.target_index),
                puzzle=puzzle,
                guesses=list(stored.guesses),
                hide_image_mode=_flag_or_default(
                    stored.hide_image_mode, self.default_hide_image_mode
                ),
                rotation_mode=_flag_or_default(
                    stored.rotation_mode, self.default_rotation_mode
                ),
            )
        return GameStateMachine(
            session=session,
            evaluator=self.evaluator,
            store=self.store,
            max_tries=self.max_tries,
        )


def _flag_or_default(value: bool | None, default: bool) -> bool:
    return default if value is None else value
