"""Pydantic models for the game HTTP API."""

from pydantic import BaseModel, Field

from worldle.domain.guesses import Guess, compass_label
from worldle.domain.sessions import SessionSnapshot
from worldle.services.catalog import CountryCatalog


class GuessRequest(BaseModel):
    """Guess submission payload."""

    text: str = Field(max_length=200)
    locale: str | None = None


class GuessView(BaseModel):
    """Scored guess as shown to the player."""

    raw_text: str
    distance_meters: int
    direction_bucket: int
    direction: str

    @classmethod
    def from_guess(cls, guess: Guess) -> "GuessView":
        return cls(
            raw_text=guess.raw_text,
            distance_meters=guess.distance_meters,
            direction_bucket=guess.direction_bucket,
            direction=compass_label(guess.direction_bucket),
        )


class TargetView(BaseModel):
    """Target country, revealed once the game has ended."""

    code: str
    name: str


class GameView(BaseModel):
    """Snapshot of the day's game."""

    day_id: str
    status: str
    max_tries: int
    guesses: list[GuessView]
    hide_image_mode: bool
    rotation_mode: bool
    angle: int
    scale: float
    target: TargetView | None = None

    @classmethod
    def from_snapshot(
        cls, snapshot: SessionSnapshot, catalog: CountryCatalog, locale: str
    ) -> "GameView":
        target = None
        if snapshot.target is not None:
            target = TargetView(
                code=snapshot.target.code,
                name=catalog.display_name(snapshot.target, locale),
            )
        return cls(
            day_id=snapshot.day_id,
            status=snapshot.status.value,
            max_tries=snapshot.max_tries,
            guesses=[GuessView.from_guess(guess) for guess in snapshot.guesses],
            hide_image_mode=snapshot.hide_image_mode,
            rotation_mode=snapshot.rotation_mode,
            angle=snapshot.angle,
            scale=snapshot.scale,
            target=target,
        )


class SubmitResponse(BaseModel):
    """Result of a guess submission."""

    accepted: bool
    status: str
    guess: GuessView | None = None
    game: GameView


class ShareView(BaseModel):
    """Finalized guesses for the share collaborator."""

    day_id: str
    status: str
    max_tries: int
    hide_image_mode: bool
    rotation_mode: bool
    guesses: list[GuessView]
