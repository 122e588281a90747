"""FastAPI application factory."""

import logging
from enum import Enum

from fastapi import FastAPI, HTTPException, Request, status

from worldle.api.models import (
    GameView,
    GuessRequest,
    GuessView,
    ShareView,
    SubmitResponse,
)
from worldle.app_logging import configure_logging
from worldle.containers import AppContainer
from worldle.domain.errors import GameNotFinishedError, UnknownCountryError
from worldle.services.days import parse_day_id
from worldle.services.game import GameStateMachine


class ModeName(str, Enum):
    """Display modes the player can switch off."""

    HIDE_IMAGE = "hide-image"
    ROTATION = "rotation"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Worldle")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/countries")
    async def list_countries(
        request: Request, locale: str | None = None
    ) -> dict[str, object]:
        """Return country names for input autocompletion."""
        state_container: AppContainer = request.app.state.container
        resolved_locale = _resolve_locale(state_container, locale)
        return {
            "locale": resolved_locale,
            "countries": state_container.catalog.names(resolved_locale),
        }

    @app.get("/game")
    async def get_game(
        request: Request, day: str | None = None, locale: str | None = None
    ) -> GameView:
        """Return the current day's game snapshot."""
        state_container: AppContainer = request.app.state.container
        machine = _open_machine(state_container, day)
        return GameView.from_snapshot(
            machine.snapshot(),
            state_container.catalog,
            _resolve_locale(state_container, locale),
        )

    @app.post("/game/guesses")
    async def submit_guess(
        payload: GuessRequest, request: Request, day: str | None = None
    ) -> SubmitResponse:
        """Submit a guess for the current day."""
        state_container: AppContainer = request.app.state.container
        locale = _resolve_locale(state_container, payload.locale)
        machine = _open_machine(state_container, day)
        try:
            result = machine.submit(payload.text, locale)
        except UnknownCountryError as exc:
            logger.info("Unknown country guess: locale=%s", exc.locale)
            raise HTTPException(
                status_code=422,
                detail="unknownCountry",
            ) from exc
        return SubmitResponse(
            accepted=result.accepted,
            status=result.status.value,
            guess=GuessView.from_guess(result.guess) if result.guess else None,
            game=GameView.from_snapshot(
                machine.snapshot(), state_container.catalog, locale
            ),
        )

    @app.post("/game/modes/{flag}/disable")
    async def disable_mode(
        flag: ModeName,
        request: Request,
        day: str | None = None,
        locale: str | None = None,
    ) -> GameView:
        """Turn off a display mode for the rest of the day."""
        state_container: AppContainer = request.app.state.container
        machine = _open_machine(state_container, day)
        if flag is ModeName.HIDE_IMAGE:
            snapshot = machine.disable_hide_image()
        else:
            snapshot = machine.disable_rotation()
        return GameView.from_snapshot(
            snapshot,
            state_container.catalog,
            _resolve_locale(state_container, locale),
        )

    @app.get("/game/share")
    async def share(request: Request, day: str | None = None) -> ShareView:
        """Return the finalized guesses once the game has ended."""
        state_container: AppContainer = request.app.state.container
        machine = _open_machine(state_container, day)
        try:
            data = machine.share_data()
        except GameNotFinishedError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail="gameInProgress"
            ) from exc
        return ShareView(
            day_id=data.day_id,
            status=data.status.value,
            max_tries=data.max_tries,
            hide_image_mode=data.hide_image_mode,
            rotation_mode=data.rotation_mode,
            guesses=[GuessView.from_guess(guess) for guess in data.guesses],
        )

    return app


def _open_machine(container: AppContainer, day: str | None) -> GameStateMachine:
    if day is not None:
        try:
            parse_day_id(day)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Day must be formatted as YYYY-MM-DD",
            ) from exc
    return container.game_service.open(day)


def _resolve_locale(container: AppContainer, locale: str | None) -> str:
    if locale and locale in container.supported_locales:
        return locale
    return container.settings.default_locale
