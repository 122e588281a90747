"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from worldle.adapters.json_file_session_repository import JsonFileSessionRepository
from worldle.adapters.supabase_session_repository import SupabaseSessionRepository
from worldle.config import Settings, parse_locales
from worldle.services.catalog import CountryCatalog, load_catalog
from worldle.services.game import GameService
from worldle.services.guesses import GuessEvaluator
from worldle.services.puzzles import DailyPuzzleSelector
from worldle.services.session_store import SessionRepository, SessionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: CountryCatalog
    session_store: SessionStore
    game_service: GameService
    supported_locales: list[str]


def build_session_repository(settings: Settings) -> SessionRepository:
    """Create the session repository selected by ``session_backend``."""
    if settings.session_backend == "file":
        return JsonFileSessionRepository(Path(settings.session_file_path))
    if settings.session_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase backend requires supabase_url and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseSessionRepository(client, profile_id=settings.profile_id)
    raise ValueError(f"Unknown session backend: {settings.session_backend}")


def build_container(
    settings: Settings | None = None,
    repository: SessionRepository | None = None,
) -> AppContainer:
    """Create the default dependency container.

    Raises EmptyCatalogError when the catalog cannot provide a puzzle.
    """
    resolved_settings = settings or Settings()
    catalog = load_catalog(
        resolved_settings.catalog_path,
        default_locale=resolved_settings.default_locale,
    )
    session_store = SessionStore(
        repository or build_session_repository(resolved_settings),
        max_tries=resolved_settings.max_tries,
    )
    game_service = GameService(
        catalog=catalog,
        selector=DailyPuzzleSelector(),
        evaluator=GuessEvaluator(catalog),
        store=session_store,
        default_hide_image_mode=resolved_settings.default_hide_image_mode,
        default_rotation_mode=resolved_settings.default_rotation_mode,
        timezone=resolved_settings.timezone,
        max_tries=resolved_settings.max_tries,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        session_store=session_store,
        game_service=game_service,
        supported_locales=parse_locales(
            resolved_settings.supported_locales, resolved_settings.default_locale
        ),
    )
