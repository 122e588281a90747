"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from worldle.config import Settings
from worldle.containers import AppContainer
from worldle.domain.countries import Country, GeoPoint
from worldle.domain.sessions import DailyPuzzle
from worldle.services.catalog import CountryCatalog
from worldle.services.game import GameService
from worldle.services.guesses import GuessEvaluator
from worldle.services.session_store import SessionRepository, SessionStore

ALPHA = Country(
    code="AA",
    names={"en": "Alpha", "fr": "Alphaie"},
    location=GeoPoint(latitude=0.0, longitude=0.0),
)
BRAVO = Country(
    code="BB",
    names={"en": "Bravo", "fr": "Bravie"},
    location=GeoPoint(latitude=0.0, longitude=1.0),
    aliases={"en": ("Republic of Bravo",)},
)
CHARLIE = Country(
    code="CC",
    names={"en": "Charlie"},
    location=GeoPoint(latitude=1.0, longitude=1.0),
)


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests."""

    records: dict[str, object] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get_record(self, day_id: str) -> dict[str, object] | None:
        return self.records.get(day_id)

    def put_record(self, day_id: str, record: dict[str, object]) -> None:
        self.writes.append(day_id)
        self.records[day_id] = record


@dataclass(frozen=True)
class FixedSelector:
    """Selector that always picks the same catalog index."""

    index: int = 0

    def select(self, day_id: str, catalog_size: int) -> DailyPuzzle:
        return DailyPuzzle(
            day_id=day_id, target_index=self.index, angle=90, scale=1.2
        )


@pytest.fixture
def catalog() -> CountryCatalog:
    return CountryCatalog(countries=(ALPHA, BRAVO, CHARLIE), default_locale="en")


@pytest.fixture
def repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def session_store(repository: InMemorySessionRepository) -> SessionStore:
    return SessionStore(repository)


@pytest.fixture
def game_service(catalog: CountryCatalog, session_store: SessionStore) -> GameService:
    return GameService(
        catalog=catalog,
        selector=FixedSelector(0),
        evaluator=GuessEvaluator(catalog),
        store=session_store,
        default_hide_image_mode=True,
        default_rotation_mode=True,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        default_locale="en",
        supported_locales="en,fr",
        session_backend="file",
        session_file_path="unused.json",
    )


@pytest.fixture
def container(
    settings: Settings,
    catalog: CountryCatalog,
    session_store: SessionStore,
    game_service: GameService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog=catalog,
        session_store=session_store,
        game_service=game_service,
        supported_locales=["en", "fr"],
    )
