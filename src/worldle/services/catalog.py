"""Country catalog loading and lookup."""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from worldle.domain.countries import Country, GeoPoint
from worldle.domain.errors import EmptyCatalogError

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "countries.json"

_logger = logging.getLogger(__name__)


class CountryPayload(BaseModel):
    """Raw country entry as stored in the catalog file."""

    code: str = Field(min_length=2)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    names: dict[str, str]
    aliases: dict[str, list[str]] = Field(default_factory=dict)

    def to_country(self) -> Country:
        return Country(
            code=self.code.upper(),
            names=dict(self.names),
            location=GeoPoint(latitude=self.latitude, longitude=self.longitude),
            aliases={
                locale: tuple(values) for locale, values in self.aliases.items()
            },
        )


@dataclass(frozen=True)
class CountryCatalog:
    """Ordered, immutable collection of countries."""

    countries: tuple[Country, ...]
    default_locale: str = "en"

    def __post_init__(self) -> None:
        if not self.countries:
            raise EmptyCatalogError("Country catalog is empty")

    def __len__(self) -> int:
        return len(self.countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self.countries)

    def at(self, index: int) -> Country:
        """Return the country at a catalog position."""
        return self.countries[index]

    def get(self, code: str) -> Country | None:
        """Return a country by its ISO code, if present."""
        wanted = code.upper()
        for country in self.countries:
            if country.code == wanted:
                return country
        return None

    def display_name(self, country: Country, locale: str) -> str:
        return country.name(locale, self.default_locale)

    def names(self, locale: str) -> list[str]:
        """Return sorted display names for autocompletion."""
        return sorted(self.display_name(country, locale) for country in self.countries)


def load_catalog(
    path: Path | str | None = None, default_locale: str = "en"
) -> CountryCatalog:
    """Load and validate a catalog file, defaulting to the bundled dataset."""
    resolved = Path(path) if path else BUNDLED_CATALOG_PATH
    try:
        raw = json.loads(resolved.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise EmptyCatalogError(f"Unable to read country catalog {resolved}") from exc
    if not isinstance(raw, list):
        raise EmptyCatalogError(f"Country catalog {resolved} must be a JSON list")
    try:
        entries = [CountryPayload.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise EmptyCatalogError(f"Invalid country catalog {resolved}") from exc
    catalog = CountryCatalog(
        countries=tuple(entry.to_country() for entry in entries),
        default_locale=default_locale,
    )
    _logger.info("Loaded country catalog: path=%s countries=%s", resolved, len(catalog))
    return catalog
