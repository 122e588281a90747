"""Guess normalization, resolution and scoring."""

import logging
import math
import re
import unicodedata
from dataclasses import dataclass, field

from geopy.distance import geodesic

from worldle.domain.countries import Country, GeoPoint
from worldle.domain.errors import UnknownCountryError
from worldle.domain.guesses import Guess
from worldle.services.catalog import CountryCatalog

_NON_ALNUM = re.compile(r"[\W_]+")
# Mercator projection diverges at the poles.
_MAX_LATITUDE = 89.999999

_logger = logging.getLogger(__name__)


def normalize_name(text: str) -> str:
    """Return the canonical comparison key for a country name.

    Case, accents, whitespace and punctuation are ignored, so
    ``"Côte d’Ivoire"`` and ``"cote divoire"`` share a key.
    """
    decomposed = unicodedata.normalize("NFKD", text.strip().casefold())
    stripped = "".join(
        char for char in decomposed if not unicodedata.combining(char)
    )
    return _NON_ALNUM.sub("", stripped)


def distance_meters(origin: GeoPoint, destination: GeoPoint) -> int:
    """Return the geodesic distance in whole meters."""
    return round(
        geodesic(
            (origin.latitude, origin.longitude),
            (destination.latitude, destination.longitude),
        ).meters
    )


def rhumb_line_bearing(origin: GeoPoint, destination: GeoPoint) -> float:
    """Return the constant-heading bearing in degrees within ``[0, 360)``."""
    origin_lat = math.radians(_clamp_latitude(origin.latitude))
    destination_lat = math.radians(_clamp_latitude(destination.latitude))
    delta_lon = math.radians(destination.longitude - origin.longitude)
    if delta_lon > math.pi:
        delta_lon -= 2 * math.pi
    elif delta_lon < -math.pi:
        delta_lon += 2 * math.pi
    delta_phi = math.log(
        math.tan(destination_lat / 2 + math.pi / 4)
        / math.tan(origin_lat / 2 + math.pi / 4)
    )
    return (math.degrees(math.atan2(delta_lon, delta_phi)) + 360) % 360


def direction_bucket(bearing: float) -> int:
    """Quantize a bearing to the nearest of the eight compass octants."""
    return int(math.floor(bearing / 45 + 0.5) * 45) % 360


def _clamp_latitude(latitude: float) -> float:
    return max(-_MAX_LATITUDE, min(_MAX_LATITUDE, latitude))


@dataclass
class GuessEvaluator:
    """Resolves raw guesses against the catalog and scores them."""

    catalog: CountryCatalog
    _indexes: dict[str, dict[str, Country]] = field(
        default_factory=dict, init=False, repr=False
    )

    def resolve(self, raw_text: str, locale: str) -> Country | None:
        """Return the country whose name or alias matches the text exactly."""
        key = normalize_name(raw_text)
        if not key:
            return None
        return self._index_for(locale).get(key)

    def evaluate(self, raw_text: str, locale: str, target: Country) -> Guess:
        """Score a raw guess against the target country."""
        guessed = self.resolve(raw_text, locale)
        if guessed is None:
            raise UnknownCountryError(raw_text, locale)
        text = raw_text.strip()
        if guessed.code == target.code:
            return Guess(raw_text=text, distance_meters=0, direction_bucket=0)
        # Zero is reserved for the target itself.
        distance = max(1, distance_meters(guessed.location, target.location))
        bearing = rhumb_line_bearing(guessed.location, target.location)
        return Guess(
            raw_text=text,
            distance_meters=distance,
            direction_bucket=direction_bucket(bearing),
        )

    def _index_for(self, locale: str) -> dict[str, Country]:
        index = self._indexes.get(locale)
        if index is not None:
            return index
        index = {}
        for country in self.catalog:
            names = (
                self.catalog.display_name(country, locale),
                *country.aliases_for(locale),
            )
            for name in names:
                key = normalize_name(name)
                existing = index.get(key)
                if existing is not None and existing.code != country.code:
                    _logger.warning(
                        "Duplicate country key: locale=%s key=%s codes=%s,%s",
                        locale,
                        key,
                        existing.code,
                        country.code,
                    )
                    continue
                index[key] = country
        self._indexes[locale] = index
        return index
