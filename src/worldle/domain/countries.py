"""Domain models for the country reference data."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GeoPoint:
    """A point on the globe in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Country:
    """A country that can be guessed or selected as a daily target."""

    code: str
    names: dict[str, str]
    location: GeoPoint
    aliases: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def name(self, locale: str, default_locale: str = "en") -> str:
        """Return the display name for a locale, falling back to the default."""
        if locale in self.names:
            return self.names[locale]
        if default_locale in self.names:
            return self.names[default_locale]
        return self.code

    def aliases_for(self, locale: str) -> tuple[str, ...]:
        return self.aliases.get(locale, ())
