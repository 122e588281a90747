"""Errors raised by the game core."""


class UnknownCountryError(ValueError):
    """Raised when a guess does not match any country in the catalog."""

    def __init__(self, raw_text: str, locale: str) -> None:
        super().__init__(f"Unknown country {raw_text!r} for locale {locale!r}")
        self.raw_text = raw_text
        self.locale = locale


class CorruptPersistedStateError(RuntimeError):
    """Raised by a session repository when a stored record is unreadable."""


class EmptyCatalogError(RuntimeError):
    """Raised when no daily target can be selected from the catalog."""


class GameNotFinishedError(RuntimeError):
    """Raised when end-of-game data is requested while the game is running."""
