"""Deterministic daily puzzle selection."""

import hashlib
import random
from dataclasses import dataclass

from worldle.domain.errors import EmptyCatalogError
from worldle.domain.sessions import DailyPuzzle

_COUNTRY_SALT = "country"
_ANGLE_SALT = "angle"
_SCALE_SALT = "scale"

MIN_SCALE = 1.0
MAX_SCALE = 1.5


def seeded_random(day_id: str, salt: str) -> random.Random:
    """Return a PRNG seeded from ``sha256("<salt>:<day_id>")``.

    Integer seeds keep the sequence stable across interpreter versions.
    """
    digest = hashlib.sha256(f"{salt}:{day_id}".encode()).digest()
    return random.Random(int.from_bytes(digest, "big"))


@dataclass(frozen=True)
class DailyPuzzleSelector:
    """Maps a day identifier to its target index, rotation angle and scale."""

    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE

    def select(self, day_id: str, catalog_size: int) -> DailyPuzzle:
        """Select the puzzle for a day; pure in ``day_id`` and ``catalog_size``."""
        if catalog_size <= 0:
            raise EmptyCatalogError("Cannot select a daily country: catalog is empty")
        target_index = seeded_random(day_id, _COUNTRY_SALT).randrange(catalog_size)
        angle = seeded_random(day_id, _ANGLE_SALT).randrange(360)
        spread = self.max_scale - self.min_scale
        scale = self.min_scale + spread * seeded_random(day_id, _SCALE_SALT).random()
        return DailyPuzzle(
            day_id=day_id,
            target_index=target_index,
            angle=angle,
            scale=scale,
        )
