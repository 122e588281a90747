"""Domain models for scored guesses."""

from dataclasses import dataclass

DIRECTION_BUCKETS = (0, 45, 90, 135, 180, 225, 270, 315)

_COMPASS_LABELS = {
    0: "N",
    45: "NE",
    90: "E",
    135: "SE",
    180: "S",
    225: "SW",
    270: "W",
    315: "NW",
}


@dataclass(frozen=True)
class Guess:
    """A resolved guess with its distance and direction to the target."""

    raw_text: str
    distance_meters: int
    direction_bucket: int

    @property
    def is_correct(self) -> bool:
        return self.distance_meters == 0

    def to_record(self) -> dict[str, object]:
        """Return the persisted representation of the guess."""
        return {
            "raw_text": self.raw_text,
            "distance_meters": self.distance_meters,
            "direction_bucket": self.direction_bucket,
        }


def compass_label(direction_bucket: int) -> str:
    """Return the compass point for a 45-degree direction bucket."""
    return _COMPASS_LABELS[direction_bucket % 360]
