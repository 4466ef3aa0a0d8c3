"""Canonical labels and thresholds shared across the recommender.

Temperature bands and advice categories are the two classification axes of a
weather observation. Keeping their definitions here lets the classifier, the
catalogs and the console agree on a single vocabulary.
"""

from enum import Enum, IntEnum
from typing import Dict

MIN_TEMPERATURE_C = -50.0
MAX_TEMPERATURE_C = 50.0

# Band edges: below COLD_BELOW_C is cold, above HOT_ABOVE_C is hot, both
# edges themselves are moderate.
COLD_BELOW_C = 10.0
HOT_ABOVE_C = 25.0


class TemperatureBand(IntEnum):
    """Temperature classification, ordered from coldest to hottest."""

    COLD = 0
    MODERATE = 1
    HOT = 2

    @property
    def label(self) -> str:
        return _BAND_LABELS[self]

    @property
    def key(self) -> str:
        return self.name.lower()


_BAND_LABELS: Dict[TemperatureBand, str] = {
    TemperatureBand.COLD: "Cold Weather",
    TemperatureBand.MODERATE: "Moderate Weather",
    TemperatureBand.HOT: "Hot Weather",
}


class AdviceCategory(str, Enum):
    """Situational guidance derived from the condition text."""

    RAIN = "rain"
    SNOW = "snow"
    WIND = "wind"
    SUN_CLEAR = "sun_clear"
    GENERAL = "general"


__all__ = [
    "AdviceCategory",
    "COLD_BELOW_C",
    "HOT_ABOVE_C",
    "MAX_TEMPERATURE_C",
    "MIN_TEMPERATURE_C",
    "TemperatureBand",
]
