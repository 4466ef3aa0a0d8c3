"""Map a temperature reading to its wardrobe band."""

from __future__ import annotations

from models.taxonomy import COLD_BELOW_C, HOT_ABOVE_C, TemperatureBand
from tools.observability import instrument_operation


@instrument_operation("classify_temperature")
def classify(temperature: float) -> TemperatureBand:
    """Return the band for ``temperature`` in degrees Celsius.

    Both edges belong to the moderate band. Values outside the accepted input
    range are still classified by the same thresholds.
    """

    if temperature < COLD_BELOW_C:
        return TemperatureBand.COLD
    if temperature <= HOT_ABOVE_C:
        return TemperatureBand.MODERATE
    return TemperatureBand.HOT


def band_thresholds() -> dict:
    return {"cold": f"<{COLD_BELOW_C}", "moderate": f"{COLD_BELOW_C}-{HOT_ABOVE_C}", "hot": f">{HOT_ABOVE_C}"}


__all__ = ["band_thresholds", "classify"]
