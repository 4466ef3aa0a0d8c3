"""Pydantic schemas and helpers for validating console input."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from models.observation import Observation
from models.taxonomy import MAX_TEMPERATURE_C, MIN_TEMPERATURE_C

_RANGE_ERROR_TYPES = {"greater_than_equal", "less_than_equal"}


class TemperatureInput(BaseModel):
    """Input contract for a typed temperature reading."""

    temperature: float = Field(ge=MIN_TEMPERATURE_C, le=MAX_TEMPERATURE_C, allow_inf_nan=False)


class InvalidTemperature(ValueError):
    """Raised when typed text is not an acceptable temperature."""

    def __init__(self, raw: str, reason: Literal["not_a_number", "out_of_range"]) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid temperature '{raw}': {reason}")


def parse_temperature(raw: str) -> float:
    """Parse ``raw`` into a temperature within the accepted range.

    Pydantic performs both the numeric coercion and the range check; its error
    type tells the two failure modes apart so the console can word its hint.
    Infinite values such as ``1e400`` count as out of range; ``nan`` and digit
    separators like ``1_0`` are not numbers.
    """

    text = (raw or "").strip()
    if not text or "_" in text:
        raise InvalidTemperature(raw, "not_a_number")
    try:
        return TemperatureInput.model_validate({"temperature": text}).temperature
    except ValidationError as exc:
        error_types = {error["type"] for error in exc.errors()}
        overflowed = "finite_number" in error_types and "nan" not in text.lower()
        reason = "out_of_range" if overflowed or error_types & _RANGE_ERROR_TYPES else "not_a_number"
        raise InvalidTemperature(raw, reason) from exc


def parse_choice(raw: str, maximum: int) -> int | None:
    """Return the 1-based choice in ``raw`` or ``None`` if it is not usable."""

    text = (raw or "").strip()
    if "_" in text:
        return None
    try:
        choice = int(text)
    except ValueError:
        return None
    if 1 <= choice <= maximum:
        return choice
    return None


def build_observation(city: str, temperature: float, condition: str) -> Observation:
    """Construct a validated observation; raises ``ValidationError`` otherwise."""

    return Observation.model_validate(
        {"city": city, "temperature": temperature, "condition": condition}
    )


__all__ = [
    "InvalidTemperature",
    "TemperatureInput",
    "build_observation",
    "parse_choice",
    "parse_temperature",
]
