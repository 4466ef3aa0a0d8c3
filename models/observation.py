"""Weather observation schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.taxonomy import MAX_TEMPERATURE_C, MIN_TEMPERATURE_C


class Observation(BaseModel):
    """One user-submitted weather record.

    Instances are frozen; a new one is built for every recommendation cycle.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    city: str = Field(min_length=1)
    temperature: float = Field(ge=MIN_TEMPERATURE_C, le=MAX_TEMPERATURE_C)
    condition: str = Field(min_length=1)


__all__ = ["Observation"]
