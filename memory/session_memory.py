"""In-process memory of the most recent weather observation."""
from __future__ import annotations

import logging
from typing import Optional

from stylist_app.logging_config import get_logger, log_event
from models.observation import Observation

LOGGER = get_logger(__name__)


class SessionMemory:
    """Holds the last observation entered during this process.

    The console owns one instance for its whole lifetime and reads it back to
    offer defaults. Nothing is written to disk; the value disappears with the
    process.
    """

    def __init__(self) -> None:
        self._last_observation: Optional[Observation] = None

    @property
    def has_observation(self) -> bool:
        return self._last_observation is not None

    def recall(self) -> Optional[Observation]:
        return self._last_observation

    def remember(self, observation: Observation) -> None:
        """Overwrite the stored observation. No validation happens here."""

        self._last_observation = observation
        log_event(
            LOGGER,
            logging.DEBUG,
            "observation_remembered",
            city=getattr(observation, "city", None),
            temperature=getattr(observation, "temperature", None),
        )


__all__ = ["SessionMemory"]
