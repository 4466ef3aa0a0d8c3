"""Unit tests for the in-process session memory."""

import pytest
from pydantic import ValidationError

from memory.session_memory import SessionMemory
from models.observation import Observation


def test_recall_is_empty_before_remember() -> None:
    memory = SessionMemory()
    assert memory.recall() is None
    assert not memory.has_observation


def test_remember_then_recall_roundtrip() -> None:
    memory = SessionMemory()
    observation = Observation(city="Paris", temperature=18.5, condition="Cloudy")

    memory.remember(observation)

    assert memory.recall() == observation
    assert memory.has_observation


def test_remember_overwrites_previous_observation() -> None:
    memory = SessionMemory()
    memory.remember(Observation(city="Paris", temperature=18.5, condition="Cloudy"))
    memory.remember(Observation(city="Rome", temperature=30, condition="Sunny"))

    assert memory.recall().city == "Rome"


def test_observation_is_frozen_and_validated() -> None:
    observation = Observation(city="  Oslo ", temperature=-3, condition="Snow")
    assert observation.city == "Oslo"

    with pytest.raises(ValidationError):
        observation.city = "Bergen"
    with pytest.raises(ValidationError):
        Observation(city="Oslo", temperature=50.1, condition="Snow")
    with pytest.raises(ValidationError):
        Observation(city="", temperature=0, condition="Snow")
    with pytest.raises(ValidationError):
        Observation(city="Oslo", temperature=0, condition="   ")
