"""Scripted tests for the interactive console shell."""
from __future__ import annotations

import io
from typing import List, Tuple

import pytest

from console.renderer import ConsoleRenderer
from console.shell import InputClosed, OutfitShell
from console.styles import Palette
from logic.recommendation_engine import RecommendationEngine
from memory.session_memory import SessionMemory
from models.observation import Observation
from models.taxonomy import AdviceCategory, TemperatureBand


def _shell(lines: List[str], memory: SessionMemory | None = None) -> Tuple[OutfitShell, io.StringIO]:
    out = io.StringIO()
    renderer = ConsoleRenderer(out, palette=Palette.plain(), loading_delay_seconds=0.0)
    shell = OutfitShell(
        engine=RecommendationEngine(),
        memory=memory or SessionMemory(),
        renderer=renderer,
        in_stream=io.StringIO("".join(f"{line}\n" for line in lines)),
    )
    return shell, out


def test_collect_observation_remembers_input() -> None:
    shell, _ = _shell(["Madrid", "31", "Clear skies"])

    observation = shell.collect_observation()

    assert observation == Observation(city="Madrid", temperature=31.0, condition="Clear skies")
    assert shell.memory.recall() == observation


def test_blank_fields_default_from_memory_except_condition() -> None:
    memory = SessionMemory()
    memory.remember(Observation(city="Madrid", temperature=31.0, condition="Rain"))
    shell, out = _shell(["", "", ""], memory=memory)

    observation = shell.collect_observation()

    assert observation.city == "Madrid"
    assert observation.temperature == 31.0
    assert observation.condition == "Clear"
    transcript = out.getvalue()
    assert "(or press Enter for 31.0°C)" in transcript
    assert "Using previous city: Madrid" in transcript


def test_blank_temperature_without_memory_reprompts() -> None:
    shell, out = _shell(["Quito", "", "99", "16", "Fog"])

    observation = shell.collect_observation()

    assert observation.temperature == 16.0
    transcript = out.getvalue()
    assert transcript.count("Please enter a valid number.") == 1
    assert "Temperature must be between -50.0 and 50.0°C." in transcript


def test_shell_uses_configured_defaults() -> None:
    shell, _ = _shell(["", "5", ""])
    shell.default_city = "Reykjavik"
    shell.default_condition = "Overcast"

    observation = shell.collect_observation()

    assert observation.city == "Reykjavik"
    assert observation.condition == "Overcast"


def test_run_cycle_returns_recommendation() -> None:
    shell, out = _shell(["Tokyo", "28", "Humid", "2", "2", "3"])

    recommendation = shell.run_cycle()

    assert recommendation.title == "Beach Ready"
    assert recommendation.accessory == "Cooling Bandana"
    assert recommendation.shoe == "Mesh Sneakers"
    transcript = out.getvalue()
    assert "Analyzing weather and finding perfect outfits.... Done!" in transcript
    assert "Stay hydrated and seek shade when possible" in transcript
    assert "General weather" in transcript


def test_ask_choice_reprompts_until_valid() -> None:
    shell, out = _shell(["x", "9", "2"])

    assert shell.ask_choice(2) == 2
    assert out.getvalue().count("Invalid input. Please enter a number between 1 and 2.") == 2


def test_input_closed_is_raised_at_end_of_stream() -> None:
    shell, _ = _shell(["Lima"])

    with pytest.raises(InputClosed):
        shell.collect_observation()


def test_loading_animation_sleeps_per_step() -> None:
    delays: List[float] = []
    out = io.StringIO()
    renderer = ConsoleRenderer(
        out, palette=Palette.plain(), sleep=delays.append, loading_delay_seconds=0.5, loading_steps=4
    )

    renderer.loading("Working")

    assert delays == [0.5, 0.5, 0.5, 0.5]
    assert out.getvalue().endswith("Working.... Done!\n")


def test_colored_palette_emits_ansi_codes() -> None:
    out = io.StringIO()
    ConsoleRenderer(out, palette=Palette.for_terminal(True)).error("boom")
    assert "\033[1;31m" in out.getvalue()

    plain = io.StringIO()
    ConsoleRenderer(plain, palette=Palette.for_terminal(False)).error("boom")
    assert "\033[" not in plain.getvalue()


def test_engine_assessment_bundles_band_advice_and_catalogs() -> None:
    assessment = RecommendationEngine().assess(Observation(city="Oslo", temperature=-2, condition="Snowfall"))

    assert assessment.band is TemperatureBand.COLD
    assert assessment.advice_category is AdviceCategory.SNOW
    assert assessment.catalogs.outfits[1].title == "Arctic Explorer"
    assert assessment.debug_summary["classification_rationale"]["advice_category"] == "snow"
