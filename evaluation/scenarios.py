"""Scripted console sessions used to evaluate the recommender end to end."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class EvaluationScenario:
    """Lines typed by a user and fragments the transcript must contain."""

    name: str
    inputs: List[str]
    expected_fragments: List[str] = field(default_factory=list)
    forbidden_fragments: List[str] = field(default_factory=list)
    expected_cycles: int = 1


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="snowy_cold_first_picks",
        inputs=["Oslo", "-5", "Light Snow", "1", "1", "1", "2"],
        expected_fragments=[
            "Weather Summary for Oslo",
            "Temperature: -5.0°C",
            "Cold Weather",
            "Snowy conditions!",
            "Style: Winter Warrior",
            "Accessory: Wool Scarf",
            "Footwear: Waterproof Boots",
            "Thank you for using the Weather-Based Outfit Recommender!",
        ],
    ),
    EvaluationScenario(
        name="rain_beats_wind_moderate",
        inputs=["Dublin", "14.5", "Windy with rain", "2", "3", "4", "2"],
        expected_fragments=[
            "Moderate Weather",
            "Rain detected!",
            "Style: Weekend Relaxed",
            "Accessory: Leather Belt",
            "Footwear: Walking Boots",
        ],
        forbidden_fragments=["Windy weather!"],
    ),
    EvaluationScenario(
        name="retries_then_hot_sunny",
        inputs=["Cairo", "hot", "75", "38", "Sunny", "0", "4", "3", "6", "5", "2", "2"],
        expected_fragments=[
            "Please enter a valid number.",
            "Temperature must be between -50.0 and 50.0°C.",
            "Invalid input. Please enter a number between 1 and 3.",
            "Invalid input. Please enter a number between 1 and 5.",
            "Hot Weather",
            "Sunny conditions!",
            "Style: City Heat",
            "Accessory: Sweat Towel",
            "Footwear: Flip-Flops",
        ],
    ),
    EvaluationScenario(
        name="second_cycle_reuses_memory",
        inputs=["Lisbon", "25", "Overcast", "1", "1", "1", "1", "", "", "", "3", "2", "1", "2"],
        expected_fragments=[
            "(or press Enter for 'Lisbon')",
            "Using previous city: Lisbon",
            "Using previous temperature: 25.0°C",
            "Using default condition: Clear",
            "General weather",
            "Sunny conditions!",
            "Style: Urban Explorer",
        ],
        expected_cycles=2,
    ),
    EvaluationScenario(
        name="blank_first_observation_defaults",
        inputs=["", "10", "", "1", "1", "1", "2"],
        expected_fragments=[
            "Using default: Unknown City",
            "Using default condition: Clear",
            "Weather Summary for Unknown City",
            "Moderate Weather",
        ],
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
