"""Static advisory copy for temperature bands and weather conditions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from models.taxonomy import AdviceCategory, TemperatureBand


@dataclass(frozen=True)
class AdviceText:
    """A headline and the bullets printed beneath it."""

    headline: str
    bullets: Tuple[str, ...] = ()


ADVICE_TEXT: Dict[AdviceCategory, AdviceText] = {
    AdviceCategory.RAIN: AdviceText(
        headline="☔ Rain detected! Recommendations:",
        bullets=(
            "Bring an umbrella or waterproof jacket",
            "Choose water-resistant footwear",
            "Avoid light-colored clothing",
        ),
    ),
    AdviceCategory.SNOW: AdviceText(
        headline="❄️ Snowy conditions! Recommendations:",
        bullets=(
            "Extra layers and waterproof outer shell",
            "Non-slip, insulated footwear",
            "Hand and foot warmers",
        ),
    ),
    AdviceCategory.WIND: AdviceText(
        headline="💨 Windy weather! Recommendations:",
        bullets=(
            "Windbreaker or fitted jacket",
            "Secure accessories (hats, scarves)",
            "Avoid loose, flowing garments",
        ),
    ),
    AdviceCategory.SUN_CLEAR: AdviceText(
        headline="☀️ Sunny conditions! Recommendations:",
        bullets=(
            "UV protection is essential",
            "Light colors reflect heat",
            "Stay hydrated",
        ),
    ),
    AdviceCategory.GENERAL: AdviceText(
        headline="🌤️  General weather - perfect for versatile styling!",
    ),
}

BAND_TIPS: Dict[TemperatureBand, Tuple[str, ...]] = {
    TemperatureBand.COLD: (
        "Layer up to trap warm air between clothing",
        "Don't forget to cover extremities (hands, feet, head)",
        "Choose moisture-wicking base layers",
    ),
    TemperatureBand.MODERATE: (
        "Perfect weather for versatile layering",
        "Consider bringing a light jacket for temperature changes",
        "Comfortable walking weather - great for outdoor activities",
    ),
    TemperatureBand.HOT: (
        "Stay hydrated and seek shade when possible",
        "Choose light-colored, loose-fitting clothes",
        "Don't forget sun protection (hat, sunscreen)",
    ),
}


__all__ = ["ADVICE_TEXT", "AdviceText", "BAND_TIPS"]
