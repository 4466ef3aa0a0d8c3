"""Terminal rendering for the interactive recommender."""

from __future__ import annotations

import time
from typing import Callable, Sequence, TextIO

from console.styles import Palette
from logic.recommendation_engine import WeatherAssessment
from models.observation import Observation
from models.outfit import Outfit, Recommendation
from models.taxonomy import TemperatureBand

_BAND_ICONS = {
    TemperatureBand.COLD: "❄️ ",
    TemperatureBand.MODERATE: "🌤️ ",
    TemperatureBand.HOT: "☀️ ",
}
_RULE = "━" * 40
_DIVIDER = "═" * 41


class ConsoleRenderer:
    """Writes every screen of the recommender to ``out``."""

    def __init__(
        self,
        out: TextIO,
        palette: Palette | None = None,
        sleep: Callable[[float], None] = time.sleep,
        loading_delay_seconds: float = 0.25,
        loading_steps: int = 4,
    ) -> None:
        self.out = out
        self.palette = palette or Palette()
        self.sleep = sleep
        self.loading_delay_seconds = loading_delay_seconds
        self.loading_steps = loading_steps

    def write(self, text: str = "") -> None:
        self.out.write(text)
        self.out.flush()

    def line(self, text: str = "") -> None:
        self.write(f"{text}\n")

    def band_color(self, band: TemperatureBand) -> str:
        p = self.palette
        return {TemperatureBand.COLD: p.cyan, TemperatureBand.MODERATE: p.yellow, TemperatureBand.HOT: p.red}[band]

    def startup(self) -> None:
        p = self.palette
        self.line(f"{p.cyan}Initializing Weather-Based Outfit Recommender...{p.reset}")

    def banner(self) -> None:
        p = self.palette
        self.line(f"{p.green}")
        self.line("==========================================")
        self.line("   🌤️  Weather-Based Outfit Recommender  👕")
        self.line(f"=========================================={p.reset}")
        self.line(f"{p.cyan}Your personal AI stylist for any weather!{p.reset}")
        self.line(f"{p.yellow}✨ Get personalized outfit suggestions based on current conditions{p.reset}")

    def error(self, message: str) -> None:
        p = self.palette
        self.line(f"{p.red}❌ {message}{p.reset}")

    def notice(self, message: str) -> None:
        self.line(message)

    def loading(self, message: str) -> None:
        p = self.palette
        self.write(f"{p.cyan}🔄 {message}")
        for _ in range(self.loading_steps):
            self.write(".")
            if self.loading_delay_seconds > 0:
                self.sleep(self.loading_delay_seconds)
        self.line(f" Done!{p.reset}")

    def weather_summary(self, observation: Observation, band: TemperatureBand) -> None:
        p = self.palette
        self.line(f"{p.magenta}\n🌡️  Weather Summary for {p.bold}{observation.city}{p.reset}{p.magenta}:{p.reset}")
        self.line(f"Temperature: {p.bold}{observation.temperature:.1f}°C{p.reset}")
        self.line(f"Condition: {p.bold}{observation.condition}{p.reset}")
        self.line(f"Category: {_BAND_ICONS[band]} {self.band_color(band)}{p.bold}{band.label}{p.reset}")

    def tips(self, tips: Sequence[str]) -> None:
        p = self.palette
        self.line(f"{p.cyan}\n💡 Weather Tips:{p.reset}")
        for tip in tips:
            self.line(f"• {tip}")

    def considerations(self, assessment: WeatherAssessment) -> None:
        p = self.palette
        self.line(f"{p.yellow}\n🌦️  Special Weather Considerations:{p.reset}")
        self.line(assessment.advice.headline)
        for bullet in assessment.advice.bullets:
            self.line(f"   • {bullet}")

    def assessment(self, assessment: WeatherAssessment) -> None:
        self.weather_summary(assessment.observation, assessment.band)
        self.tips(assessment.tips)
        self.considerations(assessment)

    def outfits(self, outfits: Sequence[Outfit]) -> None:
        p = self.palette
        self.line("\n👔 Choose your outfit style:")
        for number, outfit in enumerate(outfits, start=1):
            self.line(f"{p.blue}{number}. {p.bold}{outfit.title}{p.reset}")
            for item in outfit.items:
                self.line(f"   • {item}")
            self.line()

    def options(self, heading: str, options: Sequence[str]) -> None:
        self.line(f"\n{heading}")
        for number, option in enumerate(options, start=1):
            self.line(f"{number}. {option}")

    def choice_prompt(self, maximum: int) -> str:
        p = self.palette
        return f"{p.yellow}Enter your choice (1-{maximum}): {p.reset}"

    def recommendation(self, recommendation: Recommendation) -> None:
        p = self.palette
        self.line(f"{p.green}\n✨ Your Perfect Outfit Recommendation:{p.reset}")
        self.line(_RULE)
        self.line(f"{p.blue}Style: {p.bold}{recommendation.title}{p.reset}")
        self.line("Clothing Items:")
        for item in recommendation.items:
            self.line(f"  • {p.bold}{item}{p.reset}")
        self.line(f"Accessory: {p.bold}{recommendation.accessory}{p.reset}")
        self.line(f"Footwear: {p.bold}{recommendation.shoe}{p.reset}")
        self.line(_RULE)
        self.line(f"{p.green}Have a stylish and comfortable day! 😎✨{p.reset}")

    def divider(self) -> None:
        p = self.palette
        self.line(f"\n{p.cyan}{_DIVIDER}{p.reset}")

    def repeat_menu(self) -> None:
        p = self.palette
        self.line(f"{p.yellow}\n🔄 Would you like to get another outfit recommendation?{p.reset}")
        self.line(f"1. {p.green}Yes, try another city/weather{p.reset}")
        self.line(f"2. {p.red}No, exit program{p.reset}")

    def farewell(self) -> None:
        p = self.palette
        self.line(f"{p.green}\n🎉 Thank you for using the Weather-Based Outfit Recommender!")
        self.line("Stay stylish and weather-ready! ✨👗👔🌟")
        self.line(f"Remember: Confidence is the best accessory! 💫{p.reset}")


__all__ = ["ConsoleRenderer"]
