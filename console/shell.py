"""Interactive read-validate-recommend loop."""

from __future__ import annotations

import logging
from typing import TextIO

from console.renderer import ConsoleRenderer
from logic.recommendation_engine import RecommendationEngine, WeatherAssessment
from logic.validation import InvalidTemperature, build_observation, parse_choice, parse_temperature
from memory.session_memory import SessionMemory
from models.observation import Observation
from models.outfit import Recommendation
from models.taxonomy import MAX_TEMPERATURE_C, MIN_TEMPERATURE_C
from stylist_app.config import DEFAULT_CITY, DEFAULT_CONDITION
from stylist_app.logging_config import get_logger, log_event, operation_context

LOGGER = get_logger(__name__)

REPEAT_EXIT = 2


class InputClosed(EOFError):
    """Raised when the input stream ends while a prompt is waiting."""

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt
        super().__init__(f"Input closed while waiting for: {prompt.strip()}")


class OutfitShell:
    """Prompts for observations and walks the user through their picks."""

    def __init__(
        self,
        engine: RecommendationEngine,
        memory: SessionMemory,
        renderer: ConsoleRenderer,
        in_stream: TextIO,
        default_city: str = DEFAULT_CITY,
        default_condition: str = DEFAULT_CONDITION,
    ) -> None:
        self.engine = engine
        self.memory = memory
        self.renderer = renderer
        self.in_stream = in_stream
        self.default_city = (default_city or "").strip() or DEFAULT_CITY
        self.default_condition = (default_condition or "").strip() or DEFAULT_CONDITION

    def _ask(self, prompt: str) -> str:
        self.renderer.write(prompt)
        raw = self.in_stream.readline()
        if raw == "":
            raise InputClosed(prompt)
        return raw.rstrip("\r\n").strip()

    def ask_choice(self, maximum: int) -> int:
        """Re-prompt until the user types an integer in ``1..maximum``."""

        while True:
            choice = parse_choice(self._ask(self.renderer.choice_prompt(maximum)), maximum)
            if choice is not None:
                return choice
            self.renderer.error(f"Invalid input. Please enter a number between 1 and {maximum}.")

    def _collect_city(self, previous: Observation | None) -> str:
        p = self.renderer.palette
        prompt = "\n📍 Enter your city: "
        if previous:
            prompt += f"(or press Enter for '{previous.city}') "
        city = self._ask(prompt)
        if not city and previous:
            city = previous.city
            self.renderer.notice(f"✅ Using previous city: {p.bold}{city}{p.reset}")
        if not city:
            city = self.default_city
            self.renderer.notice(f"🏙️  Using default: {city}")
        return city

    def _collect_temperature(self, previous: Observation | None) -> float:
        p = self.renderer.palette
        while True:
            prompt = "🌡️  Enter temperature (°C): "
            if previous:
                prompt += f"(or press Enter for {previous.temperature:.1f}°C) "
            raw = self._ask(prompt)
            if not raw and previous:
                self.renderer.notice(
                    f"✅ Using previous temperature: {p.bold}{previous.temperature:.1f}°C{p.reset}"
                )
                return previous.temperature
            try:
                return parse_temperature(raw)
            except InvalidTemperature as exc:
                log_event(LOGGER, logging.DEBUG, "temperature_rejected", reason=exc.reason)
                if exc.reason == "out_of_range":
                    self.renderer.error(
                        f"Temperature must be between {MIN_TEMPERATURE_C:.1f} and {MAX_TEMPERATURE_C:.1f}°C."
                    )
                else:
                    self.renderer.error("Please enter a valid number.")

    def _collect_condition(self) -> str:
        condition = self._ask("🌦️  Enter weather condition (e.g., Sunny, Rainy, Cloudy): ")
        if not condition:
            condition = self.default_condition
            self.renderer.notice(f"☀️  Using default condition: {condition}")
        return condition

    def collect_observation(self) -> Observation:
        """Prompt for one observation, defaulting blanks from session memory."""

        previous = self.memory.recall()
        city = self._collect_city(previous)
        temperature = self._collect_temperature(previous)
        condition = self._collect_condition()
        observation = build_observation(city, temperature, condition)
        self.memory.remember(observation)
        return observation

    def choose_recommendation(self, assessment: WeatherAssessment) -> Recommendation:
        catalogs = assessment.catalogs
        self.renderer.outfits(catalogs.outfits)
        outfit_choice = self.ask_choice(len(catalogs.outfits))

        self.renderer.options("🎒 Choose your accessory:", catalogs.accessories)
        accessory_choice = self.ask_choice(len(catalogs.accessories))

        self.renderer.options("👟 Choose your footwear:", catalogs.shoes)
        shoe_choice = self.ask_choice(len(catalogs.shoes))

        return self.engine.recommend(assessment, outfit_choice, accessory_choice, shoe_choice)

    def run_cycle(self) -> Recommendation:
        """Run one full observation-to-recommendation cycle."""

        with operation_context("shell:recommendation_cycle") as correlation_id:
            self.renderer.banner()
            observation = self.collect_observation()
            self.renderer.loading("Analyzing weather and finding perfect outfits")
            assessment = self.engine.assess(observation)
            self.renderer.assessment(assessment)
            recommendation = self.choose_recommendation(assessment)
            self.renderer.recommendation(recommendation)
            log_event(
                LOGGER,
                logging.INFO,
                "recommendation_delivered",
                correlation_id=correlation_id,
                band=assessment.band.key,
                outfit=recommendation.title,
            )
            return recommendation

    def run(self) -> int:
        """Loop until the user picks exit; returns the number of cycles run."""

        self.renderer.startup()
        cycles = 0
        while True:
            self.run_cycle()
            cycles += 1
            self.renderer.divider()
            self.renderer.repeat_menu()
            if self.ask_choice(2) == REPEAT_EXIT:
                break
            self.renderer.line("\n")
        self.renderer.farewell()
        return cycles


__all__ = ["InputClosed", "OutfitShell"]
