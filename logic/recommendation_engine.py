"""Facade bundling classification, advice and catalog selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

from stylist_app.logging_config import get_logger, log_event
from logic.catalog_selector import build_recommendation, catalogs_for
from logic.condition_advisor import CONDITION_RULES, advice_text, advise
from logic.temperature_classifier import band_thresholds, classify
from models.advice import BAND_TIPS, AdviceText
from models.catalog import BandCatalogs
from models.observation import Observation
from models.outfit import Recommendation
from models.taxonomy import AdviceCategory, TemperatureBand

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class WeatherAssessment:
    """Everything the console needs to render one observation."""

    observation: Observation
    band: TemperatureBand
    advice_category: AdviceCategory
    advice: AdviceText
    tips: Tuple[str, ...]
    catalogs: BandCatalogs
    debug_summary: Dict[str, object] = field(default_factory=dict, compare=False)


class RecommendationEngine:
    """Turns a validated observation into catalogs and a final recommendation."""

    def assess(self, observation: Observation) -> WeatherAssessment:
        band = classify(observation.temperature)
        category = advise(observation.condition)
        debug_summary = {
            "thresholds": {
                "temperature_bands_c": band_thresholds(),
                "condition_priority": [rule_category.value for _, rule_category in CONDITION_RULES],
            },
            "classification_rationale": {
                "temperature_band": band.key,
                "advice_category": category.value,
            },
        }
        log_event(
            LOGGER,
            logging.INFO,
            "observation_assessed",
            city=observation.city,
            temperature=observation.temperature,
            band=band.key,
            advice_category=category.value,
        )
        return WeatherAssessment(
            observation=observation,
            band=band,
            advice_category=category,
            advice=advice_text(category),
            tips=BAND_TIPS[band],
            catalogs=catalogs_for(band),
            debug_summary=debug_summary,
        )

    def recommend(
        self,
        assessment: WeatherAssessment,
        outfit_choice: int,
        accessory_choice: int,
        shoe_choice: int,
    ) -> Recommendation:
        return build_recommendation(
            outfit_choice,
            accessory_choice,
            shoe_choice,
            assessment.catalogs,
        )


__all__ = ["RecommendationEngine", "WeatherAssessment"]
