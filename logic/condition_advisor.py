"""Keyword rules turning free-text conditions into advice categories."""

from __future__ import annotations

from typing import Tuple

from models.advice import ADVICE_TEXT, AdviceText
from models.taxonomy import AdviceCategory
from tools.observability import instrument_operation

# Evaluated top to bottom; the first rule with a matching keyword wins, so
# "windy with rain" is RAIN.
CONDITION_RULES: Tuple[Tuple[Tuple[str, ...], AdviceCategory], ...] = (
    (("rain", "drizzle"), AdviceCategory.RAIN),
    (("snow",), AdviceCategory.SNOW),
    (("wind",), AdviceCategory.WIND),
    (("sun", "clear"), AdviceCategory.SUN_CLEAR),
)


def _normalize(condition: str) -> str:
    return (condition or "").lower()


@instrument_operation("advise_condition")
def advise(condition: str) -> AdviceCategory:
    """Classify ``condition`` by case-insensitive substring match."""

    text = _normalize(condition)
    for keywords, category in CONDITION_RULES:
        if any(keyword in text for keyword in keywords):
            return category
    return AdviceCategory.GENERAL


def advice_text(category: AdviceCategory) -> AdviceText:
    return ADVICE_TEXT[category]


__all__ = ["CONDITION_RULES", "advice_text", "advise"]
