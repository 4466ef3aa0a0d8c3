"""Outfit and recommendation schemas."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Outfit:
    title: str
    items: Tuple[str, str, str]


@dataclass(frozen=True)
class Recommendation:
    """The finished pick: one outfit plus one accessory and one pair of shoes."""

    title: str
    items: Tuple[str, str, str]
    accessory: str
    shoe: str
