"""Catalog lookup and turning user picks into a recommendation."""

from __future__ import annotations

import logging
from typing import Sequence

from models.catalog import BandCatalogs, get_band_catalogs
from models.outfit import Recommendation
from models.taxonomy import TemperatureBand
from tools.observability import instrument_operation


class OutOfRangeSelection(ValueError):
    """Raised when a 1-based pick falls outside its catalog."""

    def __init__(self, field: str, choice: int, maximum: int) -> None:
        self.field = field
        self.choice = choice
        self.maximum = maximum
        super().__init__(f"{field} choice {choice} is outside 1..{maximum}")


@instrument_operation("catalogs_for")
def catalogs_for(band: TemperatureBand) -> BandCatalogs:
    """Return the outfits, accessories and shoes offered for ``band``."""

    return get_band_catalogs(band)


def _pick(options: Sequence, choice: int, field: str):
    if not 1 <= choice <= len(options):
        raise OutOfRangeSelection(field, choice, len(options))
    return options[choice - 1]


@instrument_operation("build_recommendation", level=logging.INFO)
def build_recommendation(
    outfit_choice: int,
    accessory_choice: int,
    shoe_choice: int,
    catalogs: BandCatalogs,
) -> Recommendation:
    """Resolve three 1-based picks against ``catalogs``.

    A pick outside its catalog raises :class:`OutOfRangeSelection`; it is
    never clamped.
    """

    outfit = _pick(catalogs.outfits, outfit_choice, "outfit")
    accessory = _pick(catalogs.accessories, accessory_choice, "accessory")
    shoe = _pick(catalogs.shoes, shoe_choice, "shoe")
    return Recommendation(
        title=outfit.title,
        items=tuple(outfit.items),
        accessory=accessory,
        shoe=shoe,
    )


__all__ = ["OutOfRangeSelection", "build_recommendation", "catalogs_for"]
