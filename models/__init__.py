"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.advice import ADVICE_TEXT, BAND_TIPS, AdviceText
from models.catalog import BandCatalogs, get_band_catalogs
from models.observation import Observation
from models.outfit import Outfit, Recommendation

__all__ = [
    "ADVICE_TEXT",
    "AdviceText",
    "BAND_TIPS",
    "BandCatalogs",
    "Observation",
    "Outfit",
    "Recommendation",
    "get_band_catalogs",
]
