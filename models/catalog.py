"""Static outfit, accessory and footwear catalogs keyed by temperature band."""
from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from models.outfit import Outfit
from models.taxonomy import TemperatureBand

OUTFITS_PER_BAND = 3
ITEMS_PER_OUTFIT = 3
ACCESSORIES_PER_BAND = 5
SHOES_PER_BAND = 5


class BandCatalogs(NamedTuple):
    """Everything a user can pick from for one temperature band."""

    outfits: Tuple[Outfit, ...]
    accessories: Tuple[str, ...]
    shoes: Tuple[str, ...]


_CATALOGS: Dict[TemperatureBand, BandCatalogs] = {
    TemperatureBand.COLD: BandCatalogs(
        outfits=(
            Outfit("Winter Warrior", ("Thick Trench Coat", "Corduroy Pants", "Wool Turtleneck")),
            Outfit("Arctic Explorer", ("Insulated Puffer Jacket", "Thermal Leggings", "Merino Wool Sweater")),
            Outfit("Cozy Professional", ("Wool Overcoat", "Dark Jeans", "Cashmere Sweater")),
        ),
        accessories=("Wool Scarf", "Insulated Gloves", "Warm Beanie", "Fleece Headband", "Thermal Socks"),
        shoes=("Waterproof Boots", "Insulated Sneakers", "Warm Chelsea Boots", "Snow Boots", "Thermal Loafers"),
    ),
    TemperatureBand.MODERATE: BandCatalogs(
        outfits=(
            Outfit("Smart Casual", ("Cotton Long Sleeve", "Chinos", "Light Cardigan")),
            Outfit("Weekend Relaxed", ("Henley Shirt", "Khaki Pants", "Zip-up Hoodie")),
            Outfit("Urban Explorer", ("Denim Jacket", "Joggers", "Graphic Tee")),
        ),
        accessories=("Baseball Cap", "Stylish Watch", "Leather Belt", "Sunglasses", "Light Scarf"),
        shoes=("Comfortable Sneakers", "Canvas Shoes", "Casual Loafers", "Walking Boots", "Slip-on Shoes"),
    ),
    TemperatureBand.HOT: BandCatalogs(
        outfits=(
            Outfit("Summer Cool", ("Linen Button-up", "Cotton Shorts", "Baseball Cap")),
            Outfit("Beach Ready", ("Tank Top", "Board Shorts", "Sun Hat")),
            Outfit("City Heat", ("Moisture-wicking Tee", "Linen Pants", "Cooling Towel")),
        ),
        accessories=("Wide-Brim Hat", "Cooling Bandana", "UV Protection Wristband", "Portable Fan", "Sweat Towel"),
        shoes=("Breathable Sandals", "Flip-Flops", "Mesh Sneakers", "Water Shoes", "Ventilated Slip-ons"),
    ),
}


def _check_catalog_shape(catalogs: Dict[TemperatureBand, BandCatalogs]) -> None:
    """Fail at import time if an edit breaks the fixed catalog shape."""

    missing = set(TemperatureBand) - set(catalogs)
    if missing:
        raise ValueError(f"Catalogs missing bands: {sorted(band.key for band in missing)}")
    for band, catalog in catalogs.items():
        if len(catalog.outfits) != OUTFITS_PER_BAND:
            raise ValueError(f"{band.key} catalog needs {OUTFITS_PER_BAND} outfits")
        if len(catalog.accessories) != ACCESSORIES_PER_BAND:
            raise ValueError(f"{band.key} catalog needs {ACCESSORIES_PER_BAND} accessories")
        if len(catalog.shoes) != SHOES_PER_BAND:
            raise ValueError(f"{band.key} catalog needs {SHOES_PER_BAND} shoes")
        for outfit in catalog.outfits:
            if len(outfit.items) != ITEMS_PER_OUTFIT:
                raise ValueError(f"Outfit '{outfit.title}' needs {ITEMS_PER_OUTFIT} items")


_check_catalog_shape(_CATALOGS)


def get_band_catalogs(band: TemperatureBand) -> BandCatalogs:
    return _CATALOGS[TemperatureBand(band)]


__all__ = [
    "ACCESSORIES_PER_BAND",
    "BandCatalogs",
    "ITEMS_PER_OUTFIT",
    "OUTFITS_PER_BAND",
    "SHOES_PER_BAND",
    "get_band_catalogs",
]
