"""Vehicle pricing tiers and sanity bands for quoted fares.

The tier table classifies a vehicle into a pricing category. The category
decides the band a quoted fare must fall in before it is shown on the
booking confirmation; quotes outside the band point at bad pricing data.
"""

import logging
import math
import re
from dataclasses import dataclass

from cabfare.vehicles import TripType, choice_value

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_INVALID_ID_CHARS = re.compile(r"[^a-z0-9_]")


@dataclass(frozen=True)
class VehiclePricingTier:
    base_price: float
    price_per_km: float
    driver_allowance: float
    category: str
    display_name: str


VEHICLE_TIERS: dict[str, VehiclePricingTier] = {
    "innova_hycross": VehiclePricingTier(5730, 22, 300, "premium_mpv", "Innova Hycross"),
    "innova_crysta": VehiclePricingTier(5500, 20, 300, "mpv", "Innova Crysta"),
    "innova": VehiclePricingTier(5500, 20, 300, "mpv", "Innova"),
    "ertiga": VehiclePricingTier(5400, 18, 250, "suv", "Ertiga"),
    "xuv": VehiclePricingTier(5400, 18, 250, "suv", "XUV"),
    "sedan": VehiclePricingTier(3900, 13, 250, "sedan", "Sedan"),
    "dzire": VehiclePricingTier(3900, 13, 250, "sedan", "Dzire"),
    "tempo": VehiclePricingTier(9000, 22, 300, "tempo", "Tempo Traveller"),
    "traveller": VehiclePricingTier(9000, 22, 300, "tempo", "Tempo Traveller"),
    "luxury": VehiclePricingTier(5000, 16, 300, "luxury", "Luxury Sedan"),
}

DEFAULT_TIER = VehiclePricingTier(3900, 13, 250, "sedan", "Standard Vehicle")

# (local minimum, other minimum, maximum) per category
_FARE_BANDS: dict[str, tuple[float, float, float]] = {
    "sedan": (1000, 2000, 8000),
    "suv": (1500, 2500, 12000),
    "mpv": (2000, 3000, 15000),
    "premium_mpv": (2000, 3000, 15000),
    "luxury": (3000, 4000, 20000),
    "tempo": (4000, 5000, 25000),
}
_DEFAULT_BAND = (500.0, 500.0, 20000.0)


def normalize_vehicle_id(vehicle_id: str | None) -> str:
    """Canonical vehicle id for the aliases the admin screens produce."""
    if not vehicle_id:
        return ""

    normalized = vehicle_id.lower().strip()

    if normalized == "mpv" or any(
        alias in normalized for alias in ("hycross", "hi-cross", "hi_cross")
    ):
        return "innova_hycross"
    if "crysta" in normalized or "innova" in normalized:
        return "innova_crysta"
    if "tempo" in normalized:
        return "tempo_traveller"
    if "dzire" in normalized or "cng" in normalized:
        return "dzire_cng"

    return _INVALID_ID_CHARS.sub("", _WHITESPACE.sub("_", normalized))


def get_vehicle_pricing_tier(vehicle_id: str) -> VehiclePricingTier:
    normalized = normalize_vehicle_id(vehicle_id)

    if normalized in VEHICLE_TIERS:
        return VEHICLE_TIERS[normalized]

    for key, tier in VEHICLE_TIERS.items():
        if key in normalized:
            return tier

    logger.debug(f"No pricing tier for {normalized!r}, using standard sedan tier")
    return DEFAULT_TIER


def get_valid_fare_range(vehicle_id: str, trip_type: str | TripType) -> tuple[float, float]:
    """Minimum and maximum plausible fare for the vehicle's category."""
    category = get_vehicle_pricing_tier(vehicle_id).category
    local_minimum, other_minimum, maximum = _FARE_BANDS.get(category, _DEFAULT_BAND)
    if choice_value(trip_type) == TripType.LOCAL.value:
        return local_minimum, maximum
    return other_minimum, maximum


def validate_fare_amount(fare: float, vehicle_id: str, trip_type: str | TripType) -> bool:
    if math.isnan(fare) or fare <= 0:
        return False

    minimum, maximum = get_valid_fare_range(vehicle_id, trip_type)
    if fare < minimum:
        logger.warning(
            f"Fare value too low: {fare} for {vehicle_id} ({choice_value(trip_type)}). "
            f"Minimum expected: {minimum}"
        )
        return False
    if fare > maximum:
        logger.warning(
            f"Fare value too high: {fare} for {vehicle_id} ({choice_value(trip_type)}). "
            f"Maximum expected: {maximum}"
        )
        return False
    return True


def generate_fare_checksum(fare: int, cab_id: str, trip_type: str | TripType) -> str:
    """Integrity tag carried with a quote between booking steps."""
    return f"{fare}_{normalize_vehicle_id(cab_id)}_{choice_value(trip_type)}_{int(fare % 100)}"


def validate_fare_checksum(
    fare: int, cab_id: str, trip_type: str | TripType, checksum: str
) -> bool:
    return checksum == generate_fare_checksum(fare, cab_id, trip_type)
