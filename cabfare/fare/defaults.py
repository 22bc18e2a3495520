"""Default values for incomplete vehicle profiles."""

import logging

from cabfare.vehicles import CabType, TripType, choice_value

logger = logging.getLogger(__name__)

DEFAULT_BASE_PRICE = 1000.0
DEFAULT_AIRPORT_BASE_PRICE = 800.0
DEFAULT_HR8KM80_PRICE = 1200.0
DEFAULT_HR10KM100_PRICE = 1500.0
DEFAULT_NIGHT_HALT_CHARGE = 300.0
DEFAULT_DRIVER_ALLOWANCE = 300.0

SEDAN_PRICE_PER_KM = 12.0
SUV_PRICE_PER_KM = 16.0
OTHER_PRICE_PER_KM = 14.0

# Quoted when no usable vehicle profile is available at all.
DEFAULT_FARES: dict[str, int] = {
    TripType.LOCAL.value: 1200,
    TripType.AIRPORT.value: 1500,
    TripType.OUTSTATION.value: 3000,
}

GENERIC_SEDAN = CabType(
    id="sedan",
    name="Sedan",
    capacity=4,
    base_price=DEFAULT_BASE_PRICE,
    price=DEFAULT_BASE_PRICE,
    price_per_km=SEDAN_PRICE_PER_KM,
    hr8km80_price=DEFAULT_HR8KM80_PRICE,
    hr10km100_price=DEFAULT_HR10KM100_PRICE,
    night_halt_charge=DEFAULT_NIGHT_HALT_CHARGE,
    driver_allowance=DEFAULT_DRIVER_ALLOWANCE,
    airport_fee=0.0,
    is_active=True,
)


def default_price_per_km(name: str | None) -> float:
    """Per-km rate inferred from the vehicle name."""
    lowered = (name or "").lower()
    if "sedan" in lowered:
        return SEDAN_PRICE_PER_KM
    if "suv" in lowered:
        return SUV_PRICE_PER_KM
    return OTHER_PRICE_PER_KM


def get_default_fare(trip_type: str | TripType) -> int:
    """Generic sedan fare for a trip type; unknown types price as outstation."""
    return DEFAULT_FARES.get(choice_value(trip_type), DEFAULT_FARES[TripType.OUTSTATION.value])


def ensure_default_values(cab: CabType | None) -> CabType:
    """Return a copy of ``cab`` with every pricing field resolved.

    Zero counts as missing, matching how the fleet API reports unset prices.
    """
    if cab is None:
        logger.warning("No vehicle profile supplied, using generic sedan defaults")
        return GENERIC_SEDAN.model_copy()

    return cab.model_copy(
        update={
            "base_price": cab.base_price or cab.price or DEFAULT_BASE_PRICE,
            "price_per_km": cab.price_per_km or default_price_per_km(cab.name),
            "hr8km80_price": cab.hr8km80_price or DEFAULT_HR8KM80_PRICE,
            "hr10km100_price": cab.hr10km100_price or DEFAULT_HR10KM100_PRICE,
            "night_halt_charge": cab.night_halt_charge or DEFAULT_NIGHT_HALT_CHARGE,
            "driver_allowance": cab.driver_allowance or DEFAULT_DRIVER_ALLOWANCE,
            "airport_fee": cab.airport_fee or 0.0,
        }
    )
