"""Per-trip-type fare strategies.

Each strategy is a pure function of the vehicle profile and trip
parameters. They apply their own fallbacks for unset prices, so they can be
called with a raw profile as well as with one passed through
``ensure_default_values``.
"""

import logging
from datetime import date, datetime

from cabfare.fare.dates import nights_between
from cabfare.fare.defaults import (
    DEFAULT_AIRPORT_BASE_PRICE,
    DEFAULT_BASE_PRICE,
    DEFAULT_DRIVER_ALLOWANCE,
    DEFAULT_HR8KM80_PRICE,
    DEFAULT_HR10KM100_PRICE,
    DEFAULT_NIGHT_HALT_CHARGE,
    default_price_per_km,
)
from cabfare.fare.packages import HR8KM80_PACKAGE_IDS, HR10KM100_PACKAGE_IDS
from cabfare.vehicles import CabType, TripMode, choice_value

logger = logging.getLogger(__name__)


def _distance_charge(cab: CabType, distance: float) -> float:
    if not distance > 0:
        return 0.0
    price_per_km = cab.price_per_km or default_price_per_km(cab.name)
    return price_per_km * distance


def calculate_local_fare(cab: CabType, hourly_package: str | None) -> float:
    """Flat price of an hourly package; distance plays no part."""
    if hourly_package in HR8KM80_PACKAGE_IDS:
        fare = cab.hr8km80_price or DEFAULT_HR8KM80_PRICE
    elif hourly_package in HR10KM100_PACKAGE_IDS:
        fare = cab.hr10km100_price or DEFAULT_HR10KM100_PRICE
    else:
        fare = cab.base_price or DEFAULT_BASE_PRICE

    logger.debug(f"Local fare for {cab.id} package={hourly_package}: {fare}")
    return fare


def calculate_airport_fare(cab: CabType, distance: float) -> float:
    base_price = cab.base_price or cab.price or DEFAULT_AIRPORT_BASE_PRICE
    distance_charge = _distance_charge(cab, distance)
    airport_fee = cab.airport_fee or 0.0

    fare = base_price + distance_charge + airport_fee
    logger.debug(
        f"Airport fare for {cab.id}: base={base_price} distance={distance_charge} "
        f"fee={airport_fee} total={fare}"
    )
    return fare


def calculate_outstation_fare(
    cab: CabType,
    distance: float,
    trip_mode: str | TripMode,
    pickup_date: datetime | date | None = None,
    return_date: datetime | date | None = None,
) -> float:
    """Base plus distance, with night halts and driver days on round trips.

    A round trip of N nights pays N night halts and N + 1 driver days: the
    first day's allowance is always charged. Round trips without both dates,
    or with no elapsed night, pay neither.
    """
    base_price = cab.base_price or cab.price or DEFAULT_BASE_PRICE
    fare = base_price + _distance_charge(cab, distance)

    if (
        choice_value(trip_mode) == TripMode.ROUND_TRIP.value
        and pickup_date is not None
        and return_date is not None
    ):
        nights = nights_between(pickup_date, return_date)
        if nights > 0:
            night_halt_charge = cab.night_halt_charge or DEFAULT_NIGHT_HALT_CHARGE
            driver_allowance = cab.driver_allowance or DEFAULT_DRIVER_ALLOWANCE
            fare += nights * night_halt_charge
            fare += (nights + 1) * driver_allowance
            logger.debug(
                f"Round trip for {cab.id}: {nights} nights, "
                f"halt={night_halt_charge} allowance={driver_allowance}"
            )

    logger.debug(f"Outstation fare for {cab.id} ({choice_value(trip_mode)}): {fare}")
    return fare
