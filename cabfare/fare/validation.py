"""Input guards applied before and after a fare strategy runs."""

import logging
import math
from typing import TypeGuard

from cabfare.vehicles import CabType, TripType, choice_value

logger = logging.getLogger(__name__)

DEFAULT_DISTANCE_KM = 100.0
DEFAULT_8HR_PACKAGE_DISTANCE_KM = 80.0

MINIMUM_FARES: dict[str, float] = {
    TripType.LOCAL.value: 800.0,
    TripType.AIRPORT.value: 1000.0,
    TripType.OUTSTATION.value: 1200.0,
}


def validate_cab_type(cab: CabType | None) -> TypeGuard[CabType]:
    """A profile is usable only when it exists and carries an id."""
    if cab is None:
        logger.warning("Missing vehicle profile")
        return False
    if not cab.id:
        logger.warning(f"Vehicle profile {cab.name!r} has no id")
        return False
    return True


def validate_distance(
    distance: float | None,
    trip_type: str | TripType,
    hourly_package: str | None = None,
) -> float:
    """Replace a missing, NaN or non-positive distance with a trip default."""
    if distance is not None and not math.isnan(distance) and distance > 0:
        return distance

    if choice_value(trip_type) == TripType.LOCAL.value:
        if hourly_package and "80" in hourly_package:
            replacement = DEFAULT_8HR_PACKAGE_DISTANCE_KM
        else:
            replacement = DEFAULT_DISTANCE_KM
    else:
        replacement = DEFAULT_DISTANCE_KM

    logger.debug(f"Invalid distance {distance!r}, using {replacement} km")
    return replacement


def get_minimum_fare(trip_type: str | TripType) -> float:
    return MINIMUM_FARES.get(choice_value(trip_type), MINIMUM_FARES[TripType.OUTSTATION.value])


def validate_minimum_fare(fare: float, trip_type: str | TripType) -> float:
    """Raise ``fare`` to the trip type's floor when it falls below it."""
    minimum = get_minimum_fare(trip_type)
    if fare < minimum:
        logger.info(f"Fare {fare} below {choice_value(trip_type)} minimum, using {minimum}")
        return minimum
    return fare
