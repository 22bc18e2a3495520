"""Fare calculation entry point.

``FareCalculator.compute`` runs the pipeline and reports why it fell back to
a default fare, if it did. ``FareCalculator.calculate`` and the module-level
``calculate_fare`` collapse that outcome to the integer the booking screens
display; they never raise.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

import pydantic

from cabfare.core.exceptions import CalculationError
from cabfare.fare.cache import FareCache, generate_fare_cache_key, get_default_cache
from cabfare.fare.defaults import ensure_default_values, get_default_fare
from cabfare.fare.strategies import (
    calculate_airport_fare,
    calculate_local_fare,
    calculate_outstation_fare,
)
from cabfare.fare.validation import (
    validate_cab_type,
    validate_distance,
    validate_minimum_fare,
)
from cabfare.fare_logging import log_fare_context
from cabfare.vehicles import CabType, FareRequest, TripMode, TripType

logger = logging.getLogger(__name__)


class FareFailure(str, Enum):
    """Why a default fare was quoted instead of a computed one."""

    INVALID_PROFILE = "invalid_profile"
    CALCULATION_ERROR = "calculation_error"


@dataclass(frozen=True)
class FareOutcome:
    fare: int
    failure: FareFailure | None = None
    cache_hit: bool = False

    @property
    def ok(self) -> bool:
        return self.failure is None


class FareCalculator:
    def __init__(self, cache: FareCache | None = None) -> None:
        self._cache = cache

    @property
    def cache(self) -> FareCache:
        """The injected cache, or the process-wide one when none was given."""
        return self._cache if self._cache is not None else get_default_cache()

    def compute(self, request: FareRequest) -> FareOutcome:
        cab = request.cab
        if not validate_cab_type(cab):
            fare = get_default_fare(request.trip_type)
            logger.warning(f"Unusable vehicle profile, quoting default fare {fare}")
            return FareOutcome(fare=fare, failure=FareFailure.INVALID_PROFILE)

        with log_fare_context(cab.id or "", request.trip_type):
            try:
                outcome = self._compute(cab, request)
            except Exception:
                fare = get_default_fare(request.trip_type)
                logger.exception(f"Fare calculation failed, quoting default fare {fare}")
                return FareOutcome(fare=fare, failure=FareFailure.CALCULATION_ERROR)
            logger.debug(
                "Fare quoted",
                extra={"fare": outcome.fare, "cache_hit": outcome.cache_hit},
            )
            return outcome

    def _compute(self, cab: CabType, request: FareRequest) -> FareOutcome:
        cab = ensure_default_values(cab)

        cache_key = generate_fare_cache_key(
            cab.id or "",
            request.trip_type,
            request.trip_mode,
            request.hourly_package,
            request.distance,
            request.pickup_date,
            request.return_date,
        )
        cached = self.cache.get(cache_key)
        if cached is not None:
            return FareOutcome(fare=cached, cache_hit=True)

        distance = validate_distance(request.distance, request.trip_type, request.hourly_package)
        fare = self._dispatch(cab, distance, request)

        if not math.isfinite(fare):
            raise CalculationError(
                "Strategy produced a non-finite fare",
                details={"cab_id": cab.id, "trip_type": request.trip_type, "fare": fare},
            )

        fare = validate_minimum_fare(fare, request.trip_type)
        return FareOutcome(fare=self.cache.set(cache_key, fare))

    def _dispatch(self, cab: CabType, distance: float, request: FareRequest) -> float:
        if request.trip_type == TripType.LOCAL.value and request.hourly_package:
            return calculate_local_fare(cab, request.hourly_package)
        if request.trip_type == TripType.AIRPORT.value:
            return calculate_airport_fare(cab, distance)
        return calculate_outstation_fare(
            cab,
            distance,
            request.trip_mode,
            request.pickup_date,
            request.return_date,
        )

    async def calculate(self, request: FareRequest) -> int:
        return self.compute(request).fare


def coerce_cab_type(cab: CabType | Mapping[str, Any] | None) -> CabType | None:
    """Accept a model or a raw API mapping; anything unparseable becomes None."""
    if cab is None or isinstance(cab, CabType):
        return cab
    if isinstance(cab, Mapping):
        try:
            return CabType.model_validate(cab)
        except pydantic.ValidationError as e:
            logger.warning(f"Discarding malformed vehicle profile: {e.error_count()} errors")
            return None
    logger.warning(f"Unsupported vehicle profile type {type(cab).__name__}")
    return None


_default_calculator = FareCalculator()


async def calculate_fare(
    cab: CabType | Mapping[str, Any] | None,
    distance: float | None,
    trip_type: str | TripType,
    trip_mode: str | TripMode = TripMode.ONE_WAY,
    hourly_package: str | None = None,
    pickup_date: datetime | date | None = None,
    return_date: datetime | date | None = None,
    *,
    calculator: FareCalculator | None = None,
) -> int:
    """Quote a rounded fare for one vehicle and trip; never raises.

    ``hourly_package`` must be an exact package id (``8hrs-80km``, ``8hr_80km``,
    ``10hrs-100km``, ``10hr_100km``); other spellings price at the base fare.
    Pass free-form form input through ``normalize_package_id`` first.
    """
    try:
        request = FareRequest(
            cab=coerce_cab_type(cab),
            distance=distance,
            trip_type=trip_type,
            trip_mode=trip_mode,
            hourly_package=hourly_package,
            pickup_date=pickup_date,
            return_date=return_date,
        )
    except pydantic.ValidationError:
        fare = get_default_fare(trip_type)
        logger.exception(f"Invalid fare request, quoting default fare {fare}")
        return fare

    return await (calculator or _default_calculator).calculate(request)
