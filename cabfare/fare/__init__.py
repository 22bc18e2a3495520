"""Fare calculation pipeline: defaults, validation, strategies, cache."""

from cabfare.fare.cache import (
    CachedFare,
    FareCache,
    clear_fare_cache,
    generate_fare_cache_key,
    get_cached_fare,
    get_default_cache,
    reset_default_cache,
    set_cached_fare,
)
from cabfare.fare.calculator import (
    FareCalculator,
    FareFailure,
    FareOutcome,
    calculate_fare,
    coerce_cab_type,
)
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

__all__ = [
    "CachedFare",
    "FareCache",
    "FareCalculator",
    "FareFailure",
    "FareOutcome",
    "calculate_airport_fare",
    "calculate_fare",
    "calculate_local_fare",
    "calculate_outstation_fare",
    "clear_fare_cache",
    "coerce_cab_type",
    "ensure_default_values",
    "generate_fare_cache_key",
    "get_cached_fare",
    "get_default_cache",
    "reset_default_cache",
    "get_default_fare",
    "set_cached_fare",
    "validate_cab_type",
    "validate_distance",
    "validate_minimum_fare",
]
