"""Taxi and tour fare quoting."""

from cabfare.fare import calculate_fare, clear_fare_cache
from cabfare.vehicles import CabType, FareRequest, TripMode, TripType

__all__ = [
    "CabType",
    "FareRequest",
    "TripMode",
    "TripType",
    "calculate_fare",
    "clear_fare_cache",
]
