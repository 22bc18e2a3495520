"""Time-expiring memo table for computed fares."""

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from cabfare.fare.dates import epoch_millis
from cabfare.settings import FareSettings, get_settings
from cabfare.vehicles import TripMode, TripType, choice_value

logger = logging.getLogger(__name__)

DEFAULT_FARE_CACHE_TTL = timedelta(minutes=5)


def round_fare(fare: float) -> int:
    """Round half up, so 1200.5 quotes as 1201 rather than 1200."""
    return math.floor(fare + 0.5)


def _format_distance(distance: float | None) -> str:
    if distance is None:
        return "0"
    if isinstance(distance, float) and distance.is_integer():
        return str(int(distance))
    return str(distance)


def generate_fare_cache_key(
    cab_id: str,
    trip_type: str | TripType,
    trip_mode: str | TripMode,
    hourly_package: str | None,
    distance: float | None,
    pickup_date: datetime | date | None = None,
    return_date: datetime | date | None = None,
) -> str:
    """Build the exact-match key for one fare quote.

    Fields are joined with ``|``, which vehicle ids, trip types and package
    ids never contain; ``innova_crysta`` and ``8hr_80km`` stay unambiguous.
    Any difference in distance or dates is a different key; there is no
    bucketing of nearby values.
    """
    return "|".join(
        (
            str(cab_id),
            choice_value(trip_type),
            choice_value(trip_mode),
            hourly_package or "none",
            _format_distance(distance),
            str(epoch_millis(pickup_date)),
            str(epoch_millis(return_date)),
        )
    )


@dataclass
class CachedFare:
    fare: int
    timestamp: float


class FareCache:
    """In-memory fare cache with lazy expiry.

    Stale entries are never swept; they are reported as misses on read and
    replaced on the next write for the same key. ``clock`` returns seconds
    and defaults to wall-clock time.
    """

    def __init__(
        self,
        ttl: timedelta = DEFAULT_FARE_CACHE_TTL,
        clock: Callable[[], float] = time.time,
    ):
        self._ttl_seconds = ttl.total_seconds()
        self._clock = clock
        self._entries: dict[str, CachedFare] = {}
        self.requests = 0
        self.hits = 0
        self.misses = 0

    @classmethod
    def from_settings(
        cls, settings: FareSettings, clock: Callable[[], float] = time.time
    ) -> "FareCache":
        return cls(ttl=timedelta(seconds=settings.cache_ttl_seconds), clock=clock)

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self._ttl_seconds)

    def get(self, key: str) -> int | None:
        """Return the cached fare, or None when absent or expired."""
        self.requests += 1
        entry = self._entries.get(key)

        if entry is not None and self._clock() - entry.timestamp < self._ttl_seconds:
            self.hits += 1
            logger.debug(f"Fare cache hit: {key}")
            return entry.fare

        self.misses += 1
        return None

    def set(self, key: str, fare: float) -> int:
        rounded = round_fare(fare)
        self._entries[key] = CachedFare(fare=rounded, timestamp=self._clock())
        return rounded

    def clear(self) -> None:
        self._entries.clear()
        self.requests = 0
        self.hits = 0
        self.misses = 0
        logger.info("Fare cache cleared")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get_cache_stats(self) -> dict[str, float | int]:
        hit_rate = self.hits / self.requests if self.requests > 0 else 0.0
        return {
            "requests": self.requests,
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": hit_rate,
            "cache_size": len(self._entries),
        }


_default_cache: FareCache | None = None


def get_default_cache() -> FareCache:
    """The process-wide cache behind the module-level functions.

    Built on first use with the TTL from ``FARE_CACHE_TTL_SECONDS``.
    """
    global _default_cache
    if _default_cache is None:
        _default_cache = FareCache.from_settings(get_settings().fare)
    return _default_cache


def reset_default_cache() -> None:
    """Discard the process-wide cache so the next use rebuilds it from settings."""
    global _default_cache
    _default_cache = None


def get_cached_fare(key: str) -> int | None:
    return get_default_cache().get(key)


def set_cached_fare(key: str, fare: float) -> int:
    return get_default_cache().set(key, fare)


def clear_fare_cache() -> None:
    """Drop every cached fare, e.g. after vehicle pricing was edited."""
    get_default_cache().clear()
