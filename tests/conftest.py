from datetime import timedelta

import pytest

from cabfare.fare.cache import FareCache, reset_default_cache
from cabfare.fare.calculator import FareCalculator
from cabfare.fare_logging import LogContext
from cabfare.vehicles import CabType


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Keep the process-wide fare cache and log context out of other tests."""
    reset_default_cache()
    LogContext.clear()
    yield
    reset_default_cache()
    LogContext.clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fare_cache(clock: FakeClock) -> FareCache:
    """Isolated cache with the standard five minute TTL and a fake clock."""
    return FareCache(ttl=timedelta(minutes=5), clock=clock)


@pytest.fixture
def calculator(fare_cache: FareCache) -> FareCalculator:
    return FareCalculator(cache=fare_cache)


@pytest.fixture
def sedan_cab() -> CabType:
    return CabType(
        id="sedan1",
        name="Sedan",
        base_price=1000,
        price_per_km=12,
        night_halt_charge=300,
        driver_allowance=300,
    )


@pytest.fixture
def suv_cab() -> CabType:
    return CabType(
        id="ertiga",
        name="Ertiga SUV",
        capacity=6,
        base_price=1500,
        price_per_km=16,
        hr8km80_price=2200,
        hr10km100_price=2800,
        night_halt_charge=400,
        driver_allowance=350,
        airport_fee=150,
    )
