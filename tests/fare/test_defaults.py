import pytest

from cabfare.fare.defaults import (
    DEFAULT_FARES,
    GENERIC_SEDAN,
    default_price_per_km,
    ensure_default_values,
    get_default_fare,
)
from cabfare.vehicles import CabType, TripType


@pytest.mark.unit
class TestEnsureDefaultValues:
    def test_none_returns_generic_sedan(self, caplog):
        cab = ensure_default_values(None)

        assert cab == GENERIC_SEDAN
        assert cab.capacity == 4
        assert cab.base_price == 1000
        assert cab.price_per_km == 12
        assert "generic sedan" in caplog.text

    def test_fills_every_missing_field(self):
        cab = ensure_default_values(CabType(id="x", name="Hatchback"))

        assert cab.base_price == 1000
        assert cab.price_per_km == 14
        assert cab.hr8km80_price == 1200
        assert cab.hr10km100_price == 1500
        assert cab.night_halt_charge == 300
        assert cab.driver_allowance == 300
        assert cab.airport_fee == 0

    def test_zero_treated_as_missing(self):
        cab = ensure_default_values(
            CabType(id="x", name="SUV", base_price=0, price_per_km=0, driver_allowance=0)
        )

        assert cab.base_price == 1000
        assert cab.price_per_km == 16
        assert cab.driver_allowance == 300

    def test_base_price_falls_back_to_price(self):
        cab = ensure_default_values(CabType(id="x", price=1750))

        assert cab.base_price == 1750

    def test_existing_values_kept(self, suv_cab):
        cab = ensure_default_values(suv_cab)

        assert cab.model_dump() == suv_cab.model_dump()

    def test_input_not_mutated(self):
        original = CabType(id="x", name="Sedan")
        ensure_default_values(original)

        assert original.base_price is None
        assert original.price_per_km is None


@pytest.mark.unit
class TestDefaultPricePerKm:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Sedan", 12),
            ("Dzire SEDAN", 12),
            ("suv", 16),
            ("Ertiga SUV", 16),
            ("Tempo Traveller", 14),
            ("", 14),
            (None, 14),
        ],
    )
    def test_name_match(self, name, expected):
        assert default_price_per_km(name) == expected


@pytest.mark.unit
class TestGetDefaultFare:
    def test_known_trip_types(self):
        assert get_default_fare("local") == DEFAULT_FARES["local"]
        assert get_default_fare(TripType.AIRPORT) == DEFAULT_FARES["airport"]
        assert get_default_fare("Outstation") == DEFAULT_FARES["outstation"]

    def test_unknown_trip_type_uses_outstation(self):
        assert get_default_fare("tour") == DEFAULT_FARES["outstation"]

    def test_all_defaults_positive(self):
        assert all(fare > 0 for fare in DEFAULT_FARES.values())
