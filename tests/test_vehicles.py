from datetime import date

import pytest
from pydantic import ValidationError

from cabfare.vehicles import CabType, FareRequest, TripMode, TripType, choice_value


@pytest.mark.unit
class TestCabType:
    def test_camel_case_fields(self):
        cab = CabType.model_validate(
            {
                "id": "sedan",
                "name": "Sedan",
                "capacity": 4,
                "basePrice": 1000,
                "pricePerKm": 12,
                "hr8km80Price": 1200,
                "hr10km100Price": 1500,
                "nightHaltCharge": 300,
                "driverAllowance": 250,
                "airportFee": 100,
                "isActive": False,
            }
        )

        assert cab.base_price == 1000
        assert cab.price_per_km == 12
        assert cab.hr8km80_price == 1200
        assert cab.hr10km100_price == 1500
        assert cab.night_halt_charge == 300
        assert cab.driver_allowance == 250
        assert cab.airport_fee == 100
        assert cab.is_active is False

    def test_php_snake_case_fields(self):
        cab = CabType.model_validate(
            {
                "vehicle_id": "ertiga",
                "base_price": "2500",
                "price_per_km": "16.5",
                "price_8hrs_80km": "2200",
                "price_10hrs_100km": "2800",
            }
        )

        assert cab.id == "ertiga"
        assert cab.base_price == 2500
        assert cab.price_per_km == 16.5
        assert cab.hr8km80_price == 2200
        assert cab.hr10km100_price == 2800

    def test_numeric_id_coerced(self):
        assert CabType.model_validate({"id": 7}).id == "7"

    def test_missing_fields_are_none(self):
        cab = CabType(id="x")

        assert cab.base_price is None
        assert cab.airport_fee is None
        assert cab.is_active is True

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            CabType(id="x", price_per_km=-1)

    def test_null_name_accepted(self):
        cab = CabType.model_validate({"id": "suv1", "name": None, "basePrice": 2000})

        assert cab.name is None
        assert cab.base_price == 2000

    def test_blank_and_null_optional_fields_fall_back(self):
        cab = CabType.model_validate(
            {
                "id": "sedan",
                "capacity": "",
                "basePrice": "",
                "pricePerKm": None,
                "nightHaltCharge": "  ",
                "isActive": None,
            }
        )

        assert cab.capacity is None
        assert cab.base_price is None
        assert cab.price_per_km is None
        assert cab.night_halt_charge is None
        assert cab.is_active is True

    def test_unknown_fields_ignored(self):
        cab = CabType.model_validate({"id": "x", "amenities": ["AC"], "image": "/cars/x.png"})

        assert not hasattr(cab, "amenities")


@pytest.mark.unit
class TestFareRequest:
    def test_enum_values_normalized(self):
        request = FareRequest(trip_type=TripType.AIRPORT, trip_mode=TripMode.ROUND_TRIP)

        assert request.trip_type == "airport"
        assert request.trip_mode == "round-trip"

    def test_strings_lowercased(self):
        request = FareRequest(trip_type=" Local ", trip_mode="One-Way")

        assert request.trip_type == "local"
        assert request.trip_mode == "one-way"

    def test_dates_accepted(self):
        request = FareRequest(pickup_date=date(2024, 1, 1), return_date="2024-01-03")

        assert request.pickup_date == date(2024, 1, 1)
        assert request.return_date is not None

    def test_nan_distance_allowed(self):
        request = FareRequest(distance=float("nan"))

        assert request.distance != request.distance


def test_choice_value():
    assert choice_value(TripType.LOCAL) == "local"
    assert choice_value("AIRPORT") == "airport"
    assert choice_value(None) == ""
