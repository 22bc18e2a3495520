"""Vehicle profile and trip request models."""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TripType(str, Enum):
    """Booking category a fare is quoted for."""

    LOCAL = "local"
    AIRPORT = "airport"
    OUTSTATION = "outstation"


class TripMode(str, Enum):
    """Direction of an outstation trip."""

    ONE_WAY = "one-way"
    ROUND_TRIP = "round-trip"


def choice_value(value: Any) -> str:
    """Plain lower-case string for a TripType/TripMode member or raw string."""
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return ""
    return str(value).strip().lower()


def _price_field(*aliases: str) -> Any:
    return Field(default=None, ge=0, validation_alias=AliasChoices(*aliases))


class CabType(BaseModel):
    """Vehicle class as returned by the fleet API.

    Every pricing field is optional because the upstream store routinely
    omits or zeroes them; ``ensure_default_values`` resolves them before
    any calculation reads them.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    id: str | None = Field(
        default=None, validation_alias=AliasChoices("id", "vehicleId", "vehicle_id")
    )
    name: str | None = None
    capacity: int | None = Field(default=None, ge=0)
    base_price: float | None = _price_field("basePrice", "base_price")
    price: float | None = _price_field("price")
    price_per_km: float | None = _price_field("pricePerKm", "price_per_km")
    hr8km80_price: float | None = _price_field(
        "hr8km80Price", "hr8km80_price", "price_8hrs_80km"
    )
    hr10km100_price: float | None = _price_field(
        "hr10km100Price", "hr10km100_price", "price_10hrs_100km"
    )
    night_halt_charge: float | None = _price_field("nightHaltCharge", "night_halt_charge")
    driver_allowance: float | None = _price_field("driverAllowance", "driver_allowance")
    airport_fee: float | None = _price_field("airportFee", "airport_fee")
    is_active: bool = Field(
        default=True, validation_alias=AliasChoices("isActive", "is_active")
    )

    @field_validator(
        "capacity",
        "base_price",
        "price",
        "price_per_km",
        "hr8km80_price",
        "hr10km100_price",
        "night_halt_charge",
        "driver_allowance",
        "airport_fee",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("is_active", mode="before")
    @classmethod
    def default_active(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return True
        return v


class FareRequest(BaseModel):
    """Parameters collected from the booking form for one fare quote.

    ``trip_type`` is kept as a plain string: values outside ``TripType``
    are priced as outstation trips rather than rejected.
    """

    cab: CabType | None = None
    distance: float | None = 0.0
    trip_type: str = TripType.OUTSTATION.value
    trip_mode: str = TripMode.ONE_WAY.value
    hourly_package: str | None = None
    pickup_date: datetime | date | None = None
    return_date: datetime | date | None = None

    @field_validator("trip_type", "trip_mode", mode="before")
    @classmethod
    def normalize_choice(cls, v: Any) -> str:
        return choice_value(v)
