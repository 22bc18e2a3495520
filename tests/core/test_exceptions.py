"""Tests for the exception hierarchy."""

from cabfare.core.exceptions import (
    CalculationError,
    FareError,
    PermanentError,
)


class TestExceptionHierarchy:
    def test_permanent_errors_inherit_from_fare_error(self):
        assert issubclass(PermanentError, FareError)
        assert issubclass(CalculationError, PermanentError)


class TestExceptionAttributes:
    def test_stores_message(self):
        err = FareError("test message")
        assert err.message == "test message"
        assert str(err) == "test message"

    def test_stores_details(self):
        err = CalculationError("bad fare", details={"cab_id": "sedan1"})
        assert err.details == {"cab_id": "sedan1"}

    def test_default_details_is_empty_dict(self):
        assert FareError("test").details == {}
