"""Log filter filling in the fare fields the formatters expect."""

import logging


class DefaultFareFieldsFilter(logging.Filter):
    """Adds ``-`` placeholders for cab, trip type and correlation fields.

    Records emitted outside a ``log_fare_context`` block carry none of
    these, and ``DevFormatter`` references all three.
    """

    FIELDS = ("correlation_id", "cab_id", "trip_type")

    def filter(self, record: logging.LogRecord) -> bool:
        for field in self.FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return True
