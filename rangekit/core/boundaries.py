from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, Type

from numpy import floating, integer, isfinite
from pandas import NaT, Timestamp

from rangekit.core.exceptions import ErrorMessages, InvalidIntervalError
from rangekit.core.types import IntervalBoundary, Tick

NS_PER_MS = 1_000_000


class ToTickProtocol(Protocol):
    def __call__(self, value: Any) -> Tick: ...


def _timestamp_to_tick(timestamp: Timestamp) -> Tick:
    # naive timestamps are taken to be UTC
    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize("UTC")
    return int(timestamp.value // NS_PER_MS)


def tick_to_timestamp(tick: Tick) -> Timestamp:
    """Converts integer ticks (ms since the epoch) back to a UTC pandas Timestamp"""
    return Timestamp(int(tick), unit="ms", tz="UTC")


@dataclass(frozen=True)
class BoundaryConverter:
    """
    Handles conversion between user-provided boundary types and internal ticks.

    Ticks are integer milliseconds since the Unix epoch. Strings (including
    RFC 3339 values with a UTC offset), datetimes and pandas Timestamps are
    parsed through pandas; integers are taken to already be ticks.
    """

    to_tick: ToTickProtocol
    original_type: Type[Any]

    @classmethod
    def for_type(cls, sample_value: IntervalBoundary) -> "BoundaryConverter":
        """Factory method to create appropriate converter based on input type"""

        if sample_value is None or sample_value is NaT or isinstance(sample_value, bool):
            raise InvalidIntervalError(
                ErrorMessages.UNSUPPORTED_BOUNDARY.format(type(sample_value))
            )

        if isinstance(sample_value, str):

            def str_to_tick(value: str) -> Tick:
                try:
                    timestamp = Timestamp(value)
                except ValueError as e:
                    raise InvalidIntervalError(
                        ErrorMessages.UNPARSEABLE_BOUNDARY.format(value)
                    ) from e
                if timestamp is NaT:
                    raise InvalidIntervalError(
                        ErrorMessages.UNPARSEABLE_BOUNDARY.format(value)
                    )
                return _timestamp_to_tick(timestamp)

            return cls(to_tick=str_to_tick, original_type=str)

        elif isinstance(sample_value, (int, integer)):

            def int_to_tick(value: int) -> Tick:
                return int(value)

            return cls(to_tick=int_to_tick, original_type=int)

        elif isinstance(sample_value, (float, floating)):

            def float_to_tick(value: float) -> Tick:
                if not isfinite(value):
                    raise InvalidIntervalError(
                        ErrorMessages.UNPARSEABLE_BOUNDARY.format(value)
                    )
                return int(round(float(value)))

            return cls(to_tick=float_to_tick, original_type=float)

        # Handle Timestamp first because pandas.Timestamp is a subclass of datetime
        elif isinstance(sample_value, Timestamp):

            def timestamp_to_tick(value: Timestamp) -> Tick:
                return _timestamp_to_tick(value)

            return cls(to_tick=timestamp_to_tick, original_type=Timestamp)

        elif isinstance(sample_value, datetime):

            def datetime_to_tick(value: datetime) -> Tick:
                return _timestamp_to_tick(Timestamp(value))

            return cls(to_tick=datetime_to_tick, original_type=datetime)

        else:
            raise InvalidIntervalError(
                ErrorMessages.UNSUPPORTED_BOUNDARY.format(type(sample_value))
            )


def to_tick(value: IntervalBoundary) -> Tick:
    """Converts a single user boundary value to ticks"""
    return BoundaryConverter.for_type(value).to_tick(value)
