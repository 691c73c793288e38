from dataclasses import dataclass
from typing import Optional, Tuple, Union

from pandas import Timestamp

from rangekit.core.boundaries import tick_to_timestamp, to_tick
from rangekit.core.exceptions import ErrorMessages, InvalidIntervalError
from rangekit.core.types import IntervalBoundary, Tick
from rangekit.relations.classifier import classify
from rangekit.relations.codes import RelationCode
from rangekit.search.hours import ms_to_hours


@dataclass(frozen=True, order=True)
class Interval:
    """
    Represents an immutable closed range of time, [start, stop].

    Boundaries are integer ticks (milliseconds since the Unix epoch). An
    interval whose start equals its stop is an instant. Equality, hashing and
    ordering are all structural on (start, stop), so intervals can be shared
    freely, used as dictionary keys, and sorted.

    An Interval knows how to classify itself against another interval, which
    makes it usable as an exemplar in the collection matcher without supplying
    an external comparator.
    """

    start: Tick
    stop: Tick

    def __post_init__(self) -> None:
        if self.start > self.stop:
            raise InvalidIntervalError(
                ErrorMessages.REVERSED_INTERVAL.format(self.start, self.stop)
            )

    @classmethod
    def create(
            cls,
            start: IntervalBoundary,
            stop: Optional[IntervalBoundary] = None,
    ) -> "Interval":
        """
        Creates a new Interval from user boundary values.

        Accepts ticks, floats, timestamp strings, datetimes or pandas
        Timestamps. When stop is omitted the result is an instant.
        """
        start_tick = to_tick(start)
        stop_tick = start_tick if stop is None else to_tick(stop)
        return cls(start_tick, stop_tick)

    @classmethod
    def instant(cls, tick: Tick) -> "Interval":
        return cls(tick, tick)

    @property
    def boundaries(self) -> Tuple[Tick, Tick]:
        return self.start, self.stop

    @property
    def duration(self) -> Tick:
        return self.stop - self.start

    @property
    def is_instant(self) -> bool:
        """Whether this interval has zero duration"""
        return self.start == self.stop

    def to_timestamps(self) -> Tuple[Timestamp, Timestamp]:
        """Returns the boundaries as UTC pandas Timestamps"""
        return tick_to_timestamp(self.start), tick_to_timestamp(self.stop)

    # Point Operations
    # ----------------

    def after(self, point: Tick) -> bool:
        """Whether this interval starts after the point"""
        return self.start > point

    def before(self, point: Tick) -> bool:
        """Whether this interval stops before the point"""
        return self.stop < point

    def contains(self, point: Tick) -> bool:
        """Whether the point lies within this interval, endpoints inclusive"""
        return self.start <= point <= self.stop

    def hours_apart(self, other: Union[Tick, "Interval"]) -> float:
        """
        How many hours separate this interval from a point or another interval.

        Returns 0.0 when the point is contained, else the smaller distance to
        either endpoint. For an interval argument, the smaller of the distances
        to its two endpoints is used.
        """
        if isinstance(other, Interval):
            return min(self.hours_apart(other.start), self.hours_apart(other.stop))
        if self.contains(other):
            return 0.0
        return ms_to_hours(min(abs(other - self.start), abs(other - self.stop)))

    # Interval Relationships
    # ---------------------

    def compare_range(self, other: "Interval") -> RelationCode:
        """Classifies how this interval relates to another"""
        return classify(self, other)

    def __str__(self) -> str:
        return f"{self.start}..{self.stop}"
