import logging
from typing import Iterable, Optional, Sequence, Tuple, Union

from pandas import DataFrame

from rangekit.core.exceptions import ErrorMessages, InvalidLayoutError
from rangekit.core.interval import Interval
from rangekit.core.types import IntervalBoundary, Tick
from rangekit.core.validation import SequenceValidator
from rangekit.search.nearest import find_closest

logger = logging.getLogger(__name__)


class TimeLayout:
    """
    A named, ordered sequence of time intervals that value series are aligned to.

    A layout either holds real intervals (start and end valid times were both
    given) or a run of instants (only start valid times). Two layouts are the
    same layout when their keys match, e.g. ``"k-p24h-n7-1"``.
    """

    def __init__(self, layout_key: str, intervals: Iterable[Interval] = (), is_intervals: bool = False):
        if not isinstance(layout_key, str) or not layout_key:
            raise InvalidLayoutError(ErrorMessages.EMPTY_LAYOUT_KEY)

        self.layout_key = layout_key
        self.intervals: Tuple[Interval, ...] = tuple(intervals)
        self.is_intervals = is_intervals

        validation = SequenceValidator.validate_sorted(self.intervals)
        if not validation.is_valid:
            logger.warning(
                "Time layout %s is not sorted, nearest-match results are unreliable: %s",
                layout_key,
                validation.message,
            )

    @classmethod
    def from_valid_times(
            cls,
            layout_key: str,
            start_times: Sequence[IntervalBoundary],
            end_times: Optional[Sequence[IntervalBoundary]] = None,
    ) -> "TimeLayout":
        """
        Builds a layout from parallel lists of start and (optional) end valid times.

        Each start is paired with the end at the same position; starts with no
        matching end become instants. Values may be any boundary accepted by
        Interval.create, including RFC 3339 strings such as
        ``"2012-08-20T08:00:00-07:00"``.
        """
        end_times = list(end_times or [])
        if len(end_times) > len(start_times):
            raise InvalidLayoutError(
                ErrorMessages.LAYOUT_TIMES_LENGTH.format(layout_key, len(end_times), len(start_times))
            )

        intervals = [
            Interval.create(start, end_times[n] if n < len(end_times) else None)
            for n, start in enumerate(start_times)
        ]
        return cls(layout_key, intervals, is_intervals=len(end_times) > 0)

    def find_closest_index(self, point: Union[Tick, IntervalBoundary], max_hours: float) -> Optional[int]:
        """Index of the interval closest to point within max_hours, or None"""
        return find_closest(self.intervals, point, max_hours)

    def __len__(self) -> int:
        return len(self.intervals)

    def __getitem__(self, idx: int) -> Interval:
        return self.intervals[idx]

    def __iter__(self):
        return iter(self.intervals)

    def to_frame(self) -> DataFrame:
        """Returns the intervals as a DataFrame of UTC start/stop Timestamps"""
        return DataFrame(
            [interval.to_timestamps() for interval in self.intervals],
            columns=["start", "stop"],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeLayout):
            return NotImplemented
        return self.layout_key == other.layout_key

    def __hash__(self) -> int:
        return hash(self.layout_key)

    def __repr__(self) -> str:
        return f"TimeLayout({self.layout_key!r}, {len(self.intervals)} intervals)"
