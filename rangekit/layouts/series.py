from typing import Optional, Sequence, Tuple, Union

from numpy import nan
from pandas import DatetimeIndex, Series, to_numeric

from rangekit.config import MatchConfig
from rangekit.core.exceptions import ErrorMessages, InvalidLayoutError, NonNumericSeriesError
from rangekit.core.types import IntervalBoundary, Tick
from rangekit.layouts.layout import TimeLayout


class AlignedSeries:
    """
    A series of values paired one-to-one with the intervals of a TimeLayout.

    Values must either be empty or line up with the layout one-to-one. They
    are kept as the text they were read as; numeric series can be read back as
    floats, with unparseable text coming back as NaN.
    """

    def __init__(
            self,
            name: str,
            layout: TimeLayout,
            values: Optional[Sequence[str]] = None,
            units: Optional[str] = None,
            numeric: bool = True,
            config: Optional[MatchConfig] = None,
    ):
        self.name = name
        self.layout = layout
        self.values: Tuple[str, ...] = tuple(values) if values is not None else ()
        self.units = units if units is not None else "?"
        self.numeric = numeric
        self.config = config or MatchConfig()

        if self.values and len(self.values) != len(layout):
            raise InvalidLayoutError(
                ErrorMessages.SERIES_LENGTH.format(name, len(self.values), layout.layout_key, len(layout))
            )

    @property
    def size(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def value(self, idx: int) -> str:
        return self.values[idx]

    def value_closest_to(
            self,
            point: Union[Tick, IntervalBoundary],
            max_hours: Optional[float] = None,
    ) -> Optional[str]:
        """
        Returns the value whose interval is closest to point, within max_hours.

        Falls back to the configured tolerance when max_hours is not given.
        Returns None when no interval is close enough.
        """
        if max_hours is None:
            max_hours = self.config.max_hours
        idx = self.layout.find_closest_index(point, max_hours)
        if idx is None or not self.values:
            return None
        return self.values[idx]

    def float_value(self, idx: int) -> float:
        """Returns the value at idx as a float, NaN when it is not a number"""
        if not self.numeric:
            raise NonNumericSeriesError(ErrorMessages.NON_NUMERIC_SERIES.format(self.name))
        text = self.values[idx]
        if text is None or text == "":
            return nan
        return float(to_numeric(text, errors="coerce"))

    def to_series(self) -> Series:
        """Returns the values as a pandas Series indexed by interval start"""
        starts = [interval.to_timestamps()[0] for interval in self.layout.intervals] if self.values else []
        return Series(list(self.values), index=DatetimeIndex(starts, tz="UTC"), name=self.name, dtype=object)

    def __repr__(self) -> str:
        return f"AlignedSeries({self.name!r}, layout={self.layout.layout_key!r}, units={self.units!r}, size={self.size})"
