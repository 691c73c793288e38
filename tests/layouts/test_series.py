import math

import pytest
from pandas import Timestamp

from rangekit.config import MatchConfig
from rangekit.core.exceptions import InvalidLayoutError, NonNumericSeriesError
from rangekit.core.interval import Interval
from rangekit.layouts.layout import TimeLayout
from rangekit.layouts.series import AlignedSeries

STARTS = ["2012-08-20T08:00:00-07:00", "2012-08-21T08:00:00-07:00", "2012-08-22T08:00:00-07:00"]
ENDS = ["2012-08-20T20:00:00-07:00", "2012-08-21T20:00:00-07:00", "2012-08-22T20:00:00-07:00"]


@pytest.fixture
def layout():
    return TimeLayout.from_valid_times("k-p24h-n3-1", STARTS, ENDS)


@pytest.fixture
def highs(layout):
    return AlignedSeries("maximum", layout, ["62", "", "x"], units="Fahrenheit")


class TestAlignedSeries:
    def test_accessors(self, highs, layout):
        assert highs.size == 3
        assert len(highs) == 3
        assert highs.value(0) == "62"
        assert highs.units == "Fahrenheit"
        assert highs.layout is layout

    def test_defaults(self, layout):
        series = AlignedSeries("conditions", layout)

        assert series.values == ()
        assert series.units == "?"
        assert series.config.max_hours == 3.0

    def test_value_closest_to(self, highs):
        assert highs.value_closest_to("2012-08-20T07:00:00-07:00", 2.0) == "62"
        assert highs.value_closest_to("2012-08-22T12:00:00-07:00", 1.0) == "x"
        assert highs.value_closest_to("2012-08-21T21:00:00-07:00", 2.0) == "x"

    def test_value_closest_to_not_found(self, highs):
        assert highs.value_closest_to("2012-09-01T12:00:00-07:00", 1.0) is None

    def test_value_closest_to_uses_config_tolerance(self, layout):
        strict = AlignedSeries("maximum", layout, ["1", "2", "3"], config=MatchConfig(max_hours=1.0))
        loose = AlignedSeries("maximum", layout, ["1", "2", "3"], config=MatchConfig(max_hours=5.0))

        assert strict.value_closest_to("2012-08-22T23:00:00-07:00") is None
        assert loose.value_closest_to("2012-08-22T23:00:00-07:00") == "3"

    def test_float_value(self, highs):
        assert highs.float_value(0) == 62.0
        assert math.isnan(highs.float_value(1))
        assert math.isnan(highs.float_value(2))

    def test_float_value_non_numeric(self, layout):
        conditions = AlignedSeries("conditions", layout, ["fog", "rain", "sun"], numeric=False)

        with pytest.raises(NonNumericSeriesError, match="Series conditions is not numeric"):
            conditions.float_value(0)

    def test_to_series(self, highs):
        series = highs.to_series()

        assert series.name == "maximum"
        assert list(series) == ["62", "", "x"]
        assert series.index[1] == Timestamp("2012-08-21T15:00:00Z")

    def test_misaligned_values_rejected(self):
        layout = TimeLayout("k-2", [Interval(0, 10), Interval(20, 30)])

        with pytest.raises(InvalidLayoutError, match="Series maximum has 1 values but layout k-2 has 2 intervals"):
            AlignedSeries("maximum", layout, ["1"])

    def test_empty_values_find_nothing(self, layout):
        series = AlignedSeries("conditions", layout, [])

        assert series.value_closest_to("2012-08-21T12:00:00-07:00", 1.0) is None
        assert len(series.to_series()) == 0
