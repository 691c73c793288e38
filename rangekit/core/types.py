from datetime import datetime
from typing import TypeVar, Union

from numpy import floating, integer
from pandas import Timestamp

IntervalBoundary = Union[str, int, float, integer, floating, Timestamp, datetime]
Tick = int
T = TypeVar("T")
