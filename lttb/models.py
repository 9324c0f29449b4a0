"""Value types shared by the downsampling functions."""

from typing import NamedTuple, Sequence, Tuple, Union


class DataPoint(NamedTuple):
    """Single point of a series: ``x`` is usually time, ``y`` the value."""

    x: float
    y: float


# Plain (x, y) tuples are accepted wherever a DataPoint is
PointLike = Union[DataPoint, Tuple[float, float]]
Points = Sequence[PointLike]
