from typing import Iterator, List, NamedTuple, Sequence

import numpy as np
import numpy.typing as npt


class Point(NamedTuple):
    """A point in path coordinate space (y grows downward)."""

    x: float
    y: float


class Subpath:
    """One contour of a glyph outline.

    Open subpaths are strokes, closed ones are filled regions such as a dot.
    Points are kept as an ``(N, 2)`` float array in path space; helpers that
    move points return a new subpath rather than mutating this one.
    """

    points: npt.NDArray[np.float64]
    closed: bool

    def __init__(self, points, closed: bool = False):
        self.points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        self.closed = closed

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        for x, y in self.points:
            yield Point(float(x), float(y))

    @property
    def min_x(self) -> float:
        return float(self.points[:, 0].min())

    @property
    def max_x(self) -> float:
        return float(self.points[:, 0].max())

    @property
    def min_y(self) -> float:
        return float(self.points[:, 1].min())

    @property
    def max_y(self) -> float:
        return float(self.points[:, 1].max())

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def with_points(self, points) -> "Subpath":
        return Subpath(points, self.closed)

    def translated(self, dx: float = 0.0, dy: float = 0.0) -> "Subpath":
        return self.with_points(self.points + np.array([dx, dy]))

    def __eq__(self, other):
        if not isinstance(other, Subpath):
            return NotImplemented
        return (
            self.closed == other.closed
            and self.points.shape == other.points.shape
            and np.allclose(self.points, other.points, atol=1e-6)
        )

    def __repr__(self):
        return f"Subpath({self.points.tolist()!r}, closed={self.closed})"


def all_points(subpaths: Sequence[Subpath]) -> npt.NDArray[np.float64]:
    """Stack every point of a glyph into one ``(N, 2)`` array."""
    arrays: List[npt.NDArray[np.float64]] = [s.points for s in subpaths if len(s)]
    if not arrays:
        return np.zeros((0, 2), dtype=np.float64)
    return np.concatenate(arrays)
