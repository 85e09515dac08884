"""Points, footholds and the histogram used to settle positions onto footholds."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

_INT16_MAX = 32767


def _int16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


@dataclass(frozen=True)
class Point:
    """A position in a field together with the foothold it stands on."""

    x: int
    y: int
    foothold: int = 0

    def distance_squared(self, other: Point) -> int:
        """Squared euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


def within_x(check: int, x1: int, x2: int) -> bool:
    """True when ``check`` lies in the closed range ``x1..x2``."""
    return x1 <= check <= x2


def cross_product(x: int, x1: int, x2: int, y: int, y1: int, y2: int) -> float:
    """Side of the line through (x1, y1)-(x2, y2) that (x, y) lies on.

    Zero on the line, positive above it, negative below it.
    """
    return float(_int16(x - x1)) * float(_int16(y2 - y1)) - float(
        _int16(y - y1)
    ) * float(_int16(x2 - x1))


@dataclass(frozen=True)
class Foothold:
    """A line segment that characters, mobs and drops can stand on."""

    id: int
    x1: int
    y1: int
    x2: int
    y2: int
    prev: int
    next: int
    centre_x: int
    centre_y: int

    @classmethod
    def create(
        cls, id: int, x1: int, y1: int, x2: int, y2: int, prev: int, next: int
    ) -> Foothold:
        """Build a foothold and work out its centre point."""
        centre_x = _int16(_trunc_div(_int16(x2 + x1), 2))
        centre_y = _int16(_trunc_div(_int16(y2 + y1), 2))
        return cls(id, x1, y1, x2, y2, prev, next, centre_x, centre_y)

    def is_slope(self) -> bool:
        """True when the ends are at different heights."""
        return self.y1 != self.y2

    def is_wall(self) -> bool:
        """True when the segment is vertical."""
        return self.x1 == self.x2

    def is_above(self, point: Point, ignore_x: bool) -> bool:
        """True when ``point`` is on or above this foothold.

        Unless ``ignore_x`` is set, the point must also lie within the
        foothold's horizontal span.
        """
        if not ignore_x and not within_x(point.x, self.x1, self.x2):
            return False
        return cross_product(point.x, self.x1, self.x2, point.y, self.y1, self.y2) >= 0

    def project(self, point: Point) -> Point:
        """The point on this foothold directly below or above ``point``."""
        if not self.is_slope():
            return Point(point.x, self.y1, self.id)
        ratio = float(_int16(point.x - self.x1)) / float(_int16(self.x1 - self.x2))
        offset = _int16(int(ratio * float(_int16(self.y1 - self.y2))))
        return Point(point.x, _int16(self.y1 + offset), self.id)

    def distance_from_point_squared(self, point: Point) -> tuple[int, int, int]:
        """Squared distance from the centre, plus the clamped x and y to land on.

        The landing spot is 30 units in from whichever end lies on the
        point's side of the centre.
        """
        dx = _int16(point.x - self.centre_x)
        dy = _int16(point.y - self.centre_y)
        if dx > 0:
            clamp_x, clamp_y = _int16(self.x2 - 30), self.y2
        else:
            clamp_x, clamp_y = _int16(self.x1 + 30), self.y1
        return _int16(dx * dx + dy * dy), clamp_x, clamp_y


class FootholdHistogram:
    """Footholds bucketed by x so that only nearby ones are examined.

    Walls are left out of the bins. The histogram's range always includes
    x = 0.
    """

    def __init__(self, footholds: Iterable[Foothold]) -> None:
        self.footholds: tuple[Foothold, ...] = tuple(footholds)

        min_x = 0
        max_x = 0
        floors = [fh for fh in self.footholds if not fh.is_wall()]
        for fh in floors:
            min_x = min(min_x, fh.x1)
            max_x = max(max_x, fh.x2)

        delta = _int16(max_x - min_x)
        bin_size = math.ceil(delta / max(len(self.footholds), 1))
        self.bin_size = bin_size if bin_size > 0 else 1
        self.min_x = min_x

        bin_count = math.ceil(delta / self.bin_size)
        self.bins: list[list[Foothold]] = [[] for _ in range(max(bin_count + 1, 1))]

        for fh in floors:
            first = self.bin_index(fh.x1)
            last = self.bin_index(fh.x2)
            for index in range(max(first, 0), min(last, len(self.bins) - 1) + 1):
                self.bins[index].append(fh)

    def bin_index(self, x: int) -> int:
        """Index of the bin holding ``x``; -1 when left of the range."""
        offset = _int16(x - self.min_x)
        if offset > 0:
            return _int16(math.ceil(offset / self.bin_size))
        if offset == 0:
            return 0
        return -1

    def bin_sizes(self) -> list[int]:
        """Number of footholds in each bin."""
        return [len(bin_) for bin_ in self.bins]

    def final_position(self, point: Point) -> Point:
        """Where ``point`` comes to rest when dropped onto the footholds."""
        index = self.bin_index(point.x)
        if index < 0:
            return self._nearest_point(0, point)
        if index > len(self.bins) - 1:
            return self._nearest_point(len(self.bins) - 1, point)
        return self._retrieve_position(index, point)

    def _retrieve_position(self, index: int, point: Point) -> Point:
        best: Point | None = None
        for fh in self.bins[index]:
            if fh.is_wall() or not fh.is_above(point, False):
                continue
            landed = fh.project(point)
            if landed.y >= point.y and (best is None or landed.y < best.y):
                best = landed
        if best is None:
            return self._nearest_point(index, point)
        return best

    def _nearest_point(self, index: int, point: Point) -> Point:
        nearest = point
        best = _INT16_MAX
        for fh in self.bins[index]:
            if fh.is_wall() or not fh.is_above(point, True):
                continue
            distance, clamp_x, clamp_y = fh.distance_from_point_squared(point)
            if distance < best:
                best = distance
                nearest = replace(nearest, x=clamp_x, y=clamp_y)
        return nearest

    def to_json(self) -> str:
        """Compact JSON summary of the bins for debugging."""
        return json.dumps(
            {"Bins": self.bin_sizes(), "MinX": self.min_x, "BinSize": self.bin_size},
            separators=(",", ":"),
        )


def drop_position(histogram: FootholdHistogram, origin: Point) -> Point:
    """Where a drop released at ``origin`` lands; drops start 80 units higher."""
    return histogram.final_position(replace(origin, y=_int16(origin.y - 80)))