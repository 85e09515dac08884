"""Field view-range limits and mob capacity."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

_INT32_MAX = 2**31 - 1
_INT32_MIN = -(2**31)


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


class _Segment(Protocol):
    x1: int
    y1: int
    x2: int
    y2: int


@dataclass(frozen=True)
class FieldRectangle:
    """A rectangle given by its left, top, right and bottom edges."""

    left: int
    top: int
    right: int
    bottom: int

    def inflate(self, x: int, y: int) -> FieldRectangle:
        """Widen by ``x`` and shift top/bottom by half of ``y``."""
        dx = _trunc_div(x, 2)
        dy = _trunc_div(y, 2)
        return FieldRectangle(
            self.left - dx, self.top + dy, self.right + dx, self.bottom - dy
        )

    def is_empty(self) -> bool:
        """True when every edge is zero."""
        return self.left == 0 and self.top == 0 and self.right == 0 and self.bottom == 0

    def width(self) -> int:
        return abs(self.left - self.right)

    def height(self) -> int:
        return abs(self.top - self.bottom)


@dataclass(frozen=True)
class FieldLimits:
    """The view-range limit and mob capacity of a field."""

    vr_limit: FieldRectangle
    mob_capacity_min: int
    mob_capacity_max: int


def calculate_field_limits(
    footholds: Iterable[_Segment], view_range: FieldRectangle, mob_rate: float
) -> FieldLimits:
    """Derive the view limit and mob capacity from footholds and the map's view range."""
    left, top = _INT32_MAX, _INT32_MAX
    right, bottom = _INT32_MIN, _INT32_MIN

    for fh in footholds:
        left = min(left, fh.x1, fh.x2)
        top = min(top, fh.y1, fh.y2)
        right = max(right, fh.x1, fh.x2)
        bottom = max(bottom, fh.y1, fh.y2)

    has_vr = not view_range.is_empty()
    if has_vr:
        vr_limit = view_range
    else:
        vr_limit = FieldRectangle(left, top - 300, right, bottom + 75)

    left += 30
    top -= 300
    right -= 30
    bottom += 10

    if has_vr:
        if view_range.left + 20 < left:
            left = view_range.left + 20
        if view_range.top + 65 < top:
            top = view_range.top + 20
        if view_range.right - 5 > right:
            right = view_range.right - 5
        if view_range.bottom > bottom:
            bottom = view_range.bottom

    mbr = FieldRectangle(left + 10, top - 375, right - 10, bottom + 60).inflate(10, 10)

    mob_x = mbr.width() if mbr.width() > 800 else 800
    mob_y = mbr.height() - 450 if mbr.height() - 450 > 600 else 600

    capacity = int(float(mob_x * mob_y) * mob_rate * 0.0000078125)
    capacity = min(max(capacity, 1), 40)

    return FieldLimits(vr_limit, capacity, capacity * 2)