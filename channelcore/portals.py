"""Portals of a field instance and lookups over them."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from .geometry import Point

SPAWN_PORTAL_NAME = "sp"


class PortalNotFoundError(LookupError):
    """No portal matched the request."""


@dataclass(frozen=True)
class Portal:
    """A portal placed in a field."""

    id: int
    pos: Point
    name: str
    dest_field_id: int
    dest_name: str
    temporary: bool = False


def _spawn_portals(portals: Sequence[Portal]) -> list[Portal]:
    return [p for p in portals if p.name == SPAWN_PORTAL_NAME]


def random_spawn_portal(
    portals: Sequence[Portal], rng: random.Random | None = None
) -> Portal:
    """A randomly chosen spawn portal."""
    spawns = _spawn_portals(portals)
    if not spawns:
        raise PortalNotFoundError("No spawn portals in map")
    return (rng or random).choice(spawns)


def nearest_spawn_portal_id(portals: Sequence[Portal], point: Point) -> int:
    """Id of the spawn portal closest to ``point``; the first wins ties."""
    spawns = _spawn_portals(portals)
    if not spawns:
        raise PortalNotFoundError("Portal not found")
    best = spawns[0]
    for candidate in spawns[1:]:
        if candidate.pos.distance_squared(point) < best.pos.distance_squared(point):
            best = candidate
    return best.id


def portal_by_name(portals: Sequence[Portal], name: str) -> Portal:
    """The first portal with the given name."""
    for p in portals:
        if p.name == name:
            return p
    raise PortalNotFoundError("No portal with that name")


def portal_by_id(portals: Sequence[Portal], portal_id: int) -> Portal:
    """The first portal with the given id."""
    for p in portals:
        if p.id == portal_id:
            return p
    raise PortalNotFoundError("No portal with that id")