"""Bit flags, field geometry and limits, portals, name aliases and GM command parsing for a game channel."""

__version__ = "0.1.0"

__all__ = [
    "flags",
    "limits",
    "geometry",
    "portals",
    "names",
    "commands",
]