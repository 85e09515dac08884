"""Lookups from the short names used in GM commands to game ids."""

from __future__ import annotations

import re

DEFAULT_MAP_ID = 180000000
DEFAULT_JOB_ID = 0

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_MAP_IDS: dict[str, int] = {
    # Maple Island
    "amherst": 1010000,
    "southperry": 60000,
    # Victoria Island
    "lith": 104000000,
    "henesys": 100000000,
    "kerning": 103000000,
    "perion": 102000000,
    "ellinia": 101000000,
    "sleepy": 105040300,
    "gm": 180000000,
    # Ossyria
    "orbis": 200000000,
    "elnath": 211000000,
    "ludi": 220000000,
    "omega": 221000000,
    "aqua": 230000000,
    # Misc
    "balrog": 105090900,
    "guild": 200000301,
}

_JOB_IDS: dict[str, int] = {
    "Beginner": 0,
    "Warrior": 100,
    "Fighter": 110,
    "Crusader": 111,
    "Page": 120,
    "WhiteKnight": 121,
    "Spearman": 130,
    "DragonKnight": 131,
    "Magician": 200,
    "FirePoisonWizard": 210,
    "FirePoisonMage": 211,
    "IceLightWizard": 220,
    "IceLightMage": 221,
    "Cleric": 230,
    "Priest": 231,
    "Bowman": 300,
    "Hunter": 310,
    "Ranger": 311,
    "Crossbowman": 320,
    "Sniper": 321,
    "Thief": 400,
    "Assassin": 410,
    "Hermit": 411,
    "Bandit": 420,
    "ChiefBandit": 421,
    "Gm": 500,
    "SuperGm": 510,
}

_MOB_IDS: dict[str, tuple[int, ...]] = {
    "balrog": (8130100,),
    "cbalrog": (8150000,),
    "zakum": (
        8800003,  # arm 1
        8800004,  # arm 2
        8800005,  # arm 3
        8800006,  # arm 4
        8800007,  # arm 5
        8800008,  # arm 6
        8800009,  # arm 7
        8800010,  # arm 8
        8800000,  # body
    ),
    "pap": (8500001,),
    "pianus": (8520000,),
    "mushmom": (6130101,),
    "zmushmom": (6300005,),
}


class UnknownMobError(LookupError):
    """The mob name has no known ids."""


def _int16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def _parse_int(text: str) -> int | None:
    """Parse a plain decimal integer that fits in 64 bits, else None."""
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def map_name_to_id(name: str) -> int:
    """The map id for a short map name; unknown names give the GM map."""
    return _MAP_IDS.get(name, DEFAULT_MAP_ID)


def job_name_to_id(name: str) -> int:
    """The job id for a job name; unknown names give the beginner job."""
    return _JOB_IDS.get(name, DEFAULT_JOB_ID)


def mob_name_to_ids(name: str) -> list[int]:
    """The mob ids spawned for a boss name."""
    try:
        return list(_MOB_IDS[name])
    except KeyError:
        raise UnknownMobError("Unknown mob name") from None


def resolve_map_id(value: str | int) -> int:
    """A map id from a number (truncated to 32 bits) or a short map name."""
    if isinstance(value, int):
        return _int32(value)
    number = _parse_int(value)
    if number is None:
        return map_name_to_id(value)
    return _int32(number)


def resolve_job_id(value: str | int) -> int:
    """A job id from a number (truncated to 16 bits) or a job name."""
    if isinstance(value, int):
        return _int16(value)
    number = _parse_int(value)
    if number is None:
        return job_name_to_id(value)
    return _int16(number)