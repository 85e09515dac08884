"""Parsing of GM chat commands and their arguments."""

from __future__ import annotations

import binascii
import re
import struct
from collections.abc import Sequence
from dataclasses import dataclass

RATE_KINDS = ("exp", "drop", "mesos")
PACKET_HEADER_SIZE = 4

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_FLOAT32 = struct.Struct("<f")


class CommandError(ValueError):
    """A GM command or one of its arguments is malformed."""


@dataclass(frozen=True)
class GmCommand:
    """A GM command split into its name and space-separated arguments."""

    name: str
    args: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """The arguments joined back together with single spaces."""
        return " ".join(self.args)


def parse_gm_command(message: str) -> GmCommand:
    """Split a chat message into a command.

    Everything after the first ``/`` is split on single spaces; empty pieces
    are kept. Without a ``/`` the whole message is split.
    """
    start = message.find("/") + 1
    name, *args = message[start:].split(" ")
    return GmCommand(name, tuple(args))


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise CommandError(f'parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise CommandError(f'parsing "{text}": value out of range')
    return value


def _parse_float32(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(text)
    value = float(text)
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError:
        raise ValueError(text) from None


def parse_rate(args: Sequence[str]) -> tuple[str, float]:
    """Parse the arguments of ``/rate <exp | drop | mesos> <rate>``.

    The rate is rounded to single precision.
    """
    if len(args) < 2:
        raise CommandError("Command structure is /rate <exp | drop | mesos> <rate>")
    mode = args[0]
    if mode not in RATE_KINDS:
        raise CommandError("Choose between exp/drop/mesos rates")
    try:
        rate = _parse_float32(args[1])
    except ValueError:
        raise CommandError("<rate> should be a number") from None
    return mode, rate


def parse_target_amount(args: Sequence[str]) -> tuple[str | None, int | None]:
    """Parse ``[<player>] <amount>`` arguments.

    One argument is an amount for the caller, two are a player name and an
    amount. Any other count gives no target and no amount.
    """
    if len(args) == 2:
        return args[0], _parse_int(args[1])
    if len(args) == 1:
        return None, _parse_int(args[0])
    return None, None


def decode_packet_hex(text: str) -> bytes:
    """Decode a hex string into a packet, preceded by an empty 4-byte header."""
    try:
        data = binascii.unhexlify(text)
    except (binascii.Error, ValueError):
        raise CommandError(f"invalid hex packet: {text}") from None
    return bytes(PACKET_HEADER_SIZE) + data