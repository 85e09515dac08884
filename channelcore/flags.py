"""Fixed-width bit sets addressed most-significant-bit first per 32-bit word."""

from __future__ import annotations

VER_1 = 32
VER_14 = 64
DEFAULT_BITS = VER_14

_WORD_MASK = 0xFFFFFFFF


class Flag:
    """A bit set stored as 32-bit words.

    Bit 0 is the most significant bit of the first word. The capacity is
    rounded down to a whole number of words.
    """

    __slots__ = ("_words",)

    def __init__(self, bits: int = DEFAULT_BITS) -> None:
        bits = max(bits, 0)
        self._words = [0] * (bits >> 5)

    @property
    def bits(self) -> int:
        """Total number of addressable bits."""
        return 32 * len(self._words)

    def words(self) -> list[int]:
        """Return a copy of the underlying 32-bit words."""
        return list(self._words)

    def is_zero(self) -> bool:
        """True when no bit is set or the flag has no words."""
        return not any(self._words)

    def set_bit(self, bit: int, value: int | bool) -> None:
        """Set or clear one bit; positions outside the flag are ignored."""
        if not 0 <= bit < self.bits:
            return
        word = bit >> 5
        mask = 1 << (31 - (bit & 0x1F))
        if value:
            self._words[word] |= mask
        else:
            self._words[word] &= ~mask & _WORD_MASK

    def set_value(self, value: int) -> None:
        """Store a 32-bit value in the last word and clear all others."""
        if not self._words:
            return
        for index in range(len(self._words) - 1):
            self._words[index] = 0
        self._words[-1] = value & _WORD_MASK

    def to_bytes(self, new_version: bool = False) -> bytes:
        """Serialise the flag.

        The old layout writes the words in order, each little-endian; the
        new layout is :meth:`to_bytes_ex`.
        """
        if new_version:
            return self.to_bytes_ex()
        return b"".join(word.to_bytes(4, "little") for word in self._words)

    def to_bytes_ex(self) -> bytes:
        """Serialise the words last to first, each little-endian."""
        return b"".join(word.to_bytes(4, "little") for word in reversed(self._words))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flag):
            return NotImplemented
        return self._words == other._words

    def __repr__(self) -> str:
        body = ", ".join(f"0x{word:08x}" for word in self._words)
        return f"Flag([{body}])"