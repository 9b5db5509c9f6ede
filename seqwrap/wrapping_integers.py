"""32-bit wrapping sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MASK32 = _MOD32 - 1
_MOD64 = 1 << 64
_MASK64 = _MOD64 - 1


def _check_u64(name: str, value: int) -> None:
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, used for TCP seqnos and acknos."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", int(self.raw_value) & _MASK32)

    def __add__(self, other: object) -> WrappingInt32:
        """Step `other` positions past this point."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: object) -> WrappingInt32 | int:
        """Signed 32-bit offset from another WrappingInt32, or a step back by an int."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _MOD32 if diff >= (1 << 31) else diff
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value - other)

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    _check_u64("n", n)
    return WrappingInt32(n + isn.raw_value)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number wrapping to `n` closest to `checkpoint`."""
    _check_u64("checkpoint", checkpoint)
    offset = (n.raw_value - isn.raw_value) & _MASK32
    if checkpoint <= offset:
        return offset
    shifted = ((checkpoint - offset) + (_MOD32 >> 1)) & _MASK64
    wraps = shifted // _MOD32
    return (wraps * _MOD32 + offset) & _MASK64