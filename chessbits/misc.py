"""Small numeric helpers: a xorshift PRNG, a running average and a keyed table."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1

T = TypeVar("T")


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class PRNG:
    """xorshift64star pseudo-random generator with a 64-bit state."""

    _MULTIPLIER = 2685821657736338717

    def __init__(self, seed: int) -> None:
        seed &= _MASK64
        if not seed:
            raise ValueError("PRNG seed must be non-zero")
        self._state = seed

    def _rand64(self) -> int:
        s = self._state
        s ^= s >> 12
        s ^= (s << 25) & _MASK64
        s ^= s >> 27
        self._state = s
        return (s * self._MULTIPLIER) & _MASK64

    def rand(self) -> int:
        """Return the next 64-bit unsigned value."""
        return self._rand64()

    def sparse_rand(self) -> int:
        """Return a 64-bit value with about one bit in eight set."""
        return self._rand64() & self._rand64() & self._rand64()


class RunningAverage:
    """Integer running average of a series of values."""

    PERIOD = 4096
    RESOLUTION = 1024

    def __init__(self) -> None:
        self._average = 0

    def set(self, p: int, q: int) -> None:
        """Reset the average to the rational value p / q."""
        self._average = _cdiv(p * self.PERIOD * self.RESOLUTION, q)

    def update(self, v: int) -> None:
        """Fold the value v into the average."""
        self._average = self.RESOLUTION * v + _cdiv(
            (self.PERIOD - 1) * self._average, self.PERIOD
        )

    def is_greater(self, a: int, b: int) -> bool:
        """Return whether the average is strictly greater than a / b."""
        return b * self._average > a * (self.PERIOD * self.RESOLUTION)

    def value(self) -> int:
        """Return the average as an integer, truncated toward zero."""
        return _cdiv(self._average, self.PERIOD * self.RESOLUTION)


class HashTable(Generic[T]):
    """Fixed-size table of entries addressed by the low bits of a key."""

    def __init__(self, factory: Callable[[], T], size: int) -> None:
        if size <= 0 or size & (size - 1):
            raise ValueError(f"table size must be a positive power of two, got {size}")
        self._table = [factory() for _ in range(size)]

    def __len__(self) -> int:
        return len(self._table)

    def __getitem__(self, key: int) -> T:
        return self._table[(key & _MASK32) & (len(self._table) - 1)]


def mul_hi64(a: int, b: int) -> int:
    """Return the upper 64 bits of the 128-bit product of two 64-bit values."""
    return ((a & _MASK64) * (b & _MASK64)) >> 64