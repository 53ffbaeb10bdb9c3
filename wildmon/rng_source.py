"""
rng_source – Random sources for encounter generation.

The generator only needs two operations from its random source:
``random()`` (uniform float in [0, 1)) and ``choice(seq)``. Any
``random.Random`` instance qualifies. This module adds:
  - LCRNGRandom: reproducible source driven by the Gen 3 LCRNG
  - CountingRandom: wrapper that counts draws, for checking draw order
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

from wildmon.config import LCRNG_ADD, LCRNG_MOD, LCRNG_MULT


T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...

    def choice(self, seq: Sequence[T]) -> T: ...


class LCRNGRandom:
    """
    Random source backed by the Gen 3 LCRNG.

    Every draw advances the generator by one frame and uses the high 16
    bits of the new seed, so a given seed always yields the same
    encounters. ``choice`` scales the 16-bit value to the sequence length
    the way the games pick encounter slots, which is only approximately
    uniform when the length does not divide 65536 (e.g. 100 levels).
    """

    def __init__(self, seed: int = 0):
        self.seed = seed % LCRNG_MOD
        self.frames = 0

    def advance(self) -> int:
        """Step one frame and return the high 16 bits of the new seed."""
        self.seed = (self.seed * LCRNG_MULT + LCRNG_ADD) % LCRNG_MOD
        self.frames += 1
        return self.seed >> 16

    def random(self) -> float:
        return self.advance() / 0x10000

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[(self.advance() * len(seq)) >> 16]

    def __repr__(self) -> str:
        return f"LCRNGRandom(seed=0x{self.seed:08X}, frames={self.frames})"


class CountingRandom:
    """Delegating random source that records how many draws were made."""

    def __init__(self, inner: RandomSource):
        self._inner = inner
        self.random_calls = 0
        self.choice_calls = 0

    @property
    def draws(self) -> int:
        return self.random_calls + self.choice_calls

    def random(self) -> float:
        self.random_calls += 1
        return self._inner.random()

    def choice(self, seq: Sequence[T]) -> T:
        self.choice_calls += 1
        return self._inner.choice(seq)
