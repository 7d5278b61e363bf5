"""Seeded pseudo-random engine for deterministic map generation.

Reproduces the classic 48-bit linear congruential generator (multiplier
``0x5DEECE66D``, addend ``0xB``) bit for bit, including its seed
scrambling and its rejection-sampling bounded draw.  Every stream of the
generator (one per map, one per floor-encounter lookup) gets its own
:class:`PseudoRandomEngine`, so consuming values in one never perturbs
another.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from sts_seedmap.core.errors import EmptyInputError, InvalidArgumentError
from sts_seedmap.core.seeds import Seed, SeedLike, resolve_seed

T = TypeVar("T")

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
MASK = (1 << 48) - 1

_INT32_MAX = (1 << 31) - 1

__all__ = [
    "ADDEND",
    "EmptyInputError",
    "InvalidArgumentError",
    "MASK",
    "MULTIPLIER",
    "PseudoRandomEngine",
]


class PseudoRandomEngine:
    """Deterministic 48-bit LCG bit-stream.

    Parameters
    ----------
    seed:
        An integer, a string, or an already-resolved :data:`Seed`.  Strings
        are hashed to an integer first; the result is XORed with the
        multiplier and masked to 48 bits to form the initial state.
    """

    def __init__(self, seed: SeedLike) -> None:
        self._seed = resolve_seed(seed)
        self._state = (self._seed.to_seed_value() ^ MULTIPLIER) & MASK

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> Seed:
        """Return the seed this engine was constructed from."""
        return self._seed

    @property
    def state(self) -> int:
        """Return the current 48-bit internal state."""
        return self._state

    # -- core primitive ------------------------------------------------------

    def next(self, bits: int) -> int:
        """Advance the state once and return its top *bits* bits (unsigned)."""
        if not 1 <= bits <= 32:
            raise InvalidArgumentError(f"bits must be in 1..32, got {bits}")
        self._state = (self._state * MULTIPLIER + ADDEND) & MASK
        return self._state >> (48 - bits)

    # -- derived draws -------------------------------------------------------

    def next_int(self, bound: int | None = None) -> int:
        """Return a signed 32-bit value, or a value in ``[0, bound)``.

        Power-of-two bounds take the high bits directly.  Any other bound
        uses rejection sampling: a draw is retried while
        ``bits - val + (bound - 1)`` would overflow a signed 32-bit integer,
        which keeps the result free of modulo bias and keeps the stream
        identical to the reference algorithm.
        """
        if bound is None:
            raw = self.next(32)
            return raw - (1 << 32) if raw > _INT32_MAX else raw

        if bound <= 0:
            raise InvalidArgumentError(f"bound must be positive, got {bound}")
        if bound > _INT32_MAX:
            raise InvalidArgumentError(
                f"bound must fit in a signed 32-bit integer, got {bound}"
            )

        if bound & -bound == bound:
            return (bound * self.next(31)) >> 31

        while True:
            bits = self.next(31)
            val = bits % bound
            if bits - val + (bound - 1) <= _INT32_MAX:
                return val

    def next_float(self) -> float:
        """Return a float in the half-open interval ``[0.0, 1.0)``."""
        return self.next(24) / (1 << 24)

    def next_boolean(self) -> bool:
        """Return ``True`` when the top bit of the next state is set."""
        return self.next(1) != 0

    # -- sequence helpers ----------------------------------------------------

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        """Return a Fisher-Yates shuffled copy of *seq*; *seq* is untouched."""
        items = list(seq)
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]
        return items

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if len(seq) == 0:
            raise EmptyInputError("Cannot choose from an empty sequence")
        return seq[self.next_int(len(seq))]

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"PseudoRandomEngine(seed={self._seed!s}, state={self._state:#014x})"
