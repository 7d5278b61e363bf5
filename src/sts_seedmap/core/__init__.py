"""Core primitives: the deterministic random engine and seed handling."""

from sts_seedmap.core.errors import EmptyInputError, InvalidArgumentError
from sts_seedmap.core.rng import PseudoRandomEngine
from sts_seedmap.core.seeds import (
    NumericSeed,
    Seed,
    SeedLike,
    TextualSeed,
    hash_text,
    resolve_seed,
)

__all__ = [
    # rng
    "PseudoRandomEngine",
    # errors
    "InvalidArgumentError",
    "EmptyInputError",
    # seeds
    "Seed",
    "SeedLike",
    "NumericSeed",
    "TextualSeed",
    "hash_text",
    "resolve_seed",
]
