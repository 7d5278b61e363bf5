"""Seed values accepted by the map and encounter generators.

A seed is either numeric or textual.  Both are resolved once, at engine
construction, into the integer that gets scrambled into the 48-bit LCG
state.  Text seeds go through the familiar ``h = h*31 + c`` rolling hash
(the same one used for Java string hash codes), truncated to a signed 32-bit
integer, then made non-negative.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, field_validator

from sts_seedmap.core.errors import InvalidArgumentError

_INT32_MASK = 0xFFFFFFFF
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _to_int32(value: int) -> int:
    """Interpret the low 32 bits of *value* as a signed integer."""
    value &= _INT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def hash_text(text: str) -> int:
    """Return the non-negative rolling hash of *text*.

    Characters are consumed as UTF-16 code units so that strings outside
    the Basic Multilingual Plane hash the same way a JavaScript or Java
    runtime would hash them.  Lone surrogates hash as their own code unit.
    """
    data = text.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        h = _to_int32(h * 31 + unit)
    return abs(h)


class NumericSeed(BaseModel):
    """A seed given directly as a signed 64-bit integer."""

    model_config = {"frozen": True}

    value: int

    @field_validator("value")
    @classmethod
    def _check_range(cls, v: int) -> int:
        if not _INT64_MIN <= v <= _INT64_MAX:
            raise ValueError(f"must fit in a signed 64-bit integer, got {v}")
        return v

    def to_seed_value(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class TextualSeed(BaseModel):
    """A seed given as free text, hashed to an integer."""

    model_config = {"frozen": True}

    text: str

    def to_seed_value(self) -> int:
        return hash_text(self.text)

    def __str__(self) -> str:
        return self.text


Seed = Union[NumericSeed, TextualSeed]
SeedLike = Union[int, str, NumericSeed, TextualSeed]


def resolve_seed(seed: SeedLike) -> Seed:
    """Normalise a raw ``int``/``str`` (or an existing seed) into a :data:`Seed`."""
    if isinstance(seed, (NumericSeed, TextualSeed)):
        return seed
    # bool is an int subclass but never a meaningful seed
    if isinstance(seed, bool):
        raise TypeError(f"Seed must be int or str, got {type(seed).__name__}")
    if isinstance(seed, int):
        if not _INT64_MIN <= seed <= _INT64_MAX:
            raise InvalidArgumentError(
                f"Numeric seed must fit in a signed 64-bit integer, got {seed}"
            )
        return NumericSeed(value=seed)
    if isinstance(seed, str):
        return TextualSeed(text=seed)
    raise TypeError(f"Seed must be int or str, got {type(seed).__name__}")
