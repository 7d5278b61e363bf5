"""Shared fixtures for map generation tests."""

from __future__ import annotations

import pytest

from sts_seedmap.dungeon.map_gen import generate_map
from sts_seedmap.dungeon.models import ActMap

_SEEDS: list[int | str] = [
    *range(25),
    -1,
    2**63 - 1,
    "test-seed-1",
    "1ABCD",
    "polygenelubricants",
]


@pytest.fixture(scope="session")
def sample_maps() -> list[tuple[int | str, int, ActMap]]:
    """Maps for a spread of seeds at low and high ascension, generated once."""
    maps = []
    for seed in _SEEDS:
        for ascension in (0, 20):
            maps.append((seed, ascension, generate_map(seed, 1, ascension)))
    return maps
