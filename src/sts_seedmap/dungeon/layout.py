"""Grid dimensions and floor rules for act map generation.

Only :data:`DEFAULT_LAYOUT` reproduces the reference maps; other layouts
are useful for experiments and tests but produce different streams.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator


class MapLayout(BaseModel):
    """Configuration for one act's node grid."""

    model_config = {"frozen": True}

    columns: int = 7
    floors: int = 15
    treasure_floor: int = 8
    """Every node on this floor is a Treasure node."""
    rest_floor: int = 14
    """Every node on this floor is a Rest node (the floor before the boss)."""
    restricted_below: int = 5
    """Elite and Rest nodes cannot be rolled on floors below this index."""
    ascension_threshold: int = 20
    """Ascension level from which the high-ascension weight table applies."""

    @property
    def boss_floor(self) -> int:
        return self.floors

    @model_validator(mode="after")
    def _validate_floors(self) -> "MapLayout":
        if self.columns < 1 or self.floors < 1:
            raise ValueError("Layout needs at least one column and one floor")
        for name in ("treasure_floor", "rest_floor"):
            value = getattr(self, name)
            if not 0 < value < self.floors:
                raise ValueError(
                    f"{name} must be inside the grid (1..{self.floors - 1}), got {value}"
                )
        return self


DEFAULT_LAYOUT = MapLayout()
