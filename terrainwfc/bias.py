"""Random bias check deciding whether a tile type may be chosen."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .types import BiasData, TerrainBiasCategory


class BiasManager:
    """Holds one BiasData per category and rolls against them."""

    def __init__(self, bias_data: Sequence[BiasData], rng=None):
        data = list(bias_data)
        if len(data) != len(TerrainBiasCategory):
            raise ValueError(
                f"expected {len(TerrainBiasCategory)} bias entries, got {len(data)}"
            )
        self.bias_data = data
        self.rng = rng if rng is not None else random.Random()

    def is_bias_valid(self, tile_type) -> bool:
        """Draw one value in [0, 1] and test it against every category holding the type."""
        roll = self.rng.random()
        return any(
            tile_type in entry.valid_terrain_types and roll < entry.bias
            for entry in self.bias_data
        )