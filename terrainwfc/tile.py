"""A single grid tile with its remaining entropy and allowed neighbours."""

from __future__ import annotations

from .types import TerrainTileType


class BaseTile:
    """One cell of the terrain grid."""

    def __init__(self, tile_type=TerrainTileType.INVALID, size=0):
        self.tile_type = TerrainTileType(tile_type)
        self.size = size
        self.entropies: list[TerrainTileType] = []
        self.valid_neighbours: list[TerrainTileType] = []
        self.iterated_over = False

    @property
    def entropy_count(self) -> int:
        return len(self.entropies)

    @property
    def valid_neighbour_count(self) -> int:
        return len(self.valid_neighbours)

    def reset_entropy(self):
        """Allow every tile type, including the invalid one."""
        self.entropies = list(TerrainTileType)

    def set_entropy(self, types):
        """Add the given types to the remaining entropy."""
        self.entropies.extend(types)

    def set_valid_neighbours(self, neighbours):
        self.valid_neighbours = list(neighbours)

    def remove_entropy(self, tile_type):
        """Drop the first occurrence of a type, if present."""
        try:
            self.entropies.remove(tile_type)
        except ValueError:
            pass

    def force_set(self, tile_type, size, valid_neighbours):
        """Collapse the tile to exactly one type."""
        self.tile_type = TerrainTileType(tile_type)
        self.size = size
        self.entropies = [self.tile_type]
        self.valid_neighbours = list(valid_neighbours)

    def collapse_entropy(self, incoming_neighbours, bias):
        """Narrow the entropy against the allowed neighbours of an adjacent tile.

        Falls back in turn to this tile's own allowed neighbours, then to the
        incoming list, each filtered through the bias, and finally to the first
        incoming type.
        """
        incoming = list(incoming_neighbours)
        if not incoming:
            raise ValueError("incoming neighbour list is empty")
        allowed = set(incoming)
        untyped = self.tile_type == TerrainTileType.INVALID

        chosen = [
            t
            for t in self.entropies
            if t in allowed and (not untyped or bias.is_bias_valid(t))
        ]
        if not chosen and self.valid_neighbours:
            chosen = [
                t
                for t in self.valid_neighbours
                if t in allowed and bias.is_bias_valid(t)
            ]
        if not chosen:
            chosen = [t for t in incoming if bias.is_bias_valid(t)]
        if not chosen:
            chosen = [incoming[0]]
        self.entropies = chosen

    def entropy_at(self, index):
        """Return the entropy at index, or INVALID when out of range."""
        if 0 <= index < len(self.entropies):
            return self.entropies[index]
        return TerrainTileType.INVALID

    def valid_neighbour_at(self, index):
        """Return the allowed neighbour at index, or INVALID when there are none."""
        if not self.valid_neighbours:
            return TerrainTileType.INVALID
        return self.valid_neighbours[index]