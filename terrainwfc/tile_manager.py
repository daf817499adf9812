"""Grid of tiles and the observe/collapse propagation across it."""

from __future__ import annotations

import random

from .tile import BaseTile
from .types import GridBounds, TerrainTileType, TraverseDirection

INITIAL_TILE_SIZE = 256

_OFFSETS = {
    TraverseDirection.NORTH: (0, -1),
    TraverseDirection.EAST: (1, 0),
    TraverseDirection.WEST: (-1, 0),
    TraverseDirection.SOUTH: (0, 1),
}

# Order in which a freshly collapsed tile pushes its state to its neighbours.
_PROPAGATION_ORDER = (
    TraverseDirection.EAST,
    TraverseDirection.NORTH,
    TraverseDirection.SOUTH,
    TraverseDirection.WEST,
)

_MAX_STEPS_PER_CELL = 1000


class TileManager:
    """Owns the tile grid and collapses tiles against their neighbours."""

    def __init__(
        self,
        grid_size_x,
        grid_size_y,
        data_parser,
        bias,
        rng=None,
        tile_size=64,
    ):
        self.bounds = GridBounds(grid_size_x, grid_size_y)
        self.data_parser = data_parser
        self.bias = bias
        self.rng = rng if rng is not None else random.Random()
        self.tile_size = tile_size
        self.tiles: list[list[BaseTile]] = []
        self.collapsed_locations: list[tuple[int, int]] = []

    def initialize_grid(self):
        """Fill the grid with untyped tiles that allow every type."""
        invalid_neighbours = self.data_parser.tile_data(
            TerrainTileType.INVALID
        ).valid_neighbours
        self.tiles = []
        for _ in range(self.bounds.width):
            column = []
            for _ in range(self.bounds.height):
                tile = BaseTile(TerrainTileType.INVALID, INITIAL_TILE_SIZE)
                tile.reset_entropy()
                tile.set_valid_neighbours(invalid_neighbours)
                column.append(tile)
            self.tiles.append(column)
        self.collapsed_locations = []

    def tile_at(self, x, y) -> BaseTile:
        if not self.bounds.contains(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the grid")
        return self.tiles[x][y]

    def observe(self, location, neighbour, direction):
        """Check one tile against a collapsed neighbour and propagate any change."""
        self._run([(tuple(location), neighbour, direction)])

    def force_tile_entropy(self, location, tile_type, valid_neighbours):
        """Collapse a tile to one type and propagate to its neighbours."""
        self._run(self._force(location, tile_type, valid_neighbours))

    def clear_iterations(self):
        for column in self.tiles:
            for tile in column:
                tile.iterated_over = False

    def collapse_entropy_in_direction(self, location, tile, direction):
        """Narrow a tile against the next tile along direction, then pick one entropy at random."""
        x, y = location
        dx, dy = _OFFSETS[direction]
        nx, ny = x + dx, y + dy
        if self.bounds.contains(nx, ny):
            other = self.tiles[nx][ny]
            if other.tile_type != TerrainTileType.INVALID:
                tile.collapse_entropy(other.valid_neighbours, self.bias)
        index = self.rng.randrange(tile.entropy_count)
        return tile.entropy_at(index)

    def _force(self, location, tile_type, valid_neighbours):
        x, y = location
        if (x, y) not in self.collapsed_locations:
            self.collapsed_locations.append((x, y))
        tile = self.tile_at(x, y)
        tile.force_set(tile_type, self.tile_size, valid_neighbours)
        tile.iterated_over = True
        return [
            ((x + _OFFSETS[d][0], y + _OFFSETS[d][1]), tile, d)
            for d in _PROPAGATION_ORDER
        ]

    def _observe_step(self, location, neighbour, direction):
        x, y = location
        if not self.bounds.contains(x, y):
            return []
        current = self.tiles[x][y]
        if current.tile_type in neighbour.valid_neighbours:
            current.iterated_over = True
            return []

        current.collapse_entropy(neighbour.valid_neighbours, self.bias)
        if current.entropy_count == 1:
            chosen = current.entropy_at(0)
        else:
            chosen = self.collapse_entropy_in_direction(location, current, direction)
        return self._force(
            location, chosen, self.data_parser.tile_data(chosen).valid_neighbours
        )

    def _run(self, pending):
        # Depth-first, in the same order a recursive walk would visit tiles.
        stack = list(reversed(pending))
        limit = max(1, self.bounds.width * self.bounds.height) * _MAX_STEPS_PER_CELL
        steps = 0
        while stack:
            steps += 1
            if steps > limit:
                raise RuntimeError("tile propagation did not settle")
            stack.extend(reversed(self._observe_step(*stack.pop())))