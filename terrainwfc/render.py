"""Window drawing the terrain grid with one texture per tile type."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .types import TerrainTileType

WINDOW_TITLE = "Procedural 2D Terrain"
TARGET_FPS = 60
LIGHT_GRAY = (200, 200, 200)


@dataclass
class TileRenderData:
    """Texture file paths for every drawable tile type."""

    invalid_texture_path: str = ""
    grass_texture_path: str = ""
    rock_texture_path: str = ""
    sand_texture_path: str = ""
    water_texture_path: str = ""
    rock_water_texture_path: str = ""
    rock_sand_texture_path: str = ""
    rock_grass_texture_path: str = ""
    sand_water_texture_path: str = ""
    sand_grass_texture_path: str = ""
    water_grass_texture_path: str = ""


_TEXTURE_FIELDS = {
    TerrainTileType.ROCK: "rock_texture_path",
    TerrainTileType.GRASS: "grass_texture_path",
    TerrainTileType.SAND: "sand_texture_path",
    TerrainTileType.WATER: "water_texture_path",
    TerrainTileType.ROCK_GRASS: "rock_grass_texture_path",
    TerrainTileType.ROCK_SAND: "rock_sand_texture_path",
    TerrainTileType.ROCK_WATER: "rock_water_texture_path",
    TerrainTileType.SAND_GRASS: "sand_grass_texture_path",
    TerrainTileType.SAND_WATER: "sand_water_texture_path",
    TerrainTileType.WATER_GRASS: "water_grass_texture_path",
}


def _load_texture(path):
    """Load an image, or return None when the path is empty or unreadable."""
    if not path:
        return None
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError):
        return None


class RenderManager:
    """Opens the window and draws the tile grid each frame."""

    def __init__(self, grid_size_x, grid_size_y, tile_size):
        self.grid_size = (grid_size_x, grid_size_y)
        self.tile_size = tile_size
        self.screen_size = (tile_size * grid_size_x, tile_size * grid_size_y)
        self.render_data = TileRenderData()
        self.tile_grid = None
        self._textures: dict[TerrainTileType, pygame.Surface | None] = {}
        self._invalid_texture = None
        self._close_requested = False

        pygame.display.init()
        self.surface = pygame.display.set_mode(self.screen_size)
        pygame.display.set_caption(WINDOW_TITLE)
        self._clock = pygame.time.Clock()

    def initialize(self, render_data):
        """Store the texture paths and load every texture."""
        self.render_data = render_data
        self._textures = {
            tile_type: _load_texture(getattr(render_data, name))
            for tile_type, name in _TEXTURE_FIELDS.items()
        }
        self._invalid_texture = _load_texture(render_data.invalid_texture_path)

    def texture_for(self, tile_type):
        """Return the texture drawn for a tile type; unknown types use the invalid one."""
        try:
            member = TerrainTileType(tile_type)
        except ValueError:
            return self._invalid_texture
        return self._textures.get(member, self._invalid_texture)

    def refresh_tile_grid(self, tile_grid):
        self.tile_grid = tile_grid

    def render_frame(self):
        """Draw one frame of the grid and wait for the frame rate."""
        if self.tile_grid is None:
            raise RuntimeError("no tile grid to draw")
        self._poll_events()
        self.surface.fill(LIGHT_GRAY)
        width, height = self.grid_size
        for x, column in zip(range(width), self.tile_grid):
            for y, tile in zip(range(height), column):
                texture = self.texture_for(tile.tile_type)
                if texture is not None:
                    self.surface.blit(texture, (x * self.tile_size, y * self.tile_size))
        pygame.display.flip()
        self._clock.tick(TARGET_FPS)

    def should_close(self) -> bool:
        """Return True once the window was closed or Escape was pressed."""
        self._poll_events()
        return self._close_requested

    def close(self):
        pygame.display.quit()

    def _poll_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                self._close_requested = True