import pygame
import pytest

from terrainwfc.render import RenderManager, TileRenderData
from terrainwfc.tile import BaseTile
from terrainwfc.types import TerrainTileType

T = TerrainTileType
TILE = 8

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    manager = RenderManager(2, 2, TILE)
    yield manager
    manager.close()


def write_texture(path, color):
    surface = pygame.Surface((TILE, TILE))
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return str(path)


@pytest.fixture
def render_data(tmp_path):
    return TileRenderData(
        rock_texture_path=write_texture(tmp_path / "rock.bmp", RED[:3]),
        grass_texture_path=write_texture(tmp_path / "grass.bmp", GREEN[:3]),
        invalid_texture_path=write_texture(tmp_path / "invalid.bmp", BLUE[:3]),
    )


def tile(tile_type):
    return BaseTile(tile_type, TILE)


def test_window_matches_grid(renderer):
    assert renderer.surface.get_size() == (2 * TILE, 2 * TILE)
    assert renderer.screen_size == (2 * TILE, 2 * TILE)


def test_texture_for_loaded_and_missing(renderer, render_data):
    renderer.initialize(render_data)
    rock = renderer.texture_for(T.ROCK)
    assert rock.get_size() == (TILE, TILE)
    assert rock.get_at((0, 0)) == RED
    assert renderer.texture_for(T.SAND) is None


def test_unknown_types_use_invalid_texture(renderer, render_data):
    renderer.initialize(render_data)
    assert renderer.texture_for(T.INVALID).get_at((1, 1)) == BLUE
    assert renderer.texture_for(11).get_at((1, 1)) == BLUE


def test_render_frame_draws_tiles_at_grid_positions(renderer, render_data):
    renderer.initialize(render_data)
    grid = [[tile(T.ROCK), tile(T.GRASS)], [tile(T.INVALID), tile(T.ROCK)]]
    renderer.refresh_tile_grid(grid)
    renderer.render_frame()
    assert renderer.surface.get_at((0, 0)) == RED
    assert renderer.surface.get_at((0, TILE)) == GREEN
    assert renderer.surface.get_at((TILE, 0)) == BLUE
    assert renderer.surface.get_at((TILE + 1, TILE + 1)) == RED


def test_missing_texture_leaves_background(renderer):
    renderer.initialize(TileRenderData())
    grid = [[tile(T.ROCK), tile(T.ROCK)], [tile(T.ROCK), tile(T.ROCK)]]
    renderer.refresh_tile_grid(grid)
    renderer.render_frame()
    assert renderer.surface.get_at((3, 3)) == (200, 200, 200, 255)


def test_render_without_grid_raises(renderer):
    renderer.initialize(TileRenderData())
    with pytest.raises(RuntimeError):
        renderer.render_frame()


def test_should_close_after_quit_event(renderer):
    assert renderer.should_close() is False
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert renderer.should_close() is True


def test_should_close_after_escape(renderer):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert renderer.should_close() is True