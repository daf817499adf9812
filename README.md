# terrainwfc

Procedural 2D terrain on a square tile grid, grown with a biased form of
wave function collapse and drawn in a pygame window.

Each cell starts with every terrain type possible. When a cell is fixed to a
type, each of its four neighbours whose current type is not among the fixed
cell's allowed neighbours is narrowed to the types that may sit beside it. A
cell left with one choice is fixed to it; a cell left with several is narrowed
once more against the next cell in the same direction and then fixed to one of
the remaining choices at random. Every fixed cell propagates in turn, so the
change spreads outward. While a cell is still untyped, per-category bias
values decide how likely each candidate type is to survive, so favoured
terrain shows up more often.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
terrainwfc
terrainwfc --data path/to/TerrainTileData.json --seed 7
```

Options:

- `--data`: the tile description file (default
  `assets/JSON/TerrainTileData.json`, relative to the working directory).
- `--seed`: an integer seed for the random generator, for repeatable terrain.

The command reads the tile description file and opens a window for a 10 × 10
grid of 64-pixel tiles. It then fixes two seed cells, (4, 4) and (1, 3), each
to rock, using the allowed-neighbour rules of rock and of water respectively,
and after each seed prints the type of every cell, row by row, as lines like
`[3][4] = Rock`. The window is redrawn at up to 60 frames a second until it is
closed or Escape is pressed. If the description file cannot be read or is
malformed, the command prints an error to standard error and exits with
status 1.

## The tile description file

The data file is a JSON document with two sections:

```json
{
  "TileData": {
    "Rock":  {"TexturePaths": ["assets/rock.png"],  "Neighbours": [1, 5, 6, 7]},
    "Grass": {"TexturePaths": ["assets/grass.png"], "Neighbours": [2, 7, 8, 10]}
  },
  "Bias": {
    "RockBias":  {"Bias": 0.3, "ValidTerrainTypes": [1, 5, 6, 7]},
    "SandBias":  {"Bias": 0.5, "ValidTerrainTypes": [3, 5, 8, 9]},
    "WaterBias": {"Bias": 0.6, "ValidTerrainTypes": [4, 6, 9, 10]},
    "GrassBias": {"Bias": 0.9, "ValidTerrainTypes": [2, 7, 8, 10]}
  }
}
```

Tile entries are keyed by the names `Rock`, `Grass`, `Sand`, `Water`,
`RockGrass`, `RockSand`, `RockWater`, `SandGrass`, `SandWater`,
`WaterGrass` and `InvalidTileType`; a missing entry leaves that type with no
texture and no allowed neighbours. Neighbours and valid terrain types are the
numeric values of `TerrainTileType` (0 invalid, 1 rock, 2 grass, 3 sand,
4 water, 5 rock–sand, 6 rock–water, 7 rock–grass, 8 sand–grass,
9 sand–water, 10 water–grass). Texture paths must be strings; the last one
listed for a tile is the one used.

All four bias entries are required, each with a numeric `Bias`; a missing
entry, a non-numeric bias or an unknown type number raises `ValueError`.
A bias check draws one random value in [0, 1) and passes when it is below the
`Bias` of any category that lists the type.

## Using it as a library

```python
import random

from terrainwfc.simulation import SimulationManager
from terrainwfc.types import Settings, TerrainTileType

sim = SimulationManager("assets/JSON/TerrainTileData.json", Settings(), random.Random(7))
sim.initialize_components()
sim.force_tile_entropy((4, 4), TerrainTileType.WATER, [4, 6, 9, 10])
for line in sim.tile_report():
    print(line)
```

`set_tile_to_terrain_type(location, terrain_type)` fixes a cell to rock with
the neighbour rules of `terrain_type` and prints the report itself.
`render_data()` gives the texture paths as a `TileRenderData`, and
`run(renderer)` seeds the two cells and drives a `RenderManager` until it is
closed.

The building blocks live in their own modules:

- `terrainwfc.types`: the `TerrainTileType`, `TerrainBiasCategory` and
  `TraverseDirection` enums, the `TileData`, `BiasData`, `Settings` and
  `GridBounds` records, and `tile_type_name`, `bias_category_name` and
  `format_tile`.
- `terrainwfc.data`: `DataParser`, with `load()` for a file,
  `load_document()` for an already parsed mapping, and `tile_data()` /
  `bias_data()` lookups.
- `terrainwfc.bias`: `BiasManager` and its `is_bias_valid()` roll.
- `terrainwfc.tile`: `BaseTile`, one grid cell with its entropy and allowed
  neighbours, and `collapse_entropy()`.
- `terrainwfc.tile_manager`: `TileManager`, the grid, `tile_at()`,
  `force_tile_entropy()`, `observe()` and the propagation between cells.
  Propagation that fails to settle raises `RuntimeError`.
- `terrainwfc.render`: `TileRenderData` and `RenderManager`, which draws the
  grid with pygame.

Pass your own `random.Random` to get the same terrain on every run.

## What it does not do

- No tile description file or textures come with the package; supply your
  own. Tiles whose texture is missing or cannot be loaded are left as the
  light-gray background, and untyped cells are always drawn that way.
- The window only shows the grid: there is no way to place tiles with the
  mouse or keyboard, and no way to save the generated terrain other than the
  printed report.
- Grid size and tile size are fixed by `Settings` and cannot be changed from
  the command line.