"""Loading of tile and bias configuration from a JSON document."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path

from .types import (
    BiasData,
    TerrainBiasCategory,
    TerrainTileType,
    TileData,
    bias_category_name,
    tile_type_name,
)

DEFAULT_DATA_PATH = "assets/JSON/TerrainTileData.json"


class DataParser:
    """Reads per-type tile data and per-category bias data."""

    def __init__(self, path=DEFAULT_DATA_PATH):
        self.path = Path(path)
        self._tiles: dict[TerrainTileType, TileData] = {}
        self._biases: dict[TerrainBiasCategory, BiasData] = {}

    def load(self):
        """Read and parse the JSON file at the configured path."""
        with self.path.open(encoding="utf-8") as handle:
            self.load_document(json.load(handle))

    def load_document(self, document: Mapping):
        """Fill tile and bias data from an already parsed document."""
        tile_root = document.get("TileData") or {}
        tiles = {t: self._parse_tile(tile_root, t) for t in TerrainTileType}

        bias_root = document.get("Bias") or {}
        biases = {c: self._parse_bias(bias_root, c) for c in TerrainBiasCategory}

        self._tiles = tiles
        self._biases = biases

    def tile_data(self, tile_type) -> TileData:
        if not self._tiles:
            raise RuntimeError("tile data has not been loaded")
        data = self._tiles[TerrainTileType(tile_type)]
        return replace(data, valid_neighbours=list(data.valid_neighbours))

    def bias_data(self, category) -> BiasData:
        if not self._biases:
            raise RuntimeError("bias data has not been loaded")
        data = self._biases[TerrainBiasCategory(category)]
        return replace(data, valid_terrain_types=list(data.valid_terrain_types))

    @staticmethod
    def _parse_tile(root: Mapping, tile_type: TerrainTileType) -> TileData:
        entry = root.get(tile_type_name(tile_type)) or {}
        texture_path = ""
        for texture in entry.get("TexturePaths") or []:
            if not isinstance(texture, str):
                raise ValueError(f"texture path must be a string: {texture!r}")
            texture_path = texture
        neighbours = [
            TerrainTileType(value) for value in entry.get("Neighbours") or []
        ]
        return TileData(tile_type, texture_path, neighbours)

    @staticmethod
    def _parse_bias(root: Mapping, category: TerrainBiasCategory) -> BiasData:
        name = bias_category_name(category)
        entry = root.get(name)
        if not isinstance(entry, Mapping):
            raise ValueError(f"missing bias entry {name!r}")
        value = entry.get("Bias")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"bias of {name!r} must be a number")
        types = [
            TerrainTileType(t) for t in entry.get("ValidTerrainTypes") or []
        ]
        return BiasData(float(value), types)