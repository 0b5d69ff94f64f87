"""Procedural terrain for isometric maps: noise heights, pruning and auto-tiling."""

from __future__ import annotations

from isoterra.isomap import (
    NUM_TILE_LEVELS_PER_LAYER,
    NUM_TILES_PER_ROW_IN_TILESET,
    EMPTY_TILE,
    IsoMap,
)
from isoterra.logger import default_logger
from isoterra.noise import pnoise3d

_ROW = NUM_TILES_PER_ROW_IN_TILESET
_LEVELS = NUM_TILE_LEVELS_PER_LAYER
_GRASS_TILE = 1
_TERRAIN_LAYER = 0

# Inner-corner patterns: (neighbour offset A, neighbour offset B, [(tile A, tile B), ...], tile to paint).
# Tiles are relative to the terrain height's row in the tile set.
_INNER_CORNERS = (
    ((0, -1), (-1, 0), ((8, 7), (8, 15), (7, 15), (7, 7)), 8),
    ((0, -1), (1, 0), ((14, 15), (14, 13), (13, 15), (13, 13)), 18),
    ((0, 1), (-1, 0), ((8, 4), (4, 4), (4, 12), (8, 12)), 17),
    ((0, 1), (1, 0), ((10, 10), (10, 12), (14, 10), (14, 12)), 16),
)

# Neighbour offsets in the order of the bits they set when auto-tiling: up, right, down, left.
_NEIGHBOURS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def tile_within_terrain_height(tile_value: int, terrain_height: int) -> bool:
    """Whether ``tile_value`` lies in the tile-set row of ``terrain_height``."""
    lowest = terrain_height * _ROW - 1
    highest = lowest + _ROW - 1
    return lowest <= tile_value <= highest


def _cells(iso_map: IsoMap):
    for y in range(iso_map.height):
        for x in range(iso_map.width):
            yield x, y


def _noise_heights(iso_map: IsoMap, perlin_seed: int, terrain_height: int) -> list[list[int]]:
    heights = [[0] * iso_map.width for _ in range(iso_map.height)]
    max_height = 0
    for x, y in _cells(iso_map):
        sample = pnoise3d(y * 0.04, x * 0.04, 0, 0.02, 1, perlin_seed)
        value = max(int((sample + 1) * (terrain_height * 0.5)), 0)
        max_height = max(max_height, value)
        heights[y][x] = value
    default_logger().debug("Maxheight:%d", max_height)
    return heights


def _remap_heights(heights: list[list[int]], terrain_height: int) -> None:
    # Only the top few noise levels become raised terrain; everything else is flat.
    remap = {terrain_height - offset: level for offset, level in
             ((6, 1), (5, 2), (4, 3), (3, 4), (2, 5), (1, 6), (0, 6))}
    for row in heights:
        row[:] = [remap.get(value, 0) for value in row]


def _draw_heights(iso_map: IsoMap, heights: list[list[int]]) -> None:
    for x, y in _cells(iso_map):
        level = heights[y][x] - 1
        iso_map.set_tile(x, y, _TERRAIN_LAYER, 1 + _ROW * level + 15)


def _neighbour_matches(iso_map: IsoMap, x: int, y: int, layer: int, terrain_height: int) -> list[bool]:
    matches = []
    for dx, dy in _NEIGHBOURS:
        tile = iso_map.get_tile(x + dx, y + dy, layer)
        matches.append(
            tile_within_terrain_height(tile, terrain_height)
            or tile_within_terrain_height(tile, terrain_height + 1)
        )
    return matches


def _delete_single_tiles(iso_map: IsoMap, layer: int) -> None:
    for x, y in _cells(iso_map):
        for terrain_height in range(_LEVELS, -1, -1):
            tile = iso_map.get_tile(x, y, layer)
            if not tile_within_terrain_height(tile, terrain_height):
                continue
            if sum(_neighbour_matches(iso_map, x, y, layer, terrain_height)) < 2:
                iso_map.set_tile(x, y, layer, tile - _ROW)


def _edge_pattern(iso_map: IsoMap, x: int, y: int, layer: int, terrain_height: int) -> int:
    matches = _neighbour_matches(iso_map, x, y, layer, terrain_height)
    return sum(1 << bit for bit, matched in enumerate(matches) if matched)


def _inner_corner_pattern(iso_map: IsoMap, x: int, y: int, layer: int, terrain_height: int) -> int:
    offset = terrain_height * _ROW
    for (ax, ay), (bx, by), pairs, paint in _INNER_CORNERS:
        tile_a = iso_map.get_tile(x + ax, y + ay, layer)
        tile_b = iso_map.get_tile(x + bx, y + by, layer)
        if any(tile_a == a + offset and tile_b == b + offset for a, b in pairs):
            return paint
    return -1


def _auto_tile(iso_map: IsoMap, layer: int, pattern) -> None:
    for x, y in _cells(iso_map):
        for terrain_height in range(_LEVELS, -1, -1):
            if not tile_within_terrain_height(iso_map.get_tile(x, y, layer), terrain_height):
                continue
            paint = pattern(iso_map, x, y, layer, terrain_height)
            if paint > 0:
                iso_map.set_tile(x, y, layer, paint + 1 + _ROW * terrain_height)


def _correct_slopes(iso_map: IsoMap) -> None:
    get = iso_map.get_tile
    put = iso_map.set_tile
    for x, y in _cells(iso_map):
        for layer in range(iso_map.num_layers):
            for h in range(_LEVELS):
                row = h * _ROW
                up = (h + 1) * _ROW
                down = (h - 1) * _ROW
                if get(x, y, layer) == 4 + row and get(x + 1, y, layer) == 4 + up:
                    put(x + 1, y, layer, 3 + up)
                if get(x, y, layer) == 3 + row and get(x + 1, y, layer) == 4 + up:
                    put(x + 1, y, layer, 3 + up)
                if (get(x, y, layer) == 10 + row
                        and get(x, y - 1, layer) == 14 + row
                        and get(x, y + 1, layer) == 14 + down):
                    put(x, y, layer, 5 + up)
                if get(x, y, layer) == 10 + row and get(x, y + 1, layer) == 10 + down:
                    put(x, y, layer, 5 + up)
                if get(x, y, layer) == 13 + row and get(x - 1, y, layer) == 13 + up:
                    put(x - 1, y, layer, 6 + up)
                if get(x, y, layer) == 7 + row and get(x + 1, y, layer) == 7 + up:
                    put(x + 1, y, layer, 2 + up)
                if get(x, y, layer) == 7 + row and get(x, y + 1, layer) == 7 + up:
                    put(x, y + 1, layer, 2 + up)
                if get(x, y, layer) == 2 + row and get(x + 1, y, layer) == 7 + up:
                    put(x + 1, y, layer, 2 + up)
                if get(x, y, layer) == 2 + row and get(x, y + 1, layer) == 7 + up:
                    put(x, y + 1, layer, 2 + up)


def _fill_grass(iso_map: IsoMap) -> None:
    for x, y in _cells(iso_map):
        if iso_map.get_tile(x, y, _TERRAIN_LAYER) < 0:
            iso_map.set_tile(x, y, _TERRAIN_LAYER, _GRASS_TILE)


def _clear_edges(iso_map: IsoMap) -> None:
    last_x = iso_map.width - 1
    last_y = iso_map.height - 1
    for x, y in _cells(iso_map):
        if x in (0, last_x) or y in (0, last_y):
            for layer in range(iso_map.num_layers):
                iso_map.set_tile(x, y, layer, EMPTY_TILE)


def generate_terrain(iso_map: IsoMap, perlin_seed: int, terrain_height: int) -> IsoMap:
    """Fill the map's ground layer with auto-tiled terrain from seeded noise.

    Raises ValueError if no map is given.
    """
    if iso_map is None:
        raise ValueError("Parameter 'iso_map' is None")
    heights = _noise_heights(iso_map, perlin_seed, terrain_height)
    _remap_heights(heights, terrain_height)
    _draw_heights(iso_map, heights)
    _delete_single_tiles(iso_map, _TERRAIN_LAYER)
    _delete_single_tiles(iso_map, _TERRAIN_LAYER)
    _auto_tile(iso_map, _TERRAIN_LAYER, _edge_pattern)
    _auto_tile(iso_map, _TERRAIN_LAYER, _inner_corner_pattern)
    _correct_slopes(iso_map)
    _fill_grass(iso_map)
    _clear_edges(iso_map)
    return iso_map


def create_map(
    name: str | None,
    width: int,
    height: int,
    num_layers: int,
    tile_size: int,
    perlin_seed: int,
    terrain_height: int,
) -> IsoMap:
    """Create a map and generate its terrain."""
    iso_map = IsoMap(name, width, height, num_layers, tile_size)
    return generate_terrain(iso_map, perlin_seed, terrain_height)