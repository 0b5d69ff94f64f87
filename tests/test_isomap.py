import pygame
import pytest

from isoterra.isomap import (
    EMPTY_TILE,
    MAP_NAME_LENGTH,
    UNNAMED_MAP,
    IsoMap,
    TileSet,
)
from isoterra.texture import Texture


def _texture(width, height):
    return Texture.from_surface(pygame.Surface((width, height)))


def test_new_map_is_empty():
    iso_map = IsoMap("Testmap", 5, 4, 2, 64)
    assert all(
        iso_map.get_tile(x, y, layer) == EMPTY_TILE
        for x in range(5)
        for y in range(4)
        for layer in range(2)
    )


def test_nonpositive_dimensions_fall_back_to_defaults():
    iso_map = IsoMap("m", 0, -3, 0, 64)
    assert (iso_map.width, iso_map.height, iso_map.num_layers) == (10, 10, 1)


def test_tile_size_is_halved():
    assert IsoMap("m", 3, 3, 1, 64).tile_size == 32
    assert IsoMap("m", 3, 3, 1, 65).tile_size == 32


def test_name_is_truncated():
    iso_map = IsoMap("x" * 80, 3, 3, 1, 64)
    assert iso_map.name == "x" * (MAP_NAME_LENGTH - 1)


def test_missing_name_uses_placeholder():
    assert IsoMap(None, 3, 3, 1, 64).name == UNNAMED_MAP


def test_set_and_get_round_trip():
    iso_map = IsoMap("m", 6, 4, 2, 64)
    iso_map.set_tile(5, 3, 1, 42)
    iso_map.set_tile(0, 0, 0, 7)
    assert iso_map.get_tile(5, 3, 1) == 42
    assert iso_map.get_tile(0, 0, 0) == 7
    assert iso_map.get_tile(5, 3, 0) == EMPTY_TILE


def test_layers_are_independent():
    iso_map = IsoMap("m", 3, 3, 2, 64)
    iso_map.set_tile(1, 1, 0, 3)
    iso_map.set_tile(1, 1, 1, 9)
    assert (iso_map.get_tile(1, 1, 0), iso_map.get_tile(1, 1, 1)) == (3, 9)


@pytest.mark.parametrize("x,y,layer", [(-1, 0, 0), (0, -1, 0), (4, 0, 0), (0, 3, 0), (0, 0, 2), (0, 0, -1)])
def test_out_of_bounds_reads_empty_and_writes_are_ignored(x, y, layer):
    iso_map = IsoMap("m", 4, 3, 2, 64)
    iso_map.set_tile(x, y, layer, 5)
    assert iso_map.get_tile(x, y, layer) == EMPTY_TILE
    assert all(
        iso_map.get_tile(cx, cy, cl) == EMPTY_TILE
        for cx in range(4)
        for cy in range(3)
        for cl in range(2)
    )


def test_load_tile_set_cuts_rows_then_columns():
    iso_map = IsoMap("m", 3, 3, 1, 64)
    texture = _texture(128, 160)
    tile_set = iso_map.load_tile_set(texture, 64, 80)
    assert tile_set is iso_map.tile_set
    assert tile_set.texture is texture
    assert tile_set.loaded
    assert tile_set.num_clip_rects == 4
    assert tile_set.clip_rects[0] == pygame.Rect(0, 0, 64, 80)
    assert tile_set.clip_rects[1] == pygame.Rect(64, 0, 64, 80)
    assert tile_set.clip_rects[2] == pygame.Rect(0, 80, 64, 80)


def test_tile_rects_lie_inside_texture():
    iso_map = IsoMap("m", 3, 3, 1, 64)
    texture = _texture(150, 170)
    tile_set = iso_map.load_tile_set(texture, 64, 80)
    bounds = pygame.Rect(0, 0, 150, 170)
    assert all(bounds.contains(rect) for rect in tile_set.clip_rects)
    assert all(rect.size == (64, 80) for rect in tile_set.clip_rects)


def test_reloading_replaces_tile_set():
    iso_map = IsoMap("m", 3, 3, 1, 64)
    iso_map.load_tile_set(_texture(128, 160), 64, 80)
    second = _texture(64, 80)
    tile_set = iso_map.load_tile_set(second, 64, 80)
    assert tile_set.texture is second
    assert tile_set.clip_rects == [pygame.Rect(0, 0, 64, 80)]


def test_new_map_has_empty_tile_set():
    iso_map = IsoMap("m", 3, 3, 1, 64)
    assert iso_map.tile_set == TileSet()
    assert iso_map.tile_set.num_clip_rects == 0


@pytest.mark.parametrize("size", [(32, 160), (128, 40)])
def test_texture_smaller_than_tile_is_rejected(size):
    iso_map = IsoMap("m", 3, 3, 1, 64)
    with pytest.raises(ValueError):
        iso_map.load_tile_set(_texture(*size), 64, 80)
    assert iso_map.tile_set.texture is None


def test_missing_texture_is_rejected():
    iso_map = IsoMap("m", 3, 3, 1, 64)
    with pytest.raises(ValueError):
        iso_map.load_tile_set(None, 64, 80)