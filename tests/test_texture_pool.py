import pygame
import pytest

from isoterra.texture import GraphicsError, Texture
from isoterra.texture_pool import TexturePool, base_name


class _Loader:
    def __init__(self):
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        return Texture.from_surface(pygame.Surface((len(self.calls), 1)))


def _failing_loader(path):
    raise GraphicsError(f"Could not load image:{path}")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("data/textures/isotiles.png", "isotiles.png"),
        ("character.png", "character.png"),
        ("/isotree.png", "/isotree.png"),
        ("/data/isotree.png", "isotree.png"),
    ],
)
def test_base_name(path, expected):
    assert base_name(path) == expected


def test_add_and_get_by_base_name():
    loader = _Loader()
    pool = TexturePool(loader)
    texture = pool.add("data/textures/isotiles.png")
    assert pool.get("isotiles.png") is texture
    assert "isotiles.png" in pool
    assert len(pool) == 1
    assert loader.calls == ["data/textures/isotiles.png"]


def test_get_full_path_is_not_found():
    pool = TexturePool(_Loader())
    pool.add("data/textures/character.png")
    with pytest.raises(KeyError):
        pool.get("data/textures/character.png")


def test_duplicate_name_keeps_first_texture():
    loader = _Loader()
    pool = TexturePool(loader)
    first = pool.add("a/tile.png")
    second = pool.add("b/tile.png")
    assert second is first
    assert len(pool) == 1
    assert pool.get("tile.png") is first


def test_remove_drops_texture():
    pool = TexturePool(_Loader())
    pool.add("data/textures/isotree.png")
    pool.add("data/textures/character.png")
    pool.remove("isotree.png")
    assert "isotree.png" not in pool
    assert len(pool) == 1
    assert pool.get("character.png").width == 2


def test_remove_missing_raises():
    pool = TexturePool(_Loader())
    with pytest.raises(KeyError):
        pool.remove("isotree.png")


def test_get_missing_raises():
    pool = TexturePool(_Loader())
    with pytest.raises(KeyError):
        pool.get("nothing.png")


def test_failed_load_leaves_pool_unchanged():
    pool = TexturePool(_failing_loader)
    with pytest.raises(GraphicsError):
        pool.add("data/textures/missing.png")
    assert len(pool) == 0
    assert "missing.png" not in pool


def test_clear_empties_pool():
    pool = TexturePool(_Loader())
    pool.add("one.png")
    pool.add("two.png")
    pool.clear()
    assert len(pool) == 0
    with pytest.raises(KeyError):
        pool.get("one.png")


def test_default_loader_reads_files(tmp_path):
    path = tmp_path / "tiles.bmp"
    surface = pygame.Surface((6, 5))
    pygame.image.save(surface, str(path))
    pool = TexturePool()
    texture = pool.add(str(path).replace("\\", "/"))
    assert pool.get("tiles.bmp") is texture
    assert (texture.width, texture.height) == (6, 5)