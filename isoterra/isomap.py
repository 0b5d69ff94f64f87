"""A layered tile map for an isometric world and the tile set it is drawn with."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from isoterra.texture import Texture

MAP_NAME_LENGTH = 50
NUM_TILES_PER_ROW_IN_TILESET = 23
NUM_TILE_LEVELS_PER_LAYER = 6

EMPTY_TILE = -1
UNNAMED_MAP = "Unnamed map"

_DEFAULT_SIDE = 10
_DEFAULT_LAYERS = 1


@dataclass
class TileSet:
    """A texture cut into equally sized tiles by clip rectangles."""

    texture: Texture | None = None
    clip_rects: list[pygame.Rect] = field(default_factory=list)
    loaded: bool = False

    @property
    def num_clip_rects(self) -> int:
        return len(self.clip_rects)


class IsoMap:
    """A width x height grid of tiles with several layers per cell.

    Cells hold tile-set indices; ``EMPTY_TILE`` marks a cell with no tile.
    """

    def __init__(
        self,
        name: str | None = None,
        width: int = _DEFAULT_SIDE,
        height: int = _DEFAULT_SIDE,
        num_layers: int = _DEFAULT_LAYERS,
        tile_size: int = 64,
    ) -> None:
        self.width = width if width > 0 else _DEFAULT_SIDE
        self.height = height if height > 0 else _DEFAULT_SIDE
        self.num_layers = num_layers if num_layers > 0 else _DEFAULT_LAYERS
        self.name = UNNAMED_MAP if name is None else name[: MAP_NAME_LENGTH - 1]
        # Tiles are drawn as diamonds, so the logical size is half the image size.
        self.tile_size = int(tile_size / 2)
        self.tile_set = TileSet()
        self._data = [EMPTY_TILE] * (self.width * self.height * self.num_layers)

    def _index(self, x: int, y: int, layer: int) -> int | None:
        if not (0 <= x < self.width and 0 <= y < self.height and 0 <= layer < self.num_layers):
            return None
        return (y * self.width + x) * self.num_layers + layer

    def get_tile(self, x: int, y: int, layer: int) -> int:
        """The tile at (x, y) on ``layer``, or ``EMPTY_TILE`` outside the map."""
        index = self._index(x, y, layer)
        return EMPTY_TILE if index is None else self._data[index]

    def set_tile(self, x: int, y: int, layer: int, value: int) -> None:
        """Store ``value`` at (x, y) on ``layer``; positions outside the map are ignored."""
        index = self._index(x, y, layer)
        if index is not None:
            self._data[index] = value

    def load_tile_set(self, texture: Texture, tile_width: int, tile_height: int) -> TileSet:
        """Cut ``texture`` into tiles row by row and use it as the map's tile set.

        Raises ValueError if there is no texture or it is smaller than one tile.
        """
        if texture is None:
            raise ValueError("Parameter 'texture' is None")
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("Tile width and height must be positive")
        if texture.width < tile_width:
            raise ValueError("Texture width is smaller than the tile width")
        if texture.height < tile_height:
            raise ValueError("Texture height is smaller than the tile height")

        columns = texture.width // tile_width
        rows = texture.height // tile_height
        self.tile_set = TileSet(
            texture=texture,
            clip_rects=[
                pygame.Rect(column * tile_width, row * tile_height, tile_width, tile_height)
                for row in range(rows)
                for column in range(columns)
            ],
            loaded=True,
        )
        return self.tile_set