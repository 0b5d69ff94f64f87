"""Camera, mouse picking and drawing for an isometric tile map."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence

import pygame

from isoterra.isomap import IsoMap
from isoterra.logger import default_logger
from isoterra.texture import WINDOW_HEIGHT, WINDOW_WIDTH

DEFAULT_SCROLL_SPEED = 1200
MIN_ZOOM = 1.0
MAX_ZOOM = 3.0
ZOOM_STEP = 0.25
_EDGE_MARGIN = 2


class NoMapError(RuntimeError):
    """Raised when an operation needs a map but the engine has none."""


class GameMode(IntEnum):
    OVERVIEW = 0
    OBJECT_FOCUS = 1


def _cmod(a: float, b: int) -> int:
    """Integer remainder that keeps the sign of the dividend."""
    return int(math.fmod(int(a), b))


def _cdiv(a: int, b: int) -> int:
    """Integer division that truncates towards zero."""
    return int(a / b)


def convert_2d_to_iso(x: float, y: float) -> tuple[int, int]:
    """Project a cartesian point onto isometric screen coordinates."""
    return int(x - y), int((x + y) * 0.5)


def convert_iso_to_2d(x: float, y: float) -> tuple[int, int]:
    """Map isometric screen coordinates back to a cartesian point."""
    return int((2 * y + x) * 0.5), int((2 * y - x) * 0.5)


def _mirror(value: float) -> float:
    """Flip the sign of a non-zero value, leaving zero untouched."""
    if value < 0:
        return abs(value)
    if value > 0:
        return -abs(value)
    return value


class IsoEngine:
    """Holds the camera, zoom and mouse state for drawing an isometric map."""

    def __init__(self, iso_map: IsoMap | None = None) -> None:
        self.iso_map = iso_map
        self.scroll_x = 0
        self.scroll_y = 0
        self.map_scroll_speed = DEFAULT_SCROLL_SPEED
        self.map_scroll_2d_pos = pygame.math.Vector2(0, 0)
        self.zoom_level = MIN_ZOOM
        self.mouse_rect = pygame.Rect(0, 0, 1, 1)
        self.mouse_point = pygame.math.Vector2(0, 0)
        self.tile_pos = pygame.math.Vector2(0, 0)
        self.last_tile_clicked = -1
        self.game_mode = GameMode.OVERVIEW

    def _require_map(self) -> IsoMap:
        if self.iso_map is None:
            default_logger().error("isoEngine->isoMap is None!")
            raise NoMapError("The iso engine has no map")
        return self.iso_map

    def _scroll_correction(self, tile_size: int) -> tuple[int, int]:
        modulus = int(tile_size * self.zoom_level)
        correct_x = _cmod(self.map_scroll_2d_pos.x, modulus) * 2
        correct_y = _cmod(self.map_scroll_2d_pos.y, modulus)
        return correct_x, correct_y

    def get_tile_coordinates(self, x: float, y: float) -> tuple[int, int]:
        """The tile that the cartesian point (x, y) falls in."""
        tile_size = self._require_map().tile_size
        return int(x / tile_size), int(y / tile_size)

    def iso_camera_to_cartesian(self) -> tuple[float, float]:
        """The camera's isometric scroll expressed as a cartesian position."""
        return self.iso_point_to_cartesian(self.scroll_x, self.scroll_y)

    def iso_point_to_cartesian(self, x: float, y: float) -> tuple[float, float]:
        """An isometric scroll point expressed as a cartesian position."""
        iso_x, iso_y = convert_2d_to_iso(x, y)
        return _mirror(iso_x * 0.5), iso_y

    def cartesian_camera_to_isometric(self, x: float, y: float) -> tuple[int, int]:
        """Set the isometric scroll from a cartesian camera position and return it."""
        iso_x = _mirror(int(x) * 2)
        flat_x, flat_y = convert_iso_to_2d(iso_x, y)
        self.scroll_x = int(flat_x)
        self.scroll_y = int(flat_y)
        return self.scroll_x, self.scroll_y

    def _apply_scroll(self) -> None:
        self.cartesian_camera_to_isometric(self.map_scroll_2d_pos.x, self.map_scroll_2d_pos.y)

    def update_mouse_pos(self, x: int, y: int) -> None:
        """Record the mouse position in window pixels, adjusted for zoom."""
        self.mouse_rect.x = int(x / self.zoom_level)
        self.mouse_rect.y = int(y / self.zoom_level)

    def scroll_map_with_mouse(self, delta_time: float) -> None:
        """Scroll the map when the mouse touches an edge of the window."""
        zoom = self.zoom_level
        zoom_edge_x = int(WINDOW_WIDTH * zoom - WINDOW_WIDTH)
        zoom_edge_y = int(WINDOW_HEIGHT * zoom - WINDOW_HEIGHT)
        step = self.map_scroll_speed * delta_time

        if self.mouse_rect.x < _EDGE_MARGIN:
            self.map_scroll_2d_pos.x -= step
            self._apply_scroll()
        if self.mouse_rect.x > WINDOW_WIDTH - zoom_edge_x / zoom - _EDGE_MARGIN:
            self.map_scroll_2d_pos.x += step
            self._apply_scroll()
        if self.mouse_rect.y < _EDGE_MARGIN:
            self.map_scroll_2d_pos.y += step
            self._apply_scroll()
        if self.mouse_rect.y > WINDOW_HEIGHT - zoom_edge_y / zoom - _EDGE_MARGIN:
            self.map_scroll_2d_pos.y -= step
            self._apply_scroll()

    def draw_iso_mouse(self, target: pygame.Surface) -> pygame.Rect:
        """Draw the tile cursor under the mouse; return the area drawn."""
        iso_map = self._require_map()
        tile_set = iso_map.tile_set
        if tile_set.texture is None or not tile_set.clip_rects:
            raise ValueError("The map has no tile set loaded")
        tile_size = iso_map.tile_size
        correct_x, correct_y = self._scroll_correction(tile_size)

        self.mouse_point.x = _cdiv(self.mouse_rect.x, tile_size) * tile_size
        self.mouse_point.y = _cdiv(self.mouse_rect.y, tile_size) * tile_size
        # Every other column is shifted down half a tile so its diamonds can be picked too.
        if _cmod(_cdiv(int(self.mouse_point.x), tile_size), 2):
            self.mouse_point.y += tile_size * 0.5

        zoom = self.zoom_level
        return tile_set.texture.render_clip_scale(
            target,
            int(zoom * self.mouse_point.x - correct_x),
            int(zoom * self.mouse_point.y + correct_y),
            tile_set.clip_rects[0],
            zoom,
        )

    def draw_iso_map(self, target: pygame.Surface) -> int:
        """Draw the visible tiles of the ground layer; return how many were drawn."""
        iso_map = self.iso_map
        if iso_map is None:
            return 0
        tile_set = iso_map.tile_set
        if tile_set.texture is None:
            return 0

        zoom = self.zoom_level
        tile_size = iso_map.tile_size
        start_x = int(-3 / zoom + (self.map_scroll_2d_pos.x / zoom / tile_size) * 2)
        start_y = int(-20 / zoom + abs(self.map_scroll_2d_pos.y / zoom / tile_size) * 2)
        tiles_wide = int((WINDOW_WIDTH // tile_size) / zoom)
        tiles_high = int(((WINDOW_HEIGHT // tile_size) / zoom) * 2)

        drawn = 0
        for i in range(start_y, start_y + tiles_high + 26):
            for j in range(start_x, start_x + tiles_wide + 5):
                if (j & 1) != (i & 1):
                    continue
                x = (i + j) // 2
                y = (i - j) // 2
                if not (0 <= x < iso_map.width and 0 <= y < iso_map.height):
                    continue
                tile = iso_map.get_tile(x, y, 0)
                if not 0 <= tile < len(tile_set.clip_rects):
                    continue
                px, py = convert_2d_to_iso(
                    x * zoom * tile_size + self.scroll_x,
                    y * zoom * tile_size + self.scroll_y,
                )
                tile_set.texture.render_clip_scale(target, px, py, tile_set.clip_rects[tile], zoom)
                drawn += 1
        return drawn

    def get_mouse_tile_pos(self) -> tuple[int, int]:
        """The map tile under the last drawn mouse cursor."""
        iso_map = self._require_map()
        tile_size = iso_map.tile_size
        zoom = self.zoom_level
        correct_x, correct_y = self._scroll_correction(tile_size)

        flat_x, flat_y = convert_iso_to_2d(self.mouse_point.x, self.mouse_point.y)
        tile_x, tile_y = self.get_tile_coordinates(flat_x, flat_y)
        shift_x, shift_y = convert_2d_to_iso(correct_x, correct_y)

        point_y = tile_y - ((self.scroll_y - shift_y) / tile_size) / zoom
        if self.map_scroll_2d_pos.y > 0:
            point_y += 1
        point_x = tile_x - ((self.scroll_x + shift_x) / tile_size) / zoom
        if self.map_scroll_2d_pos.x > 0:
            point_x += 1
        return int(point_x), int(point_y)

    def center_map_to_tile_under_mouse(self) -> None:
        """Scroll so the tile under the mouse is centred, when zoomed in."""
        iso_map = self._require_map()
        zoom = self.zoom_level
        if zoom <= MIN_ZOOM or zoom >= MAX_ZOOM:
            return
        tile_size = iso_map.tile_size
        offset_x = int(WINDOW_WIDTH / zoom / 2)
        offset_y = int(WINDOW_HEIGHT / zoom / 2)

        tile_x, tile_y = self.get_mouse_tile_pos()
        self.tile_pos.x = tile_x * tile_size
        self.tile_pos.y = tile_y * tile_size

        iso_x, iso_y = convert_2d_to_iso(tile_x, tile_y)
        self.map_scroll_2d_pos.x = (iso_x * tile_size * zoom) / 2 - (offset_x * zoom) / 2
        self.map_scroll_2d_pos.y = -(iso_y * tile_size * zoom) + offset_y * zoom
        self._apply_scroll()

    def center_map(self, point: Sequence[float], size: Sequence[float] | None = None) -> None:
        """Scroll so ``point`` is centred; in object focus mode ``size`` offsets the view."""
        px, py = point
        zoom = self.zoom_level
        offset_x = int(WINDOW_WIDTH / zoom * 0.5)
        offset_y = int(WINDOW_HEIGHT / zoom * 0.5)
        size_x, size_y = size if size is not None else (0.0, 0.0)
        focus = self.game_mode == GameMode.OBJECT_FOCUS

        self.tile_pos.x = px
        self.tile_pos.y = py
        iso_x, iso_y = convert_2d_to_iso(px, py)

        scroll_x = math.floor(iso_x * zoom) * 0.5 - offset_x * zoom * 0.5
        if focus:
            scroll_x += int(size_x * zoom * 0.5) * 0.5
        scroll_y = -math.floor(iso_y * zoom) + offset_y * zoom
        if focus:
            scroll_y -= int(size_y * zoom * 0.5)

        self.map_scroll_2d_pos.x = scroll_x
        self.map_scroll_2d_pos.y = scroll_y
        self._apply_scroll()

    def get_mouse_tile_click(self) -> int:
        """Remember and return the tile value under the mouse, if it is on the map."""
        iso_map = self._require_map()
        x, y = self.get_mouse_tile_pos()
        if 0 <= x < iso_map.width and 0 <= y < iso_map.height:
            self.last_tile_clicked = iso_map.get_tile(x, y, 0)
        return self.last_tile_clicked

    def zoom_in(self) -> None:
        """Zoom in one step, up to the maximum."""
        if self.zoom_level < MAX_ZOOM:
            self.zoom_level += ZOOM_STEP
            if self.game_mode == GameMode.OVERVIEW:
                self.center_map((self.tile_pos.x, self.tile_pos.y))

    def zoom_out(self) -> None:
        """Zoom out one step, down to the minimum."""
        if self.zoom_level > MIN_ZOOM:
            self.zoom_level -= ZOOM_STEP
            if self.game_mode == GameMode.OVERVIEW:
                self.center_map((self.tile_pos.x, self.tile_pos.y))

    def set_game_mode(self, game_mode: GameMode | int) -> None:
        """Switch between overview and object focus; raise ValueError for unknown modes."""
        self.game_mode = GameMode(game_mode)