"""Textures drawn with clipping, scaling, rotation and flipping, and the game window."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntFlag

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720


class GraphicsError(RuntimeError):
    """Raised when a texture or the window cannot be created."""


class Flip(IntFlag):
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


def _default_cliprect() -> pygame.Rect:
    return pygame.Rect(0, 0, 100, 100)


@dataclass
class Texture:
    """An image together with its drawing state."""

    surface: pygame.Surface
    width: int
    height: int
    x: int = 0
    y: int = 0
    angle: float = 0.0
    center: tuple[int, int] | None = None
    cliprect: pygame.Rect = field(default_factory=_default_cliprect)
    flip: Flip = Flip.NONE

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> "Texture":
        width, height = surface.get_size()
        return cls(surface=surface, width=width, height=height)

    @classmethod
    def from_file(cls, filename: str) -> "Texture":
        """Load an image file; raise GraphicsError if it cannot be read."""
        try:
            surface = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            raise GraphicsError(f"Could not load image:{filename}! {exc}") from exc
        return cls.from_surface(surface)

    def scaled_quad(self, x: int, y: int, cliprect: pygame.Rect | None, scale: float) -> pygame.Rect:
        """Destination rectangle for drawing at (x, y) with the given scale."""
        w = self.width * scale
        h = self.height * scale
        diff_x = x * scale - x
        diff_y = y * scale - y
        quad = pygame.Rect(int(x * scale - diff_x), int(y * scale - diff_y), int(w), int(h))
        if cliprect is not None:
            clip = pygame.Rect(cliprect)
            quad.w = int(clip.w * scale)
            quad.h = int(clip.h * scale)
            if scale != 1.0:
                # Grow by a pixel so neighbouring scaled tiles leave no seams.
                quad.w += 1
                quad.h += 1
        return quad

    def render_clip(self, target: pygame.Surface, x: int, y: int, cliprect: pygame.Rect) -> pygame.Rect:
        """Draw the clipped part of the texture at (x, y) at its natural size."""
        self.x = x
        self.y = y
        self.cliprect = pygame.Rect(cliprect)
        quad = pygame.Rect(x, y, self.cliprect.w, self.cliprect.h)
        return self._draw(target, self.cliprect, quad, self.center)

    def render_clip_scale(
        self,
        target: pygame.Surface,
        x: int,
        y: int,
        cliprect: pygame.Rect | None,
        scale: float,
    ) -> pygame.Rect:
        """Draw the texture, or its clipped part, scaled by ``scale``."""
        quad = self.scaled_quad(x, y, cliprect, scale)
        if cliprect is not None:
            self.cliprect = pygame.Rect(cliprect)
            return self._draw(target, self.cliprect, quad, None)
        return self._draw(target, None, quad, None)

    def _draw(
        self,
        target: pygame.Surface,
        source: pygame.Rect | None,
        quad: pygame.Rect,
        center: tuple[int, int] | None,
    ) -> pygame.Rect:
        empty = pygame.Rect(quad.x, quad.y, 0, 0)
        if quad.w <= 0 or quad.h <= 0:
            return empty
        if source is None:
            image = self.surface
        else:
            area = pygame.Rect(source).clip(self.surface.get_rect())
            if area.w == 0 or area.h == 0:
                return empty
            image = self.surface.subsurface(area)

        if image.get_size() != quad.size:
            image = pygame.transform.scale(image, quad.size)
        if self.flip:
            image = pygame.transform.flip(
                image,
                bool(self.flip & Flip.HORIZONTAL),
                bool(self.flip & Flip.VERTICAL),
            )

        if not self.angle:
            return target.blit(image, quad.topleft)

        half = pygame.math.Vector2(quad.w / 2, quad.h / 2)
        pivot_offset = pygame.math.Vector2(center) if center is not None else half
        pivot = pygame.math.Vector2(quad.topleft) + pivot_offset
        new_centre = pivot + (half - pivot_offset).rotate(self.angle)
        rotated = pygame.transform.rotate(image, -self.angle)
        dest = rotated.get_rect(center=(round(new_centre.x), round(new_centre.y)))
        return target.blit(rotated, dest)


class RenderWindow:
    """A resizable game window with image loading enabled."""

    def __init__(self, caption: str, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        pygame.init()
        try:
            self._surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.quit()
            raise GraphicsError(f"Could not create window: {exc}") from exc
        pygame.display.set_caption(caption)
        if not pygame.image.get_extended():
            self.close()
            raise GraphicsError("Could not initialize image loading: PNG support is missing")
        self.caption = caption
        self._open = True

    def surface(self) -> pygame.Surface:
        """The surface everything is drawn onto."""
        return self._surface

    def close(self) -> None:
        """Destroy the window and shut the display down."""
        pygame.display.quit()
        pygame.quit()
        self._open = False

    def __enter__(self) -> "RenderWindow":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()