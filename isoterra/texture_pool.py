"""A collection of textures looked up by the file name they were loaded from."""

from __future__ import annotations

from typing import Callable

from isoterra.texture import Texture


def base_name(path: str) -> str:
    """The part of ``path`` after its last '/', unless that slash leads the path."""
    index = path.rfind("/")
    return path[index + 1:] if index > 0 else path


class TexturePool:
    """Loads textures once and hands them out by base file name."""

    def __init__(self, loader: Callable[[str], Texture] = Texture.from_file) -> None:
        self.loader = loader
        self._textures: dict[str, Texture] = {}

    def add(self, path: str) -> Texture:
        """Load ``path`` and store it under its base name; return the stored texture.

        A name already in the pool keeps its first texture.
        """
        name = base_name(path)
        existing = self._textures.get(name)
        if existing is not None:
            return existing
        texture = self.loader(path)
        self._textures[name] = texture
        return texture

    def remove(self, name: str) -> None:
        """Drop the texture called ``name``; raise KeyError if there is none."""
        try:
            del self._textures[name]
        except KeyError:
            raise KeyError(f"Texture:{name} was not found in the texture pool") from None

    def get(self, name: str) -> Texture:
        """The texture called ``name``; raise KeyError if there is none."""
        try:
            return self._textures[name]
        except KeyError:
            raise KeyError(f"Could not find texture:{name}") from None

    def clear(self) -> None:
        """Release every texture in the pool."""
        self._textures.clear()

    def __len__(self) -> int:
        return len(self._textures)

    def __contains__(self, name: object) -> bool:
        return name in self._textures