"""Named storage for textures, fonts, sounds and music."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any

import pygame


def _report(kind: str, filename: str) -> None:
    print(f"Error loading {kind}: {filename}", file=sys.stderr)


@dataclass
class FontFace:
    """A font file that can be rendered at any character size."""

    path: str
    _sizes: dict[int, pygame.font.Font] = field(default_factory=dict, repr=False)

    def sized(self, size: int) -> pygame.font.Font:
        """Return the font at ``size`` pixels, created once per size."""
        font = self._sizes.get(size)
        if font is None:
            font = pygame.font.Font(self.path, size)
            self._sizes[size] = font
        return font


@dataclass
class Music:
    """A streamed music track played through the shared music channel."""

    path: str
    looping: bool = False
    volume: float = 100.0

    def play(self) -> None:
        """Start streaming the track from the beginning."""
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(self.path)
        pygame.mixer.music.set_volume(max(0.0, min(self.volume, 100.0)) / 100.0)
        pygame.mixer.music.play(loops=-1 if self.looping else 0)

    def stop(self) -> None:
        """Stop the track if the mixer is running."""
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()


class AssetManager:
    """Loads game assets once and hands them out by name.

    A failed load is reported on standard error and leaves nothing stored;
    asking for a name that was never loaded raises ``KeyError``.
    """

    def __init__(self, window: Any) -> None:
        self.window = window
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, FontFace] = {}
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._music: dict[str, Music] = {}

    def load_texture(self, name: str, filename: str) -> None:
        try:
            surface = pygame.image.load(filename)
        except (pygame.error, OSError):
            _report("texture", filename)
            return
        self._textures[name] = surface

    def load_font(self, name: str, filename: str) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        face = FontFace(filename)
        try:
            face.sized(12)
        except (pygame.error, OSError):
            _report("font", filename)
            return
        self._fonts[name] = face

    def load_sound(self, name: str, filename: str) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            sound = pygame.mixer.Sound(filename)
        except (pygame.error, OSError):
            _report("sound", filename)
            return
        self._sounds[name] = sound

    def load_music(self, name: str, filename: str) -> None:
        try:
            with open(filename, "rb") as stream:
                stream.read(1)
        except OSError:
            _report("music", filename)
            return
        self._music[name] = Music(filename)

    def texture(self, name: str) -> pygame.Surface:
        return self._textures[name]

    def font(self, name: str) -> FontFace:
        return self._fonts[name]

    def sound(self, name: str) -> pygame.mixer.Sound:
        return self._sounds[name]

    def music(self, name: str) -> Music:
        return self._music[name]