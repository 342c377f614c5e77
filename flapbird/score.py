"""Current and best score, with the best score kept in a file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import pygame

from .assets import AssetManager

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


class ScoreManager:
    """Tracks the score, draws it centred near the top and saves new bests."""

    def __init__(
        self,
        window: Any,
        assets: AssetManager,
        path: str | os.PathLike[str] = "best_score.txt",
    ) -> None:
        self.window = window
        self.path = Path(path)
        self._face = assets.font("pixel")
        self._current = 0
        self._best = 0
        self.text_surface: pygame.Surface | None = None
        self.text_position = (0.0, 0.0)
        self._load_best_score()
        self._update_text()

    @property
    def current_score(self) -> int:
        return self._current

    @property
    def best_score(self) -> int:
        return self._best

    def render(self) -> None:
        if self.text_surface is not None:
            self.window.blit(
                self.text_surface,
                (round(self.text_position[0]), round(self.text_position[1])),
            )

    def add_score(self, points: int = 1) -> None:
        self._current += points
        if self._current > self._best:
            self._best = self._current
            self._save_best_score()
        self._update_text()

    def reset(self) -> None:
        self._current = 0
        self._update_text()

    def _update_text(self) -> None:
        width, height = self.window.get_size()
        font = self._face.sized(int(height * 0.053))
        label = str(self._current)
        fill = font.render(label, True, _WHITE)
        thickness = round(height * 0.003)

        if thickness > 0:
            surface = pygame.Surface(
                (fill.get_width() + 2 * thickness, fill.get_height() + 2 * thickness),
                pygame.SRCALPHA,
            )
            outline = font.render(label, True, _BLACK)
            for dx in range(-thickness, thickness + 1):
                for dy in range(-thickness, thickness + 1):
                    if dx * dx + dy * dy <= thickness * thickness:
                        surface.blit(outline, (dx + thickness, dy + thickness))
            surface.blit(fill, (thickness, thickness))
        else:
            surface = fill

        self.text_surface = surface
        self.text_position = ((width - surface.get_width()) / 2.0, height * 0.083)

    def _save_best_score(self) -> None:
        try:
            self.path.write_text(str(self._best))
        except OSError:
            pass

    def _load_best_score(self) -> None:
        try:
            content = self.path.read_text()
        except OSError:
            return
        match = _LEADING_INT.match(content)
        self._best = int(match.group(1)) if match else 0