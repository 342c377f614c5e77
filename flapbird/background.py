"""Endlessly scrolling sky and ground."""

from __future__ import annotations

import math
from typing import Any

import pygame

from .assets import AssetManager


def _advance(offset: float, speed: float, delta_time: float, width: float) -> float:
    offset += speed * delta_time
    if offset >= width:
        offset = math.fmod(offset, width)
    return offset


class Background:
    """Two layers that scroll left at different speeds and wrap around."""

    BACKGROUND_SPEED = 50.0
    GROUND_SPEED = 100.0

    def __init__(self, window: Any, assets: AssetManager) -> None:
        self.window = window
        width, height = window.get_size()
        self.ground_y = height * 0.9

        sky = assets.texture("background")
        sky_scale = self.ground_y / sky.get_height()
        self.background_width = sky.get_width() * sky_scale
        self._sky = pygame.transform.scale(
            sky,
            (max(1, round(self.background_width)), max(1, round(sky.get_height() * sky_scale))),
        )

        ground = assets.texture("ground")
        ground_scale_x = width / ground.get_width()
        ground_scale_y = (height - self.ground_y) / ground.get_height()
        self.ground_width = ground.get_width() * ground_scale_x
        self._ground = pygame.transform.scale(
            ground,
            (
                max(1, round(self.ground_width)),
                max(1, round(ground.get_height() * ground_scale_y)),
            ),
        )

        self.background_offset = 0.0
        self.ground_offset = 0.0

    def update(self, delta_time: float) -> None:
        self.background_offset = _advance(
            self.background_offset, self.BACKGROUND_SPEED, delta_time, self.background_width
        )
        self.ground_offset = _advance(
            self.ground_offset, self.GROUND_SPEED, delta_time, self.ground_width
        )

    def _tile(self, image: pygame.Surface, width: float, offset: float, y: float) -> None:
        tiles = math.ceil(self.window.get_width() / width) + 1
        for tile in range(tiles):
            self.window.blit(image, (round(-offset + tile * width), round(y)))

    def render(self) -> None:
        self._tile(self._sky, self.background_width, self.background_offset, 0.0)
        self._tile(self._ground, self.ground_width, self.ground_offset, self.ground_y)

    def reset(self) -> None:
        self.background_offset = 0.0
        self.ground_offset = 0.0