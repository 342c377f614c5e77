"""The bird the player steers and the pipes it has to fly through."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import pygame

from .assets import AssetManager


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in window coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap; touching edges do not count."""
        left1, right1 = sorted((self.left, self.right))
        top1, bottom1 = sorted((self.top, self.bottom))
        left2, right2 = sorted((other.left, other.right))
        top2, bottom2 = sorted((other.top, other.bottom))
        return max(left1, left2) < min(right1, right2) and max(top1, top2) < min(
            bottom1, bottom2
        )


@dataclass
class _Sprite:
    """A region of a texture placed with origin, scale, rotation and position."""

    texture: pygame.Surface
    area: tuple[int, int, int, int]
    position: tuple[float, float] = (0.0, 0.0)
    origin: tuple[float, float] = (0.0, 0.0)
    scale: tuple[float, float] = (1.0, 1.0)
    rotation: float = 0.0

    def transform(self, local_x: float, local_y: float) -> tuple[float, float]:
        scale_x, scale_y = self.scale
        origin_x, origin_y = self.origin
        x = (local_x - origin_x) * scale_x
        y = (local_y - origin_y) * scale_y
        angle = math.radians(self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        return (
            self.position[0] + x * cos - y * sin,
            self.position[1] + x * sin + y * cos,
        )

    def global_bounds(self) -> Rect:
        width, height = self.area[2], self.area[3]
        corners = [self.transform(x, y) for x, y in ((0, 0), (width, 0), (0, height), (width, height))]
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def draw(self, target: pygame.Surface) -> None:
        area = pygame.Rect(self.area)
        clip = area.clip(self.texture.get_rect())
        if clip.width <= 0 or clip.height <= 0:
            return
        scale_x, scale_y = self.scale
        size = (
            max(1, round(abs(clip.width * scale_x))),
            max(1, round(abs(clip.height * scale_y))),
        )
        image = pygame.transform.scale(self.texture.subsurface(clip), size)
        if scale_x < 0 or scale_y < 0:
            image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
        if self.rotation:
            image = pygame.transform.rotate(image, -self.rotation)
        center = self.transform(
            clip.x - area.x + clip.width / 2, clip.y - area.y + clip.height / 2
        )
        target.blit(image, image.get_rect(center=(round(center[0]), round(center[1]))))


class Pipe:
    """A pair of pipes, one above and one below a gap, moving to the left."""

    SPEED = 200.0
    _AREA = (64, 0, 32, 80)

    def __init__(
        self, window: Any, assets: AssetManager, x: float, gap_y: float, gap_size: float
    ) -> None:
        self.window = window
        self.x = x
        self.gap_y = gap_y
        self.gap_size = gap_size

        width, height = window.get_size()
        self.pipe_width = width * 0.065
        self.pipe_height = height * 0.533
        scale_x = self.pipe_width / self._AREA[2]
        scale_y = self.pipe_height / self._AREA[3]

        texture = assets.texture("pipe")
        self._top = _Sprite(
            texture, self._AREA, origin=(0.0, self.pipe_height), scale=(scale_x, -scale_y)
        )
        self._bottom = _Sprite(texture, self._AREA, scale=(scale_x, scale_y))
        self._place()

    def _place(self) -> None:
        half_gap = self.gap_size / 2
        self._top.position = (self.x, self.gap_y - half_gap)
        self._bottom.position = (self.x, self.gap_y + half_gap)

    def update(self, delta_time: float) -> None:
        self.x -= self.SPEED * delta_time
        self._place()

    def render(self) -> None:
        self._top.draw(self.window)
        self._bottom.draw(self.window)

    def top_bounds(self) -> Rect:
        return self._top.global_bounds()

    def bottom_bounds(self) -> Rect:
        return self._bottom.global_bounds()

    def is_off_screen(self) -> bool:
        return self.x + self.pipe_width < 0

    def has_passed_player(self, player_x: float) -> bool:
        return self.x + self.pipe_width < player_x


class Player:
    """The bird: falls under gravity, jumps on demand and flaps its wings."""

    FRAME_COUNT = 4
    FRAME_WIDTH = 16
    FRAME_HEIGHT = 16
    ANIMATION_SPEED = 0.1
    GRAVITY = 980.0
    JUMP_FORCE = -350.0
    MAX_FALL_SPEED = 500.0

    def __init__(self, window: Any, assets: AssetManager) -> None:
        self.window = window
        width, height = window.get_size()
        self.start_x = width * 0.125
        self.start_y = height * 0.5
        self.ground_y = height * 0.9

        scale = min(width / 400.0, height / 300.0)
        self._sprite = _Sprite(
            assets.texture("bird"),
            (0, 0, self.FRAME_WIDTH, self.FRAME_HEIGHT),
            origin=(self.FRAME_WIDTH / 2, self.FRAME_HEIGHT / 2),
            scale=(scale, scale),
        )
        self.velocity = 0.0
        self.frame = 0
        self._animation_timer = 0.0
        self.reset()

    @property
    def position(self) -> tuple[float, float]:
        return self._sprite.position

    @property
    def rotation(self) -> float:
        return self._sprite.rotation

    def update(self, delta_time: float) -> None:
        self._update_animation(delta_time)
        self._update_physics(delta_time)

    def render(self) -> None:
        self._sprite.draw(self.window)

    def jump(self) -> None:
        self.velocity = self.JUMP_FORCE

    def reset(self) -> None:
        self._sprite.position = (self.start_x, self.start_y)
        self.velocity = 0.0
        self.frame = 0
        self._animation_timer = 0.0

    def bounds(self) -> Rect:
        return self._sprite.global_bounds()

    def is_on_ground(self) -> bool:
        return self._sprite.position[1] >= self.ground_y

    def _update_animation(self, delta_time: float) -> None:
        self._animation_timer += delta_time
        if self._animation_timer >= self.ANIMATION_SPEED:
            self.frame = (self.frame + 1) % self.FRAME_COUNT
            self._sprite.area = (
                self.frame * self.FRAME_WIDTH,
                0,
                self.FRAME_WIDTH,
                self.FRAME_HEIGHT,
            )
            self._animation_timer = 0.0

    def _update_physics(self, delta_time: float) -> None:
        self.velocity = min(self.velocity + self.GRAVITY * delta_time, self.MAX_FALL_SPEED)

        x, y = self._sprite.position
        y += self.velocity * delta_time
        if y >= self.ground_y:
            y = self.ground_y
            self.velocity = 0.0
        if y <= 0:
            y = 0.0
            self.velocity = 0.0
        self._sprite.position = (x, y)

        self._sprite.rotation = max(-30.0, min(self.velocity * 0.1, 90.0))