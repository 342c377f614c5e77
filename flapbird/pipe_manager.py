"""Spawning, moving, scoring and colliding pipes."""

from __future__ import annotations

import random
from typing import Any

from .assets import AssetManager
from .entities import Pipe, Rect


class PipeManager:
    """Spawns a pipe pair at a random height every couple of seconds."""

    SPAWN_INTERVAL = 2.0
    GAP_SIZE = 120.0

    def __init__(
        self, window: Any, assets: AssetManager, rng: random.Random | None = None
    ) -> None:
        self.window = window
        self.assets = assets
        self._rng = rng if rng is not None else random.Random()
        self.pipes: list[Pipe] = []
        self._spawn_timer = 0.0
        self._last_scored = -1

        height = window.get_height()
        self.min_gap_y = height * 0.25
        self.max_gap_y = height * 0.75

    def update(self, delta_time: float) -> None:
        for pipe in self.pipes:
            pipe.update(delta_time)
        self.pipes = [pipe for pipe in self.pipes if not pipe.is_off_screen()]

        self._spawn_timer += delta_time
        if self._spawn_timer >= self.SPAWN_INTERVAL:
            self._spawn()
            self._spawn_timer = 0.0

    def render(self) -> None:
        for pipe in self.pipes:
            pipe.render()

    def reset(self) -> None:
        self.pipes.clear()
        self._spawn_timer = 0.0
        self._last_scored = -1

    def check_collision(self, player_bounds: Rect) -> bool:
        return any(
            player_bounds.intersects(pipe.top_bounds())
            or player_bounds.intersects(pipe.bottom_bounds())
            for pipe in self.pipes
        )

    def check_scoring(self, player_x: float) -> int:
        """Count pipes newly passed by the player since the last call."""
        new_scores = 0
        for index, pipe in enumerate(self.pipes):
            if index > self._last_scored and pipe.has_passed_player(player_x):
                new_scores += 1
                self._last_scored = index
        return new_scores

    def _spawn(self) -> None:
        gap_y = self._rng.uniform(self.min_gap_y, self.max_gap_y)
        spawn_x = self.window.get_width() + 50.0
        self.pipes.append(Pipe(self.window, self.assets, spawn_x, gap_y, self.GAP_SIZE))