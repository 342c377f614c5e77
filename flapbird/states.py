"""The menu, playing and game-over screens."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Any

import pygame

from .assets import AssetManager, FontFace
from .background import Background
from .entities import Player
from .pipe_manager import PipeManager
from .score import ScoreManager
from .state import GameState, GameStateManager

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_RED = (255, 0, 0)
_YELLOW = (255, 255, 0)
_GREEN = (0, 255, 0)
_DIMMED = (100, 100, 100, 200)

_BLINK_INTERVAL = 0.5


def _is_key(event: Any, key: int) -> bool:
    return getattr(event, "type", None) == pygame.KEYDOWN and getattr(event, "key", None) == key


def _render_text(
    face: FontFace,
    text: str,
    size: int,
    fill: tuple[int, int, int],
    thickness: float = 0.0,
) -> pygame.Surface:
    """Render ``text``, surrounded by a black outline when ``thickness`` is positive."""
    font = face.sized(max(1, size))
    image = font.render(text, True, fill)
    outline_width = round(thickness)
    if outline_width <= 0:
        return image

    surface = pygame.Surface(
        (image.get_width() + 2 * outline_width, image.get_height() + 2 * outline_width),
        pygame.SRCALPHA,
    )
    outline = font.render(text, True, _BLACK)
    for dx, dy in product(range(-outline_width, outline_width + 1), repeat=2):
        if dx * dx + dy * dy <= outline_width * outline_width:
            surface.blit(outline, (dx + outline_width, dy + outline_width))
    surface.blit(image, (outline_width, outline_width))
    return surface


@dataclass
class _Label:
    """A rendered line of text at a fixed place in the window."""

    text: str
    image: pygame.Surface
    position: tuple[float, float]

    def draw(self, target: pygame.Surface) -> None:
        target.blit(self.image, (round(self.position[0]), round(self.position[1])))


def _centered_label(
    window: Any,
    face: FontFace,
    text: str,
    size: int,
    fill: tuple[int, int, int],
    y_fraction: float,
    thickness: float = 0.0,
) -> _Label:
    width, height = window.get_size()
    image = _render_text(face, text, size, fill, thickness)
    return _Label(text, image, ((width - image.get_width()) / 2, height * y_fraction))


@dataclass
class _Blinker:
    """Toggles visibility every half second."""

    visible: bool = True
    elapsed: float = 0.0

    def advance(self, delta_time: float) -> None:
        self.elapsed += delta_time
        if self.elapsed >= _BLINK_INTERVAL:
            self.visible = not self.visible
            self.elapsed = 0.0


def _fitted(texture: pygame.Surface, size: tuple[int, int]) -> pygame.Surface:
    return pygame.transform.scale(texture, size)


class MenuState(GameState):
    """Title screen: waits for space and plays the background music."""

    def __init__(self, window: Any, assets: AssetManager) -> None:
        super().__init__(window)
        self.assets = assets
        self.music = assets.music("background")
        width, height = window.get_size()

        self._background = _fitted(assets.texture("background"), (width, height))

        main_font = assets.font("main")
        pixel_font = assets.font("pixel")
        self.title_label = _centered_label(
            window, main_font, "Flappy Bird", int(height * 0.107), _WHITE, 0.25, height * 0.005
        )
        self.play_label = _centered_label(
            window, pixel_font, "Press SPACE to Play", int(height * 0.04), _YELLOW, 0.583
        )
        self.instruction_label = _centered_label(
            window, pixel_font, "Press SPACE to jump", int(height * 0.03), _WHITE, 0.75
        )
        self._blink = _Blinker()

    @property
    def show_play_text(self) -> bool:
        return self._blink.visible

    def handle_input(self, event: Any, manager: GameStateManager) -> None:
        if _is_key(event, pygame.K_SPACE):
            manager.change_state(PlayState(self.window, self.assets))

    def update(self, delta_time: float, manager: GameStateManager) -> None:
        self._blink.advance(delta_time)

    def render(self) -> None:
        self.window.blit(self._background, (0, 0))
        self.title_label.draw(self.window)
        if self._blink.visible:
            self.play_label.draw(self.window)
        self.instruction_label.draw(self.window)

    def on_enter(self) -> None:
        self.music.looping = True
        self.music.volume = 50
        self.music.play()


class PlayState(GameState):
    """The game itself: the bird, the pipes, the scrolling scenery and the score."""

    def __init__(self, window: Any, assets: AssetManager) -> None:
        super().__init__(window)
        self.assets = assets
        self.jump_sound = assets.sound("jump")
        self.score_sound = assets.sound("score")
        self.hit_sound = assets.sound("hit")
        self.started = False

        self.player = Player(window, assets)
        self.pipes = PipeManager(window, assets)
        self.background = Background(window, assets)
        self.score = ScoreManager(window, assets)

        height = window.get_height()
        self.start_label = _centered_label(
            window,
            assets.font("pixel"),
            "Press SPACE to start",
            int(height * 0.04),
            _WHITE,
            0.5,
            height * 0.003,
        )

    def handle_input(self, event: Any, manager: GameStateManager) -> None:
        if _is_key(event, pygame.K_SPACE):
            self.started = True
            self.player.jump()
            self.jump_sound.stop()
            self.jump_sound.play()

    def update(self, delta_time: float, manager: GameStateManager) -> None:
        if not self.started:
            return

        self.background.update(delta_time)
        self.player.update(delta_time)
        self.pipes.update(delta_time)

        new_score = self.pipes.check_scoring(self.player.position[0])
        if new_score > 0:
            self.score.add_score(new_score)
            self.score_sound.play()

        self._check_collisions(manager)

    def render(self) -> None:
        self.background.render()
        self.pipes.render()
        self.player.render()
        self.score.render()
        if not self.started:
            self.start_label.draw(self.window)

    def on_enter(self) -> None:
        self._reset_game()

    def _check_collisions(self, manager: GameStateManager) -> None:
        if self.player.is_on_ground() or self.pipes.check_collision(self.player.bounds()):
            self.hit_sound.play()
            manager.change_state(
                GameOverState(
                    self.window,
                    self.assets,
                    self.score.current_score,
                    self.score.best_score,
                )
            )

    def _reset_game(self) -> None:
        self.started = False
        self.player.reset()
        self.pipes.reset()
        self.background.reset()
        self.score.reset()


class GameOverState(GameState):
    """Shows the final and best score; space plays again, escape opens the menu."""

    def __init__(self, window: Any, assets: AssetManager, score: int, best_score: int) -> None:
        super().__init__(window)
        self.assets = assets
        self.score = score
        self.best_score = best_score
        width, height = window.get_size()

        background = pygame.Surface((width, height), pygame.SRCALPHA)
        background.blit(_fitted(assets.texture("background"), (width, height)), (0, 0))
        background.fill(_DIMMED, special_flags=pygame.BLEND_RGBA_MULT)
        self._background = background

        main_font = assets.font("main")
        pixel_font = assets.font("pixel")
        score_size = int(height * 0.04)
        self.game_over_label = _centered_label(
            window, main_font, "Game Over", int(height * 0.08), _RED, 0.25, height * 0.005
        )
        self.score_label = _centered_label(
            window, pixel_font, f"Score: {score}", score_size, _WHITE, 0.417
        )
        self.best_label = _centered_label(
            window, pixel_font, f"Best: {best_score}", score_size, _YELLOW, 0.483
        )
        self.restart_label = _centered_label(
            window, pixel_font, "Press SPACE to play again", int(height * 0.033), _GREEN, 0.633
        )
        self.menu_label = _centered_label(
            window, pixel_font, "Press ESC for menu", int(height * 0.03), _WHITE, 0.75
        )
        self._blink = _Blinker()

    @property
    def show_restart_text(self) -> bool:
        return self._blink.visible

    def handle_input(self, event: Any, manager: GameStateManager) -> None:
        if _is_key(event, pygame.K_SPACE):
            manager.change_state(PlayState(self.window, self.assets))
        elif _is_key(event, pygame.K_ESCAPE):
            manager.change_state(MenuState(self.window, self.assets))

    def update(self, delta_time: float, manager: GameStateManager) -> None:
        self._blink.advance(delta_time)

    def render(self) -> None:
        self.window.blit(self._background, (0, 0))
        self.game_over_label.draw(self.window)
        self.score_label.draw(self.window)
        self.best_label.draw(self.window)
        if self._blink.visible:
            self.restart_label.draw(self.window)
        self.menu_label.draw(self.window)

    def on_enter(self) -> None:
        """Nothing to start when the game-over screen appears."""