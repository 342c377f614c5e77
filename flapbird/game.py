"""The window, the main loop and the command that starts the game."""

from __future__ import annotations

import sys

import pygame

from .assets import AssetManager
from .state import GameStateManager
from .states import MenuState

_CLEAR_COLOR = (0, 255, 255)


class Game:
    """Opens the window, loads every asset and runs the state machine."""

    WINDOW_WIDTH = 1200
    WINDOW_HEIGHT = 800
    FRAMERATE_LIMIT = 120
    TITLE = "Flappy Bird"

    def __init__(self) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((self.WINDOW_WIDTH, self.WINDOW_HEIGHT))
        pygame.display.set_caption(self.TITLE)
        self.clock = pygame.time.Clock()
        self._open = True

        self.assets = AssetManager(self.window)
        self.manager = GameStateManager(self.window, self.assets)

        self.assets.load_texture("bird", "assets/sprites/Player/StyleBird1/Bird1-2.png")
        self.assets.load_texture("background", "assets/sprites/Background/Background2.png")
        self.assets.load_texture("pipe", "assets/sprites/Tiles/Style 2/PipeStyle2.png")
        self.assets.load_texture("ground", "assets/sprites/Tiles/Style 1/TileStyle1.png")

        self.assets.load_font("main", "assets/fonts/MegamaxJonathanToo.ttf")
        self.assets.load_font("pixel", "assets/fonts/SuperPixel.ttf")

        self.assets.load_music("background", "assets/sounds/background-music.mp3")
        self.assets.load_sound("jump", "assets/sounds/jump-sound.wav")
        self.assets.load_sound("hit", "assets/sounds/fall-sound.wav")
        self.assets.load_sound("score", "assets/sounds/score-sound.wav")

        self.manager.push_state(MenuState(self.window, self.assets))

    def run(self) -> None:
        """Process events, update and draw until the window closes."""
        while self._open and not self.manager.is_empty():
            delta_time = self.clock.tick(self.FRAMERATE_LIMIT) / 1000.0
            self._process_events()
            self.manager.update(delta_time)
            self._render()

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._open = False
            self.manager.handle_input(event)

    def _render(self) -> None:
        self.window.fill(_CLEAR_COLOR)
        self.manager.render()
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Run the game; report a fatal error on standard error and return -1."""
    try:
        Game().run()
    except Exception as error:  # noqa: BLE001 - any failure ends the game
        print(f"Error: {error}", file=sys.stderr)
        return -1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())