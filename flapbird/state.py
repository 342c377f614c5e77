"""Game states and the stack that drives them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .assets import AssetManager


class GameState(ABC):
    """One screen of the game: handles input, advances and draws itself."""

    def __init__(self, window: Any) -> None:
        self.window = window
        self.active = False

    @abstractmethod
    def handle_input(self, event: Any, manager: GameStateManager) -> None:
        """React to a single input event."""

    @abstractmethod
    def update(self, delta_time: float, manager: GameStateManager) -> None:
        """Advance the state by ``delta_time`` seconds."""

    @abstractmethod
    def render(self) -> None:
        """Draw the state to its window."""

    def on_enter(self) -> None:
        """Called when the state becomes the active one; marks it active."""
        self.active = True

    def on_exit(self) -> None:
        """Called when the state stops being the active one; marks it inactive."""
        self.active = False


class GameStateManager:
    """A stack of states; only the top one receives input, updates and draws."""

    def __init__(self, window: Any, assets: AssetManager) -> None:
        self.window = window
        self.assets = assets
        self._states: list[GameState] = []

    @property
    def current(self) -> GameState | None:
        """The active state, or ``None`` when the stack is empty."""
        return self._states[-1] if self._states else None

    def __len__(self) -> int:
        return len(self._states)

    def push_state(self, state: GameState) -> None:
        if self._states:
            self._states[-1].on_exit()
        self._states.append(state)
        state.on_enter()

    def pop_state(self) -> None:
        if not self._states:
            return
        self._states[-1].on_exit()
        self._states.pop()
        if self._states:
            self._states[-1].on_enter()

    def change_state(self, state: GameState) -> None:
        if self._states:
            self._states[-1].on_exit()
            self._states.pop()
        self._states.append(state)
        state.on_enter()

    def handle_input(self, event: Any) -> None:
        if self._states:
            self._states[-1].handle_input(event, self)

    def update(self, delta_time: float) -> None:
        if self._states:
            self._states[-1].update(delta_time, self)

    def render(self) -> None:
        if self._states:
            self._states[-1].render()

    def is_empty(self) -> bool:
        return not self._states