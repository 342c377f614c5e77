import pygame
import pytest

from flapbird.game import Game, main


@pytest.fixture
def headless(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield tmp_path
    pygame.quit()


def test_main_reports_missing_assets(headless, capsys):
    assert main([]) == -1
    err = capsys.readouterr().err
    assert "Error loading texture: assets/sprites/Player/StyleBird1/Bird1-2.png" in err
    assert "Error loading font: assets/fonts/SuperPixel.ttf" in err
    assert "Error loading music: assets/sounds/background-music.mp3" in err
    assert "Error: " in err


def test_game_without_assets_cannot_start(headless):
    with pytest.raises(KeyError):
        Game()