import os

import pygame
import pytest

from flapbird.assets import AssetManager
from flapbird.score import ScoreManager

FONT_PATH = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


@pytest.fixture
def window():
    return pygame.Surface((1200, 800))


@pytest.fixture
def assets(window):
    manager = AssetManager(window)
    manager.load_font("pixel", FONT_PATH)
    return manager


@pytest.fixture
def score_file(tmp_path):
    return tmp_path / "best.txt"


def test_starts_at_zero_without_file(window, assets, score_file):
    scores = ScoreManager(window, assets, score_file)
    assert scores.current_score == 0
    assert scores.best_score == 0
    assert not score_file.exists()


def test_add_score_saves_new_best(window, assets, score_file):
    scores = ScoreManager(window, assets, score_file)
    scores.add_score()
    assert scores.current_score == 1
    assert scores.best_score == 1
    assert score_file.read_text() == "1"


def test_add_score_by_points(window, assets, score_file):
    scores = ScoreManager(window, assets, score_file)
    scores.add_score(3)
    scores.add_score(2)
    assert scores.current_score == 5
    assert score_file.read_text() == str(scores.best_score)


def test_best_loaded_from_file(window, assets, score_file):
    score_file.write_text("42")
    scores = ScoreManager(window, assets, score_file)
    assert scores.best_score == 42
    assert scores.current_score == 0


def test_lower_score_does_not_overwrite_best(window, assets, score_file):
    score_file.write_text("42")
    scores = ScoreManager(window, assets, score_file)
    scores.add_score(3)
    assert scores.best_score == 42
    assert score_file.read_text() == "42"


def test_unreadable_content_gives_zero(window, assets, score_file):
    score_file.write_text("not a number")
    scores = ScoreManager(window, assets, score_file)
    assert scores.best_score == 0


def test_reset_keeps_best(window, assets, score_file):
    scores = ScoreManager(window, assets, score_file)
    scores.add_score(4)
    scores.reset()
    assert scores.current_score == 0
    assert scores.best_score == 4


def test_best_survives_new_manager(window, assets, score_file):
    ScoreManager(window, assets, score_file).add_score(7)
    assert ScoreManager(window, assets, score_file).best_score == 7


def test_text_is_centred(window, assets, score_file):
    scores = ScoreManager(window, assets, score_file)
    scores.add_score(123)
    x, _ = scores.text_position
    assert x + scores.text_surface.get_width() / 2 == pytest.approx(window.get_width() / 2)


def test_render_draws_white_digits(window, assets, score_file):
    scores = ScoreManager(window, assets, score_file)
    scores.render()
    x, y = (round(v) for v in scores.text_position)
    width, height = scores.text_surface.get_size()
    white = [
        (px, py)
        for px in range(x, x + width)
        for py in range(y, y + height)
        if tuple(window.get_at((px, py)))[:3] == (255, 255, 255)
    ]
    assert len(white) > 0


def test_missing_font_raises(window, score_file):
    with pytest.raises(KeyError):
        ScoreManager(window, AssetManager(window), score_file)