import pygame
import pytest

from flapbird.assets import AssetManager
from flapbird.background import Background

SKY = (0, 0, 255)
GROUND = (0, 255, 0)


def _texture(tmp_path, assets, name, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    path = tmp_path / f"{name}.bmp"
    pygame.image.save(surface, str(path))
    assets.load_texture(name, str(path))


@pytest.fixture
def window():
    return pygame.Surface((1200, 800))


@pytest.fixture
def background(tmp_path, window):
    assets = AssetManager(window)
    _texture(tmp_path, assets, "background", (256, 256), SKY)
    _texture(tmp_path, assets, "ground", (32, 32), GROUND)
    return Background(window, assets)


def test_ground_line(background):
    assert background.ground_y == pytest.approx(720.0)


def test_ground_spans_window(background, window):
    assert background.ground_width == pytest.approx(window.get_width())


def test_update_scrolls_at_layer_speeds(background):
    background.update(0.1)
    assert background.background_offset == pytest.approx(Background.BACKGROUND_SPEED * 0.1)
    assert background.ground_offset == pytest.approx(Background.GROUND_SPEED * 0.1)
    assert background.ground_offset > background.background_offset


def test_offsets_wrap_within_tile(background):
    for _ in range(50):
        background.update(1.3)
        assert 0 <= background.background_offset < background.background_width
        assert 0 <= background.ground_offset < background.ground_width


def test_reset_clears_offsets(background):
    background.update(2.0)
    background.reset()
    assert background.background_offset == 0.0
    assert background.ground_offset == 0.0


def test_render_fills_sky_and_ground(background, window):
    background.update(0.7)
    background.render()
    ground_line = int(background.ground_y)
    right = window.get_width() - 1
    assert ground_line == 720
    assert tuple(window.get_at((0, ground_line - 1)))[:3] == SKY
    assert tuple(window.get_at((right, ground_line - 1)))[:3] == SKY
    assert tuple(window.get_at((0, ground_line + 1)))[:3] == GROUND
    assert tuple(window.get_at((right, ground_line + 1)))[:3] == GROUND


def test_missing_ground_texture_raises(tmp_path, window):
    assets = AssetManager(window)
    _texture(tmp_path, assets, "background", (16, 16), SKY)
    with pytest.raises(KeyError):
        Background(window, assets)