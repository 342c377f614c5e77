import os

import pygame
import pytest

from flapbird.assets import AssetManager


@pytest.fixture
def assets():
    return AssetManager(window="window")


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "bird.png"
    pygame.image.save(pygame.Surface((4, 3)), str(path))
    return str(path)


def _default_font_path():
    return os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


def test_window_is_kept(assets):
    assert assets.window == "window"


def test_load_texture(assets, png_file):
    assets.load_texture("bird", png_file)
    assert assets.texture("bird").get_size() == (4, 3)


def test_missing_texture_reports_and_stores_nothing(assets, tmp_path, capsys):
    missing = str(tmp_path / "nope.png")
    assets.load_texture("bird", missing)
    assert f"Error loading texture: {missing}" in capsys.readouterr().err
    with pytest.raises(KeyError):
        assets.texture("bird")


def test_corrupt_texture_reports(assets, tmp_path, capsys):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    assets.load_texture("bird", str(bad))
    assert "Error loading texture" in capsys.readouterr().err
    with pytest.raises(KeyError):
        assets.texture("bird")


def test_failed_reload_keeps_previous_texture(assets, png_file, tmp_path):
    assets.load_texture("bird", png_file)
    first = assets.texture("bird")
    assets.load_texture("bird", str(tmp_path / "missing.png"))
    assert assets.texture("bird") is first


def test_load_font_and_sizes_are_cached(assets):
    path = _default_font_path()
    assets.load_font("main", path)
    face = assets.font("main")
    assert face.path == path
    assert face.sized(20) is face.sized(20)
    assert face.sized(40).get_height() > face.sized(10).get_height()


def test_missing_font_reports(assets, tmp_path, capsys):
    missing = str(tmp_path / "font.ttf")
    assets.load_font("main", missing)
    assert f"Error loading font: {missing}" in capsys.readouterr().err
    with pytest.raises(KeyError):
        assets.font("main")


def test_missing_sound_reports(assets, tmp_path, capsys):
    missing = str(tmp_path / "jump.wav")
    assets.load_sound("jump", missing)
    assert "Error loading sound" in capsys.readouterr().err
    with pytest.raises(KeyError):
        assets.sound("jump")


def test_load_music(assets, tmp_path):
    track = tmp_path / "track.mp3"
    track.write_bytes(b"\x00\x01")
    assets.load_music("background", str(track))
    music = assets.music("background")
    assert music.path == str(track)
    assert music.looping is False


def test_missing_music_reports(assets, tmp_path, capsys):
    missing = str(tmp_path / "track.mp3")
    assets.load_music("background", missing)
    assert f"Error loading music: {missing}" in capsys.readouterr().err
    with pytest.raises(KeyError):
        assets.music("background")


def test_unknown_names_raise(assets):
    for getter in (assets.texture, assets.font, assets.sound, assets.music):
        with pytest.raises(KeyError):
            getter("unknown")