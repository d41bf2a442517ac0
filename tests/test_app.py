import pygame
import pytest

from kinki.app import key_from_pygame, main, print_error, run
from kinki.controls import Key


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _write_background(asset_dir):
    image_dir = asset_dir / "image"
    image_dir.mkdir(parents=True, exist_ok=True)
    image = pygame.Surface((8, 8))
    image.fill((10, 20, 30))
    pygame.image.save(image, str(image_dir / "background.png"))
    (image_dir / "background.png").rename(image_dir / "background.jpg")


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_w, Key.W),
        (pygame.K_s, Key.S),
        (pygame.K_a, Key.A),
        (pygame.K_d, Key.D),
        (pygame.K_SPACE, Key.SPACE),
        (pygame.K_c, Key.C),
    ],
)
def test_key_from_pygame_maps_game_keys(code, key):
    assert key_from_pygame(code) is key


def test_key_from_pygame_ignores_other_keys():
    assert key_from_pygame(pygame.K_q) is None


def test_print_error_writes_to_stderr(capsys):
    assert print_error("something failed") == -1
    captured = capsys.readouterr()
    assert captured.err == "something failed\n"
    assert captured.out == ""


def test_run_fails_without_background(headless, tmp_path, capsys):
    assert run(tmp_path, 1) == -1
    assert "failed to initialize window" in capsys.readouterr().err


def test_main_fails_without_background(headless, tmp_path, capsys):
    assert main(["--assets", str(tmp_path), "--frames", "1"]) == -1
    assert "failed to initialize window" in capsys.readouterr().err


def test_run_plays_given_number_of_frames(headless, tmp_path):
    _write_background(tmp_path)
    assert run(tmp_path, 3) == 0
    assert not pygame.display.get_init()