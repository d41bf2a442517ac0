import pytest

from kinki.controls import Key, handle_key
from kinki.entities import Player
from kinki.settings import BulletType


@pytest.mark.parametrize(
    "key, flag",
    [(Key.W, "up"), (Key.S, "down"), (Key.A, "left"), (Key.D, "right"), (Key.SPACE, "shoot")],
)
def test_press_and_release(key, flag):
    player = Player()
    handle_key(player, key, True)
    assert getattr(player.move, flag) is True
    handle_key(player, key, False)
    assert getattr(player.move, flag) is False


def test_c_toggles_on_press():
    player = Player()
    handle_key(player, Key.C, True)
    assert player.bullet_type is BulletType.WAVE
    handle_key(player, Key.C, True)
    assert player.bullet_type is BulletType.NORMAL


def test_c_release_does_nothing():
    player = Player()
    handle_key(player, Key.C, False)
    assert player.bullet_type is BulletType.NORMAL


def test_unknown_key_ignored():
    player = Player()
    before = Player()
    handle_key(player, None, True)
    assert player == before