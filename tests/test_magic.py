from kinki.entities import Player
from kinki.magic import consume_magic, magic_cost
from kinki.settings import PLAYER_MAGIC, BulletType


def test_costs():
    assert magic_cost(BulletType.NORMAL) == 1
    assert magic_cost(BulletType.WAVE) == 4


def test_consume_normal():
    player = Player()
    player.move.shoot = True
    consume_magic(player, BulletType.NORMAL)
    assert player.magic == PLAYER_MAGIC - magic_cost(BulletType.NORMAL)
    assert player.move.shoot is True
    assert player.mp_short is False


def test_consume_may_overdraw():
    player = Player(magic=2)
    consume_magic(player, BulletType.WAVE)
    assert player.magic == 2 - magic_cost(BulletType.WAVE)
    assert player.mp_short is False


def test_out_of_magic_cancels_shot():
    player = Player(magic=0)
    player.move.shoot = True
    consume_magic(player, BulletType.NORMAL)
    assert player.magic == 0
    assert player.mp_short is True
    assert player.move.shoot is False


def test_negative_magic_clamped():
    player = Player(magic=-3)
    player.move.shoot = True
    consume_magic(player, BulletType.WAVE)
    assert player.magic == 0
    assert player.mp_short is True