"""Magic point costs of the player's shots."""

from __future__ import annotations

from .entities import Player
from .settings import BulletType

_COSTS = {BulletType.NORMAL: 1, BulletType.WAVE: 4}


def magic_cost(bullet_type) -> int:
    """Magic points one shot of the given type costs."""
    return _COSTS.get(bullet_type, 1)


def consume_magic(player: Player, bullet_type) -> None:
    """Pay for a shot, or cancel shooting when the player is out of magic."""
    if player.magic > 0:
        player.magic -= magic_cost(bullet_type)
    else:
        player.magic = 0
        player.mp_short = True
        player.move.shoot = False