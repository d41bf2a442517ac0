"""Keyboard handling for the player's ship."""

from __future__ import annotations

from enum import Enum

from .entities import Player


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    SPACE = "space"
    C = "c"


_HELD_FLAGS = {
    Key.W: "up",
    Key.S: "down",
    Key.A: "left",
    Key.D: "right",
    Key.SPACE: "shoot",
}


def handle_key(player: Player, key, pressed) -> None:
    """Update the player for a key going down (`pressed`) or up."""
    flag = _HELD_FLAGS.get(key)
    if flag is not None:
        setattr(player.move, flag, bool(pressed))
    elif key is Key.C and pressed:
        player.bullet_type = player.bullet_type.toggled()