"""Game-wide constants and small enumerations."""

from __future__ import annotations

import math
from enum import Enum

WD_WIDTH = 720
WD_HEIGHT = 960
PLAY_WD_WIDTH = 520
PLAY_WD_HEIGHT = 960

SHOOT_INTERVAL = 30
MAX_BULLETS = 255
WAVE_BULLET_MAX = 5
WAVE_SPREAD = math.pi / 12

PLAYER_WIDTH = 50
PLAYER_HEIGHT = 50
PLAYER_HEALTH = 3
PLAYER_MAGIC = 600
PLAYER_BASE_SPEED = 2
PLAYER_HITBOX_SIZE = 6

PLAYER_BULLET_SIZE = 25
PLAYER_BULLET_SPEED = 3

ENEMY_BULLET_SIZE = 20
ENEMY_BULLET_SPEED = 1
ENEMY_BULLET_X_OFFSET = 5
ENEMY_SHOT_BURST = 3
ENEMY_SHOT_GAP = 10
ENEMY_COOLDOWN = 180

MAX_ENEMY = 15
ENEMY_WIDTH = 50
ENEMY_HEIGHT = 50
ENEMY_HEALTH = 3
ENEMY_BASE_SPEED = 1

BOSS_SIZE = 100
BOSS_Y = 100
BOSS_HEALTH = 50
BOSS_MAGIC = 200
BOSS_SPEED = 1

DEAD_PLAYER_POSITION = -990


class BulletType(Enum):
    """The player's shot pattern."""

    NORMAL = "normal"
    WAVE = "wave"

    def toggled(self) -> BulletType:
        """Return the other shot pattern."""
        return BulletType.WAVE if self is BulletType.NORMAL else BulletType.NORMAL


class EnemyType(Enum):
    """Kinds of regular enemies."""

    CROW = "crow"