"""Game objects and the state that holds them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .settings import (
    BOSS_HEALTH,
    BOSS_MAGIC,
    BOSS_SIZE,
    BOSS_SPEED,
    BOSS_Y,
    ENEMY_BASE_SPEED,
    ENEMY_HEALTH,
    ENEMY_WIDTH,
    ENEMY_HEIGHT,
    MAX_ENEMY,
    PLAY_WD_HEIGHT,
    PLAY_WD_WIDTH,
    PLAYER_BASE_SPEED,
    PLAYER_BULLET_SIZE,
    PLAYER_BULLET_SPEED,
    PLAYER_HEALTH,
    PLAYER_HEIGHT,
    PLAYER_HITBOX_SIZE,
    PLAYER_MAGIC,
    PLAYER_WIDTH,
    BulletType,
)


@dataclass
class Move:
    """Which movement and action keys are held."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False


@dataclass
class Bullet:
    """A projectile fired by the player or an enemy."""

    x: float
    y: float
    width: int = PLAYER_BULLET_SIZE
    height: int = PLAYER_BULLET_SIZE
    speed: int = PLAYER_BULLET_SPEED
    angle: float = 0.0

    def overlaps(self, x, y, width, height) -> bool:
        """Whether this bullet overlaps the given rectangle."""
        return (
            self.x < x + width
            and self.x + self.width > x
            and self.y < y + height
            and self.y + self.height > y
        )


@dataclass
class Enemy:
    """A regular enemy that drifts sideways and fires bursts downwards."""

    x: int
    y: int
    width: int = ENEMY_WIDTH
    height: int = ENEMY_HEIGHT
    health: int = ENEMY_HEALTH
    speed: int = ENEMY_BASE_SPEED
    direction: int = 1
    shoot_timer: int = 0
    shoot_count: int = 0
    cooldown_timer: int = 0
    move: Move = field(default_factory=Move)

    @property
    def alive(self) -> bool:
        return self.health > 0


@dataclass
class Boss:
    """The stage boss."""

    x: int = PLAY_WD_WIDTH // 2 - BOSS_SIZE // 2
    y: int = BOSS_Y
    width: int = BOSS_SIZE
    height: int = BOSS_SIZE
    health: int = BOSS_HEALTH
    magic: int = BOSS_MAGIC
    speed: int = BOSS_SPEED
    move: Move = field(default_factory=Move)


@dataclass
class Player:
    """The player's ship."""

    x: int = PLAY_WD_WIDTH // 2
    y: int = PLAY_WD_HEIGHT - 100
    width: int = PLAYER_WIDTH
    height: int = PLAYER_HEIGHT
    health: int = PLAYER_HEALTH
    magic: int = PLAYER_MAGIC
    mp_short: bool = False
    speed: int = PLAYER_BASE_SPEED
    move: Move = field(default_factory=Move)
    bullet_type: BulletType = BulletType.NORMAL

    def hitbox(self) -> tuple[int, int, int, int]:
        """The small square at the ship's centre that enemy bullets can hit."""
        size = PLAYER_HITBOX_SIZE
        return (
            self.x + self.width // 2 - size // 2,
            self.y + self.height // 2 - size // 2,
            size,
            size,
        )


def make_player() -> Player:
    """A player placed at the bottom centre of the play area."""
    return Player(x=PLAY_WD_WIDTH // 2 - PLAYER_WIDTH // 2, y=PLAY_WD_HEIGHT - 10)


def make_boss() -> Boss:
    """A boss placed at the top centre of the play area."""
    return Boss(x=PLAY_WD_WIDTH // 2 - BOSS_SIZE // 2, y=BOSS_Y)


def make_enemies(rng) -> list[Enemy]:
    """Enemies scattered at random over the upper half of the play area."""
    enemies = []
    for _ in range(MAX_ENEMY):
        x = rng.randrange(PLAY_WD_WIDTH - ENEMY_WIDTH)
        y = rng.randrange(PLAY_WD_HEIGHT // 2)
        enemies.append(Enemy(x=x, y=y, height=ENEMY_WIDTH))
    return enemies


@dataclass
class GameState:
    """Everything that changes while the game runs."""

    player: Player
    boss: Boss
    enemies: list[Enemy]
    bullets: list[Bullet] = field(default_factory=list)
    enemy_bullets: list[Bullet] = field(default_factory=list)
    boss_appear: bool = True
    shoot_interval: int = 0

    @classmethod
    def new(cls, rng=None) -> GameState:
        """A fresh game; `rng` places the enemies."""
        if rng is None:
            rng = random.Random()
        return cls(player=make_player(), boss=make_boss(), enemies=make_enemies(rng))