"""Firing and moving bullets."""

from __future__ import annotations

import math

from .entities import Bullet, GameState
from .magic import consume_magic
from .settings import (
    ENEMY_BULLET_SIZE,
    ENEMY_BULLET_SPEED,
    ENEMY_BULLET_X_OFFSET,
    ENEMY_COOLDOWN,
    ENEMY_SHOT_BURST,
    ENEMY_SHOT_GAP,
    MAX_BULLETS,
    PLAY_WD_HEIGHT,
    PLAYER_BULLET_SIZE,
    PLAYER_BULLET_SPEED,
    SHOOT_INTERVAL,
    WAVE_BULLET_MAX,
    WAVE_SPREAD,
    WD_WIDTH,
)

_UP = -math.pi / 2
_DOWN = math.pi / 2


def _player_bullet(state: GameState, angle: float) -> Bullet:
    player = state.player
    return Bullet(
        x=player.x + player.width // 2 - PLAYER_BULLET_SIZE // 2,
        y=player.y,
        width=PLAYER_BULLET_SIZE,
        height=PLAYER_BULLET_SIZE,
        speed=PLAYER_BULLET_SPEED,
        angle=angle,
    )


def shoot_normal(state: GameState) -> None:
    """Fire single bullets straight up and advance the player's bullets."""
    player = state.player
    if (
        player.move.shoot
        and len(state.bullets) < MAX_BULLETS
        and state.shoot_interval % SHOOT_INTERVAL == 0
    ):
        consume_magic(player, player.bullet_type)
        if not player.move.shoot:
            return
        state.bullets.append(_player_bullet(state, _UP))
        state.shoot_interval = 1
    elif player.move.shoot and state.shoot_interval % SHOOT_INTERVAL != 0:
        state.shoot_interval += 1

    for bullet in state.bullets:
        bullet.y -= bullet.speed
    state.bullets = [b for b in state.bullets if b.y >= 0]


def shoot_wave(state: GameState) -> None:
    """Fire a fan of bullets and advance the player's bullets along their angles."""
    player = state.player
    if (
        player.move.shoot
        and len(state.bullets) + WAVE_BULLET_MAX <= MAX_BULLETS
        and state.shoot_interval >= SHOOT_INTERVAL
    ):
        consume_magic(player, player.bullet_type)
        if not player.move.shoot:
            return
        half = WAVE_BULLET_MAX // 2
        state.bullets.extend(
            _player_bullet(state, _UP + step * WAVE_SPREAD) for step in range(-half, half + 1)
        )
        state.shoot_interval = 0
    else:
        state.shoot_interval += 1

    for bullet in state.bullets:
        bullet.x += math.cos(bullet.angle) * bullet.speed
        bullet.y += math.sin(bullet.angle) * bullet.speed
    state.bullets = [
        b
        for b in state.bullets
        if not (b.y < -b.height or b.x < -b.width or b.x > WD_WIDTH)
    ]


def enemy_shoot(state: GameState) -> None:
    """Let each enemy fire its bursts and advance the enemy bullets."""
    for enemy in state.enemies:
        if enemy.cooldown_timer > 0:
            enemy.cooldown_timer -= 1
            continue
        if enemy.shoot_timer > 0:
            enemy.shoot_timer -= 1
            continue
        if enemy.health <= 0:
            enemy.health = 0
            continue
        if len(state.enemy_bullets) < MAX_BULLETS:
            state.enemy_bullets.append(
                Bullet(
                    x=enemy.x + enemy.width // 2 - ENEMY_BULLET_X_OFFSET,
                    y=enemy.y + enemy.height,
                    width=ENEMY_BULLET_SIZE,
                    height=ENEMY_BULLET_SIZE,
                    speed=ENEMY_BULLET_SPEED,
                    angle=_DOWN,
                )
            )
        enemy.shoot_count += 1
        if enemy.shoot_count >= ENEMY_SHOT_BURST:
            enemy.shoot_count = 0
            enemy.cooldown_timer = ENEMY_COOLDOWN
        else:
            enemy.shoot_timer = ENEMY_SHOT_GAP

    for bullet in state.enemy_bullets:
        bullet.x += math.cos(bullet.angle) * bullet.speed
        bullet.y += math.sin(bullet.angle) * bullet.speed
    state.enemy_bullets = [b for b in state.enemy_bullets if b.y <= PLAY_WD_HEIGHT]