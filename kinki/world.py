"""Per-frame updates of the game state."""

from __future__ import annotations

from .collision import hit_boss, hit_enemies, hit_player
from .entities import GameState, Player
from .settings import PLAY_WD_HEIGHT, PLAY_WD_WIDTH, BulletType
from .shooting import enemy_shoot, shoot_normal, shoot_wave


def update_player(player: Player) -> None:
    """Move the player within the play area according to held keys."""
    if player.move.up and player.y > 0:
        player.y -= player.speed
    if player.move.down and player.y < PLAY_WD_HEIGHT - player.height:
        player.y += player.speed
    if player.move.left and player.x > 0:
        player.x -= player.speed
    if player.move.right and player.x < PLAY_WD_WIDTH - player.width:
        player.x += player.speed


def update_enemies(enemies) -> None:
    """Slide living enemies sideways, turning at the play-area edges."""
    for enemy in enemies:
        if enemy.health <= 0:
            continue
        enemy.x += enemy.direction * enemy.speed
        if enemy.x <= 0 or enemy.x + enemy.width >= PLAY_WD_WIDTH:
            enemy.direction *= -1


def update_bullets(state: GameState) -> None:
    """Fire and move all bullets, then resolve collisions."""
    if state.player.bullet_type is BulletType.NORMAL:
        shoot_normal(state)
    elif state.player.bullet_type is BulletType.WAVE:
        shoot_wave(state)
    hit_enemies(state)
    hit_boss(state)
    enemy_shoot(state)
    hit_player(state)


def update_objects(state: GameState) -> None:
    """Advance the whole game by one frame."""
    update_player(state.player)
    update_enemies(state.enemies)
    update_bullets(state)