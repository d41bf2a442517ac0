"""Collision checks between bullets and ships."""

from __future__ import annotations

from .entities import GameState
from .settings import DEAD_PLAYER_POSITION


def rects_intersect(a, b) -> bool:
    """Whether two (x, y, width, height) rectangles share any area."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
        return False
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def hit_boss(state: GameState) -> None:
    """Apply player bullets that strike the boss."""
    boss = state.boss
    remaining = []
    for bullet in state.bullets:
        if bullet.overlaps(boss.x, boss.y, boss.width, boss.height):
            boss.health -= 1
        else:
            remaining.append(bullet)
    state.bullets = remaining
    if boss.health <= 0:
        boss.health = 0
        state.boss_appear = False
        print("Boss defeated!")


def hit_enemies(state: GameState) -> None:
    """Apply player bullets to living enemies; each bullet hits at most one."""
    remaining = []
    for bullet in state.bullets:
        target = next(
            (
                e
                for e in state.enemies
                if e.health > 0 and bullet.overlaps(e.x, e.y, e.width, e.height)
            ),
            None,
        )
        if target is None:
            remaining.append(bullet)
        else:
            target.health -= 1
    state.bullets = remaining


def hit_player(state: GameState) -> None:
    """Apply enemy bullets that strike the player's hitbox."""
    player = state.player
    hitbox = player.hitbox()
    remaining = []
    for bullet in state.enemy_bullets:
        rect = (int(bullet.x), int(bullet.y), bullet.width, bullet.height)
        if rects_intersect(hitbox, rect):
            player.health -= 1
            if player.health <= 0:
                player.health = 0
                player.x = DEAD_PLAYER_POSITION
                player.y = DEAD_PLAYER_POSITION
        else:
            remaining.append(bullet)
    state.enemy_bullets = remaining