"""Drawing the game state onto a pygame surface."""

from __future__ import annotations

import sys
from pathlib import Path

import pygame

from .entities import GameState
from .settings import PLAY_WD_HEIGHT, PLAY_WD_WIDTH, WD_HEIGHT, WD_WIDTH

SIDEBAR_WIDTH = 200
SIDEBAR_X = WD_WIDTH - SIDEBAR_WIDTH
SIDEBAR_MARGIN = 20
MP_TEXT_Y = 250
HEALTH_ICON_SIZE = 48
HEALTH_ICON_SPACING = 10
HEALTH_ICON_Y = 300
MESSAGE_PADDING = 10

BLACK = (0, 0, 0)
RED = (255, 0, 0)
MP_COLOR = (0, 128, 255)

FONT_PATH = "font/arial.ttf"
SUB_UI_FONT_SIZE = 24
MESSAGE_FONT_SIZE = 32

MP_SHORT_MESSAGE = "Short Magic Points!"
GAME_OVER_MESSAGE = "Game Over!"


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def health_icon_rects(health) -> list[tuple[int, int, int, int]]:
    """Rectangles of the life icons shown in the sidebar, one per life."""
    start_x = SIDEBAR_X + SIDEBAR_MARGIN
    step = HEALTH_ICON_SIZE + HEALTH_ICON_SPACING
    return [
        (start_x + i * step, HEALTH_ICON_Y, HEALTH_ICON_SIZE, HEALTH_ICON_SIZE)
        for i in range(max(health, 0))
    ]


def centered_message_rect(text_width, text_height) -> tuple[int, int, int, int]:
    """Where text of the given size sits when centred in the play area."""
    x = int((PLAY_WD_WIDTH - text_width) / 2)
    y = int((PLAY_WD_HEIGHT - text_height) / 2)
    return (x, y, text_width, text_height)


class Renderer:
    """Draws frames of the game onto a surface, using images from an asset directory."""

    def __init__(self, surface, asset_dir=".") -> None:
        pygame.font.init()
        self.surface = surface
        self.asset_dir = Path(asset_dir)
        self.background = self._load("image/background.jpg")
        self.player_image = self._load("image/player.png")
        self.enemy_image = self._load("image/enemy_crow.png")
        self.boss_image = self._load("image/enemy_black.png")
        self.bullet_image = self._load("image/nomal_bullet.png")
        self.enemy_bullet_image = self._load("image/nomal_bullet_enemy.png")
        self.health_icon = self._load("image/health.png")
        self._fonts: dict[int, pygame.font.Font] = {}

    def _load(self, relative: str):
        path = self.asset_dir / relative
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            _report(str(exc))
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            path = self.asset_dir / FONT_PATH
            try:
                font = pygame.font.Font(str(path), size)
            except (pygame.error, OSError):
                _report(f"failed to load font: {path}")
                font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _blit(self, image, rect) -> None:
        x, y, width, height = (int(v) for v in rect)
        if width <= 0 or height <= 0:
            return
        if image.get_size() != (width, height):
            image = pygame.transform.scale(image, (width, height))
        self.surface.blit(image, (x, y))

    def render_frame(self, state: GameState) -> None:
        """Draw one complete frame of `state`."""
        self.surface.fill(BLACK)
        self._draw_background()
        self._draw_enemies(state)
        self._draw_player(state)
        self._draw_bullets(state)
        self._draw_sub_ui(state)
        if state.boss_appear:
            self._draw_boss(state)
        if state.player.mp_short:
            self._draw_message(MP_SHORT_MESSAGE)
        if state.player.health <= 0:
            self._draw_message(GAME_OVER_MESSAGE)

    def _draw_background(self) -> None:
        if self.background is not None:
            self._blit(self.background, (0, 0, WD_WIDTH, WD_HEIGHT))

    def _draw_enemies(self, state: GameState) -> None:
        if self.enemy_image is None:
            return
        for enemy in state.enemies:
            if enemy.alive:
                self._blit(self.enemy_image, (enemy.x, enemy.y, enemy.width, enemy.height))

    def _draw_player(self, state: GameState) -> None:
        player = state.player
        if self.player_image is None:
            _report("Player texture is not loaded")
            return
        self._blit(self.player_image, (player.x, player.y, player.width, player.height))

    def _draw_bullets(self, state: GameState) -> None:
        for bullet in state.bullets:
            if self.bullet_image is None:
                _report("Bullet texture is not loaded")
            else:
                self._blit(self.bullet_image, (bullet.x, bullet.y, bullet.width, bullet.height))
        for bullet in state.enemy_bullets:
            if self.enemy_bullet_image is None:
                _report("Enemy bullet texture is not loaded")
            else:
                self._blit(
                    self.enemy_bullet_image, (bullet.x, bullet.y, bullet.width, bullet.height)
                )

    def _draw_sub_ui(self, state: GameState) -> None:
        font = self._font(SUB_UI_FONT_SIZE)
        self.surface.fill(BLACK, pygame.Rect(SIDEBAR_X, 0, SIDEBAR_WIDTH, WD_HEIGHT))
        text = font.render(f"MP: {state.player.magic}", True, MP_COLOR)
        self.surface.blit(text, (SIDEBAR_X + SIDEBAR_MARGIN, MP_TEXT_Y))
        if self.health_icon is None:
            return
        for rect in health_icon_rects(state.player.health):
            self._blit(self.health_icon, rect)

    def _draw_boss(self, state: GameState) -> None:
        boss = state.boss
        if self.boss_image is None:
            _report("Boss texture is not loaded")
            return
        self._blit(self.boss_image, (boss.x, boss.y, boss.width, boss.height))

    def _draw_message(self, message: str) -> None:
        font = self._font(MESSAGE_FONT_SIZE)
        text = font.render(message, True, RED)
        x, y, width, height = centered_message_rect(text.get_width(), text.get_height())
        pad = MESSAGE_PADDING
        self.surface.fill(BLACK, pygame.Rect(x - pad, y - pad, width + 2 * pad, height + 2 * pad))
        self.surface.blit(text, (x, y))