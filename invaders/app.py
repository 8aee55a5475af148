"""The playable window: drawing, keyboard reading and the main loop."""

from __future__ import annotations

import argparse
import random

import pygame

from invaders.entities import (
    BLOCK_DRAW_SIZE,
    BULLET_HEIGHT,
    BULLET_WIDTH,
    Enemy,
    Player,
)
from invaders.game import Controls, Game

OFFSET = 50
WIDTH = 750 + OFFSET
HEIGHT = 700 + OFFSET * 2
FPS = 60

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (230, 41, 55)
GOLD = (255, 203, 0)
ORANGE = (255, 161, 0)
YELLOW = (253, 249, 0)
ENEMY_COLOURS = ((0, 121, 241), (0, 228, 48), (230, 41, 55), (253, 249, 0))
ENEMY_BULLET_COLOURS = (GOLD, ORANGE, YELLOW)


def format_score(number: int, width: int) -> str:
    """Left-pad the number with zeros to the given width."""
    text = str(number)
    return "0" * max(0, width - len(text)) + text


def level_label(level: int) -> str | None:
    """The caption shown for a level, or None past the last one."""
    if 1 <= level <= 3:
        return f"LEVEL {level:02d}"
    return None


def read_controls(keys, pressed_enter: bool) -> Controls:
    """Turn a key-state mapping into the frame's controls."""
    return Controls(
        left=bool(keys[pygame.K_LEFT] or keys[pygame.K_a]),
        right=bool(keys[pygame.K_RIGHT] or keys[pygame.K_d]),
        fire=bool(keys[pygame.K_SPACE]),
        enter=pressed_enter,
    )


def _draw_ship(surface: pygame.Surface, x: float, y: float) -> None:
    size = 50
    pygame.draw.polygon(
        surface,
        WHITE,
        [(x + size / 2, y + 5), (x + size - 5, y + size - 10), (x + 5, y + size - 10)],
    )


def _draw_enemy(surface: pygame.Surface, enemy: Enemy) -> None:
    colour = ENEMY_COLOURS[enemy.sprite_index]
    pygame.draw.rect(
        surface, colour, (enemy.x + 4, enemy.y + 8, enemy.width - 8, enemy.height - 16)
    )


def _draw_player(surface: pygame.Surface, player: Player) -> None:
    _draw_ship(surface, player.x, player.y)


def _draw_text(surface, font, text, position, colour) -> None:
    surface.blit(font.render(text, True, colour), position)


def _render_game(surface: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    _draw_player(surface, game.player)
    for bullet in game.player.bullets:
        if bullet.active:
            pygame.draw.rect(surface, RED, (bullet.x, bullet.y, BULLET_WIDTH, BULLET_HEIGHT))
    for barrier in game.barriers:
        for block in barrier.blocks:
            pygame.draw.rect(surface, RED, (block.x, block.y, BLOCK_DRAW_SIZE, BLOCK_DRAW_SIZE))
    for enemy in game.enemies:
        _draw_enemy(surface, enemy)
    for bullet in game.enemy_bullets:
        if bullet.active:
            pygame.draw.rect(
                surface,
                random.choice(ENEMY_BULLET_COLOURS),
                (int(bullet.x), int(bullet.y), BULLET_WIDTH, BULLET_HEIGHT),
            )
    if not game.running and game.lives <= 0:
        _draw_text(surface, font, "GAME OVER!", (WIDTH // 2 - 90, HEIGHT // 2 - 40), RED)


def _render_frame(surface, game: Game, fonts) -> None:
    big, medium, small = fonts
    surface.fill(BLACK)
    pygame.draw.rect(surface, RED, (10, 10, 780, 780), width=2, border_radius=70)
    pygame.draw.line(surface, RED, (20, 720), (780, 720), 3)

    x = 55.0
    y = (HEIGHT - 1.5 * 50) + 5.0
    for _ in range(game.lives):
        _draw_ship(surface, x, y)
        x += 50.0

    label = level_label(game.level)
    if label is not None:
        _draw_text(surface, big, label, (600, 740), RED)

    if not game.running:
        if game.lives > 0:
            _draw_text(surface, medium, "YOU WON!!!", (WIDTH // 2 - 90, HEIGHT // 2 - 40), RED)
            _draw_text(
                surface, small, "Press ENTER to restart",
                (WIDTH // 2 - 120, HEIGHT // 2 + 10), WHITE,
            )
        else:
            _draw_text(surface, big, "GAME OVER", (560, 740), RED)
            _draw_text(
                surface, small, "Press ENTER to restart",
                (WIDTH // 2 - 120, HEIGHT // 2 + 10), WHITE,
            )

    _draw_text(surface, big, "SCORE", (50, 20), RED)
    _draw_text(surface, big, format_score(game.score, 5), (50, 50), RED)
    _render_game(surface, game, medium)


def main(argv: list[str] | None = None) -> int:
    """Open the window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="invaders", description="Play Space Invaders.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Space Invaders")
        fonts = (
            pygame.font.Font(None, 34),
            pygame.font.Font(None, 30),
            pygame.font.Font(None, 20),
        )
        frame_clock = pygame.time.Clock()
        game = Game(WIDTH, HEIGHT)

        while True:
            pressed_enter = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return 0
                    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        pressed_enter = True
            controls = read_controls(pygame.key.get_pressed(), pressed_enter)
            game.handle_input(controls)
            game.update(controls)
            _render_frame(screen, game, fonts)
            pygame.display.flip()
            frame_clock.tick(FPS)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())