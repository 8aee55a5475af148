"""Game state and rules: waves, levels, shooting, collisions and scoring."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Protocol

from invaders.entities import (
    GRID,
    PLAYER_BOTTOM_MARGIN,
    PLAYER_HITBOX,
    PLAYER_SPRITE_SIZE,
    Barrier,
    Bullet,
    Enemy,
    Rect,
)

STARTING_LIVES = 3
LAST_LEVEL = 3
KILL_POINTS = 10
EXTRA_LIFE_POINTS = 300
ENEMY_ROWS = 4
ENEMY_COLUMNS = 10
ENEMY_SPACING = 50
ENEMY_START = 100
ENEMY_DROP = 10
EDGE_MARGIN = 25
ENEMY_BULLET_SPEED = 5
FIRST_SHOT_INTERVAL = 0.75
BARRIER_COUNT = 4
BARRIER_DRAW_BLOCK = 6
BARRIER_RAISE = 200


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Controls:
    """The keys held or pressed during one frame."""

    left: bool = False
    right: bool = False
    fire: bool = False
    enter: bool = False


def _monotonic_clock() -> Callable[[], float]:
    start = time.monotonic()
    return lambda: time.monotonic() - start


class Game:
    """One game of invaders on a screen of the given size."""

    def __init__(
        self,
        width: int = 800,
        height: int = 850,
        clock: Callable[[], float] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.clock = clock if clock is not None else _monotonic_clock()
        self.rng = rng if rng is not None else random.Random()
        self.player = Player_at_start(width, height)
        self.barriers: list[Barrier] = []
        self.enemies: list[Enemy] = []
        self.enemy_bullets: list[Bullet] = []
        self.enemy_direction = 1
        self.time_last_enemy_shot = 0.0
        self.enemy_shot_interval = FIRST_SHOT_INTERVAL
        self._level = 1
        self._running = True
        self.reset()

    def reset(self) -> None:
        """Start over at level one with a fresh wave, barriers, score and lives."""
        self.player.bullets.clear()
        self.enemy_bullets.clear()
        self.barriers = self.create_barriers()
        self.enemies = self.create_enemies()
        self.player.score = 0
        self.player.lives = STARTING_LIVES
        self._level = 1
        self._running = True
        self.enemy_direction = 1
        self.time_last_enemy_shot = 0.0
        self.enemy_shot_interval = FIRST_SHOT_INTERVAL

    def game_over(self) -> None:
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def level(self) -> int:
        return self._level

    @property
    def score(self) -> int:
        return self.player.score

    @property
    def lives(self) -> int:
        return self.player.lives

    def handle_input(self, controls: Controls) -> None:
        """Move or fire the ship, or restart a finished game on ENTER."""
        if not self._running:
            if controls.enter:
                self.reset()
            return
        if controls.left:
            self.player.move_left()
        if controls.right:
            self.player.move_right(self.width)
        elif controls.fire:
            self.player.shoot(self.clock())

    def update(self, controls: Controls | None = None) -> None:
        """Advance the game by one frame."""
        if not self._running:
            if controls is not None and controls.enter:
                self.reset()
            return

        self.move_enemies()

        while self.player.score >= EXTRA_LIFE_POINTS and self._level > 1:
            self.player.lives += 1
            self.player.score -= EXTRA_LIFE_POINTS

        for bullet in self.player.bullets:
            bullet.update(self.height)
        self.player.bullets[:] = [b for b in self.player.bullets if b.active]

        self.enemy_shoot()
        for bullet in self.enemy_bullets:
            bullet.update(self.height)
        self.enemy_bullets[:] = [b for b in self.enemy_bullets if b.active]

        self.check_collisions()

        if not self.enemies:
            if self._level < LAST_LEVEL:
                self._level += 1
                self.enemy_shot_interval *= 0.5
                self.enemies = self.create_enemies()
            else:
                self.game_over()

    def _erode_barriers(self, hit: Rect) -> bool:
        """Remove every barrier block under ``hit``; return True if any was hit."""
        struck = False
        for barrier in self.barriers:
            kept = [block for block in barrier.blocks if not hit.collides(block.rect())]
            if len(kept) != len(barrier.blocks):
                struck = True
                barrier.blocks[:] = kept
        return struck

    def check_collisions(self) -> None:
        """Resolve hits of bullets on enemies, barriers and the player."""
        for bullet in self.player.bullets:
            if not bullet.active:
                continue
            hit = bullet.rect()
            if any(hit.collides(enemy.rect()) for enemy in self.enemies):
                bullet.active = False
                self.enemies = [e for e in self.enemies if not hit.collides(e.rect())]
                self.player.score += KILL_POINTS
            if self._erode_barriers(hit):
                bullet.active = False

        for bullet in self.enemy_bullets:
            if not bullet.active:
                continue
            hit = bullet.rect()
            ship = Rect(self.player.x, self.player.y, PLAYER_HITBOX, PLAYER_HITBOX)
            if hit.collides(ship):
                bullet.active = False
                self.player.lives -= 1
                if self.player.lives <= 0:
                    self.game_over()
                else:
                    self.player.reset(self.width, self.height)
            if self._erode_barriers(hit):
                bullet.active = False

    def create_barriers(self) -> list[Barrier]:
        """Lay out the barriers evenly across the screen above the ship."""
        barrier_width = len(GRID[0]) * BARRIER_DRAW_BLOCK
        gap = (self.width - BARRIER_COUNT * barrier_width) / (BARRIER_COUNT + 1)
        y = float(self.height - BARRIER_RAISE)
        return [
            Barrier.from_grid((i + 1) * gap + i * barrier_width, y)
            for i in range(BARRIER_COUNT)
        ]

    def create_enemies(self) -> list[Enemy]:
        """Build a fresh wave: rows of enemies, one kind per row."""
        return [
            Enemy(
                x=ENEMY_START + column * ENEMY_SPACING,
                y=ENEMY_START + row * ENEMY_SPACING,
                kind=row % 4 + 1,
            )
            for row in range(ENEMY_ROWS)
            for column in range(ENEMY_COLUMNS)
        ]

    def move_enemies(self) -> None:
        """Shift the wave sideways, dropping and turning it at the screen edges."""
        hit_edge = False
        for enemy in self.enemies:
            if enemy.x + int(enemy.rect().width) >= self.width - EDGE_MARGIN:
                self.enemy_direction = -1
                hit_edge = True
                break
            if enemy.x <= EDGE_MARGIN:
                self.enemy_direction = 1
                hit_edge = True
                break
        if hit_edge:
            self.move_down_enemies(ENEMY_DROP)
        for enemy in self.enemies:
            enemy.x += self.enemy_direction

    def move_down_enemies(self, distance: int) -> None:
        for enemy in self.enemies:
            enemy.y += distance

    def _bottom_enemies(self) -> list[Enemy]:
        bottoms = []
        for band in range(0, self.width, ENEMY_SPACING):
            lowest: Enemy | None = None
            for enemy in self.enemies:
                if band <= enemy.x < band + ENEMY_SPACING:
                    if lowest is None or enemy.y > lowest.y:
                        lowest = enemy
            if lowest is not None:
                bottoms.append(lowest)
        return bottoms

    def enemy_shoot(self) -> Bullet | None:
        """Let a random lowest enemy fire if the shot interval has passed."""
        now = self.clock()
        if now - self.time_last_enemy_shot < self.enemy_shot_interval or not self.enemies:
            return None
        shooters = self._bottom_enemies()
        if not shooters:
            return None
        shooter = shooters[self.rng.randint(0, len(shooters) - 1)]
        body = shooter.rect()
        bullet = Bullet(
            x=body.x + body.width / 2,
            y=body.y + body.height,
            speed=ENEMY_BULLET_SPEED,
        )
        self.enemy_bullets.append(bullet)
        self.time_last_enemy_shot = now
        return bullet


def Player_at_start(width: int, height: int):  # noqa: N802
    """Create the ship at its starting place at the bottom centre."""
    from invaders.entities import Player

    return Player(
        x=(width - PLAYER_SPRITE_SIZE) // 2,
        y=height - PLAYER_SPRITE_SIZE - PLAYER_BOTTOM_MARGIN,
    )