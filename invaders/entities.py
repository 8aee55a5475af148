"""Game entities: positions, hitboxes and the per-frame behaviour of each object."""

from __future__ import annotations

from dataclasses import dataclass, field

BULLET_WIDTH = 4
BULLET_HEIGHT = 15
BLOCK_SIZE = 3
BLOCK_DRAW_SIZE = 6
PLAYER_STEP = 7
PLAYER_HITBOX = 40
PLAYER_SPRITE_SIZE = 50
PLAYER_BOTTOM_MARGIN = 90
PLAYER_BULLET_SPEED = -6
FIRE_COOLDOWN = 0.35
ENEMY_SPRITE_SIZE = 40
ENEMY_KINDS = 4

GRID: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0),
    (0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0),
    (0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0),
    (0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1),
)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap (touching edges do not count)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass
class GameObject:
    """Anything with a position on the screen."""

    x: float = 0
    y: float = 0

    def update(self) -> None:
        """Advance one frame; plain objects stay still."""

    def __str__(self) -> str:
        return f"GameObject at ({self.x}, {self.y})"


@dataclass
class Bullet(GameObject):
    """A projectile travelling vertically at a fixed speed per frame."""

    speed: int = 0
    active: bool = True

    def update(self, screen_height: float) -> None:  # type: ignore[override]
        """Move one frame and deactivate once off screen."""
        self.y += self.speed
        if self.active and (self.y > screen_height or self.y < 0):
            self.active = False

    def rect(self) -> Rect:
        return Rect(self.x, self.y, BULLET_WIDTH, BULLET_HEIGHT)


@dataclass
class Enemy(GameObject):
    """An invader of one of four kinds."""

    kind: int = 1
    width: int = ENEMY_SPRITE_SIZE
    height: int = ENEMY_SPRITE_SIZE

    @property
    def sprite_index(self) -> int:
        """Index of the sprite used for this kind, from 0 to 3."""
        return (self.kind - 1) % ENEMY_KINDS if self.kind >= 1 else 0

    def update(self) -> None:
        self.x += 1

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Block:
    """One destructible cell of a barrier."""

    x: float
    y: float

    def rect(self) -> Rect:
        return Rect(self.x, self.y, BLOCK_SIZE, BLOCK_SIZE)


@dataclass
class Barrier:
    """A shield made of blocks laid out after GRID."""

    x: float
    y: float
    blocks: list[Block] = field(default_factory=list)

    @classmethod
    def from_grid(cls, x: float, y: float) -> Barrier:
        """Build a full barrier whose top-left corner is at (x, y)."""
        blocks = [
            Block(x + column * BLOCK_SIZE, y + row * BLOCK_SIZE)
            for row, cells in enumerate(GRID)
            for column, cell in enumerate(cells)
            if cell == 1
        ]
        return cls(x, y, blocks)


@dataclass
class Player(GameObject):
    """The player's ship, with its lives, score and bullets in flight."""

    lives: int = 3
    score: int = 0
    width: int = PLAYER_SPRITE_SIZE
    height: int = PLAYER_SPRITE_SIZE
    bullets: list[Bullet] = field(default_factory=list)
    last_fire_time: float = 0.0

    def move_left(self) -> None:
        new_x = self.x - PLAYER_STEP
        if new_x >= PLAYER_STEP:
            self.x = new_x

    def move_right(self, screen_width: float) -> None:
        new_x = self.x + PLAYER_STEP
        if new_x + self.width <= screen_width - PLAYER_STEP:
            self.x = new_x

    def shoot(self, now: float) -> Bullet | None:
        """Fire a bullet unless still cooling down; return the new bullet, if any."""
        if now - self.last_fire_time <= FIRE_COOLDOWN:
            return None
        bullet = Bullet(
            x=self.x + self.width // 2 - 2, y=self.y, speed=PLAYER_BULLET_SPEED
        )
        self.bullets.append(bullet)
        self.last_fire_time = now
        return bullet

    def reset(self, screen_width: float, screen_height: float) -> None:
        """Put the ship back at the bottom centre and drop its bullets."""
        self.x = int((screen_width - self.width) / 2.0)
        self.y = int(screen_height - self.height - PLAYER_BOTTOM_MARGIN)
        self.bullets.clear()

    def rect(self) -> Rect:
        return Rect(self.x, self.y, PLAYER_HITBOX, PLAYER_HITBOX)

    def _with_score(self, score: int) -> Player:
        return Player(
            x=self.x,
            y=self.y,
            lives=self.lives,
            score=score,
            width=self.width,
            height=self.height,
        )

    def __add__(self, points: int) -> Player:
        return self._with_score(self.score + points)

    def __sub__(self, points: int) -> Player:
        return self._with_score(self.score - points)

    def __str__(self) -> str:
        return (
            f"Player: Lives={self.lives}, Score={self.score}, "
            f"Position=({self.x},{self.y})"
        )