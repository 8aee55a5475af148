import pytest

from invaders.entities import (
    BLOCK_SIZE,
    BULLET_HEIGHT,
    BULLET_WIDTH,
    FIRE_COOLDOWN,
    GRID,
    PLAYER_HITBOX,
    PLAYER_STEP,
    Barrier,
    Block,
    Bullet,
    Enemy,
    GameObject,
    Player,
    Rect,
)


def test_rect_overlap_detected_both_ways():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.collides(b)
    assert b.collides(a)


def test_rect_touching_edges_do_not_collide():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.collides(b)
    assert not b.collides(a)


def test_rect_separate():
    assert not Rect(0, 0, 5, 5).collides(Rect(100, 100, 5, 5))


def test_game_object_str_and_update():
    obj = GameObject(3, 4)
    obj.update()
    assert (obj.x, obj.y) == (3, 4)
    assert str(obj) == "GameObject at (3, 4)"


def test_bullet_moves_by_speed():
    bullet = Bullet(x=10, y=100, speed=5)
    bullet.update(700)
    assert bullet.y == 105
    assert bullet.active


def test_bullet_deactivates_above_screen():
    bullet = Bullet(x=10, y=3, speed=-6)
    bullet.update(700)
    assert not bullet.active


def test_bullet_deactivates_below_screen():
    bullet = Bullet(x=10, y=698, speed=5)
    bullet.update(700)
    assert not bullet.active


def test_bullet_rect_size():
    rect = Bullet(x=7, y=9, speed=1).rect()
    assert rect == Rect(7, 9, BULLET_WIDTH, BULLET_HEIGHT)


def test_enemy_update_moves_right():
    enemy = Enemy(x=100, y=50, kind=2)
    enemy.update()
    assert enemy.x == 101
    assert enemy.y == 50


@pytest.mark.parametrize("kind", [1, 2, 3, 4])
def test_enemy_sprite_index_in_range(kind):
    assert Enemy(kind=kind).sprite_index == kind - 1


@pytest.mark.parametrize("kind", [0, -1, -2, -3])
def test_enemy_sprite_index_non_positive_kind(kind):
    assert Enemy(kind=kind).sprite_index == 0


def test_enemy_rect_uses_size():
    enemy = Enemy(x=10, y=20, kind=1, width=30, height=25)
    assert enemy.rect() == Rect(10, 20, 30, 25)


def test_block_rect():
    assert Block(4, 5).rect() == Rect(4, 5, BLOCK_SIZE, BLOCK_SIZE)


def test_barrier_spans_thirteen_rows_and_twenty_three_columns():
    barrier = Barrier.from_grid(0, 0)
    xs = {b.x for b in barrier.blocks}
    ys = {b.y for b in barrier.blocks}
    assert len(xs) == 23
    assert len(ys) == 13
    assert max(xs) == 22 * BLOCK_SIZE
    assert max(ys) == 12 * BLOCK_SIZE


def test_barrier_block_count_matches_grid():
    barrier = Barrier.from_grid(100, 500)
    assert len(barrier.blocks) == sum(map(sum, GRID))


def test_barrier_blocks_follow_grid():
    barrier = Barrier.from_grid(100, 500)
    positions = {(b.x, b.y) for b in barrier.blocks}
    assert (100, 500) not in positions
    assert (100 + 4 * BLOCK_SIZE, 500) in positions
    assert (100, 500 + 4 * BLOCK_SIZE) in positions
    assert all(b.x >= 100 and b.y >= 500 for b in barrier.blocks)


def test_player_move_left_and_limit():
    player = Player(x=20, y=500)
    player.move_left()
    assert player.x == 20 - PLAYER_STEP
    player.move_left()
    assert player.x == 20 - PLAYER_STEP


def test_player_move_right_and_limit():
    player = Player(x=600, y=500, width=50)
    player.move_right(700)
    assert player.x == 600 + PLAYER_STEP
    for _ in range(50):
        player.move_right(700)
    assert player.x + player.width <= 700 - PLAYER_STEP
    assert player.x + PLAYER_STEP + player.width > 700 - PLAYER_STEP


def test_player_shoot_and_cooldown():
    player = Player(x=100, y=500, width=50)
    first = player.shoot(1.0)
    assert first is not None
    assert first.y == 500
    assert first.speed == -6
    assert player.shoot(1.0 + FIRE_COOLDOWN) is None
    assert player.shoot(1.0 + FIRE_COOLDOWN + 0.01) is not None
    assert len(player.bullets) == 2


def test_player_first_shot_at_start_needs_cooldown():
    player = Player(x=100, y=500)
    assert player.shoot(0.1) is None
    assert player.bullets == []


def test_player_reset_centres_and_clears():
    player = Player(x=3, y=4, width=50, height=50)
    player.shoot(10.0)
    player.reset(750, 850)
    assert player.x == (750 - 50) // 2
    assert player.y == 850 - 50 - 90
    assert player.bullets == []


def test_player_rect_hitbox():
    assert Player(x=5, y=6).rect() == Rect(5, 6, PLAYER_HITBOX, PLAYER_HITBOX)


def test_player_add_sub_do_not_mutate():
    player = Player(x=1, y=2, lives=3, score=10)
    more = player + 5
    less = player - 4
    assert more.score == 15
    assert less.score == 6
    assert player.score == 10
    assert (more.x, more.y, more.lives) == (1, 2, 3)


def test_player_str():
    player = Player(x=1, y=2, lives=3, score=0)
    assert str(player) == "Player: Lives=3, Score=0, Position=(1,2)"