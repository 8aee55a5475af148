# invaders

A compact take on the classic Space Invaders arcade game, drawn with pygame.

Four rows of ten invaders march from side to side. Each time one of them
reaches the edge of the playfield, the whole wave steps down. Four barriers
give you cover. Your shots and the invaders' shots both chip pieces out of
them.

## Installing

```
pip install .
```

## Playing

```
invaders
```

This opens an 800 × 850 window running at 60 frames per second.

| Key                   | Action                                     |
|-----------------------|--------------------------------------------|
| Left arrow / `A`      | Move left                                  |
| Right arrow / `D`     | Move right                                 |
| Space                 | Fire (only while you are not moving right) |
| Enter                 | Restart after winning or losing            |
| Esc / close window    | Quit                                       |

### Rules

- Each shot that hits scores 10 points. It removes every invader its
  hitbox touches.
- You start with three lives. When an invader's shot hits you, you lose a
  life, your ship returns to the bottom centre and your shots in flight are
  removed.
- There must be more than 0.35 seconds between two of your shots.
- Only the lowest invader in each 50-pixel column fires. On level 1 one of
  them fires every 0.75 seconds. The interval halves on each new level.
- Clear a wave to move on to the next level. Clear level 3 to win. Lose
  every life and the game is over.
- From level 2 on, every 300 points are traded for an extra life.

The score is shown top left as five digits. Your remaining lives and the
current level appear along the bottom of the screen.

## Using the game logic

The rules live in `invaders.game` and the objects in `invaders.entities`.
Neither module needs a display. The window code is in `invaders.app`.

Create a game with `Game(width, height, clock, rng)`. All four arguments are
optional:

- `width` and `height` default to 800 and 850.
- `clock` returns the current time in seconds. By default it counts from the
  moment the game was created.
- `rng` must provide `randint(a, b)`. It defaults to a `random.Random`
  instance.

Each frame, pass a `Controls(left, right, fire, enter)` value to
`Game.handle_input` and `Game.update`. Read the state back from `running`,
`level`, `score` and `lives`. You can also inspect `player`, `enemies`,
`barriers` and `enemy_bullets` directly.

## What it does not do

- Nothing happens when the invaders reach the bottom of the screen. The game
  ends only when you run out of lives or clear level 3.
- There is no sound.
- Ships and invaders are drawn as simple shapes, not image sprites.
- Scores are not saved between games.

## Running the tests

```
pip install .[test]
pytest
```