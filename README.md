# arcadebox

`arcadebox` holds the rules and the per-frame simulation for a small set of
classic arcade games. You give each game the elapsed time and the player's
input, and you read back its state: positions, scores, lives and whether the
game is over. It uses only the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `arcadebox.geometry` | `SCREEN_WIDTH`, `SCREEN_HEIGHT` (640 × 480) and `Rect`, an axis-aligned rectangle with `intersects`, `contains` and `moved` |
| `arcadebox.states` | `GameState` (the menu and eight game screens), `MenuButton`, `menu_buttons()` and `select_state(x, y)` for hit-testing the main menu |
| `arcadebox.scores` | `read_highscore(path)`, `write_highscore(path, value)` and `HighScore`, which keeps the best score and, when given a path, writes it to the file on `update(score)` |
| `arcadebox.tetris` | `Tetris`: spawning pieces, rotating and shifting them, wall and stack collision, clearing lines with a randomised score, and `restart()` after game over |
| `arcadebox.simon` | `SimonBox` (a coloured pad that lights up and fades) and `Simon`, which plays back a growing sequence and checks the player's presses |
| `arcadebox.pong` | `Pong`: ball movement, paddle bounces, scoring and a computer paddle that sometimes hesitates |
| `arcadebox.shield` | `SectionType`, `ShieldSection` and `Shield`: destructible pixel bunkers that crumble where shots hit them |
| `arcadebox.space_invaders` | `Projectile`, `Invader` and `SpaceInvaders`: the marching formation, cannon fire, alien return fire, shields, lives and new waves |
| `arcadebox.pacman` | `Direction`, `Pellet` and `PacMan`: a maze built from a level grid, pellets and power pellets, frightened mode and collisions with ghost rectangles you supply |
| `arcadebox.mario` | `Mario`: walking, timed jumps with a cooldown, growing and shrinking, a short invincibility after shrinking, the shot cooldown while shiny, and the death hop |
| `arcadebox.level` | `BlockType`, `classify_pixel(color)` and `World`, which loads a side-scrolling level column by column from a grid of RGB or RGBA colours and drops columns that scroll off |

## How the games are driven

Every game is a plain object that you advance once per frame:

* `Tetris.step(elapsed, dx, rotate, fast)` shifts the falling piece by `dx`,
  rotates it if `rotate` is true and drops it faster with `fast`. The piece
  locks into the stack when it has rested long enough.
* `Pong.step(delta, up, down)` moves both paddles and the ball and returns the
  events of the frame (`"bounce"`, `"point"`).
* `Simon.tick(elapsed)` plays back the sequence and returns the pad it lit, if
  any. `Simon.press(index)` records an answer, and `Simon.box_at(x, y)` finds
  the pad under a point.
* `SpaceInvaders.step(delta, left, right, shoot)` runs one frame of the
  invasion; `restart()` begins a new game.
* `PacMan.steer(direction)` sets the heading and `PacMan.step(delta)` moves the
  player, eats pellets and checks the rectangles in `PacMan.ghosts`.
* `Mario.update(left, right, up, contacts, delta, sprint)` moves the player.
  `contacts` says which of the four hit boxes from `Mario.hitboxes()` (top,
  bottom, left, right) touch the level. The return value says whether the
  level should scroll instead. `Mario.death_step(elapsed)` plays the death hop.

Times are in seconds and distances are in screen pixels.

Picking a game from a menu click:

```python
from arcadebox.states import GameState, select_state

chosen = select_state(100, 110)
if chosen is GameState.TETRIS:
    ...
```

High scores are kept in one-line text files:

```python
from arcadebox.scores import read_highscore, write_highscore

best = read_highscore("tetris_highscore.txt")
write_highscore("tetris_highscore.txt", max(best, 1200))
```

## What it does not do

* It draws nothing, plays no sound and reads no keyboard or mouse; there is no
  window and no command to run. A front end has to supply input and render
  the state.
* `GameState` lists Arkanoid and Asteroids screens, but the package has no
  game logic for them.
* Ghosts in `PacMan` have no movement of their own: you place their
  rectangles in `ghosts` each frame.
* `World` only places tiles, coins, enemy spawn points and the player's start
  position; enemies, power-ups, fire shots and scrolling of the loaded level
  are not simulated.

## Running the tests

The test suite uses pytest, which comes with the `test` extra:

```
pip install -e .[test]
pytest
```