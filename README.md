# librarydash

A small arcade game set in a library. You run along a bumpy floor while
chairs and tables drop from the ceiling and magic balls fly in from the
left. Pick up magic books for points, extra glide energy and a short
spell of invincibility. You start with three lives; the game stops when
they are gone.

## Installing

```
pip install .
```

The game draws with pygame, which is installed as a dependency.

## Playing

```
librarydash
```

To play the earlier, plainer variant (no gliding, no Z skill, steadily
faster side obstacles):

```
librarydash --classic
```

Controls:

| Key         | Action                                                         |
|-------------|----------------------------------------------------------------|
| Left/Right  | Run left or right                                              |
| Space       | Jump; press again in the air to jump a second time             |
| Hold Space  | Glide while airborne, using glide energy (not in `--classic`)  |
| Z           | With more than 100 points, spend 100 for four seconds of invincibility (not in `--classic`) |

You earn 5 points every second you survive and 50 points for each magic
book. Getting hit costs a life and makes you invincible for four seconds.
More falling obstacles appear over time.

## Using the game logic

The rules live in `librarydash.game`, apart from the drawing code in
`librarydash.app`, so they can be driven from your own loop or from
tests. `Game` takes a `Rules` value, a `random.Random` and a clock that
returns seconds:

```python
import random
import time

from librarydash.game import Game, Key, final_rules

game = Game(final_rules(), random.Random(1), time.monotonic)
game.press(Key.RIGHT)
for _ in range(70):
    game.tick()
game.tick_score()
print(game.score, game.player.lives, game.is_over())
```

- `Game.tick()` advances one frame (about 14 ms of game time).
- `Game.tick_score()` adds the points for one survived second.
- `Game.press(key)` / `Game.release(key)` take a `Key` (`LEFT`, `RIGHT`,
  `SPACE`, `Z`).
- `Game.check_long_press()` starts a glide if space is still held.

`classic_rules()` gives the earlier variant; `final_rules()` gives the
full one with gliding, the Z skill and the book counter.
`librarydash.app.run(rules)` opens a window, plays the given rule set
until the window is closed and returns the final score;
`librarydash.app.draw(surface, game)` renders one frame onto a pygame
surface.

## What it does not do

The game is drawn with plain coloured rectangles; it ships no sprite or
background pictures. Scores are not saved, and when the last life is
lost the world simply stops moving until the window is closed.