# mutiny

This package has two parts. The first is a deck of cards for a pirate-ship
board game. The second is a small top-down pygame prototype. In it, a player
sprite moves around and fires bullets at an enemy.

## Installing

```
pip install .
```

To run the tests, install the test extra as well:

```
pip install ".[test]"
pytest
```

## The command

```
mutiny
mutiny --seed 7
```

The command builds the full deck and shuffles it. It then prints each card on
its own line in the form `navigation, action`. For example:

```
pirate, telescope
sailor, drunk
cult, cult uprising
```

With `--seed N`, the shuffle repeats: the same seed always gives the same
order.

## The deck

`mutiny.deck.Deck` holds 24 cards in its draw pile, `draw_deck`. Before
shuffling, they are grouped in this order:

| Navigation | Action        | Count |
|------------|---------------|-------|
| pirate     | drunk         | 5     |
| pirate     | mermaid       | 2     |
| pirate     | telescope     | 2     |
| pirate     | armed         | 2     |
| sailor     | drunk         | 5     |
| sailor     | disarmed      | 2     |
| cult       | cult uprising | 6     |

The counts are kept in `mutiny.deck.CARD_AMOUNTS`. Cards are `Card` values,
each made of a `Navigation` and an `Action`.

```python
import random
from mutiny.deck import Deck

deck = Deck(random.Random(7))
deck.shuffle()
for line in deck.lines():
    print(line)
print(len(deck))  # 24
```

The other methods and members:

- `Deck.shuffle()` walks through every position and swaps it with a randomly
  chosen position, using the deck's `rng`.
- `Deck.swap(i, j)` exchanges two cards in the draw pile. It raises
  `IndexError` if either index is out of range.
- `Deck.print(file=None)` writes the listing to a text stream. When no stream
  is given, it writes to standard output.
- `sea_deck` is a second pile. It starts empty.

## The shooting prototype

`mutiny.game.play_game(sprite_path)` opens an 800×600 pygame window and runs
the game until the window is closed. It then returns the final `Game`.

- The sprite sheet must be made of 64×64 tiles. The player is drawn from tile
  (0, 0) and the enemy from tile (4, 2).
- `sprite_path` defaults to `assets/player/textures/spritesheet.png`, relative
  to the current directory.
- If the sheet cannot be loaded, the game still runs. In that case only the
  red bounding boxes are drawn.
- Use W, A, S and D to move.
- Hold Space to fire bullets towards the enemy's position.
- Bullets that leave the window are removed.

The building blocks can also be used on their own:

- `mutiny.game.Game` holds one game's state and has three methods:
  - `handle_events(events)` reacts to window events.
  - `update(keys, delta_time)` advances the game. `keys` is indexed by pygame
    key codes, as from `pygame.key.get_pressed()`.
  - `draw(surface)` draws the game onto a surface.
- `mutiny.bullet.Bullet` is a single bullet:
  - `aim_at(target)` points it at a target.
  - `move(delta_time)` moves it at 400 pixels per second.
- `mutiny.bullet.Mag` holds the bullets in flight.
  - `try_add_bullet(bullet)` always accepts the bullet; the magazine's
    `capacity` is recorded but not enforced.
  - `update_bullets(delta_time)` drops the bullets outside the 800×600 field,
    then moves the rest.
- `mutiny.npc.NPC` is a stationary enemy with a bounding box.
- `mutiny.player.Player` is the player sprite. It has a `mag`, a `speed` of
  120 pixels per second and three `pistols`.
- A player can hold a `role`. It can be a `CaptainRole`, a `NavigatorRole`, or
  any other `DutyBase` subclass.
  - `Player.perform_role_action()` runs the role's action. Both built-in roles
    only record their title in `player.duties_performed`.
- `mutiny.collision.check_rect_collision(a, b)` tests whether two `FloatRect`
  values overlap. Rectangles that only touch at an edge do not count.

## What it does not do

The card game itself is not here. There are no players' hands, no turns and
no rules: the deck can only be built, shuffled, swapped and listed.

The shooting prototype is only a prototype:

- Bullets do not hit anything. `check_rect_collision` is never used by the
  game loop.
- The enemy does not move.
- There is no score and no end condition.

There is no command that starts the prototype. Call `play_game` from Python.