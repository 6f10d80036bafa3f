# pixelpets

A small pixel-art virtual pet game built on pygame. Pick a companion (a Shiba
Inu, a pink cat or a grey cat) and keep it alive for as long as you can. Your
score is the points you earn plus the seconds your pet has survived.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
pixelpets
```

Options:

- `--resources DIR`: folder holding the images (default `resources`).
- `--highscore FILE`: high-score file (default `highscore.txt`). It is created
  with zero scores if it does not exist.
- `--frames N`: close the window after N frames.

A 1000 × 700 window opens on the pet selection screen.

- Click one of the three pets to select it, then click the start button.
- The instructions button opens a help screen; click the exit button to go back.
- The best score for each breed is shown under its picture.

In the game:

- Click somewhere and your pet runs towards that spot, left or right.
- Run into coins to collect them (+1 coin, +20 points). A new coin drops every
  5 to 10 seconds.
- The food button costs 2 coins and drops a fish within 300 pixels of your pet;
  catch it before it reaches the floor to restore 50 hunger.
- The water button costs 1 coin and fills the bowl; walk into it to restore
  25 thirst.
- Cats also want affection: click a cat to pet it (at most once every four
  seconds) for 25 happiness.
- Pets leave droppings, up to five per pet; click one to clean it up for
  30 points.

Each need is capped at 100. Hunger, thirst and happiness drop by
25 × drain factor × level each time their interval passes, so they fall faster
as your pet levels up. While any of them is at zero the pet loses 5 health
every 1.5 seconds; otherwise it heals 5 every 2 seconds, up to 97. When health
reaches zero the pet dies, the score is written to the high-score file (kept
only if it beats the breed's best) and after a five-second countdown the game
returns to the selection screen.

## Breeds

| Breed     | Hunger interval | Thirst interval | Happiness interval | Drain factor | Level up every |
|-----------|-----------------|-----------------|--------------------|--------------|----------------|
| Grey cat  | 18 s            | 10 s            | 21 s               | 0.5          | 10 s           |
| Pink cat  | 18 s            | 11 s            | 23 s               | 0.4          | 10 s           |
| Shiba Inu | 20 s            | 12 s            | 25 s               | 0.2          | 5 s            |

Dogs also poop more often (every 3 to 8 seconds, against 5 to 10 for cats).

## High-score file

A plain text file with a label line and a score line for each breed, in this
order:

```
Grey Cat Highscore:
0
Pink Cat Highscore:
0
Shiba Inu Highscore:
0
```

## Using the pieces

The game logic does not need a window. `pixelpets.game.Game` takes a
`pixelpets.highscore.Highscore` and an optional `random.Random`, and is advanced
one frame at a time with `Game.update(FrameInput(...))`, where
`pixelpets.game.FrameInput` carries the time, the frame length, the mouse
position and whether the left button was pressed or is held. The current screen
is `Game.screen`, a `pixelpets.game.Screen`.

The other modules can be used on their own:

- `pixelpets.pets`: `Pet`, `Cat`, `Dog`, `GreyCat`, `PinkCat`, `ShibaInu` and
  `create_pet(breed, now, rng)`.
- `pixelpets.supplies`: `Wallet`, `Food` and `Water`.
- `pixelpets.healthbar`: `HealthBar`.
- `pixelpets.highscore`: `Highscore`.
- `pixelpets.essentials`: `Rect`, `Coin`, `Poop` and `Petting`.

Drawing is done by `pixelpets.app.Renderer`, and `pixelpets.app.main` runs the
window.

## What it does not include

The package ships no images. Point `--resources` at a folder of PNG files
(for example `bg.png`, `cat/11.png`, `Coins/c1.png`, `poo.png`) to get the
pixel art. Images that are missing are left out of backgrounds and icons, and
pets, coins, droppings, food, hearts, buttons and the water bowl are then drawn
as plain coloured rectangles. Text uses pygame's default font.