# flapbird

A small side-scrolling arcade game in the flappy bird style. You steer the
bird through the gaps between pipes for as long as you can. Each pipe you clear
adds a point, and your best score is kept between sessions.

## Installing

```
pip install .
```

pygame is the only runtime dependency.

## Playing

Start the game from the directory that holds the `assets/` folder:

```
flapbird
```

The game opens a 1200 by 800 window titled "Flappy Bird" and runs at up to
120 frames per second.

Controls:

- **Space** on the title screen starts a round.
- **Space** during a round makes the bird flap. The world starts scrolling on
  the first flap.
- **Space** on the game-over screen starts another round.
- **Esc** on the game-over screen returns to the title screen.
- Closing the window quits.

A round ends when the bird touches a pipe or reaches the ground. A new pair of
pipes appears every two seconds, with its gap placed at a random height
between a quarter and three quarters of the window.

## Assets

The game loads its sprites, fonts and sounds from paths relative to the working
directory:

```
assets/sprites/Player/StyleBird1/Bird1-2.png
assets/sprites/Background/Background2.png
assets/sprites/Tiles/Style 2/PipeStyle2.png
assets/sprites/Tiles/Style 1/TileStyle1.png
assets/fonts/MegamaxJonathanToo.ttf
assets/fonts/SuperPixel.ttf
assets/sounds/background-music.mp3
assets/sounds/jump-sound.wav
assets/sounds/fall-sound.wav
assets/sounds/score-sound.wav
```

If a file cannot be loaded, `Error loading <kind>: <path>` is printed on
standard error and that asset is left out. A screen that then asks for the
missing asset fails; the `flapbird` command prints `Error: ...` on standard
error and exits with status -1.

## Best score

Your best score is written to `best_score.txt` in the working directory each
time you beat it, and read back whenever a round starts.

## Package layout

- `flapbird.game` – `Game` opens the window, loads the assets and runs the
  main loop; `main()` is what the `flapbird` command calls.
- `flapbird.state` – `GameState`, the base class for a screen, and
  `GameStateManager`, a stack of screens with `push_state`, `pop_state` and
  `change_state`; only the top screen receives input, updates and draws.
- `flapbird.states` – the screens: `MenuState`, `PlayState` and
  `GameOverState`.
- `flapbird.entities` – `Player` (the bird), `Pipe` and `Rect`, the rectangle
  used for collisions.
- `flapbird.pipe_manager` – `PipeManager` spawns, moves, scores and collides
  pipes; it takes an optional `random.Random` for the gap heights.
- `flapbird.background` – `Background`, the scrolling sky and ground.
- `flapbird.score` – `ScoreManager`, the current and best score; the file it
  keeps the best score in can be given as `path`.
- `flapbird.assets` – `AssetManager`, which loads textures, fonts, sounds and
  music once and hands them out by name.
- `flapbird.logger` – `log()`, timestamped messages on standard output at a
  `Level` of `INFO`, `WARNING` or `ERROR`.

## What it does not do

The `flapbird` command takes no options: the window size, asset locations and
best-score file are fixed. There is no pause, no settings screen and no sound
volume control beyond the music playing at half volume on the title screen.

## Running the tests

```
pip install ".[test]"
pytest
```