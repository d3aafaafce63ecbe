# bombgrid

bombgrid is an arcade maze game that runs in the terminal. You move through a
grid of walls and lay bombs. The blasts break soft walls and destroy enemies.

## Installing and starting

```
pip install .
bombgrid
```

The game draws with Python's standard `curses` module. It needs a terminal where
that module is available, such as Linux or macOS. The terminal must be at least
30 rows by 120 columns. If it is smaller, the game shows a message asking you to
resize it and waits until you do.

## Playing

- The main menu has "New Game", "Leaderboard" and "Quit". Move between them with
  the up and down arrows or `w`/`s`. Confirm with Enter, space or `e`.
- In the game, move with the arrow keys or `w` `a` `s` `d`. Press space to lay a
  bomb. A bomb goes off three seconds after you lay it. At the start you can have
  one bomb on the board at a time, and its blast reaches one cell in each
  direction.
- There are five levels. Each is a 21 × 41 grid. The levels are linked through
  gaps in the middle of the left and right edges, so you can walk from one to the
  next. The first level has no left exit and the last has no right exit.
- Once you have killed every enemy on a level, that level is removed from the
  chain when you walk out of it. If you leave through the right exit, the time
  left on the level is added to your score.
- Each level has its own 200-second clock. It runs only while that level still
  has enemies. The game ends when you lose your last life, when the clock of the
  level you are on reaches zero, or when you clear the last level left.
- Some soft walls hide power-ups. When the wall is destroyed the power-up shows
  as a capital letter:
  - `R`: longer blast range
  - `N`: one more bomb at a time
  - `L`: an extra life
  - `T`: sixty more seconds on the current level
  - `P`: fifty points
- Basic enemies `#` walk in straight lines and turn at random when they are
  blocked. Advanced enemies `%` chase you and can pass through walls. Touching an
  enemy costs a life, and so does being caught in a blast.

## Scores

Breaking a soft wall scores 5 points. Killing a basic enemy scores 10, and an
advanced enemy more.

When the game ends, a dialog shows the result and your score and asks for a
nickname of up to 16 characters. If you enter one, a `name-score` line is
appended to `highscores.txt` in the current directory.

"Leaderboard" first asks how many scores to load. If you type nothing, it loads
up to 100. The table is sorted from the highest score down and can be scrolled
with up/down or `w`/`s`. Choose "Menu" or "Quit" with left/right or `a`/`d`, then
confirm with Enter, space or `e`. Pressing `r` adds a random entry to the table
on screen only. Nothing is written to the file.

## Using the pieces from Python

The game logic works without a screen:

- `bombgrid.world.GameState` holds the player, the chain of levels, the score and
  the bombs. `GameState.step(key, now)` runs one frame for a command character and
  returns whether the game is over. `bombgrid.world.convert_key` turns a curses
  key code into such a character.
- `bombgrid.board.Board` is the tile grid. `Board.rows()` returns it as strings.
- `bombgrid.highscore.load_highscores(limit, path)` and
  `bombgrid.highscore.save_highscore(name, score, path)` read and write the score
  file.

## What it does not do

Key bindings and the terminal size cannot be configured. The score file is always
`highscores.txt` in the working directory. The game does not support saving or
resuming a game in progress.

## Running the tests

```
pip install .[test]
pytest
```