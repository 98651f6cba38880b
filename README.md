# fillerbot

A bot for the Filler board game, plus a viewer that draws a match as it is played.

Filler is played by two programs that a game server runs. On every turn the server
writes the board (the "Plateau") and the piece to place to the player's standard
input. The player answers with one line, `Y X`, giving the board position of the
piece's top-left corner. A placement is legal when exactly one star of the piece
covers one of the player's own cells, no star covers an opponent cell, and every
star stays on the board.

## Installation

```
pip install .
```

The viewer needs `pygame`, which is installed as a dependency.

## The player

```
fillerbot
```

The first line the bot reads tells it which seat it has, for example
`$$$ exec p1 : [...]` or `$$$ exec p2 : [...]`. The character in column 10 decides
its letter: `1` plays `O` against `X`, and `2` plays `X` against `O`. After that line
the bot reads turns and answers each one until its input ends. If the first line is
missing or not understood, if a turn stops part-way, or if a player's letter is not
on the board, the bot prints a message to standard error and exits with status 1.

The strategy:

* Until one of its pieces has come next to the opponent, the bot heads for the
  opponent. It checks each pair of its own cell and an opponent cell and keeps the
  closest pair, by Manhattan distance, for which a legal placement exists. It picks
  which star of the piece to lay on its own cell from the direction of the opponent
  and from the quarter of the board its cell is in.
* Once a checked placement has put a star next to an opponent cell, every later turn
  scans all positions. Each legal one is scored by the cells around its stars: an
  opponent cell is worth 50 points and an own cell 1. The bot takes the highest score,
  and the later position when scores tie. This hems the opponent in.
* If no pairing gives a legal placement before that point, the bot uses the same scan
  for that turn, and all scores are zero there.

## The viewer

Pipe the game server's output into the viewer:

```
<game server output> | fillerbot-viewer
```

The viewer opens a 1600×1000 window. It draws the board with player 1 (`O`) in red
and player 2 (`X`) in blue. Beside the board it shows a score bar for each player,
the number of cells each holds, the players' names, and a yellow marker under the
player in the lead. Each piece in the input moves the display on by one frame. When
the input ends the last board stays on screen. Press Escape or close the window to
quit.

The viewer prints a message and exits with status 1 in these cases:

* a line names the viewer itself (`./visual.fx`) as a player;
* a line contains `error`, `Usage` or `the map is too small`;
* the input ends before a board size arrives.

## Library use

The modules can be used on their own:

* `fillerbot.board` parses the server's input: `parse_player`, `parse_dimensions`,
  `read_turn`, which returns a `Turn` (board, piece and their sizes as `Coord`s).
  Bad input raises `InputError`.
* `fillerbot.strategy` chooses moves: `Strategy(me, op).next_move(turn)` returns the
  `Coord` at which to place the piece. Its helpers `quarter`, `direction`,
  `adjust_direction` and `anchor_star` are public too.
* `fillerbot.player.play(lines, out)` plays a whole game from any iterable of lines
  and returns the number of moves written.
* `fillerbot.viewer_state.ViewerState` follows a match for display (`read_first`,
  `read_next`) and raises `ViewerError` on the cases listed above.
* `fillerbot.canvas` draws a match into an in-memory RGB image: `Canvas` and `render`,
  which returns the text labels as `(x, y, color, text)` tuples.
* `fillerbot.viewer.run(state, lines)` yields one rendered `(Canvas, labels)` frame
  for each piece read, without opening a window.

## What is not included

This package has no game server. It cannot run a match by itself. It needs a server
that sends turns to `fillerbot` and whose output is piped into `fillerbot-viewer`.

## Running the tests

```
pip install .[test]
pytest
```