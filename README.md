# ferrisplay

A handful of small terminal programs:

- **tic-tac-toe** for two players at one keyboard,
- **a number guessing game**,
- **a system summary** that shows user, host, OS, kernel, uptime, processes, shell, CPU and memory,
- **a greeting** that prints `Hello, world!`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Tic-tac-toe

```
ferrisplay-tictactoe
```

The screen is cleared and the board redrawn before every move (on Windows a
dashed separator line is printed instead of clearing). Players take turns,
starting with X. Each player enters a cell number from 1 to 9, counted left to
right and top to bottom:

```
┌───┬───┬───┐
│ 1 │ 2 │ 3 │
│───┼───┼───│
│ 4 │ 5 │ 6 │
│───┼───┼───│
│ 7 │ 8 │ 9 │
└───┴───┴───┘
```

A cell that is already taken, or any input that is not a number from 1 to 9,
gets you asked again. The game ends when someone has three in a row, column
or diagonal, or when the board is full and the game is a tie. If the input
ends before the game does, the command exits with status 1.

### Guessing game

```
ferrisplay-guess
```

The game picks a secret number between 1 and 100. After each guess it says
"Too small!" or "Too big!" until you find it. Input that is not a whole,
non-negative number is ignored. If the input ends before the number is found,
the command exits with status 1.

### System summary

```
ferrisplay-fetch
```

Prints a short coloured summary of the current machine, for example:

```
alice@workstation
OS: Linux 12 x86_64
Kernel: Debian GNU/Linux 6.1.0-18-amd64
Uptime: 2 days, 3 hours, 14 minutes
Processes: 2 running, 310 in sleep
Shell: GNU bash, version 5.2.15(1)-release (x86_64-pc-linux-gnu)
CPU: Example CPU Model
Memory: 5231 MiB/15890 MiB
```

The shell line runs `$SHELL --version` and shows its output; when `SHELL` is
not set it shows `Unknown`. An `aarch64` machine is shown as `arm64`.

### Greeting

```
ferrisplay-hello
```

## Using it from Python

The pieces behind the commands can be used on their own:

```python
from ferrisplay.fetch import convert_seconds, format_size, describe_processes

convert_seconds(90061)                          # '1 day, 1 hour, 1 minute'
format_size(2048)                               # '2 KiB'
describe_processes(["running", "sleeping", "sleeping"])  # '1 running, 2 in sleep'
```

`convert_seconds` raises `ValueError` for durations shorter than a minute, and
`describe_processes` raises `ValueError` when no status is a known one.
`collect_report()` returns a `SystemReport`, whose `render()` gives the text
that `ferrisplay-fetch` prints.

```python
from ferrisplay.tictactoe import Cell, Grid, render_grid

grid = Grid()
grid[4] = Cell.X
print(render_grid(grid))
```

Both games take `read_line` and `write` callables, so they can be played by a
script as well as from the terminal. `read_line` returns one line, or an empty
string at the end of input, which raises `EOFError`:

```python
import sys
from ferrisplay.guessing import run_game

guesses = iter(["50", "25", "37"])
run_game(37, lambda: next(guesses), sys.stdout.write)   # returns 3
```

```python
from ferrisplay.tictactoe import Game, GameState

moves = iter(["1", "4", "2", "5", "3"])
game = Game(lambda: next(moves) + "\n", lambda text: None)
assert game.run() is GameState.WIN
```

## What it does not do

The games keep nothing between runs: there are no settings files, no saved
games or scores, and no computer opponent in tic-tac-toe. The board is drawn
as plain text; there is no graphical window.