"""A two-player game of noughts and crosses played in the terminal."""

from __future__ import annotations

import enum
import re
import sys
from collections.abc import Callable

_NUMBER = re.compile(r"\+?[0-9]+")

_TITLE = "Welcome to TicTacToe.rs"
_TITLE_RULE = "━━━━━━━━━━━━━━━━━━━━━━━"
_WINDOWS_SEPARATOR = "\n┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄\n\n"
_CLEAR_SCREEN = "\x1bc"

# Index triples checked for a winner, in the order they are tried.
_WINNING_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 7, 6),
)


class Cell(enum.Enum):
    """The content of one square of the board."""

    X = "X"
    O = "O"  # noqa: E741
    NONE = " "

    def __str__(self) -> str:
        return self.value

    def invert(self) -> Cell:
        """Return the other player's mark."""
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError("Attempted to invert a cell that is empty.")


class GameState(enum.Enum):
    """Where a game stands after a move."""

    PLAYING = "playing"
    TIE = "tie"
    WIN = "win"


class Grid:
    """A 3x3 board addressed either by line or by cell index 0 to 8."""

    def __init__(self) -> None:
        self._rows = [[Cell.NONE] * 3 for _ in range(3)]

    def is_full(self) -> bool:
        """True when no square is empty."""
        return all(Cell.NONE not in row for row in self._rows)

    def line(self, index: int) -> tuple[Cell, Cell, Cell]:
        """Return the cells of line 0, 1 or 2."""
        if not 0 <= index <= 2:
            raise IndexError("Invalid line index: needs to be between 0 and 2")
        return tuple(self._rows[index])

    @staticmethod
    def _position(index: int) -> tuple[int, int]:
        if not 0 <= index <= 8:
            raise IndexError("Invalid cell index: needs to be between 0 and 8")
        return divmod(index, 3)

    def __getitem__(self, index: int) -> Cell:
        row, column = self._position(index)
        return self._rows[row][column]

    def __setitem__(self, index: int, value: Cell) -> None:
        row, column = self._position(index)
        self._rows[row][column] = value

    def filled_the_same(self, index_0: int, index_1: int, index_2: int) -> Cell | None:
        """Return the mark filling all three cells, or None."""
        first, second, third = self[index_0], self[index_1], self[index_2]
        if first is not Cell.NONE and first is second is third:
            return first
        return None


def render_line(grid: Grid, line_index: int) -> str:
    """Draw one line of the board."""
    first, second, third = grid.line(line_index)
    return f"│ {first} │ {second} │ {third} │"


def render_grid(grid: Grid) -> str:
    """Draw the title and the whole board."""
    return "\n".join(
        [
            _TITLE,
            _TITLE_RULE,
            "",
            "┌───┬───┬───┐",
            render_line(grid, 0),
            "│───┼───┼───│",
            render_line(grid, 1),
            "│───┼───┼───│",
            render_line(grid, 2),
            "└───┴───┴───┘",
        ]
    )


def _clear_sequence() -> str:
    return _WINDOWS_SEPARATOR if sys.platform.startswith("win") else _CLEAR_SCREEN


def _stdin_line() -> str:
    return sys.stdin.readline()


class Game:
    """A game between X and O, reading moves from ``read_line``.

    ``read_line`` returns one line of input, or an empty string at the end
    of input; ``write`` receives the text to show.
    """

    def __init__(
        self,
        read_line: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
    ) -> None:
        self.grid = Grid()
        self.current_player = Cell.X
        self._read_line = read_line or _stdin_line
        self._write = write or sys.stdout.write

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _draw(self) -> None:
        self._write(_clear_sequence())
        self._say(render_grid(self.grid))

    def winner(self) -> Cell | None:
        """Return the mark holding a full line, if any."""
        for indices in _WINNING_LINES:
            mark = self.grid.filled_the_same(*indices)
            if mark is not None:
                return mark
        return None

    def state(self) -> GameState:
        """Tell whether the game is won, tied or still going."""
        if self.winner() is not None:
            return GameState.WIN
        if self.grid.is_full():
            return GameState.TIE
        return GameState.PLAYING

    def prompt_cell(self) -> int:
        """Ask until the current player names a free cell; return its index.

        Raises EOFError when the input runs out.
        """
        while True:
            self._say(f"{self.current_player} is playing. Enter a cell number:")
            line = self._read_line()
            if line == "":
                raise EOFError("no more input")
            text = line.strip()
            number = int(text) if _NUMBER.fullmatch(text) else 0
            if 1 <= number <= 9:
                taken_by = self.grid[number - 1]
                if taken_by is Cell.NONE:
                    return number - 1
                self._say(
                    f"The selected cell is already taken by {taken_by}, "
                    "please choose another"
                )
            else:
                self._say("Please enter a valid number between 1 and 9.")

    def run(self) -> GameState:
        """Play until someone wins or the board is full; return the outcome."""
        while True:
            self._draw()
            player = self.current_player
            self.grid[self.prompt_cell()] = player

            state = self.state()
            if state is GameState.TIE:
                self._draw()
                self._say("This game is a tie.")
                return state
            if state is GameState.WIN:
                self._draw()
                self._say(f"{self.winner()} wins the game.")
                return state

            self.current_player = self.current_player.invert()


def main(argv: list[str] | None = None) -> int:
    """Play one game on the terminal."""
    try:
        Game().run()
    except EOFError:
        return 1
    return 0