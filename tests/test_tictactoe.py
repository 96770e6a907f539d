import pytest

from ferrisplay.tictactoe import (
    Cell,
    Game,
    GameState,
    Grid,
    render_grid,
    render_line,
)


def scripted_game(moves):
    lines = iter(moves)
    output = []
    game = Game(read_line=lambda: next(lines, ""), write=output.append)
    return game, output


def test_invert_swaps_players():
    assert Cell.X.invert() is Cell.O
    assert Cell.O.invert() is Cell.X


def test_invert_empty_raises():
    with pytest.raises(ValueError):
        Cell.NONE.invert()


def test_cell_text():
    grid = Grid()
    grid[0] = Cell.X
    grid[1] = Cell.O
    assert render_line(grid, 0) == "│ X │ O │   │"


def test_new_grid_is_empty():
    grid = Grid()
    assert all(grid[i] is Cell.NONE for i in range(9))
    assert grid.is_full() is False


def test_full_grid():
    grid = Grid()
    for i in range(9):
        grid[i] = Cell.X if i % 2 else Cell.O
    assert grid.is_full() is True


@pytest.mark.parametrize("index", [-1, 9])
def test_cell_index_out_of_range(index):
    grid = Grid()
    with pytest.raises(IndexError):
        grid[index]
    with pytest.raises(IndexError):
        grid[index] = Cell.X
    assert [grid[i] for i in range(9)] == [Cell.NONE] * 9
    assert grid.is_full() is False


@pytest.mark.parametrize("index", [-1, 3])
def test_line_index_out_of_range(index):
    with pytest.raises(IndexError):
        Grid().line(index)


def test_cell_index_maps_to_lines():
    grid = Grid()
    grid[4] = Cell.X
    grid[6] = Cell.O
    assert grid.line(1) == (Cell.NONE, Cell.X, Cell.NONE)
    assert grid.line(2) == (Cell.O, Cell.NONE, Cell.NONE)


def test_filled_the_same():
    grid = Grid()
    assert grid.filled_the_same(0, 1, 2) is None
    for i in (0, 1, 2):
        grid[i] = Cell.O
    assert grid.filled_the_same(0, 1, 2) is Cell.O
    grid[1] = Cell.X
    assert grid.filled_the_same(0, 1, 2) is None


def test_render_line():
    grid = Grid()
    grid[0] = Cell.X
    grid[2] = Cell.O
    assert render_line(grid, 0) == "│ X │   │ O │"


def test_render_grid_contains_lines():
    grid = Grid()
    grid[8] = Cell.X
    text = render_grid(grid).split("\n")
    assert text[0] == "Welcome to TicTacToe.rs"
    assert text[3] == "┌───┬───┬───┐"
    assert text[-1] == "└───┴───┴───┘"
    assert text[8] == render_line(grid, 2)


@pytest.mark.parametrize(
    "cells", [(0, 1, 2), (3, 4, 5), (6, 7, 8), (0, 3, 6), (1, 4, 7), (2, 5, 8), (0, 4, 8), (2, 7, 6)]
)
def test_winner_lines(cells):
    game = Game(read_line=lambda: "", write=lambda text: None)
    for i in cells:
        game.grid[i] = Cell.X
    assert game.winner() is Cell.X
    assert game.state() is GameState.WIN


def test_anti_diagonal_is_not_checked():
    game = Game(read_line=lambda: "", write=lambda text: None)
    for i in (2, 4, 6):
        game.grid[i] = Cell.O
    assert game.winner() is None
    assert game.state() is GameState.PLAYING


def test_x_wins_top_row():
    game, output = scripted_game(["1", "4", "2", "5", "3"])
    assert game.run() is GameState.WIN
    assert game.winner() is Cell.X
    assert "X wins the game.\n" in output


def test_tie_game():
    game, output = scripted_game(["1", "2", "3", "5", "4", "6", "8", "7", "9"])
    assert game.run() is GameState.TIE
    assert game.grid.is_full()
    assert output[-1] == "This game is a tie.\n"


def test_prompt_rejects_bad_and_taken_cells():
    game, output = scripted_game(["abc", "0", "10", "5"])
    assert game.prompt_cell() == 4
    bad = [line for line in output if line.startswith("Please enter a valid number")]
    assert len(bad) == 3

    game.grid[4] = Cell.O
    lines = iter(["5", "+6"])
    game._read_line = lambda: next(lines, "")
    assert game.prompt_cell() == 5
    assert (
        "The selected cell is already taken by O, please choose another\n" in output
    )


def test_prompt_raises_at_end_of_input():
    game, _ = scripted_game([])
    with pytest.raises(EOFError):
        game.prompt_cell()