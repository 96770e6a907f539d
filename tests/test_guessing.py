import pytest

from ferrisplay.guessing import run_game


def play(secret, moves):
    lines = iter(moves)
    output = []
    count = run_game(secret, lambda: next(lines, ""), output.append)
    return count, "".join(output)


def test_hints_and_win():
    count, text = play(50, ["10\n", "90\n", "50\n"])
    assert count == 3
    assert text.startswith("Guess the number!\n")
    assert text.index("Too small!") < text.index("Too big!") < text.index("You win!")
    assert "You guessed: 90\n" in text


def test_non_numbers_are_ignored():
    count, text = play(7, ["seven\n", "-7\n", "4294967296\n", "\n", "7\n"])
    assert count == 1
    assert text.count("You guessed:") == 1
    assert text.count("Please input your guess.") == 5


def test_plus_sign_accepted():
    count, text = play(42, [" +42 \n"])
    assert count == 1
    assert "You guessed: 42\n" in text


def test_end_of_input_raises():
    with pytest.raises(EOFError):
        play(3, ["1\n"])