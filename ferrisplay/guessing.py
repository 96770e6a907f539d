"""Guess a secret number between 1 and 100."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Callable

_NUMBER = re.compile(r"\+?[0-9]+")
_MAX_GUESS = 2**32 - 1


def _parse_guess(line: str) -> int | None:
    text = line.strip()
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_GUESS else None


def run_game(
    secret_number: int,
    read_line: Callable[[], str],
    write: Callable[[str], object],
) -> int:
    """Play until the secret number is guessed; return the number of guesses.

    ``read_line`` returns one line, or an empty string at the end of input,
    which raises EOFError. Lines that are not numbers are ignored.
    """
    write("Guess the number!\n")
    guesses = 0
    while True:
        write("Please input your guess.\n")
        line = read_line()
        if line == "":
            raise EOFError("no more input")
        guess = _parse_guess(line)
        if guess is None:
            continue
        guesses += 1
        write(f"You guessed: {guess}\n")
        if guess < secret_number:
            write("Too small!\n")
        elif guess > secret_number:
            write("Too big!\n")
        else:
            write("You win!\n")
            return guesses


def main(argv: list[str] | None = None) -> int:
    """Play one round on the terminal."""
    try:
        run_game(random.randint(1, 100), sys.stdin.readline, sys.stdout.write)
    except EOFError:
        return 1
    return 0