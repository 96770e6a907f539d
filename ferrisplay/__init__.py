"""Small terminal programs: tic-tac-toe, a guessing game, a system summary and a greeting."""

__version__ = "0.1.0"