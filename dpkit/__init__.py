"""Classic dynamic-programming and counting puzzles as plain Python functions, with a command-line front end."""

__version__ = "0.1.0"