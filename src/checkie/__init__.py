"""Checkie — checkers on an 8x8 board with a Qt front end."""

__version__ = "0.1.0"
