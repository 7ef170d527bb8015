"""Hand cricket in the terminal against a computer opponent."""

__version__ = "0.1.0"
__all__ = ["game", "players"]