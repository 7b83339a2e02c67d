"""Stone, Paper, Scissors against the computer, played in the terminal."""

__version__ = "1.0.0"
