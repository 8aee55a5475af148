"""A Space Invaders arcade game: display-free game logic and a pygame window."""

__version__ = "1.0.0"
__all__ = ["__version__"]