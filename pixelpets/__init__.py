"""A pixel-art virtual pet game: pets, supplies, health, high scores and a pygame window."""

__version__ = "1.0.0"