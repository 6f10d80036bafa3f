"""The pet's health bar, drawn as columns of small red blocks."""

from __future__ import annotations

MAX_HEALTH = 97
BLOCK_SIZE = 3
BLOCKS_PER_COLUMN = 5
BLOCK_COLOR = (136, 8, 8, 255)


class HealthBar:
    """Health between 0 and MAX_HEALTH, one block column per point."""

    def __init__(self, x: float = 14, y: float = 22) -> None:
        self.x = x
        self.y = y
        self.health = MAX_HEALTH

    def take_damage(self, damage: int) -> None:
        """Lose health, never going below zero."""
        self.health = max(0, self.health - damage)

    def heal(self, amount: int) -> None:
        """Regain health, never going above MAX_HEALTH."""
        if self.health + amount > MAX_HEALTH - 1:
            self.health = MAX_HEALTH
        else:
            self.health += amount

    def blocks(self) -> list[tuple[float, float]]:
        """Top-left corners of the blocks that make up the bar."""
        return [
            (self.x + column * BLOCK_SIZE, self.y + row * BLOCK_SIZE)
            for column in range(self.health)
            for row in range(BLOCKS_PER_COLUMN)
        ]