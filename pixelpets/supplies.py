"""Coins the player spends, and the food and water they buy with them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from pixelpets.essentials import Rect

FOOD_COST = 2
WATER_COST = 1

FISH_WIDTH = 55
FISH_HEIGHT = 65
FOOD_SPEED = 200.0
FOOD_FLOOR = 480
FOOD_MAX_X = 950
FOOD_SPREAD = 300

BUTTON_SIZE = 95


@dataclass
class Wallet:
    """The player's coins."""

    coins: int = 0

    def spend(self, amount: int) -> bool:
        """Pay if there are enough coins; return whether it was paid."""
        if self.coins < amount:
            return False
        self.coins -= amount
        return True


def _drop_offset(pet_x: float, rng: random.Random) -> int:
    low = max(-FOOD_SPREAD, math.ceil(-pet_x))
    high = min(FOOD_SPREAD, math.floor(FOOD_MAX_X - pet_x))
    if low > high:
        raise ValueError(f"no place to drop food near x={pet_x}")
    return rng.randint(low, high)


class Food:
    """A fish that falls from the sky when the food button is bought."""

    def __init__(self, wallet: Wallet) -> None:
        self.wallet = wallet
        self.button_rect = Rect(870, 16, BUTTON_SIZE, BUTTON_SIZE)
        self.x = 0.0
        self.y = -100.0
        self.falling = False
        self.speed = FOOD_SPEED
        self.button_pressed = False
        self._rect = Rect()

    def click(self, x: float, y: float, pet_x: float, rng: random.Random) -> bool:
        """Handle a click; return True if a fish starts falling."""
        if self.falling:
            return False
        if not self.button_rect.contains(x, y):
            self.button_pressed = False
            return False
        if self.wallet.coins < FOOD_COST:
            return False
        offset = _drop_offset(pet_x, rng)
        self.wallet.spend(FOOD_COST)
        self.button_pressed = True
        self.x = pet_x + offset
        self.y = 0.0
        self.falling = True
        return True

    def update(self, dt: float) -> None:
        """Let a falling fish drop until it reaches the floor."""
        if not self.falling:
            return
        self.y += self.speed * dt
        self._rect = Rect(self.x, self.y, FISH_WIDTH, FISH_HEIGHT)
        if self.y >= FOOD_FLOOR:
            self.falling = False

    def rect(self) -> Rect:
        return self._rect

    def eat(self) -> None:
        self._rect = Rect()
        self.falling = False


class Water:
    """A water bowl that the water button fills."""

    def __init__(self, wallet: Wallet) -> None:
        self.wallet = wallet
        self.button_rect = Rect(750, 16, BUTTON_SIZE, BUTTON_SIZE)
        self.bowl_rect = Rect(700, 470, 110, 90)
        self.button_pressed = False
        self.bowl_full = False

    def click(self, x: float, y: float) -> bool:
        """Handle a click; return True if the bowl was filled."""
        if not self.button_rect.contains(x, y) or self.bowl_full:
            return False
        if not self.wallet.spend(WATER_COST):
            return False
        self.button_pressed = True
        self.bowl_full = True
        return True

    def release(self) -> None:
        """Called on frames without a click."""
        self.button_pressed = False

    def drink(self) -> None:
        self.bowl_full = False

    def rect(self) -> Rect:
        """The bowl's collision rectangle, empty while the bowl is empty."""
        return self.bowl_rect if self.bowl_full else Rect()