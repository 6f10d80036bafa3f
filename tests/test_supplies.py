import random

import pytest

from pixelpets.essentials import Rect
from pixelpets.supplies import Food, Wallet, Water


def test_wallet_spend_enough():
    wallet = Wallet(3)
    assert wallet.spend(2) is True
    assert wallet.coins == 1


def test_wallet_spend_not_enough():
    wallet = Wallet(1)
    assert wallet.spend(2) is False
    assert wallet.coins == 1


def test_food_button_rect():
    food = Food(Wallet())
    assert food.button_rect == Rect(870, 16, 95, 95)


def test_food_eat_empties_rect():
    food = Food(Wallet())
    food.eat()
    assert food.rect() == Rect(0, 0, 0, 0)
    assert not food.falling


def test_food_click_starts_falling():
    wallet = Wallet(2)
    food = Food(wallet)
    assert food.click(875, 20, 250, random.Random(1)) is True
    assert food.falling
    assert food.button_pressed
    assert food.y == 0
    assert wallet.coins == 0


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("pet_x", [20, 250, 915])
def test_food_lands_within_reach(seed, pet_x):
    food = Food(Wallet(2))
    food.click(875, 20, pet_x, random.Random(seed))
    assert 0 <= food.x <= 950
    assert abs(food.x - pet_x) <= 300


def test_food_click_without_coins():
    wallet = Wallet(1)
    food = Food(wallet)
    assert food.click(875, 20, 250, random.Random(1)) is False
    assert not food.falling
    assert wallet.coins == 1


def test_food_click_while_falling_ignored():
    wallet = Wallet(4)
    food = Food(wallet)
    food.click(875, 20, 250, random.Random(1))
    assert food.click(875, 20, 250, random.Random(1)) is False
    assert wallet.coins == 2


def test_food_click_elsewhere_releases_button():
    food = Food(Wallet(2))
    food.click(875, 20, 250, random.Random(1))
    food.update(10.0)
    assert food.click(10, 10, 250, random.Random(1)) is False
    assert food.button_pressed is False


def test_food_falls_and_lands():
    food = Food(Wallet(2))
    food.click(875, 20, 250, random.Random(3))
    food.update(0.1)
    rect = food.rect()
    assert rect.y > 0
    assert (rect.width, rect.height) == (55, 65)
    assert food.falling
    food.update(10.0)
    assert not food.falling


def test_food_unreachable_position_raises():
    food = Food(Wallet(2))
    with pytest.raises(ValueError):
        food.click(875, 20, 5000, random.Random(1))


def test_water_button_rect():
    water = Water(Wallet())
    assert water.button_rect == Rect(750, 16, 95, 95)


def test_water_empty_bowl_rect():
    assert Water(Wallet()).rect() == Rect(0, 0, 0, 0)


def test_water_fill_and_drink():
    wallet = Wallet(2)
    water = Water(wallet)
    assert water.click(750, 16) is True
    assert wallet.coins == 1
    assert water.rect() == Rect(700, 470, 110, 90)
    water.drink()
    assert water.rect() == Rect()


def test_water_full_bowl_not_refilled():
    wallet = Wallet(2)
    water = Water(wallet)
    water.click(750, 16)
    assert water.click(750, 16) is False
    assert wallet.coins == 1


def test_water_without_coins():
    wallet = Wallet(0)
    water = Water(wallet)
    assert water.click(760, 20) is False
    assert not water.bowl_full


def test_water_release():
    water = Water(Wallet(1))
    water.click(760, 20)
    assert water.button_pressed
    water.release()
    assert water.button_pressed is False
    assert water.bowl_full