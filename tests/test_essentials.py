import pytest

from pixelpets.essentials import Coin, Petting, Poop, Rect


def test_rect_collides_overlapping():
    assert Rect(0, 0, 10, 10).collides(Rect(5, 5, 10, 10))
    assert Rect(5, 5, 10, 10).collides(Rect(0, 0, 10, 10))


def test_rect_touching_edges_do_not_collide():
    assert not Rect(0, 0, 10, 10).collides(Rect(10, 0, 10, 10))


def test_empty_rect_does_not_collide_with_pet_area():
    assert not Rect().collides(Rect(250, 480, 85, 95))


def test_rect_contains_is_half_open():
    rect = Rect(870, 16, 95, 95)
    assert rect.contains(870, 16)
    assert rect.contains(875, 20)
    assert not rect.contains(965, 20)
    assert not rect.contains(869, 20)


def test_coin_rect_without_collision():
    coin = Coin(10, 40)
    assert coin.rect() == Rect(10, 40, 15, 35)


def test_coin_rect_with_collision_is_empty():
    coin = Coin(10, 40)
    coin.collision = True
    assert coin.rect() == Rect(0, 0, 0, 0)


def test_coin_constructor():
    coin = Coin(20, 30)
    assert (coin.x, coin.y) == (20, 30)
    assert coin.active is True
    assert coin.collision is False


def test_coin_frame_stays_in_range():
    coin = Coin(0, 0)
    seen = set()
    for _ in range(50):
        coin.update(0.25, 0.0)
        seen.add(coin.frame)
    assert seen == set(range(6))


def test_uncollected_coin_does_not_move():
    coin = Coin(100, 525)
    coin.update(1.0, 100.0)
    assert coin.y == 525
    assert coin.active


def test_collected_coin_rises_then_disappears():
    coin = Coin(100, 525)
    coin.collision = True
    coin.collision_time = 10.0
    coin.update(0.5, 11.0)
    assert coin.y < 525
    assert coin.active
    coin.update(0.5, 13.0)
    assert not coin.active
    height = coin.y
    coin.update(0.5, 14.0)
    assert coin.y == height


def test_poop_constructor_position():
    poo = Poop(10, 20)
    assert (poo.x, poo.y) == (10, 20)
    assert poo.active


def test_poop_spawn():
    poo = Poop(10, 20)
    poo.deactivate()
    poo.spawn()
    assert poo.active is True


def test_poop_rect_active_and_inactive():
    poo = Poop(10, 20)
    rect = poo.rect()
    assert (rect.x, rect.y) == (10, 20)
    assert rect.width == rect.height == 35
    poo.deactivate()
    assert poo.rect() == Rect()


def test_poop_deactivate():
    poo = Poop(10, 20)
    poo.deactivate()
    assert poo.active is False


def test_petting_initially_inactive():
    assert Petting().active is False


def test_petting_start_activates():
    hearts = Petting()
    hearts.start((100, 20), now=5.0)
    assert hearts.active is True
    assert hearts.frame == 0
    assert hearts.heart_position == (120, -35)


def test_petting_rises_and_expires():
    hearts = Petting()
    hearts.start((100, 200), now=0.0)
    hearts.update(0.5, 0.5)
    assert hearts.active
    assert hearts.y < 200
    hearts.update(0.7, 1.2)
    assert not hearts.active


@pytest.mark.parametrize("now", [0.0, 1.0, 1.1])
def test_petting_still_active_within_duration(now):
    hearts = Petting()
    hearts.start((0, 0), now=0.0)
    hearts.update(0.01, now)
    assert hearts.active