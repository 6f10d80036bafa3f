"""The companions: cats and dogs whose needs run down over time."""

from __future__ import annotations

import random
from dataclasses import dataclass

from pixelpets.essentials import Poop, Rect

SCREEN_LEFT = 20
SCREEN_RIGHT = 915
START_POSITION = (250.0, 480.0)
PET_WIDTH = 85
PET_HEIGHT = 95

MAX_POOPS = 5
POOP_OFFSET = (-30, 40)

FRAME_SPEED = 0.25
STAND_FRAMES = 4
RUN_FRAMES = 6
DRAW_RUN_FRAMES = 5

MAX_STATUS = 100
STATUS_STEP = 25


@dataclass(frozen=True)
class SpriteSet:
    """Image names for a breed's animations, relative to the resource folder."""

    stand: str
    run_right: str
    run_left: str
    death: str
    size: tuple[int, int]
    stand_frames: int = STAND_FRAMES
    run_frames: int = RUN_FRAMES

    def stand_files(self) -> list[str]:
        return [f"{self.stand}{i}.png" for i in range(1, self.stand_frames + 1)]

    def run_right_files(self) -> list[str]:
        return [f"{self.run_right}{i}.png" for i in range(1, self.run_frames + 1)]

    def run_left_files(self) -> list[str]:
        return [f"{self.run_left}{i}.png" for i in range(1, self.run_frames + 1)]


class Pet:
    """A companion with hunger, thirst and happiness that drop as it levels up."""

    pet_type = "pet"
    breed = ""
    level_up_interval = 10
    scaling_factor = 0.5
    hunger_interval = 18
    thirst_interval = 10
    happiness_interval = 21
    poo_interval_range = (5, 10)
    move_speed = 100.0
    sprites: SpriteSet | None = None

    def __init__(self, now: float = 0.0, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.level = 0
        self.x, self.y = START_POSITION
        self.target_x = self.x
        self.is_running = False
        self.is_dead = False
        self.moving_right = True
        self.frame = 0
        self.frame_speed = FRAME_SPEED
        self._frame_time = 0.0

        self.hunger = MAX_STATUS
        self.thirst = MAX_STATUS
        self.happiness = MAX_STATUS

        now = float(now)
        self.last_fed_time = now
        self.last_drank_time = now
        self.last_pet_time = now
        self.last_level_up_time = now
        self.last_poo_time = now
        self.poo_interval = rng.randint(*self.poo_interval_range)
        self.poops: list[Poop] = []

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def _decayed(self, value: int) -> int:
        remaining = value - STATUS_STEP * self.scaling_factor * self.level
        return 0 if remaining < 0 else int(remaining)

    def update_status(self, now: float) -> None:
        """Lower unmet needs once their interval has passed, and level up."""
        if now - self.last_fed_time >= self.hunger_interval:
            self.hunger = self._decayed(self.hunger)
            self.last_fed_time = now
        if now - self.last_drank_time >= self.thirst_interval:
            self.thirst = self._decayed(self.thirst)
            self.last_drank_time = now
        if now - self.last_pet_time >= self.happiness_interval:
            self.happiness = self._decayed(self.happiness)
            self.last_pet_time = now
        if now - self.last_level_up_time >= self.level_up_interval:
            self.level += 1
            self.last_level_up_time = now

    def rect(self) -> Rect:
        """Collision rectangle of the pet."""
        return Rect(self.x, self.y, PET_WIDTH, PET_HEIGHT)

    def command(self, x: float) -> bool:
        """Send the pet running towards x; return False if it cannot move."""
        if self.is_dead:
            return False
        self.target_x = float(x)
        self.is_running = True
        if self.target_x > self.x:
            self.moving_right = True
        elif self.target_x < self.x:
            self.moving_right = False
        return True

    def move(self, dt: float) -> None:
        """Keep the pet on screen and run it towards its target."""
        if self.is_dead:
            return
        if self.x > SCREEN_RIGHT:
            self.x = SCREEN_RIGHT
            self.is_running = False
        elif self.x < SCREEN_LEFT:
            self.x = SCREEN_LEFT
            self.is_running = False

        self._frame_time += dt
        if self._frame_time >= self.frame_speed:
            self._frame_time = 0.0
            frames = RUN_FRAMES if self.is_running else STAND_FRAMES
            self.frame = (self.frame + 1) % frames

        if not self.is_running:
            return
        if self.moving_right:
            self.x += self.move_speed * dt
            if self.x >= self.target_x:
                self.x = self.target_x
                self.is_running = False
        else:
            self.x -= self.move_speed * dt
            if self.x <= self.target_x:
                self.x = self.target_x
                self.is_running = False

    def animate(self, dt: float) -> None:
        """Advance the drawing animation; a dead pet stays on one frame."""
        self._frame_time += dt
        if not self.is_dead and self._frame_time >= self.frame_speed:
            self._frame_time = 0.0
            frames = DRAW_RUN_FRAMES if self.is_running else STAND_FRAMES
            self.frame = (self.frame + 1) % frames

    def try_poop(self, now: float, rng: random.Random) -> Poop | None:
        """Leave a poop if it is time and there is room; return it."""
        if now - self.last_poo_time < self.poo_interval or len(self.poops) >= MAX_POOPS:
            return None
        poop = Poop(self.x + POOP_OFFSET[0], self.y + POOP_OFFSET[1])
        poop.spawn()
        self.poops.append(poop)
        self.last_poo_time = now
        self.poo_interval = rng.randint(*self.poo_interval_range)
        return poop


class Cat(Pet):
    """A cat: levels up every ten seconds and wants to be petted."""

    pet_type = "cat"
    level_up_interval = 10
    poo_interval_range = (5, 10)


class Dog(Pet):
    """A dog: levels up faster and poops more often than a cat."""

    pet_type = "dog"
    level_up_interval = 5
    scaling_factor = 0.2
    hunger_interval = 20
    thirst_interval = 12
    happiness_interval = 25
    poo_interval_range = (3, 8)


class GreyCat(Cat):
    breed = "greyCat"
    scaling_factor = 0.5
    hunger_interval = 18
    thirst_interval = 10
    happiness_interval = 21
    sprites = SpriteSet("cat/1", "cat/2", "cat/3", "cat/114.png", (85, 95))


class PinkCat(Cat):
    breed = "pinkCat"
    scaling_factor = 0.4
    hunger_interval = 18
    thirst_interval = 11
    happiness_interval = 23
    sprites = SpriteSet("cat/4", "cat/5", "cat/6", "cat/214.png", (85, 95))


class ShibaInu(Dog):
    breed = "shibaInu"
    scaling_factor = 0.2
    hunger_interval = 20
    thirst_interval = 12
    happiness_interval = 25
    sprites = SpriteSet("dog/2", "dog/1", "dog/3", "dog/41.png", (108, 95))


_BREEDS: dict[str, type[Pet]] = {
    cls.breed: cls for cls in (PinkCat, GreyCat, ShibaInu)
}


def create_pet(breed: str, now: float, rng: random.Random) -> Pet:
    """Make a pet of the named breed."""
    try:
        cls = _BREEDS[breed]
    except KeyError:
        raise ValueError(f"unknown breed: {breed!r}") from None
    return cls(now, rng)