"""Game flow: the breed menu, the instructions page, play and the death screen."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from pixelpets.essentials import Coin, Petting, Rect
from pixelpets.healthbar import MAX_HEALTH, HealthBar
from pixelpets.highscore import Highscore
from pixelpets.pets import MAX_STATUS, STATUS_STEP, Pet, create_pet
from pixelpets.supplies import Food, Wallet, Water

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 700

PET_OPTIONS = ("shibaInu", "pinkCat", "greyCat")
PET_RECTS = (
    Rect((875 // 4) - 65, 300, 140, 200),
    Rect((875 // 4) * 2 - 35, 300, 170, 200),
    Rect((875 // 4) * 3 + 20, 300, 170, 200),
)
NO_SELECTION = -200

START_BUTTON_SIZE = (300, 200)
START_RECT = Rect(
    (WINDOW_WIDTH // 3) * 2 - START_BUTTON_SIZE[0] // 2, 560, *START_BUTTON_SIZE
)
INSTRUCTIONS_BUTTON_SIZE = (200, 150)
INSTRUCTIONS_RECT = Rect(
    WINDOW_WIDTH // 3 - INSTRUCTIONS_BUTTON_SIZE[0] // 2, 560, *INSTRUCTIONS_BUTTON_SIZE
)
EXIT_RECT = Rect(100, 100, 115, 80)

COIN_SPAWN_Y = 525
COIN_SPAWN_X = (20, 980)
COIN_INTERVAL = (5, 10)
COIN_VALUE = 1
COIN_POINTS = 20
POOP_POINTS = 30
POOP_CLICK_SIZE = 5

PETTING_COOLDOWN = 4
DRINK_AMOUNT = STATUS_STEP
EAT_AMOUNT = 50
PET_AMOUNT = STATUS_STEP

DAMAGE_INTERVAL = 1.5
HEAL_INTERVAL = 2
DAMAGE_PER_TICK = 5
HEAL_PER_TICK = 5

DEATH_SCREEN_SECONDS = 5


class Screen(enum.Enum):
    MENU = "menu"
    INSTRUCTIONS = "instructions"
    PLAYING = "playing"
    DEATH = "death"


@dataclass(frozen=True)
class FrameInput:
    """What happened during one frame: time, mouse position and buttons."""

    now: float
    dt: float = 1 / 60
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    pressed: bool = False
    down: bool = False

    def mouse_rect(self, size: float = 1) -> Rect:
        return Rect(self.mouse_x, self.mouse_y, size, size)


def _raise_status(value: int, amount: int) -> int:
    return min(MAX_STATUS, value + amount)


class Game:
    """The whole game state, advanced one frame at a time by update()."""

    def __init__(self, highscore: Highscore, rng: random.Random | None = None) -> None:
        self.highscore = highscore
        self.rng = rng if rng is not None else random.Random()
        self.screen = Screen.MENU
        self.selected_breed: str | None = None
        self.box_location = NO_SELECTION

        self.pet: Pet | None = None
        self.pet_alive = False
        self.wallet = Wallet()
        self.food = Food(self.wallet)
        self.water = Water(self.wallet)
        self.health = HealthBar()
        self.petting = Petting()
        self.coins: list[Coin] = []

        self.score_value = 0
        self.score_timer = 0
        self.ui_timer = 0
        self.coin_interval = COIN_INTERVAL[0]
        self.last_coin_time = 0
        self.last_time_damaged = 0
        self.last_time_healed = 0
        self.last_time_petted = 0.0

        self.ending_timer = 0
        self.time_tracker = 0
        self.end_counter = DEATH_SCREEN_SECONDS

    @property
    def display_score(self) -> int:
        """The score shown during play: points earned plus seconds survived."""
        return self.score_value + self.score_timer

    def update(self, frame: FrameInput) -> None:
        """Advance the game by one frame."""
        if self.screen is Screen.MENU:
            self._pick_pet(frame)
            self.ui_timer = int(frame.now)
        elif self.screen is Screen.INSTRUCTIONS:
            self._instructions(frame)
            self.ui_timer = int(frame.now)
        elif self.screen is Screen.PLAYING:
            self._play(frame)
        else:
            self._death_screen(frame)

    def _instructions(self, frame: FrameInput) -> None:
        if frame.down and frame.mouse_rect().collides(EXIT_RECT):
            self.screen = Screen.MENU

    def _pick_pet(self, frame: FrameInput) -> None:
        if not frame.down:
            return
        mouse = frame.mouse_rect()
        for index, (rect, breed) in enumerate(zip(PET_RECTS, PET_OPTIONS)):
            if mouse.collides(rect):
                self.selected_breed = breed
                self.box_location = index
        if self.selected_breed and START_RECT.collides(mouse):
            self.create_pet(self.selected_breed, frame.now)
            self.screen = Screen.PLAYING
        if mouse.collides(INSTRUCTIONS_RECT):
            self.screen = Screen.INSTRUCTIONS
            self.selected_breed = None
            self.box_location = NO_SELECTION

    def _handle_click(self, pet: Pet, frame: FrameInput) -> bool:
        """Handle a click during play; return True if the pet should stay put."""
        stay = False
        mouse = frame.mouse_rect()
        target = frame.mouse_rect(POOP_CLICK_SIZE)
        for poop in pet.poops:
            if poop.rect().collides(target):
                poop.deactivate()
                self.score_value += POOP_POINTS
                stay = True
        if pet.pet_type == "cat" and mouse.collides(pet.rect()):
            if frame.now - self.last_time_petted > PETTING_COOLDOWN:
                self.petting.start(pet.position, frame.now)
                self.last_time_petted = frame.now
                pet.happiness = _raise_status(pet.happiness, PET_AMOUNT)
            stay = True
        if mouse.collides(self.food.button_rect) or mouse.collides(self.water.button_rect):
            stay = True
        return stay

    def _play(self, frame: FrameInput) -> None:
        pet = self.pet
        if pet is None:
            raise RuntimeError("no pet to play with")
        now, dt = frame.now, frame.dt
        self.score_timer = int(now - self.ui_timer)

        if self.pet_alive:
            if frame.pressed:
                self.water.click(frame.mouse_x, frame.mouse_y)
            else:
                self.water.release()
            pet.try_poop(now, self.rng)

        pet.animate(dt)

        stay = self._handle_click(pet, frame) if frame.pressed else False
        if not stay:
            pet.move(dt)
            if frame.pressed:
                pet.command(frame.mouse_x)

        self.petting.update(dt, now)
        pet.animate(dt)

        if self.pet_alive:
            self.load_coins(now)
            for coin in self.coins:
                coin.update(dt, now)
            self.check_collisions(now)

            if frame.pressed:
                self.food.click(frame.mouse_x, frame.mouse_y, pet.x, self.rng)
            self.food.update(dt)

        pet.update_status(now)
        self._apply_health(pet, now)

    def _apply_health(self, pet: Pet, now: float) -> None:
        if 0 in (pet.happiness, pet.hunger, pet.thirst):
            if now - self.last_time_damaged > DAMAGE_INTERVAL:
                for _ in range(DAMAGE_PER_TICK):
                    self.health.take_damage(1)
                self.last_time_damaged = int(now)
                if self.health.health == 0 and self.pet_alive:
                    self._die(pet, now)
        elif now - self.last_time_healed > HEAL_INTERVAL:
            for _ in range(HEAL_PER_TICK):
                self.health.heal(1)
            self.last_time_healed = int(now)

    def _die(self, pet: Pet, now: float) -> None:
        self.pet_alive = False
        pet.is_running = False
        pet.is_dead = True
        self.water.drink()
        self.highscore.add_highscore(self.display_score, self.selected_breed or pet.breed)
        self.ending_timer = int(now)
        self.time_tracker = int(now)
        self.end_counter = DEATH_SCREEN_SECONDS
        self.screen = Screen.DEATH

    def _death_screen(self, frame: FrameInput) -> None:
        if self.pet is not None:
            self.pet.animate(frame.dt)
        if frame.now - self.time_tracker >= 1:
            self.end_counter -= 1
            self.time_tracker = int(frame.now)
        if frame.now - self.ending_timer >= DEATH_SCREEN_SECONDS:
            self.screen = Screen.MENU
            self.pet = None

    def load_coins(self, now: float) -> Coin | None:
        """Drop a new coin once the current interval has passed; return it."""
        if now - self.last_coin_time < self.coin_interval:
            return None
        self.last_coin_time = int(now)
        self.coin_interval = self.rng.randint(*COIN_INTERVAL)
        coin = Coin(self.rng.randint(*COIN_SPAWN_X), COIN_SPAWN_Y)
        self.coins.append(coin)
        return coin

    def check_collisions(self, now: float) -> None:
        """Let the pet collect coins, drink from the bowl and eat the fish."""
        pet = self.pet
        if pet is None:
            return
        pet_rect = pet.rect()
        for coin in self.coins:
            if coin.rect().collides(pet_rect):
                if not coin.collision:
                    self.wallet.coins += COIN_VALUE
                    self.score_value += COIN_POINTS
                coin.collision = True
                coin.collision_time = int(now)

        if self.water.rect().collides(pet_rect):
            self.water.drink()
            pet.last_drank_time = now
            pet.thirst = _raise_status(pet.thirst, DRINK_AMOUNT)

        if self.food.rect().collides(pet_rect):
            self.food.eat()
            pet.last_fed_time = now
            pet.hunger = _raise_status(pet.hunger, EAT_AMOUNT)

    def create_pet(self, breed: str, now: float) -> Pet:
        """Make a new pet of the breed and start a fresh game around it."""
        self.pet = create_pet(breed, now, self.rng)
        self.reset(now)
        return self.pet

    def reset(self, now: float) -> None:
        """Clear coins, restore health and zero the score and wallet."""
        self.coins.clear()
        self.health.heal(MAX_HEALTH)
        self.coin_interval = self.rng.randint(*COIN_INTERVAL)
        self.last_coin_time = int(now)
        self.last_time_damaged = int(now)
        self.last_time_healed = int(now)
        self.last_time_petted = float(now)
        self.wallet.coins = 0
        self.score_value = 0
        self.pet_alive = True
        self.screen = Screen.MENU