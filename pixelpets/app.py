"""Window, input and drawing for the game."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import pygame

from pixelpets.essentials import COIN_HEIGHT, COIN_WIDTH, POOP_SIZE
from pixelpets.game import (
    INSTRUCTIONS_BUTTON_SIZE,
    INSTRUCTIONS_RECT,
    START_BUTTON_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    FrameInput,
    Game,
    Screen,
)
from pixelpets.healthbar import BLOCK_COLOR, BLOCK_SIZE
from pixelpets.highscore import Highscore
from pixelpets.pets import PET_HEIGHT, PET_WIDTH, Pet
from pixelpets.supplies import BUTTON_SIZE, FISH_HEIGHT, FISH_WIDTH

TITLE = "Pixel Companions"
FPS = 60

RAYWHITE = (245, 245, 245)
WHITE = (255, 255, 255)
GRAY = (130, 130, 130)
RED = (230, 41, 55)
BLUE = (0, 121, 241)
PINK = (255, 109, 194)
BLACK = (0, 0, 0)
YELLOW = (253, 249, 0)

FALLBACK_COLORS = {
    "pet": (120, 120, 120),
    "dead_pet": (60, 60, 60),
    "coin": (255, 203, 0),
    "poop": (110, 70, 30),
    "fish": (255, 140, 40),
    "heart": PINK,
    "button": (200, 200, 200),
    "button_pressed": (150, 150, 150),
    "bowl_full": (80, 160, 255),
    "bowl_empty": (170, 170, 190),
}

_START_BUTTON_POS = ((WINDOW_WIDTH // 3) * 2 - START_BUTTON_SIZE[0] // 2, 530)
_HIGHSCORE_SLOTS = (("shibaInu", 180), ("pinkCat", 470), ("greyCat", 750))
_COIN_ICON_SIZE = (35, 40)

_EMPTY_HIGHSCORES = (
    "Grey Cat Highscore:\n0\nPink Cat Highscore:\n0\nShiba Inu Highscore:\n0\n"
)


class Renderer:
    """Draws a game onto a surface, using images from a resource folder when present."""

    def __init__(self, surface: pygame.Surface, resources: str | Path | None = None) -> None:
        pygame.font.init()
        self.surface = surface
        self.resources = Path(resources) if resources is not None else None
        self._images: dict[tuple[str, tuple[int, int]], pygame.Surface | None] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    def _image(self, name: str, size: tuple[int, int]) -> pygame.Surface | None:
        key = (name, size)
        if key not in self._images:
            image = None
            if self.resources is not None:
                path = self.resources / name
                if path.is_file():
                    try:
                        image = pygame.transform.scale(pygame.image.load(str(path)), size)
                    except pygame.error:
                        image = None
            self._images[key] = image
        return self._images[key]

    def _blit(
        self,
        name: str,
        size: tuple[int, int],
        pos: tuple[float, float],
        fallback: str | None = None,
    ) -> None:
        x, y = int(pos[0]), int(pos[1])
        image = self._image(name, size)
        if image is not None:
            self.surface.blit(image, (x, y))
        elif fallback is not None:
            pygame.draw.rect(self.surface, FALLBACK_COLORS[fallback], (x, y, *size))

    def _text(self, text: object, x: int, y: int, size: int, color: tuple[int, int, int]) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        self.surface.blit(font.render(str(text), True, color), (x, y))

    def draw(self, game: Game) -> None:
        """Draw the current screen of the game."""
        self.surface.fill(RAYWHITE)
        if game.screen is Screen.MENU:
            self._draw_menu(game)
        elif game.screen is Screen.INSTRUCTIONS:
            self._draw_instructions()
        elif game.screen is Screen.PLAYING:
            self._draw_playing(game)
        else:
            self._draw_death(game)

    def _draw_menu(self, game: Game) -> None:
        self._blit("breedchoosing.png", (WINDOW_WIDTH, WINDOW_HEIGHT), (0, 0))
        self._text("Pixel Companion", 300, 20, 50, WHITE)
        self._blit(
            "instructions-button.png",
            INSTRUCTIONS_BUTTON_SIZE,
            (INSTRUCTIONS_RECT.x, INSTRUCTIONS_RECT.y),
            "button",
        )
        for breed, x in _HIGHSCORE_SLOTS:
            self._text(game.highscore.score_text(breed), x, 500, 40, GRAY)
        box = game.box_location
        pygame.draw.rect(self.surface, YELLOW, ((865 // 4) * box + 70 * box + 110, 300, 20, 20))
        if game.selected_breed:
            self._blit("startButton.png", START_BUTTON_SIZE, _START_BUTTON_POS, "button")

    def _draw_instructions(self) -> None:
        self._blit("instruction.png", (WINDOW_WIDTH, WINDOW_HEIGHT), (0, 0))
        self._text("Pixel Companion", 300, 20, 50, WHITE)

    def _draw_level(self, pet: Pet) -> None:
        self._text("LVL ", 13, 75, 40, BLACK)
        self._text(pet.level, 106, 75, 40, BLACK)

    def _draw_pet(self, pet: Pet) -> None:
        sprites = pet.sprites
        size = sprites.size if sprites is not None else (PET_WIDTH, PET_HEIGHT)
        fallback = "dead_pet" if pet.is_dead else "pet"
        if sprites is None:
            self._blit("", size, pet.position, fallback)
            return
        if pet.is_dead:
            name = sprites.death
        else:
            if not pet.is_running:
                files = sprites.stand_files()
            elif pet.moving_right:
                files = sprites.run_right_files()
            else:
                files = sprites.run_left_files()
            name = files[pet.frame % len(files)]
        self._blit(name, size, pet.position, fallback)

    def _draw_playing(self, game: Game) -> None:
        pet = game.pet
        if pet is None:
            return
        self._blit("bg.png", (WINDOW_WIDTH, WINDOW_HEIGHT), (0, 0))
        self._text(game.wallet.coins, 915, 655, 30, WHITE)
        self._text(game.display_score, 30, 648, 50, WHITE)

        self._text(pet.hunger, 370, 20, 30, RED)
        self._blit("food/fish.png", (30, 30), (330, 20))
        self._text(pet.thirst, 500, 20, 30, BLUE)
        self._blit("water.png", (30, 30), (460, 20))
        self._draw_level(pet)
        if pet.pet_type == "cat":
            self._text(pet.happiness, 630, 20, 30, PINK)
            self._blit("happiness.png", (30, 30), (590, 20))

        self._blit("Coins/c1.png", _COIN_ICON_SIZE, (885, 130))
        self._text("2", 930, 135, 35, WHITE)
        self._blit("Coins/c1.png", _COIN_ICON_SIZE, (770, 130))
        self._text("1", 815, 135, 35, WHITE)

        water = game.water
        button_size = (BUTTON_SIZE, BUTTON_SIZE)
        if water.button_pressed:
            self._blit("buttons/waterbuttonclicked.png", button_size, (750, 16), "button_pressed")
        else:
            self._blit("buttons/waterbutton.png", button_size, (750, 16), "button")
        if water.bowl_full:
            self._blit("water/fullWater.png", (110, 90), (700, 470), "bowl_full")
        else:
            self._blit("water/emptyWater.png", (95, 70), (708, 482), "bowl_empty")

        for poop in pet.poops:
            if poop.active:
                self._blit("poo.png", (POOP_SIZE, POOP_SIZE), (poop.x, poop.y), "poop")

        if game.petting.active:
            frame = game.petting.frame + 1
            self._blit(f"hearts/h{frame}.png", (55, 65), game.petting.heart_position, "heart")

        self._draw_pet(pet)
        self._blit("health bar.png", (300, 40), (10, 10))
        self._blit(
            "Coins/c1.png",
            _COIN_ICON_SIZE,
            (WINDOW_WIDTH - _COIN_ICON_SIZE[0] - 20, WINDOW_HEIGHT - _COIN_ICON_SIZE[1] - 10),
        )

        if game.pet_alive:
            for coin in game.coins:
                if coin.active:
                    self._blit(
                        f"Coins/c{coin.frame + 1}.png",
                        (COIN_WIDTH, COIN_HEIGHT),
                        (coin.x, coin.y),
                        "coin",
                    )

        food = game.food
        if food.falling:
            self._blit("food/fish.png", (FISH_WIDTH, FISH_HEIGHT), (food.x, food.y), "fish")
        if food.button_pressed:
            self._blit("buttons/foodbuttonclicked.png", button_size, (870, 16), "button_pressed")
        else:
            self._blit("buttons/foodbutton.png", button_size, (870, 16), "button")

        for x, y in game.health.blocks():
            pygame.draw.rect(self.surface, BLOCK_COLOR[:3], (int(x), int(y), BLOCK_SIZE, BLOCK_SIZE))

    def _draw_death(self, game: Game) -> None:
        self._blit("bg.png", (WINDOW_WIDTH, WINDOW_HEIGHT), (0, 0))
        if game.pet is not None:
            self._draw_level(game.pet)
            self._draw_pet(game.pet)
        self._blit("deathbg.png", (600, 350), (200, 60))
        self._text("You died!", 350, 170, 70, WHITE)
        self._text("Returning in", 320, 240, 50, GRAY)
        self._text(game.end_counter, 650, 240, 50, GRAY)


def _ensure_highscore_file(path: Path) -> None:
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_EMPTY_HIGHSCORES, encoding="utf-8")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pixelpets", description="Look after a pixel pet.")
    parser.add_argument("--resources", default="resources", help="folder holding the images")
    parser.add_argument("--highscore", default="highscore.txt", help="high-score file")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    highscore_path = Path(args.highscore)
    _ensure_highscore_file(highscore_path)
    game = Game(Highscore(highscore_path))

    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        renderer = Renderer(surface, args.resources)
        clock = pygame.time.Clock()
        start = time.monotonic()
        frames = 0
        running = True
        while running and (args.frames is None or frames < args.frames):
            dt = clock.tick(FPS) / 1000
            pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed = True
            mouse_x, mouse_y = pygame.mouse.get_pos()
            frame = FrameInput(
                now=time.monotonic() - start,
                dt=dt,
                mouse_x=float(mouse_x),
                mouse_y=float(mouse_y),
                pressed=pressed,
                down=bool(pygame.mouse.get_pressed()[0]),
            )
            game.update(frame)
            renderer.draw(game)
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()
    return 0