"""Small world objects: collision rectangles, coins, poops and petting hearts."""

from __future__ import annotations

from dataclasses import dataclass

COIN_WIDTH = 15
COIN_HEIGHT = 35
COIN_FRAMES = 6
COIN_FRAME_SPEED = 0.2
COIN_RISE_SPEED = 70
COIN_LINGER = 3.0

POOP_SIZE = 35

HEART_FRAMES = 5
HEART_FRAME_SPEED = 0.3
HEART_RISE_SPEED = 30
HEART_DURATION = 1.1
HEART_OFFSET = (20, -55)


@dataclass
class Rect:
    """Axis-aligned rectangle; the all-zero rectangle stands for "nothing"."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def contains(self, x: float, y: float) -> bool:
        """Return True when the point lies inside the rectangle."""
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )


class Coin:
    """A spinning coin that floats away for a few seconds once collected."""

    def __init__(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.collision = False
        self.active = True
        self.collision_time = 0.0
        self.frame = 0
        self.frame_speed = COIN_FRAME_SPEED
        self.move_speed = COIN_RISE_SPEED
        self._frame_time = 0.0

    def update(self, dt: float, now: float) -> None:
        """Advance the animation; a collected coin rises and then disappears."""
        if not self.active:
            return
        self._frame_time += dt
        if self._frame_time >= self.frame_speed:
            self._frame_time = 0.0
            self.frame = (self.frame + 1) % COIN_FRAMES
        if self.collision:
            self.y -= dt * self.move_speed
            if now - self.collision_time >= COIN_LINGER:
                self.active = False

    def rect(self) -> Rect:
        """Collision rectangle, empty once the coin has been collected."""
        if self.collision:
            return Rect()
        return Rect(self.x, self.y, COIN_WIDTH, COIN_HEIGHT)


class Poop:
    """A mess left by a pet; it is active from the moment it is made."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.active = False
        self.spawn()

    def spawn(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def rect(self) -> Rect:
        """Collision rectangle, empty while inactive."""
        if not self.active:
            return Rect()
        return Rect(self.x, self.y, POOP_SIZE, POOP_SIZE)


class Petting:
    """Hearts that float up from a pet for a short while after it is petted."""

    def __init__(self, now: float = 0.0) -> None:
        self.x = 0.0
        self.y = 0.0
        self.active = False
        self.frame = 0
        self.frame_speed = HEART_FRAME_SPEED
        self.time = float(now)
        self._frame_time = 0.0

    def start(self, position: tuple[float, float], now: float) -> None:
        """Show hearts at the given position, restarting the animation."""
        self.x, self.y = (float(v) for v in position)
        self.active = True
        self.time = float(now)
        self.frame = 0

    def update(self, dt: float, now: float) -> None:
        """Float the hearts upwards and hide them once their time is up."""
        if not self.active:
            return
        self._frame_time += dt
        if self._frame_time >= self.frame_speed:
            self._frame_time = 0.0
            self.frame = (self.frame + 1) % HEART_FRAMES
        self.y -= dt * HEART_RISE_SPEED
        if now - self.time > HEART_DURATION:
            self.active = False

    @property
    def heart_position(self) -> tuple[int, int]:
        """Where the hearts are drawn, relative to the petted spot."""
        return int(self.x) + HEART_OFFSET[0], int(self.y) + HEART_OFFSET[1]