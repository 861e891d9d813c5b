"""Hero backdrop: a drifting, twinkling star field with occasional shooting stars.

Lifecycle
---------
``Starfield.start()`` sizes the surface to the viewport, seeds a fixed set of
stars and schedules frames until ``stop()``. Each frame:

1. clear the surface;
2. advance the simulation clock by a fixed step (not wall time);
3. draw every star with a twinkle, drift it down, sway it sideways and
   recycle it above the top once it leaves the bottom;
4. maybe spawn a shooting star;
5. draw and advance every shooting star, dropping the ones whose life ran out;
6. request the next frame.

Colors are looked up from ``dark_mode()`` on every draw call. ``HeroBackdrop``
additionally restarts the whole field whenever the preference changes.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from .canvas import ManualFrameScheduler, SvgSurface, Viewport
from .theme import ThemePreference

STAR_COUNT = 150
STAR_SIZE = (1.0, 3.0)
STAR_SPEED = (0.1, 0.6)
STAR_OPACITY = (0.2, 1.0)
STAR_TWINKLE = (0.01, 0.03)
STAR_RESET_Y = -5.0
DRIFT_SCALE = 0.1
SWAY_RATE = 0.1
SWAY_AMPLITUDE = 0.1

TIME_STEP = 0.016

SPAWN_CHANCE = 0.003
SPAWN_HEIGHT = 0.3
STREAK_LENGTH = (50.0, 130.0)
STREAK_SPEED = (12.0, 20.0)
STREAK_ANGLE = (math.pi * 0.15, math.pi * 0.45)
STREAK_DECAY = 0.008
STREAK_WIDTH = 2

STAR_COLOR = {True: "#ffffff", False: "#1e3a8a"}
STREAK_RGB = {True: (255, 255, 255), False: (59, 130, 246)}


@dataclass
class Star:
    x: float
    y: float
    size: float
    speed: float
    opacity: float
    twinkle_speed: float


@dataclass
class ShootingStar:
    x: float
    y: float
    length: float
    speed: float
    angle: float
    opacity: float = 1.0
    life: float = 1.0


def _between(rng: random.Random, bounds) -> float:
    low, high = bounds
    return rng.random() * (high - low) + low


class Starfield:
    """One mounted star field. Not reusable after ``stop()``; build a new one."""

    def __init__(
        self,
        viewport: Viewport,
        scheduler,
        dark_mode: Callable[[], bool],
        rng: Optional[random.Random] = None,
        star_count: int = STAR_COUNT,
    ):
        self.viewport = viewport
        self.scheduler = scheduler
        self.dark_mode = dark_mode
        self.rng = rng or random.Random()
        self.star_count = star_count

        self.surface = None
        self.stars: List[Star] = []
        self.shooting_stars: List[ShootingStar] = []
        self.time = 0.0
        self.frame_count = 0
        self.streaks_spawned = 0
        self.running = False
        self._handle = None

    # -- lifecycle ---------------------------------------------------------

    def start(self) -> bool:
        """Mount the effect. Returns False (and does nothing) without a surface."""
        surface = self.viewport.get_context()
        if surface is None:
            return False
        self.surface = surface
        self._resize()
        self.viewport.add_resize_listener(self._resize)

        self.stars = [self._new_star() for _ in range(self.star_count)]
        self.shooting_stars = []
        self.time = 0.0
        self.running = True
        self._frame()
        return True

    def stop(self) -> None:
        if self.surface is None:
            return
        self.viewport.remove_resize_listener(self._resize)
        self.scheduler.cancel_frame(self._handle)
        self._handle = None
        self.running = False

    def _resize(self) -> None:
        self.surface.width = self.viewport.width
        self.surface.height = self.viewport.height

    def _frame(self) -> None:
        self.step()
        if self.running:
            self._handle = self.scheduler.request_frame(self._frame)

    # -- simulation --------------------------------------------------------

    def _new_star(self) -> Star:
        return Star(
            x=self.rng.random() * self.surface.width,
            y=self.rng.random() * self.surface.height,
            size=_between(self.rng, STAR_SIZE),
            speed=_between(self.rng, STAR_SPEED),
            opacity=_between(self.rng, STAR_OPACITY),
            twinkle_speed=_between(self.rng, STAR_TWINKLE),
        )

    def _new_shooting_star(self) -> ShootingStar:
        return ShootingStar(
            x=self.rng.random() * self.surface.width,
            y=self.rng.random() * self.surface.height * SPAWN_HEIGHT,
            length=_between(self.rng, STREAK_LENGTH),
            speed=_between(self.rng, STREAK_SPEED),
            angle=_between(self.rng, STREAK_ANGLE),
        )

    def step(self) -> None:
        """Draw and advance exactly one frame."""
        surface = self.surface
        surface.clear()
        self.time += TIME_STEP
        self.frame_count += 1

        sway = math.sin(self.time * SWAY_RATE) * SWAY_AMPLITUDE
        for star in self.stars:
            twinkle = math.sin(self.time * star.twinkle_speed * 100) * 0.3 + 0.7
            surface.fill_circle(
                star.x, star.y, star.size, STAR_COLOR[bool(self.dark_mode())],
                star.opacity * twinkle,
            )
            star.y += star.speed * DRIFT_SCALE
            star.x += sway
            if star.y > surface.height:
                star.y = STAR_RESET_Y
                star.x = self.rng.random() * surface.width

        if self.rng.random() < SPAWN_CHANCE:
            self.shooting_stars.append(self._new_shooting_star())
            self.streaks_spawned += 1

        alive: List[ShootingStar] = []
        for streak in self.shooting_stars:
            end_x = streak.x + math.cos(streak.angle) * streak.length
            end_y = streak.y + math.sin(streak.angle) * streak.length
            surface.stroke_gradient_line(
                streak.x, streak.y, end_x, end_y,
                STREAK_RGB[bool(self.dark_mode())],
                streak.opacity * streak.life,
                STREAK_WIDTH,
            )
            streak.x += math.cos(streak.angle) * streak.speed
            streak.y += math.sin(streak.angle) * streak.speed
            streak.life -= STREAK_DECAY
            if streak.life > 0:
                alive.append(streak)
        self.shooting_stars = alive


class HeroBackdrop:
    """Mounts a star field and rebuilds it whenever the display mode changes."""

    def __init__(
        self,
        viewport: Viewport,
        scheduler,
        preference: ThemePreference,
        rng_factory: Callable[[], random.Random] = random.Random,
    ):
        self.viewport = viewport
        self.scheduler = scheduler
        self.preference = preference
        self.rng_factory = rng_factory
        self.field: Optional[Starfield] = None
        self.mounts = 0
        self._unsubscribe = None

    def mount(self) -> None:
        self._start_field()
        self._unsubscribe = self.preference.subscribe(self._on_mode_change)

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self.field is not None:
            self.field.stop()
            self.field = None

    def _start_field(self) -> None:
        self.field = Starfield(
            self.viewport, self.scheduler, self.preference.get, rng=self.rng_factory()
        )
        self.field.start()
        self.mounts += 1

    def _on_mode_change(self, _dark: bool) -> None:
        if self.field is not None:
            self.field.stop()
        self._start_field()


def render_snapshot(
    width: int,
    height: int,
    dark: bool = True,
    frames: int = 1,
    seed: Optional[int] = None,
    star_count: int = STAR_COUNT,
) -> str:
    """Run the field headless for ``frames`` frames and return the last one as SVG."""
    surface = SvgSurface(width, height, dark=dark)
    scheduler = ManualFrameScheduler()
    field = Starfield(
        Viewport(width, height, surface),
        scheduler,
        lambda: dark,
        rng=random.Random(seed),
        star_count=star_count,
    )
    field.start()
    scheduler.run(max(frames, 1) - 1)
    field.stop()
    return surface.to_svg()
