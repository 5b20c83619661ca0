"""Alternating paw animation shown on each key press."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from bongocat.config import ANIM_DURATION_MS
from bongocat.ui import AssetPaths


class Picture(Protocol):
    """Anything that can display an image file."""

    def show_image(self, path: Path) -> None: ...


Scheduler = Callable[[int, Callable[[], None]], object]


class Animator:
    """Shows a hit frame, alternating paws, then returns to idle after a delay."""

    def __init__(self, assets: AssetPaths, schedule: Scheduler) -> None:
        self._assets = assets
        self._schedule = schedule
        self._next_left = True

    def next_hit(self) -> Path:
        """Return the next hit frame and flip to the other paw."""
        use_left = self._next_left
        self._next_left = not use_left
        return self._assets.hit_left if use_left else self._assets.hit_right

    def animate(self, picture: Picture) -> None:
        """Show a hit frame now and schedule the switch back to idle."""
        picture.show_image(self.next_hit())
        idle = self._assets.idle
        self._schedule(ANIM_DURATION_MS, lambda: picture.show_image(idle))