from __future__ import annotations

import random
from typing import Sequence

from sunvale.events.bus import EventBus
from sunvale.world import create_world


class DummyWindow:
    def __init__(self, width=1024, height=720):
        self.width = width
        self.height = height


def make_world(slots: Sequence[str] | None = None, target: str | None = None, *, seed: int = 7, **kwargs):
    """Return (bus, world) with a seeded RNG so random setups are repeatable."""
    bus = EventBus()
    world = create_world(
        bus,
        slots=list(slots) if slots is not None else None,
        target=target,
        rng=random.Random(seed),
        **kwargs,
    )
    return bus, world


def center_of(bounds):
    left, bottom, width, height = bounds
    return left + width / 2, bottom + height / 2
