from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Dict, Tuple


@dataclass(slots=True)
class MouseThrottle:
	"""Drops repeated presses of the same button on the same spot.

	A press is rejected when it arrives within ``min_interval`` seconds of the
	previous press of that button and no further than ``min_distance`` pixels
	away. Accepted presses get an increasing sequence number.
	"""

	min_interval: float = 0.2
	min_distance: float = 6.0
	clock: Callable[[], float] = field(default=monotonic, repr=False)

	_last_press: Dict[int, Tuple[float, float, float]] = field(init=False, default_factory=dict, repr=False)
	_sequence: int = field(init=False, default=0, repr=False)

	def allow(self, x: float, y: float, button: int) -> bool:
		now = self.clock()
		last = self._last_press.get(button)
		if last is not None:
			last_time, last_x, last_y = last
			if (now - last_time) < max(0.0, self.min_interval):
				dx = x - last_x
				dy = y - last_y
				if (dx * dx + dy * dy) <= self.min_distance * self.min_distance:
					return False
		self._last_press[button] = (now, x, y)
		self._sequence += 1
		return True

	def reset(self) -> None:
		self._last_press.clear()
		self._sequence = 0

	@property
	def last_sequence(self) -> int | None:
		return self._sequence or None
