from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass(slots=True)
class GravityTimer:
	"""One-shot delay driven by elapsed time rather than a wall clock.

	The timer fires its callback once ``period`` milliseconds have been fed in
	through ``advance``. It does not repeat by itself: the callback (or its
	caller) re-arms it, so at most one firing is ever pending. Changing the
	period only affects the next ``arm``.
	"""

	period: float
	callback: Callable[[], None] = field(repr=False)

	_remaining: float | None = field(init=False, default=None, repr=False)
	_fired: int = field(init=False, default=0, repr=False)

	def __post_init__(self) -> None:
		self.period = self._sanitize(self.period)

	@staticmethod
	def _sanitize(period: float) -> float:
		value = float(period)
		if value <= 0.0:
			raise ValueError("Gravity period must be positive")
		return value

	@property
	def armed(self) -> bool:
		return self._remaining is not None

	@property
	def remaining(self) -> float | None:
		return self._remaining

	@property
	def fired(self) -> int:
		return self._fired

	def arm(self) -> None:
		"""Cancel any pending firing and schedule a new one ``period`` from now."""
		self._remaining = self.period

	def cancel(self) -> None:
		self._remaining = None

	def set_period(self, period: float) -> None:
		self.period = self._sanitize(period)

	def advance(self, elapsed: float) -> bool:
		"""Feed ``elapsed`` milliseconds; returns True when the callback ran."""
		if self._remaining is None:
			return False
		self._remaining -= max(0.0, float(elapsed))
		if self._remaining > 0.0:
			return False
		self._remaining = None
		self._fired += 1
		self.callback()
		return True
