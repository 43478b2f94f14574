"""
tick_source.py
--------------
Periodic tick sources that drive an Animator.

Responsibilities
----------------
- Arm a step function to run every ``period`` milliseconds.
- Hand back a TickHandle that cancels exactly that registration.
- Keep the concrete timing mechanism out of the Animator.

Sources
-------
- ManualTickSource: ticks only when ``advance()`` is called (tests, headless).
- PygameTimerTickSource: pygame timer events tagged with their registration,
  delivered by the event loop through ``dispatch()``.
"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List

import pygame

from scenereel.core.debug.debug_logger import DebugLogger
from scenereel.core.errors import ConfigurationError


StepFunction = Callable[[], None]


@dataclass(frozen=True)
class TickHandle:
    """Cancellation token for one armed step function."""
    token: int
    period: int


def _validate_period(period) -> int:
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise ConfigurationError(f"Tick period must be a positive integer, got {period!r}")
    return period


# ===========================================================
# Interface
# ===========================================================

class TickSource(ABC):
    """Base interface for periodic tick sources."""

    @abstractmethod
    def start(self, step: StepFunction, period: int) -> TickHandle:
        """
        Arm ``step`` to run every ``period`` milliseconds.

        Args:
            step: Zero-argument function invoked on every tick
            period: Tick interval in milliseconds

        Returns:
            TickHandle used to cancel this registration
        """
        pass

    @abstractmethod
    def cancel(self, handle: TickHandle) -> None:
        """Stop the registration behind ``handle``. Unknown handles are ignored."""
        pass

    @abstractmethod
    def is_active(self, handle: TickHandle) -> bool:
        """True while ``handle`` is armed."""
        pass


# ===========================================================
# Manual Source
# ===========================================================

class ManualTickSource(TickSource):
    """Deterministic source: every ``advance()`` is one tick for each registration."""

    def __init__(self):
        self._tokens = itertools.count(1)
        self._steps: Dict[TickHandle, StepFunction] = {}
        self.ticks = 0

    def start(self, step: StepFunction, period: int) -> TickHandle:
        handle = TickHandle(next(self._tokens), _validate_period(period))
        self._steps[handle] = step
        DebugLogger.trace(f"Armed manual tick #{handle.token} every {period}ms")
        return handle

    def cancel(self, handle: TickHandle) -> None:
        if self._steps.pop(handle, None) is not None:
            DebugLogger.trace(f"Cancelled manual tick #{handle.token}")

    def is_active(self, handle: TickHandle) -> bool:
        return handle in self._steps

    @property
    def active_count(self) -> int:
        return len(self._steps)

    def advance(self, count: int = 1) -> None:
        """
        Run ``count`` ticks. A step that cancels any registration
        (its own included) stops it from running later in the same tick.
        """
        for _ in range(count):
            for handle in list(self._steps):
                step = self._steps.get(handle)
                if step is not None:
                    step()
            self.ticks += 1


# ===========================================================
# Pygame Timer Source
# ===========================================================

class PygameTimerTickSource(TickSource):
    """
    Arms ``pygame.time.set_timer`` with timer events that carry the token of
    their registration. Event types come from a small pool: each one is
    allocated once with ``pygame.event.custom_type()`` and reused after its
    registration is cancelled. The owning event loop must pass every event
    to ``dispatch()``; only events whose token is still armed run a step.
    """

    def __init__(self):
        self._tokens = itertools.count(1)
        self._steps: Dict[int, StepFunction] = {}
        self._handles: Dict[int, TickHandle] = {}
        self._event_types: Dict[int, int] = {}
        self._free_types: List[int] = []

    def _acquire_event_type(self) -> int:
        if self._free_types:
            return self._free_types.pop()
        return pygame.event.custom_type()

    def start(self, step: StepFunction, period: int) -> TickHandle:
        period = _validate_period(period)
        handle = TickHandle(next(self._tokens), period)
        event_type = self._acquire_event_type()

        self._steps[handle.token] = step
        self._handles[handle.token] = handle
        self._event_types[handle.token] = event_type
        pygame.time.set_timer(pygame.event.Event(event_type, token=handle.token), period)

        DebugLogger.trace(f"Armed pygame timer #{handle.token} (event {event_type}) every {period}ms")
        return handle

    def cancel(self, handle: TickHandle) -> None:
        if self._handles.get(handle.token) != handle:
            return
        event_type = self._event_types.pop(handle.token)
        pygame.time.set_timer(event_type, 0)
        del self._steps[handle.token]
        del self._handles[handle.token]
        self._free_types.append(event_type)
        DebugLogger.trace(f"Cancelled pygame timer #{handle.token}")

    def is_active(self, handle: TickHandle) -> bool:
        return self._handles.get(handle.token) == handle

    @property
    def event_types(self) -> List[int]:
        """Every event type this source has allocated so far."""
        return sorted(set(self._event_types.values()) | set(self._free_types))

    def cancel_all(self) -> None:
        """Disarm every timer this source owns (used at shutdown)."""
        for handle in list(self._handles.values()):
            self.cancel(handle)

    def dispatch(self, event) -> bool:
        """
        Run the step owning ``event``. Timer events left in the queue by a
        cancelled registration are consumed without running anything.

        Returns:
            True if the event was a tick for this source (consumed)
        """
        event_type = getattr(event, "type", None)
        if event_type not in self.event_types:
            return False

        token = getattr(event, "token", None)
        if self._event_types.get(token) == event_type:
            self._steps[token]()
        else:
            DebugLogger.trace(f"Dropped stale timer event {event_type}")
        return True
