from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")

Sleep = Callable[[float], None]


class CancelToken:
    """Cancellation flag shared between a simulated task and the UI scope that started it."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True)
class TaskOutcome(Generic[T]):
    """Result of a simulated step: a value, an error, or a cancellation."""

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    cancelled: bool = False


@dataclass(frozen=True)
class Tick:
    """One timer firing: wait `delay` seconds, then run `action`."""

    delay: float
    action: Callable[[], Any]


def run_simulated(
    ticks: Iterable[Tick],
    produce: Callable[[], T],
    *,
    sleep: Sleep = time.sleep,
    cancel: Optional[CancelToken] = None,
) -> TaskOutcome[T]:
    """Fire `ticks` in order, then return the value from `produce`.

    The cancel token is checked before every wait and after the last one.
    A cancelled run never calls `produce`. Exceptions raised by an action
    or by `produce` are returned as an error outcome.
    """
    try:
        for tick in ticks:
            if cancel is not None and cancel.cancelled:
                return TaskOutcome(ok=False, cancelled=True, error="cancelled")
            if tick.delay > 0:
                sleep(tick.delay)
            if cancel is not None and cancel.cancelled:
                return TaskOutcome(ok=False, cancelled=True, error="cancelled")
            tick.action()
        if cancel is not None and cancel.cancelled:
            return TaskOutcome(ok=False, cancelled=True, error="cancelled")
        return TaskOutcome(ok=True, value=produce())
    except Exception as e:  # noqa: BLE001
        return TaskOutcome(ok=False, error=f"{type(e).__name__}: {e}")


def delayed(delay: float, produce: Callable[[], T], *, sleep: Sleep = time.sleep, cancel: Optional[CancelToken] = None) -> TaskOutcome[T]:
    """Single-timer form of run_simulated."""
    return run_simulated([Tick(delay, lambda: None)], produce, sleep=sleep, cancel=cancel)
