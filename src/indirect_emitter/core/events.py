from __future__ import annotations

import logging
import threading

from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable

from .base import BaseEmitter

_LOG = logging.getLogger(__name__)

DEFAULT_MAX_LISTENERS: int = 10
"""Listener cap a new emitter starts with. ``0`` means unlimited."""


class UnhandledErrorEvent(Exception):
    """Raised when ``"error"`` is emitted with a non-exception and nobody listens."""

    def __init__(self, payload: Any) -> None:
        super().__init__(f"Unhandled 'error' event ({payload!r})")
        self.payload = payload


@dataclass(frozen=True, slots=True, eq=False)
class _Registration:
    listener: Callable[..., Any]
    once: bool


class EventEmitter(BaseEmitter):
    """Lightweight, thread-safe, synchronous event emitter.

    • Synchronous: `emit()` blocks until all callbacks return.
    • Exceptions raised by listeners **propagate** to the caller.
    • Listeners for one event run in registration order; `prepend_*`
      registrations jump to the front.
    • `once` registrations are dropped *before* their callback runs, so a
      callback re-emitting the same event does not fire itself again.
    """

    def __init__(self, max_listeners: int | None = None) -> None:
        self._registry: dict[Any, list[_Registration]] = {}
        self._lock = threading.RLock()
        self._max_listeners = (
            DEFAULT_MAX_LISTENERS if max_listeners is None else max_listeners
        )
        self._warned: set[Any] = set()

    # ------------------------------------------------------------------ registration
    def _add(
        self, event: Any, listener: Callable[..., Any], *, once: bool, prepend: bool
    ) -> "EventEmitter":
        reg = _Registration(listener, once)
        with self._lock:
            regs = self._registry.setdefault(event, [])
            if prepend:
                regs.insert(0, reg)
            else:
                regs.append(reg)
            count = len(regs)
        self._check_limit(event, count)
        return self

    def _check_limit(self, event: Any, count: int) -> None:
        limit = self._max_listeners
        if limit and count > limit and event not in self._warned:
            self._warned.add(event)
            _LOG.warning(
                "Possible listener leak: %d listeners added for %r (limit %d); "
                "use set_max_listeners() to increase the limit",
                count,
                event,
                limit,
            )

    def on(self, event: Any, listener: Callable[..., Any]) -> "EventEmitter":
        return self._add(event, listener, once=False, prepend=False)

    def once(self, event: Any, listener: Callable[..., Any]) -> "EventEmitter":
        return self._add(event, listener, once=True, prepend=False)

    def prepend_listener(
        self, event: Any, listener: Callable[..., Any]
    ) -> "EventEmitter":
        return self._add(event, listener, once=False, prepend=True)

    def prepend_once_listener(
        self, event: Any, listener: Callable[..., Any]
    ) -> "EventEmitter":
        return self._add(event, listener, once=True, prepend=True)

    def remove_listener(
        self, event: Any, listener: Callable[..., Any]
    ) -> "EventEmitter":
        """Remove the most recently added registration of *listener* for *event*."""
        with self._lock:
            regs = self._registry.get(event, [])
            for idx in range(len(regs) - 1, -1, -1):
                if regs[idx].listener is listener:
                    del regs[idx]
                    break
            if not regs:
                self._registry.pop(event, None)
        return self

    def remove_all_listeners(self, event: Any = None) -> "EventEmitter":
        """Remove every listener for *event* (or for all events if *None*)."""
        with self._lock:
            if event is None:
                self._registry.clear()
            else:
                self._registry.pop(event, None)
        return self

    # ------------------------------------------------------------------ queries
    def listeners(self, event: Any) -> list[Callable[..., Any]]:
        with self._lock:
            return [reg.listener for reg in self._registry.get(event, ())]

    def listener_count(self, event: Any) -> int:
        with self._lock:
            return len(self._registry.get(event, ()))

    def event_names(self) -> list[Any]:
        with self._lock:
            return [name for name, regs in self._registry.items() if regs]

    def get_max_listeners(self) -> int:
        return self._max_listeners

    def set_max_listeners(self, n: int) -> "EventEmitter":
        if n < 0:
            raise ValueError(f"max listeners must be a non-negative number, got {n!r}")
        self._max_listeners = n
        return self

    # ------------------------------------------------------------------ dispatch
    def emit(self, event: Any, *args: Any, **kwargs: Any) -> bool:
        """Fire *event*, forwarding all arguments to each listener.

        Returns ``True`` if at least one listener was called.
        """
        with self._lock:
            regs = list(self._registry.get(event, ()))
            for reg in regs:
                if reg.once:
                    self._discard(event, reg)

        if not regs:
            if event == "error":
                err = args[0] if args else None
                if isinstance(err, BaseException):
                    raise err
                raise UnhandledErrorEvent(err)
            return False

        for reg in regs:
            reg.listener(*args, **kwargs)
        return True

    def _discard(self, event: Any, reg: _Registration) -> None:
        regs = self._registry.get(event)
        if regs is None:
            return
        for idx, other in enumerate(regs):
            if other is reg:
                del regs[idx]
                break
        if not regs:
            self._registry.pop(event, None)

    # ------------------------------------------------------------------ context manager
    def __enter__(self) -> "EventEmitter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.remove_all_listeners()
        return False
