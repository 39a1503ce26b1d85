from __future__ import annotations

"""indirect_emitter.adapters.pyee_adapter
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Make a :class:`pyee.EventEmitter` usable as a backing emitter.

pyee already covers ``on`` / ``once`` / ``remove_listener`` / ``emit``; this
subclass adds the prepend variants and a max-listener limit, and turns removal
of an unknown handler into a no-op.
"""

import logging

from typing import Any, Callable

from pyee import EventEmitter as _PyeeEmitter

from ..core.base import BaseEmitter
from ..core.events import DEFAULT_MAX_LISTENERS

__all__ = ["PyeeEmitter"]

_LOG = logging.getLogger(__name__)


class PyeeEmitter(_PyeeEmitter, BaseEmitter):
    """``pyee.EventEmitter`` with the full backing-emitter contract."""

    def __init__(self, max_listeners: int | None = None) -> None:
        super().__init__()
        self._max_listeners: int = (
            DEFAULT_MAX_LISTENERS if max_listeners is None else max_listeners
        )
        self._warned: set[Any] = set()

    # ------------------------------------------------------------------
    # pyee hooks
    # ------------------------------------------------------------------
    def _add_event_handler(self, event: str, k: Callable, v: Callable) -> None:
        super()._add_event_handler(event, k, v)

        count = len(self._events.get(event, ()))
        limit = self._max_listeners
        if limit and count > limit and event not in self._warned:
            self._warned.add(event)
            _LOG.warning(
                "Possible listener leak: %d listeners added for %r (limit %d)",
                count,
                event,
                limit,
            )

    def _move_to_front(self, event: str, f: Callable) -> None:
        with self._lock:
            handlers = self._events.get(event)
            if handlers is not None and f in handlers:
                handlers.move_to_end(f, last=False)

    # ------------------------------------------------------------------
    # Contract additions
    # ------------------------------------------------------------------
    def prepend_listener(self, event: str, f: Callable[..., Any]) -> Callable[..., Any]:
        self.on(event, f)
        self._move_to_front(event, f)
        return f

    def prepend_once_listener(
        self, event: str, f: Callable[..., Any]
    ) -> Callable[..., Any]:
        self.once(event, f)
        self._move_to_front(event, f)
        return f

    def remove_listener(self, event: str, f: Callable[..., Any]) -> None:
        with self._lock:
            handlers = self._events.get(event)
            if handlers is None or f not in handlers:
                return
        super().remove_listener(event, f)

    def get_max_listeners(self) -> int:
        return self._max_listeners

    def set_max_listeners(self, n: int) -> "PyeeEmitter":
        self._max_listeners = n
        return self
