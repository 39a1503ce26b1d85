from __future__ import annotations

"""indirect_emitter.core.indirect
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
An event emitter that can be used before the real one exists.

:class:`IndirectEmitter` keeps its own ordered list of subscriptions and
*mirrors* them onto whatever backing emitter is currently attached.  Swapping
the backing emitter tears the mirrors down on the old one and re-creates them,
in registration order, on the new one.  Emissions made while nothing is
attached are buffered and replayed verbatim on the next attach.

Anything that is not part of the wrapper's own surface is read from / written
to the attached emitter, so the wrapper can stand in for a richer emitter
subclass.
"""

import logging
import threading

from types import TracebackType
from typing import Any, Callable

from .base import BaseEmitter
from .events import DEFAULT_MAX_LISTENERS
from .subscription import QueuedEmission, Subscription

__all__ = ["IndirectEmitter"]

_LOG = logging.getLogger(__name__)


class IndirectEmitter:
    """Deferred-binding event emitter.

    Parameters
    ----------
    emitter
        Optional backing emitter to attach right away.
    max_listeners
        Initial listener cap, mirrored onto every attached emitter.  Defaults
        to :data:`DEFAULT_MAX_LISTENERS`.

    Notes
    -----
    While detached, ``emit()`` reports ``True`` only for the first emission
    that finds a still-active subscription; that subscription is then marked
    inactive (and hidden from ``listeners()``) until the next attach.  Every
    buffered emission is replayed on attach regardless, so more callbacks can
    fire than the detached return values suggested.
    """

    # Attribute writes to any other name are forwarded to the backing emitter.
    _OWN_FIELDS = frozenset(
        {
            "_lock",
            "_subscriptions",
            "_queued",
            "_max_listeners",
            "_original_max_listeners",
            "_emitter",
        }
    )

    def __init__(
        self, emitter: BaseEmitter | None = None, *, max_listeners: int | None = None
    ) -> None:
        self._lock = threading.RLock()
        self._subscriptions: list[Subscription] = []
        self._queued: list[QueuedEmission] = []
        self._max_listeners: int = (
            DEFAULT_MAX_LISTENERS if max_listeners is None else max_listeners
        )
        self._original_max_listeners: int | None = None
        self._emitter: BaseEmitter | None = None

        self.set_emitter(emitter)

    # ------------------------------------------------------------------ registry
    def _register(
        self, event: Any, listener: Callable[..., Any], *, once: bool, prepend: bool
    ) -> Subscription:
        sub = Subscription(event, listener, once=once, owner=self)
        with self._lock:
            if prepend:
                self._subscriptions.insert(0, sub)
            else:
                self._subscriptions.append(sub)

            if self._emitter is not None:
                self._mirror(self._emitter, sub, prepend=prepend)
        return sub

    def _discard(self, sub: Subscription) -> None:
        """Forget *sub* without touching the backing emitter (once-records)."""
        with self._lock:
            self._subscriptions = [s for s in self._subscriptions if s is not sub]

    def on(self, event: Any, listener: Callable[..., Any]) -> "IndirectEmitter":
        self._register(event, listener, once=False, prepend=False)
        return self

    def add_listener(
        self, event: Any, listener: Callable[..., Any]
    ) -> "IndirectEmitter":
        return self.on(event, listener)

    def once(self, event: Any, listener: Callable[..., Any]) -> "IndirectEmitter":
        self._register(event, listener, once=True, prepend=False)
        return self

    def prepend_listener(
        self, event: Any, listener: Callable[..., Any]
    ) -> "IndirectEmitter":
        self._register(event, listener, once=False, prepend=True)
        return self

    def prepend_once_listener(
        self, event: Any, listener: Callable[..., Any]
    ) -> "IndirectEmitter":
        self._register(event, listener, once=True, prepend=True)
        return self

    def remove_listener(
        self, event: Any, listener: Callable[..., Any]
    ) -> "IndirectEmitter":
        """Remove **every** subscription of *listener* to *event*."""
        with self._lock:
            removed = [
                s
                for s in self._subscriptions
                if s.event == event and s.listener == listener
            ]
            if not removed:
                return self

            if self._emitter is not None:
                for sub in removed:
                    self._emitter.remove_listener(event, sub)

            gone = {id(s) for s in removed}
            self._subscriptions = [
                s for s in self._subscriptions if id(s) not in gone
            ]
        return self

    def off(self, event: Any, listener: Callable[..., Any]) -> "IndirectEmitter":
        return self.remove_listener(event, listener)

    def remove_all_listeners(self, event: Any = None) -> "IndirectEmitter":
        """Remove every subscription to *event* (or to any event if *None*).

        Done as one :meth:`remove_listener` call per distinct listener.
        """
        with self._lock:
            pairs: list[tuple[Any, Callable[..., Any]]] = []
            for sub in list(self._subscriptions):
                if event is not None and sub.event != event:
                    continue
                pair = (sub.event, sub.listener)
                if pair not in pairs:
                    pairs.append(pair)

            for name, listener in pairs:
                self.remove_listener(name, listener)
        return self

    def listeners(self, event: Any) -> list[Callable[..., Any]]:
        with self._lock:
            return [
                s.listener for s in self._subscriptions if s.event == event and s.active
            ]

    def listener_count(self, event: Any) -> int:
        with self._lock:
            return sum(
                1 for s in self._subscriptions if s.event == event and s.active
            )

    def event_names(self) -> list[Any]:
        names: list[Any] = []
        with self._lock:
            for sub in self._subscriptions:
                if sub.active and sub.event not in names:
                    names.append(sub.event)
        return names

    # ------------------------------------------------------------------ binding
    @staticmethod
    def _mirror(emitter: BaseEmitter, sub: Subscription, *, prepend: bool = False) -> None:
        if sub.once:
            if prepend:
                emitter.prepend_once_listener(sub.event, sub)
            else:
                emitter.once(sub.event, sub)
        else:
            if prepend:
                emitter.prepend_listener(sub.event, sub)
            else:
                emitter.on(sub.event, sub)

    def _detach(self) -> None:
        emitter = self._emitter
        if emitter is None:
            return

        emitter.set_max_listeners(self._original_max_listeners)
        for sub in list(self._subscriptions):
            emitter.remove_listener(sub.event, sub)

        self._emitter = None
        self._original_max_listeners = None
        _LOG.debug("Detached %r", emitter)

    def set_emitter(self, emitter: BaseEmitter | None = None) -> "IndirectEmitter":
        """Attach *emitter* (detaching the current one first), or just detach.

        On attach every subscription is re-activated and mirrored in
        registration order, then buffered emissions are replayed in the order
        they were made.
        """
        with self._lock:
            self._detach()
            if emitter is None:
                return self

            original = emitter.get_max_listeners()
            emitter.set_max_listeners(self._max_listeners)

            mirrored: list[Subscription] = []
            try:
                for sub in list(self._subscriptions):
                    self._mirror(emitter, sub)
                    mirrored.append(sub)
            except Exception:
                # leave the emitter as it was handed to us
                for sub in mirrored:
                    emitter.remove_listener(sub.event, sub)
                emitter.set_max_listeners(original)
                raise

            for sub in mirrored:
                sub.active = True
            self._original_max_listeners = original
            self._emitter = emitter

            pending, self._queued = self._queued, []

        _LOG.debug(
            "Attached %r: %d subscription(s) mirrored, %d emission(s) to replay",
            emitter,
            len(mirrored),
            len(pending),
        )
        replayed = 0
        try:
            for item in pending:
                replayed += 1
                self.emit(item.event, *item.args, **item.kwargs)
        finally:
            # a raising emission must not take the rest of the buffer with it
            rest = pending[replayed:]
            if rest:
                with self._lock:
                    self._queued[:0] = rest
        return self

    def detach(self) -> "IndirectEmitter":
        with self._lock:
            self._detach()
        return self

    def has_emitter(self) -> bool:
        return self._emitter is not None

    def get_max_listeners(self) -> int:
        return self._max_listeners

    def set_max_listeners(self, n: int) -> "IndirectEmitter":
        with self._lock:
            if self._emitter is not None:
                self._emitter.set_max_listeners(n)
            self._max_listeners = n
        return self

    # ------------------------------------------------------------------ delegation
    def emit(self, event: Any, *args: Any, **kwargs: Any) -> bool:
        """Forward to the backing emitter, or buffer until one is attached."""
        with self._lock:
            emitter = self._emitter
            if emitter is None:
                self._queued.append(QueuedEmission(event, args, kwargs))

                credited = False
                for sub in self._subscriptions:
                    if sub.event == event and sub.active:
                        sub.active = False
                        credited = True
                return credited

        return bool(emitter.emit(event, *args, **kwargs))

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails, so own members always win.
        if name in self._OWN_FIELDS or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)

        emitter = self.__dict__.get("_emitter")
        if emitter is None:
            return None
        return getattr(emitter, name, None)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._OWN_FIELDS or hasattr(type(self), name):
            object.__setattr__(self, name, value)
            return

        emitter = self.__dict__.get("_emitter")
        if emitter is not None:
            setattr(emitter, name, value)

    # ------------------------------------------------------------------ context manager
    def __enter__(self) -> "IndirectEmitter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.detach()
        return False

    def __repr__(self) -> str:
        state = f"attached={self._emitter!r}" if self._emitter is not None else "detached"
        return (
            f"<IndirectEmitter {state} subscriptions={len(self._subscriptions)} "
            f"queued={len(self._queued)}>"
        )
