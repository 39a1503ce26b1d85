from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .indirect import IndirectEmitter


@dataclass(slots=True, eq=False)
class Subscription:
    """One logical ``on``/``once``/``prepend_*`` call on an :class:`IndirectEmitter`.

    Attributes
    ----------
    event
        Name of the event the caller subscribed to.
    listener
        The caller's callback, exactly as passed in. ``listeners()`` returns it.
    once
        Whether the record drops itself after the first call.
    active
        Only consulted while no emitter is attached: ``emit()`` flips it off so
        each record is credited with a buffered emission at most once.
    owner
        Back-reference to the emitter wrapper that holds this record.

    The record *is* the handle registered on a backing emitter: calling it
    invokes ``listener`` and, for once-records, removes the record from its
    owner. Equality is identity, so two records for the same
    ``(event, listener)`` pair never collide on the backing emitter.
    """

    event: Any
    listener: Callable[..., Any]
    once: bool = False
    active: bool = True
    owner: "IndirectEmitter | None" = field(default=None, repr=False)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        try:
            return self.listener(*args, **kwargs)
        finally:
            if self.once and self.owner is not None:
                self.owner._discard(self)


@dataclass(frozen=True, slots=True)
class QueuedEmission:
    """An ``emit()`` call made while no emitter was attached."""

    event: Any
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)
