from .base import BaseEmitter
from .events import DEFAULT_MAX_LISTENERS, EventEmitter, UnhandledErrorEvent
from .indirect import IndirectEmitter
from .subscription import QueuedEmission, Subscription

__all__ = [
    "BaseEmitter",
    "DEFAULT_MAX_LISTENERS",
    "EventEmitter",
    "IndirectEmitter",
    "QueuedEmission",
    "Subscription",
    "UnhandledErrorEvent",
]
