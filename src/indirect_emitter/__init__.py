import types as _types

from importlib import import_module
from typing import TYPE_CHECKING

from .core.base import BaseEmitter
from .core.events import DEFAULT_MAX_LISTENERS, EventEmitter, UnhandledErrorEvent
from .core.indirect import IndirectEmitter
from .core.subscription import QueuedEmission, Subscription

__all__: list[str] = [
    "IndirectEmitter",
    "EventEmitter",
    "BaseEmitter",
    "Subscription",
    "QueuedEmission",
    "UnhandledErrorEvent",
    "DEFAULT_MAX_LISTENERS",
    "adapters",
]


def __getattr__(name: str) -> _types.ModuleType:
    # pyee is only imported when the adapters are asked for
    if name == "adapters":
        mod = import_module(f"{__name__}.{name}")
        globals()[name] = mod
        return mod
    raise AttributeError(name)


if TYPE_CHECKING:  # pragma: no cover
    from . import adapters  # noqa: F401
