import abc

from typing import Any, Callable


class BaseEmitter(abc.ABC):
    """Everything :class:`IndirectEmitter` needs from a backing emitter."""

    @abc.abstractmethod
    def on(self, event: Any, listener: Callable[..., Any]) -> Any: ...

    @abc.abstractmethod
    def once(self, event: Any, listener: Callable[..., Any]) -> Any: ...

    @abc.abstractmethod
    def prepend_listener(self, event: Any, listener: Callable[..., Any]) -> Any: ...

    @abc.abstractmethod
    def prepend_once_listener(self, event: Any, listener: Callable[..., Any]) -> Any: ...

    @abc.abstractmethod
    def remove_listener(self, event: Any, listener: Callable[..., Any]) -> Any: ...

    @abc.abstractmethod
    def emit(self, event: Any, *args: Any, **kwargs: Any) -> bool: ...

    @abc.abstractmethod
    def get_max_listeners(self) -> int: ...

    @abc.abstractmethod
    def set_max_listeners(self, n: int) -> Any: ...

    def add_listener(self, event: Any, listener: Callable[..., Any]) -> Any:
        return self.on(event, listener)

    def off(self, event: Any, listener: Callable[..., Any]) -> Any:
        return self.remove_listener(event, listener)
