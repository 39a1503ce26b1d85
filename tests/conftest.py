import pytest

from indirect_emitter import EventEmitter, IndirectEmitter


class RichEmitter(EventEmitter):
    """Emitter subclass carrying extra state the wrapper should expose."""

    def __init__(self) -> None:
        super().__init__()
        self.test_property = 42

    def shout(self, word: str) -> str:
        return word.upper()


@pytest.fixture
def indirect() -> IndirectEmitter:
    """A fresh wrapper with nothing attached."""
    return IndirectEmitter()


@pytest.fixture
def emitter_a() -> EventEmitter:
    return EventEmitter()


@pytest.fixture
def emitter_b() -> EventEmitter:
    return EventEmitter()


@pytest.fixture
def rich_emitter() -> RichEmitter:
    return RichEmitter()


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def recorder(calls):
    """Factory for listeners that append ``(tag, args)`` to *calls*."""

    def make(tag: str):
        def listener(*args, **kwargs):
            calls.append((tag, args, kwargs) if kwargs else (tag, args))

        return listener

    return make
