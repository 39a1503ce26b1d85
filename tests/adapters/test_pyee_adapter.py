import pytest

from indirect_emitter import BaseEmitter, IndirectEmitter
from indirect_emitter.adapters import PyeeEmitter


@pytest.fixture
def pyee_emitter() -> PyeeEmitter:
    return PyeeEmitter()


def test_adapter_is_a_backing_emitter(pyee_emitter):
    assert isinstance(pyee_emitter, BaseEmitter)


def test_prepend_variants(pyee_emitter):
    order = []

    def on():
        order.append("on")

    def prepend():
        order.append("prepend")

    def prepend_once():
        order.append("prepend_once")

    pyee_emitter.on("evt", on)
    pyee_emitter.prepend_listener("evt", prepend)
    pyee_emitter.prepend_once_listener("evt", prepend_once)
    pyee_emitter.emit("evt")
    pyee_emitter.emit("evt")

    assert order == ["prepend_once", "prepend", "on", "prepend", "on"]


def test_remove_unknown_listener_is_noop(pyee_emitter):
    pyee_emitter.remove_listener("evt", print)

    pyee_emitter.on("evt", print)
    pyee_emitter.remove_listener("evt", print)
    pyee_emitter.remove_listener("evt", print)

    assert pyee_emitter.listeners("evt") == []


def test_max_listeners(pyee_emitter):
    assert pyee_emitter.get_max_listeners() == 10
    assert pyee_emitter.set_max_listeners(3) is pyee_emitter
    assert pyee_emitter.get_max_listeners() == 3


def test_indirect_emitter_rides_on_pyee(calls, recorder):
    first, second = PyeeEmitter(max_listeners=4), PyeeEmitter()
    indirect = IndirectEmitter()
    indirect.on("x", recorder("on")).once("x", recorder("once"))
    indirect.emit("x", 1)

    indirect.set_emitter(first)
    assert first.get_max_listeners() == 10
    assert calls == [("on", (1,)), ("once", (1,))]

    indirect.set_emitter(second)
    assert first.get_max_listeners() == 4
    assert first.listeners("x") == []

    assert indirect.emit("x", 2) is True
    assert calls[-1] == ("on", (2,))
    assert len(calls) == 3
    assert indirect.listener_count("x") == 1
    assert len(second.listeners("x")) == 1
