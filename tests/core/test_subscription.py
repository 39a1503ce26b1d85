import pytest

from indirect_emitter import IndirectEmitter, QueuedEmission, Subscription


def test_subscriptions_compare_by_identity():
    a = Subscription("x", print)
    b = Subscription("x", print)

    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_calling_forwards_arguments():
    seen = []
    sub = Subscription("x", lambda *a, **kw: seen.append((a, kw)) or "result")

    assert sub(1, 2, key="v") == "result"
    assert seen == [((1, 2), {"key": "v"})]


def test_once_subscription_discards_itself_from_owner():
    owner = IndirectEmitter()
    owner.once("x", print).on("x", print)
    once_sub = owner._subscriptions[0]

    once_sub("hello")

    assert owner.listeners("x") == [print]
    assert once_sub not in owner._subscriptions


def test_once_subscription_without_owner_is_harmless():
    sub = Subscription("x", lambda: None, once=True)

    sub()
    sub()


def test_queued_emission_is_frozen():
    item = QueuedEmission("x", (1,), {"k": 2})

    with pytest.raises(AttributeError):
        item.event = "y"  # type: ignore[misc]
