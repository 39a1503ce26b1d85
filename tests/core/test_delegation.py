def test_unknown_attribute_is_none_while_detached(indirect):
    assert indirect.test_property is None


def test_unknown_attribute_reads_from_emitter(indirect, rich_emitter):
    indirect.set_emitter(rich_emitter)

    assert indirect.test_property == 42
    assert indirect.shout("hi") == "HI"
    assert indirect.not_there is None


def test_unknown_attribute_writes_to_emitter(indirect, rich_emitter):
    indirect.set_emitter(rich_emitter)

    indirect.test_property = 100

    assert rich_emitter.test_property == 100
    assert "test_property" not in vars(indirect)


def test_write_while_detached_is_discarded(indirect, rich_emitter):
    indirect.test_property = 7

    assert indirect.test_property is None
    assert "test_property" not in vars(indirect)

    indirect.set_emitter(rich_emitter)
    assert indirect.test_property == 42


def test_reads_follow_the_current_emitter(indirect, rich_emitter):
    indirect.set_emitter(rich_emitter)
    assert indirect.test_property == 42

    indirect.set_emitter(None)
    assert indirect.test_property is None


def test_own_members_are_not_delegated(indirect, rich_emitter):
    indirect.set_emitter(rich_emitter)

    assert indirect.emit.__self__ is indirect
    assert indirect.get_max_listeners() == rich_emitter.get_max_listeners()
    assert indirect._subscriptions == []


def test_own_fields_are_assigned_on_the_wrapper(indirect, rich_emitter):
    indirect.set_emitter(rich_emitter)

    indirect._max_listeners = 5

    assert indirect.get_max_listeners() == 5
    assert rich_emitter.get_max_listeners() == 10


def test_dunder_lookups_are_not_delegated(indirect, rich_emitter):
    indirect.set_emitter(rich_emitter)

    assert not hasattr(indirect, "__missing_dunder__")
