import threading

from pojopoly import ImplementationRegistry, capability_key, get_default_registry

# HELPERS ##################


def factory_a(record):
    return ('a', record)


def factory_b(record):
    return ('b', record)


# TESTS ####################


def test_lookup_empty(registry, cap_key):
    assert registry.lookup(cap_key, 'x') is None
    assert not registry.has_capability(cap_key)
    assert cap_key not in registry
    assert registry.subtypes(cap_key) == []


def test_register_then_lookup(registry, cap_key):
    registry.register(cap_key, 'x', factory_a)
    assert registry.lookup(cap_key, 'x') is factory_a
    assert registry.lookup(cap_key, 'y') is None
    assert registry.has_capability(cap_key)
    assert cap_key in registry


def test_last_registration_wins(registry, cap_key):
    registry.register(cap_key, 'x', factory_a)
    registry.register(cap_key, 'x', factory_b)
    assert registry.lookup(cap_key, 'x') is factory_b
    assert registry.subtypes(cap_key) == ['x']


def test_same_subtype_different_capabilities(registry):
    cap_a = capability_key('A')
    cap_b = capability_key('B')
    registry.register(cap_a, 'x', factory_a)
    registry.register(cap_b, 'x', factory_b)
    assert registry.lookup(cap_a, 'x') is factory_a
    assert registry.lookup(cap_b, 'x') is factory_b


def test_same_name_keys_do_not_collide(registry):
    first = capability_key('Same')
    second = capability_key('Same')
    registry.register(first, 'x', factory_a)
    assert registry.lookup(second, 'x') is None
    assert not registry.has_capability(second)


def test_numeric_subtypes_and_plain_keys(registry):
    # any hashable works as a capability key
    registry.register('plain-string-key', 0, factory_a)
    registry.register('plain-string-key', 1, factory_b)
    assert registry.lookup('plain-string-key', 0) is factory_a
    assert registry.lookup('plain-string-key', 1) is factory_b
    assert registry.subtypes('plain-string-key') == [0, 1]


def test_subtypes_in_registration_order(registry, cap_key):
    for subtype in ('c', 'a', 'b'):
        registry.register(cap_key, subtype, factory_a)
    assert registry.subtypes(cap_key) == ['c', 'a', 'b']


def test_clear(registry, cap_key):
    registry.register(cap_key, 'x', factory_a)
    registry.clear()
    assert not registry.has_capability(cap_key)
    assert registry.lookup(cap_key, 'x') is None


def test_registries_are_isolated(registry, cap_key):
    other = ImplementationRegistry()
    registry.register(cap_key, 'x', factory_a)
    assert other.lookup(cap_key, 'x') is None
    assert get_default_registry().lookup(cap_key, 'x') is None


def test_default_registry_is_singleton():
    assert get_default_registry() is get_default_registry()
    assert isinstance(get_default_registry(), ImplementationRegistry)


def test_snapshot_not_affected_by_later_writes(registry, cap_key):
    registry.register(cap_key, 'x', factory_a)
    snapshot = registry.subtypes(cap_key)
    registry.register(cap_key, 'y', factory_b)
    assert snapshot == ['x']
    assert registry.subtypes(cap_key) == ['x', 'y']


def test_concurrent_registration(registry, cap_key):
    def worker(offset: int) -> None:
        for i in range(50):
            registry.register(cap_key, offset * 1000 + i, factory_a)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(registry.subtypes(cap_key)) == 8 * 50


def test_register_logs(registry, cap_key, caplog):
    caplog.set_level('DEBUG', logger='pojopoly')
    registry.register(cap_key, 'x', factory_a)
    registry.register(cap_key, 'x', factory_b)
    messages = [r.getMessage() for r in caplog.records if r.name == 'pojopoly']
    assert len(messages) == 2
    assert messages[0].startswith('Registered implementation')
    assert messages[1].startswith('Replaced implementation')
