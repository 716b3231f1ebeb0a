"""Tests for the build-once reflection registry."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from enumreflect import (
    EnumDeclaration,
    RegistrationError,
    StructuralMismatchError,
    create_registry,
    get_registry,
    register_enum,
    reflector_for,
)
from enumreflect.parsing import EnumeratorSlot
from enumreflect.table import ReflectionBuilder


class Ports:
    """Stand-in enum type used as a registry key."""


class CardSuit:
    """Stand-in enum type used as a registry key."""


# =============================================================================
# Registration
# =============================================================================

class TestRegistration:
    """Tests for registering declarations."""

    def test_register_and_lookup(self, registry, ports):
        registry.register(Ports, ports)

        assert Ports in registry
        assert len(registry) == 1
        assert registry.keys() == [Ports]
        assert registry.declaration(Ports) is ports

    def test_reregister_equal_is_noop(self, registry, ports):
        registry.register(Ports, ports)
        registry.register(Ports, ports.model_copy())

        assert len(registry) == 1

    def test_reregister_different_raises(self, registry, ports, card_suit):
        registry.register(Ports, ports)

        with pytest.raises(RegistrationError):
            registry.register(Ports, card_suit)

    def test_unknown_key_raises(self, registry):
        with pytest.raises(RegistrationError):
            registry.reflector(Ports)

    def test_unknown_declaration_is_none(self, registry):
        assert registry.declaration(Ports) is None

    def test_registration_counted(self, registry, metrics, ports, card_suit):
        registry.register(Ports, ports)
        registry.register(CardSuit, card_suit)

        assert metrics.registered_types.value == 2


# =============================================================================
# Lazy, memoized build
# =============================================================================

class TestLazyBuild:
    """Tests for build-on-first-use."""

    def test_not_built_until_used(self, registry, ports):
        registry.register(Ports, ports)

        assert not registry.is_built(Ports)
        registry.reflector(Ports)
        assert registry.is_built(Ports)

    def test_memoized(self, registry, metrics, ports):
        registry.register(Ports, ports)

        first = registry.reflector(Ports)
        second = registry.reflector(Ports)

        assert first is second
        assert metrics.tables_built.value == 1

    def test_failed_build_caches_nothing(self, registry, metrics):
        broken = EnumDeclaration(type_name="Broken", raw_text="A", values=[0, 1])
        registry.register(Ports, broken)

        with pytest.raises(StructuralMismatchError):
            registry.reflector(Ports)
        assert not registry.is_built(Ports)

        with pytest.raises(StructuralMismatchError):
            registry.reflector(Ports)
        assert metrics.build_failures.value == 2

    def test_keys_are_independent(self, registry, ports, card_suit):
        registry.register(Ports, ports)
        registry.register(CardSuit, card_suit)

        assert registry.reflector(Ports).type_name == "Ports"
        assert registry.reflector(CardSuit).type_name == "CardSuit"


class CountingBuilder(ReflectionBuilder):
    """Builder that counts calls and holds each build open briefly."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = 0
        self._calls_lock = threading.Lock()

    def build(self, declaration):
        with self._calls_lock:
            self.calls += 1
        time.sleep(0.05)
        return super().build(declaration)


class TestConcurrentFirstUse:
    """Tests for racing first use across threads."""

    def test_single_build_under_race(self, metrics, ports):
        builder = CountingBuilder(metrics=metrics)
        registry = create_registry(builder=builder)
        registry.register(Ports, ports)

        barrier = threading.Barrier(16)

        def first_use():
            barrier.wait()
            return registry.reflector(Ports)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: first_use(), range(16)))

        assert builder.calls == 1
        assert all(r is results[0] for r in results)
        assert results[0].count == 4

    def test_concurrent_reads_after_build(self, registry, ports):
        registry.register(Ports, ports)
        reflector = registry.reflector(Ports)

        def read(_):
            return reflector.name_of(22), reflector.value_of("HTTPS")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(read, range(200)))

        assert set(results) == {("SecureShell", 443)}


# =============================================================================
# Process-wide registry
# =============================================================================

class TestGlobalRegistry:
    """Tests for module-level conveniences."""

    def test_register_enum_and_reflector_for(self):
        key = object()
        declaration = register_enum(
            key,
            "Color",
            "Transparent = -1, Red = 1, Green, Blue",
            slots=[EnumeratorSlot.explicit(-1), 1, EnumeratorSlot.implicit(), None],
        )

        assert declaration.slots == [-1, 1, None, None]
        assert key in get_registry()

        reflector = reflector_for(key)
        assert reflector.values == [-1, 1, 2, 3]
        assert reflector_for(key) is reflector
