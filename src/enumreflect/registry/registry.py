"""
Reflection Registry — One lazily built reflector per enumeration type.

Declarations are registered up front and built on first use. Each entry
builds at most once; later reads return the memoized reflector without
taking a lock.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Hashable

from enumreflect.errors import RegistrationError
from enumreflect.observability import get_logger
from enumreflect.parsing import SlotLike, as_slot
from enumreflect.schemas import EnumDeclaration
from enumreflect.table import EnumReflector, ReflectionBuilder
from enumreflect.vocabulary import UnderlyingType

logger = get_logger("registry")


@dataclass
class _Entry:
    """Registered declaration and its build-once reflector."""
    declaration: EnumDeclaration
    lock: Lock = field(default_factory=Lock)
    reflector: EnumReflector | None = None


class ReflectionRegistry:
    """
    Maps enum type keys (usually the enum class) to reflectors.

    Safe for concurrent registration and first use. Racing callers of
    reflector() for the same key all receive the same instance.
    """

    def __init__(self, builder: ReflectionBuilder | None = None):
        self.builder = builder or ReflectionBuilder()
        self._entries: dict[Hashable, _Entry] = {}
        self._lock = Lock()

    def register(self, key: Hashable, declaration: EnumDeclaration) -> None:
        """
        Register a declaration under key.

        Registering an equal declaration again is a no-op.

        Raises:
            RegistrationError: key already holds a different declaration
        """
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                if existing.declaration == declaration:
                    return
                raise RegistrationError(
                    f"Enum type {key!r} is already registered with a different declaration"
                )
            self._entries[key] = _Entry(declaration=declaration)

        self.builder.metrics.registered_types.inc()
        logger.debug("Registered %s (%d enumerators)", declaration.type_name, declaration.count)

    def reflector(self, key: Hashable) -> EnumReflector:
        """
        Get the reflector for key, building it on first use.

        Raises:
            RegistrationError: key was never registered
            ReflectionError: The declaration is malformed (nothing is cached)
        """
        entry = self._entries.get(key)
        if entry is None:
            raise RegistrationError(f"Enum type {key!r} is not registered")

        reflector = entry.reflector
        if reflector is not None:
            return reflector

        with entry.lock:
            if entry.reflector is None:
                entry.reflector = self.builder.build(entry.declaration)
            return entry.reflector

    def declaration(self, key: Hashable) -> EnumDeclaration | None:
        entry = self._entries.get(key)
        return entry.declaration if entry else None

    def is_built(self, key: Hashable) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry.reflector is not None

    def keys(self) -> list[Hashable]:
        return list(self._entries.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def create_registry(builder: ReflectionBuilder | None = None) -> ReflectionRegistry:
    """Factory for reflection registry."""
    return ReflectionRegistry(builder=builder)


# Process-wide registry
_registry = ReflectionRegistry()


def get_registry() -> ReflectionRegistry:
    """Get the process-wide registry."""
    return _registry


def register_enum(
    key: Hashable,
    type_name: str,
    raw_text: str,
    *,
    values: list[int] | None = None,
    slots: list[SlotLike] | None = None,
    underlying: UnderlyingType | None = None,
) -> EnumDeclaration:
    """
    Declare an enumeration in the process-wide registry.

    Returns the validated declaration.
    """
    declaration = EnumDeclaration(
        type_name=type_name,
        raw_text=raw_text,
        values=values,
        slots=[as_slot(s).value for s in slots] if slots is not None else None,
        underlying=underlying,
    )
    _registry.register(key, declaration)
    return declaration


def reflector_for(key: Hashable) -> EnumReflector:
    """Get a reflector from the process-wide registry."""
    return _registry.reflector(key)
