"""Storage for every registered implementation.

The registry is a two-level table: capability key -> subtype id -> implementation factory.
It has no behavior beyond storage and lookup; validation happens in the registrar, construction in the resolver.

Most applications only ever touch the process-wide default registry (see `get_default_registry()`),
which is created lazily on first use. Tests and embedding applications can build their own
`ImplementationRegistry` and pass it explicitly wherever a `registry` parameter is accepted.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from ._internal.logger import logger

if TYPE_CHECKING:
    from .core_definitions import CapabilityKeyLike, ImplementationFactory, SubtypeId


class ImplementationRegistry:
    """Two-level mapping of capability keys to their implementation factories.

    Writes are serialized with a lock and publish a fresh read-only snapshot, so reads never need to lock.
    Registrations are expected to be rare (import time), resolutions frequent.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._table: Mapping[CapabilityKeyLike, Mapping[SubtypeId, ImplementationFactory]] = (
            MappingProxyType({})
        )

    def register(
        self,
        capability: CapabilityKeyLike,
        subtype_id: SubtypeId,
        factory: ImplementationFactory,
    ) -> None:
        """Insert the factory for the (capability, subtype_id) pair.

        Registering the same pair twice silently replaces the earlier factory (last registration wins).
        """
        with self._lock:
            subtypes = dict(self._table.get(capability, {}))
            previous = subtypes.get(subtype_id)
            subtypes[subtype_id] = factory
            table = dict(self._table)
            table[capability] = MappingProxyType(subtypes)
            self._table = MappingProxyType(table)
        if previous is not None and previous is not factory:
            logger.debug(
                f'Replaced implementation {previous!r} with {factory!r} for subtype {subtype_id!r} of capability {capability!r}'
            )
        else:
            logger.debug(
                f'Registered implementation {factory!r} for subtype {subtype_id!r} of capability {capability!r}'
            )

    def lookup(
        self, capability: CapabilityKeyLike, subtype_id: SubtypeId
    ) -> ImplementationFactory | None:
        """Return the factory registered for the pair, or None if there isn't one."""
        subtypes = self._table.get(capability)
        if subtypes is None:
            return None
        return subtypes.get(subtype_id)

    def has_capability(self, capability: CapabilityKeyLike) -> bool:
        """Whether at least one implementation has been registered for the capability."""
        return capability in self._table

    def subtypes(self, capability: CapabilityKeyLike) -> list[SubtypeId]:
        """All subtype ids registered for the capability, in registration order."""
        return list(self._table.get(capability, {}))

    def clear(self) -> None:
        """Forget every registration.

        Meant for test isolation only; applications should treat the registry as append-only.
        """
        with self._lock:
            self._table = MappingProxyType({})

    def __contains__(self, capability: object) -> bool:
        return capability in self._table

    def __repr__(self) -> str:
        return f'{type(self).__name__}(capabilities={len(self._table)})'


_default_registry: ImplementationRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> ImplementationRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry  # noqa: PLW0603 (lazily initialized process-wide singleton)
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = ImplementationRegistry()
    return _default_registry
