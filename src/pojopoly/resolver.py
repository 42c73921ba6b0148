"""Turn a capability and a record into a ready-to-use implementation instance.

Capability authors wrap `resolve()` in small forwarding functions, so call sites never see it::

  def list_items(listable: Listable) -> list[int]:
      return resolve(LISTABLE, 'type', listable).list()

Nothing is cached: every call re-reads the registry and constructs a fresh implementation instance.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from ._internal.constants import MISSING
from .exceptions import CapabilityNotRegisteredError, ImplementationNotFoundError
from .registry import get_default_registry

if TYPE_CHECKING:
    from .core_definitions import CapabilityKeyLike, SubtypingKey
    from .registry import ImplementationRegistry

RecordT = TypeVar('RecordT')


def read_subtype_id(record: Any, subtyping_key: SubtypingKey) -> Any:
    """Read the variant tag off a record, or return `MISSING` if the record doesn't carry it.

    Mappings (dicts, TypedDicts) are read by key. Other records (dataclasses, pydantic models, named tuples)
    are read by attribute when the key is a string, then by item access as a last resort.
    """
    if isinstance(record, Mapping):
        return record.get(subtyping_key, MISSING)
    if isinstance(subtyping_key, str) and hasattr(record, subtyping_key):
        return getattr(record, subtyping_key)
    try:
        return record[subtyping_key]
    except (KeyError, IndexError, TypeError):
        return MISSING


def resolve(
    capability: CapabilityKeyLike,
    subtyping_key: SubtypingKey,
    record: RecordT,
    *,
    registry: ImplementationRegistry | None = None,
) -> Any:
    """Build the implementation registered for `record`'s variant of `capability`.

    params:
      capability: the capability key the implementations were registered under.
      subtyping_key: name of the record field holding the variant tag. Must be the same for every call on one capability.
      record: the tagged record. It is handed to the implementation as-is; it is neither copied nor validated.
      registry: registry to read from. Defaults to the process-wide registry.

    Returns:
      a new implementation instance bound to `record`.

    Raises:
      CapabilityNotRegisteredError: nothing was ever registered for `capability`.
      ImplementationNotFoundError: the record's subtype id is missing, or has no registered implementation.
    """
    if registry is None:
        registry = get_default_registry()
    subtype_id = read_subtype_id(record, subtyping_key)
    if not registry.has_capability(capability):
        msg = f'Capability <{capability}> not found'
        raise CapabilityNotRegisteredError(msg)
    if subtype_id is MISSING:
        msg = f'Implementation not found: record has no subtyping key {subtyping_key!r} for capability <{capability}>'
        raise ImplementationNotFoundError(msg)
    # True == 1 in Python, but a bool tag never matches an int variant
    if isinstance(subtype_id, bool) or not isinstance(subtype_id, Hashable):
        factory = None
    else:
        factory = registry.lookup(capability, subtype_id)
    if factory is None:
        known = ', '.join(repr(s) for s in registry.subtypes(capability))
        msg = f'Implementation <{subtype_id}> not found for capability <{capability}>. Registered: {known}'
        raise ImplementationNotFoundError(msg)
    return factory(record)
