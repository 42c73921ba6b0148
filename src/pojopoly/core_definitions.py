"""Core type aliases used throughout pojopoly, by capability authors and implementation authors alike."""

from typing import Any, Callable, Hashable, Union

from typing_extensions import TypeAlias

SubtypingKey: TypeAlias = Union[str, int]
"""
The key of the record field which holds the variant tag, i.e. `'type'` or `'kind'`.

Example::

  # the subtyping key is 'kind', the subtype id is 'circle'
  {'kind': 'circle', 'radius': 2}

A capability and all of its implementations must agree on one subtyping key.
"""

SubtypeId: TypeAlias = Union[str, int]
"""
The value held under the subtyping key of a record. Identifies one variant within a capability.

Subtype ids only need to be unique within a single capability; two capabilities may reuse the same id freely.
"""

CapabilityKeyLike: TypeAlias = Hashable
"""
Anything usable as a capability identifier. `pojopoly.CapabilityKey` is the recommended choice,
but any hashable object with identity/equality semantics works.
"""

ImplementationFactory: TypeAlias = Callable[[Any], Any]
"""
A callable which takes a record as its sole argument and returns an object exposing a capability's operations.

Subclasses of `ImplementationBase` are the common case, but plain functions work as well.
"""
