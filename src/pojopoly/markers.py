"""Typing-only capability markers.

A marker lets static type checkers (and readers) see which capabilities a record type is meant to support.
It has no runtime representation: the marker is an empty Protocol, so every record satisfies it structurally
and nothing is ever added to, read from, or written to the record itself.

Example::

  LISTABLE = capability_key('MyApp.Listable')

  class ListableKey: ...  # stands in for the key at the type level

  Listable = CapabilityMarker[ListableKey, Literal['type'], Tuple[int]]

  def list_items(listable: Listable) -> list[int]:
      ...

Python has no `typeof <symbol>`, so the first parameter is any type you choose to name the capability with.
"""

from typing import Tuple

from typing_extensions import Protocol, TypeVar

_KeyT = TypeVar('_KeyT', covariant=True)
_SubtypingKeyT = TypeVar('_SubtypingKeyT', covariant=True)
_GenericsT = TypeVar('_GenericsT', covariant=True, default=Tuple[()])


class CapabilityMarker(Protocol[_KeyT, _SubtypingKeyT, _GenericsT]):
    """Structural marker type: "this record supports capability `_KeyT`, tagged by `_SubtypingKeyT`".

    The third parameter carries any generic parameters of the capability (i.e. the item type of a Listable),
    purely for annotation purposes. It defaults to an empty tuple.
    """


DefCapabilityMarker = CapabilityMarker
"""Alias of `CapabilityMarker`, named after the operation of defining a marker for a capability."""
