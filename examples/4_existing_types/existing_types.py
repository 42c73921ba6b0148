"""Records which were defined without any capability marker can still be dispatched on."""

from dataclasses import dataclass
from typing import Dict, Generic, List, TypeVar, Union

from pojopoly import ImplementationBase, capability_key, make_registrar, resolve
from typing_extensions import Literal

V = TypeVar('V')

#
# Types are already defined elsewhere, without a marker
#


@dataclass
class ArrayObj(Generic[V]):
    ary: List[V]
    type: Literal['array-obj'] = 'array-obj'


@dataclass
class MapObj(Generic[V]):
    map: Dict[str, V]
    type: Literal['map-obj'] = 'map-obj'


Item = Union[ArrayObj[V], MapObj[V]]

#
# Capability over the existing union
#

LISTABLE_KEY = capability_key('MyApp.Listable')
register_listable = make_registrar(LISTABLE_KEY)


def list_items(item: 'Item[V]') -> List[V]:
    return resolve(LISTABLE_KEY, 'type', item).list()  # type: ignore[no-any-return]


@register_listable
class ListableForArrayObj(ImplementationBase[ArrayObj[V]]):
    subtype_id = 'array-obj'

    def list(self) -> List[V]:
        return self.v.ary


@register_listable
class ListableForMapObj(ImplementationBase[MapObj[V]]):
    subtype_id = 'map-obj'

    def list(self) -> List[V]:
        return list(self.v.map.values())


if __name__ == '__main__':
    print(list_items(ArrayObj([1, 2, 3])))  # noqa: T201 (this is an example)
    print(list_items(MapObj({'a': '1', 'b': '2', 'c': '3'})))  # noqa: T201 (this is an example)
