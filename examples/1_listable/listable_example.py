"""Define a Listable capability, two record variants implementing it, and call it on both."""

import logging
from typing import Any, Dict, List, Tuple, TypeVar

from pojopoly import (
    CapabilityMarker,
    ImplementationBase,
    Registrar,
    capability_key,
    make_registrar,
    resolve,
)
from typing_extensions import Literal, Protocol, TypedDict

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)

#
# Define capability
#

LISTABLE_KEY = capability_key('MyApp.Listable')
SUBTYPING_KEY = 'type'


class ListableKey:
    pass


# add generics to the marker for type annotation
Listable = CapabilityMarker[ListableKey, Literal['type'], Tuple[T]]


class ListableImpl(Protocol[T_co]):
    def list(self) -> List[T_co]: ...


register_listable: Registrar[ListableImpl[Any]] = make_registrar(LISTABLE_KEY)


def list_items(listable: Listable[T]) -> List[T]:
    impl: ListableImpl[T] = resolve(LISTABLE_KEY, SUBTYPING_KEY, listable)
    return impl.list()


#
# Define subtypes and implementations
#


class ArrayObj(TypedDict):
    type: Literal['array-obj']
    ary: List[int]


@register_listable
class ListableForArrayObj(ImplementationBase[ArrayObj]):
    subtype_id = 'array-obj'

    def list(self) -> List[int]:
        return self.v['ary']


class RecordObj(TypedDict):
    type: Literal['record-obj']
    rec: Dict[str, int]


@register_listable
class ListableForRecordObj(ImplementationBase[RecordObj]):
    subtype_id = 'record-obj'

    def list(self) -> List[Tuple[str, int]]:
        return list(self.v['rec'].items())


#
# Usage
#

if __name__ == '__main__':
    ary: ArrayObj = {'type': 'array-obj', 'ary': [1, 2, 3]}
    rec: RecordObj = {'type': 'record-obj', 'rec': {'a': 1, 'b': 2, 'c': 3}}

    logger.info('Listing both records')
    print(list_items(ary))  # noqa: T201 (this is an example)
    print(list_items(rec))  # noqa: T201 (this is an example)
