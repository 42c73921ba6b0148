"""One record variant implementing two independent capabilities, defined with the `Capability` wrapper."""

from typing import List

from pojopoly import Capability, ImplementationBase
from typing_extensions import Literal, Protocol, TypedDict


class ListableImpl(Protocol):
    def list(self) -> List[int]: ...


class PrintableImpl(Protocol):
    def print(self) -> str: ...


Listable = Capability[ListableImpl]('MyApp.Listable', 'type')
Printable = Capability[PrintableImpl]('MyApp.Printable', 'type')


class ArrayObj(TypedDict):
    type: Literal['array-obj']
    ary: List[int]


@Listable.register_impl
class ListableForArrayObj(ImplementationBase[ArrayObj]):
    subtype_id = 'array-obj'

    def list(self) -> List[int]:
        return self.v['ary']


# the same subtype id, registered under a different capability
@Printable.register_impl
class PrintableForArrayObj(ImplementationBase[ArrayObj]):
    subtype_id = 'array-obj'

    def print(self) -> str:
        return f'ArrayObj({", ".join(str(x) for x in self.v["ary"])})'


if __name__ == '__main__':
    ary: ArrayObj = {'type': 'array-obj', 'ary': [1, 2, 3]}
    print(Listable.resolve(ary).list())  # noqa: T201 (this is an example)
    print(Printable.resolve(ary).print())  # noqa: T201 (this is an example)
