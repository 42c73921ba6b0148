"""Printable capability, shares the 'type' subtyping key with Listable."""

from typing import Any, Tuple

from pojopoly import CapabilityMarker, Registrar, capability_key, make_registrar, resolve
from typing_extensions import Literal, Protocol

PRINTABLE_KEY = capability_key('MyApp.Printable')
SUBTYPING_KEY = 'type'


class PrintableKey:
    """Type-level stand-in for PRINTABLE_KEY."""


Printable = CapabilityMarker[PrintableKey, Literal['type'], Tuple[()]]


class PrintableImpl(Protocol):
    def print(self) -> str: ...


register_impl: Registrar[PrintableImpl] = make_registrar(PRINTABLE_KEY)


def print_item(printable: Any) -> str:
    impl: PrintableImpl = resolve(PRINTABLE_KEY, SUBTYPING_KEY, printable)
    return impl.print()
