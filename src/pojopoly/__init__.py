"""The root module contains the intended public API for users of pojopoly.

Users should not need to import anything outside of the root.

pojopoly provides open, extensible single-dispatch over plain tagged records (dicts, TypedDicts, dataclasses...):
capability authors define a set of operations, implementation authors register one implementation per variant tag,
and call sites get the right implementation resolved from the record's tag at call time.
"""

from importlib import import_module
from typing import TYPE_CHECKING

# import everything eagerly for IDEs/LSPs
if TYPE_CHECKING:
    from .capability import Capability, CapabilityDefinition, CapabilityKey, capability_key
    from .core_definitions import (
        CapabilityKeyLike,
        ImplementationFactory,
        SubtypeId,
        SubtypingKey,
    )
    from .exceptions import (
        CapabilityNotRegisteredError,
        ImplementationNotFoundError,
        InvalidImplementationError,
        PojopolyError,
    )
    from .implementation import ImplementationBase
    from .markers import CapabilityMarker, DefCapabilityMarker
    from .registrar import Registrar, make_registrar
    from .registry import ImplementationRegistry, get_default_registry
    from .resolver import resolve
    from .version import __version__, version_info, version_string

__all__ = (
    'Capability',
    'CapabilityDefinition',
    'CapabilityKey',
    'CapabilityKeyLike',
    'CapabilityMarker',
    'CapabilityNotRegisteredError',
    'DefCapabilityMarker',
    'ImplementationBase',
    'ImplementationFactory',
    'ImplementationNotFoundError',
    'ImplementationRegistry',
    'InvalidImplementationError',
    'PojopolyError',
    'Registrar',
    'SubtypeId',
    'SubtypingKey',
    '__version__',
    'capability_key',
    'get_default_registry',
    'make_registrar',
    'resolve',
    'version_info',
    'version_string',
)

# PEP 562 stuff: do lazy imports for people who just want to import from the top-level module

__lazy_imports = {
    'Capability': '.capability',
    'CapabilityDefinition': '.capability',
    'CapabilityKey': '.capability',
    'CapabilityKeyLike': '.core_definitions',
    'CapabilityMarker': '.markers',
    'CapabilityNotRegisteredError': '.exceptions',
    'DefCapabilityMarker': '.markers',
    'ImplementationBase': '.implementation',
    'ImplementationFactory': '.core_definitions',
    'ImplementationNotFoundError': '.exceptions',
    'ImplementationRegistry': '.registry',
    'InvalidImplementationError': '.exceptions',
    'PojopolyError': '.exceptions',
    'Registrar': '.registrar',
    'SubtypeId': '.core_definitions',
    'SubtypingKey': '.core_definitions',
    '__version__': '.version',
    'capability_key': '.capability',
    'get_default_registry': '.registry',
    'make_registrar': '.registrar',
    'resolve': '.resolver',
    'version_info': '.version',
    'version_string': '.version',
}


def __getattr__(attr_name: str) -> object:
    attr_module = __lazy_imports.get(attr_name)
    if attr_module:
        module = import_module(attr_module, package=__spec__.parent)
        return getattr(module, attr_name)

    msg = f'module {__name__!r} has no attribute {attr_name!r}'
    raise AttributeError(msg)


def __dir__() -> list[str]:
    return list(__all__)
