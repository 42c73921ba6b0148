"""Registration entry points, one per capability.

Capability authors create a registrar once, next to the capability definition, and export it::

  register_listable = make_registrar(LISTABLE)

Implementation authors then register each variant, usually at import time of their module::

  @register_listable
  class ListableForArrayObj(ImplementationBase[ArrayObj]):
      subtype_id = 'array-obj'
      ...

  @register_listable.variant('tuple-obj')
  def listable_for_tuple_obj(record: TupleObj) -> ListableImpl:
      ...

Registration fails fast: an implementation without a usable `subtype_id` never enters the registry.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from ._internal.constants import SUBTYPE_ID_ATTR
from ._internal.logger import logger
from .exceptions import InvalidImplementationError
from .registry import get_default_registry

if TYPE_CHECKING:
    from .core_definitions import CapabilityKeyLike, SubtypeId
    from .registry import ImplementationRegistry

ImplT = TypeVar('ImplT')
_FactoryT = TypeVar('_FactoryT', bound=Callable[..., Any])


def _check_subtype_id(subtype_id: Any, owner: str) -> None:
    if subtype_id is None or subtype_id == '':
        msg = f'{owner}: Implementation must declare a non-empty "{SUBTYPE_ID_ATTR}"'
        logger.error(msg)
        raise InvalidImplementationError(msg)
    # bool is an int subclass, but True/False as a variant tag is almost certainly a mistake
    if isinstance(subtype_id, bool) or not isinstance(subtype_id, (str, int)):
        msg = f'{owner}: "{SUBTYPE_ID_ATTR}" must be a str or int, got {type(subtype_id).__name__}'
        logger.error(msg)
        raise InvalidImplementationError(msg)


def _describe(impl: Any) -> str:
    return getattr(impl, '__qualname__', None) or repr(impl)


class Registrar(Generic[ImplT]):
    """Registration entry point bound to one capability.

    `ImplT` is the interface (usually a `typing.Protocol`) every registered implementation provides.
    It is only used for annotations.
    """

    def __init__(
        self, capability: CapabilityKeyLike, registry: ImplementationRegistry | None = None
    ) -> None:
        self._capability = capability
        self._registry = registry

    @property
    def capability(self) -> CapabilityKeyLike:
        """The capability key this registrar inserts into."""
        return self._capability

    @property
    def registry(self) -> ImplementationRegistry:
        """The registry this registrar writes to.

        Without an explicit registry, the process-wide default is looked up on every access.
        """
        return self._registry if self._registry is not None else get_default_registry()

    def __call__(self, impl: _FactoryT) -> _FactoryT:
        """Register an implementation under the `subtype_id` it declares.

        params:
          impl: a callable taking a record and returning an implementation instance. Usually an
            `ImplementationBase` subclass with a class-level `subtype_id`.

        Returns:
          the implementation itself, unchanged, so this also works as a class decorator.

        Raises:
          InvalidImplementationError: if `impl` does not declare a usable `subtype_id`, or is not callable.
        """
        owner = _describe(impl)
        if not callable(impl):
            msg = f'{owner}: Implementation must be callable with the record as its only argument'
            logger.error(msg)
            raise InvalidImplementationError(msg)
        subtype_id = getattr(impl, SUBTYPE_ID_ATTR, None)
        _check_subtype_id(subtype_id, owner)
        self.registry.register(self._capability, subtype_id, impl)
        return impl

    def variant(self, subtype_id: SubtypeId) -> Callable[[_FactoryT], _FactoryT]:
        """Decorator which tags a factory with `subtype_id` and registers it.

        Useful for plain factory functions, which have no class body to declare `subtype_id` in.
        """
        _check_subtype_id(subtype_id, f'{type(self).__name__}.variant')

        def inner(impl: _FactoryT) -> _FactoryT:
            try:
                setattr(impl, SUBTYPE_ID_ATTR, subtype_id)
            except (AttributeError, TypeError) as e:
                msg = f'{_describe(impl)}: Cannot attach "{SUBTYPE_ID_ATTR}" to this callable, wrap it in a function or class'
                logger.error(msg)
                raise InvalidImplementationError(msg) from e
            return self(impl)

        return inner

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._capability!r})'


def make_registrar(
    capability: CapabilityKeyLike, *, registry: ImplementationRegistry | None = None
) -> Registrar[Any]:
    """Create the registration entry point for one capability.

    params:
      capability: the capability key. Must be hashable; `capability_key()` creates a unique one.
      registry: registry to write to. Defaults to the process-wide registry.

    Raises:
      InvalidImplementationError: if `capability` is None or unhashable.
    """
    if capability is None or not isinstance(capability, Hashable):
        msg = f'make_registrar: capability key must be a hashable, non-None value, got {type(capability).__name__}'
        logger.error(msg)
        raise InvalidImplementationError(msg)
    return Registrar(capability, registry)
