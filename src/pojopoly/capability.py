"""Capability keys, capability definitions, and the `Capability` convenience wrapper.

A capability is a named set of related operations which different record variants can implement.
At minimum it needs two things: a unique key, and the name of the record field holding the variant tag.

The lowest-level way to define a capability wires `make_registrar()` and `resolve()` by hand::

  LISTABLE = capability_key('MyApp.Listable')
  register_listable = make_registrar(LISTABLE)

  def list_items(listable):
      return resolve(LISTABLE, 'type', listable).list()

`Capability` bundles the same pieces together::

  Listable = Capability[ListableImpl]('MyApp.Listable', 'type')

  @Listable.register_impl
  class ListableForArrayObj(ImplementationBase[ArrayObj]):
      subtype_id = 'array-obj'
      ...

  def list_items(listable):
      return Listable.resolve(listable).list()
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated, final

from .registrar import Registrar
from .resolver import resolve

if TYPE_CHECKING:
    from .core_definitions import CapabilityKeyLike, SubtypeId, SubtypingKey
    from .registry import ImplementationRegistry

ImplT = TypeVar('ImplT')
_FactoryT = TypeVar('_FactoryT', bound=Callable[..., Any])


@final
class CapabilityKey(BaseModel):
    """Globally unique, opaque capability identifier.

    Two keys created with the same name are still distinct, much like two symbols with the same description.
    Keys are immutable and hashable, so they can be used as mapping keys.
    """

    name: str = ''
    """
    Human-readable name, only used in error and log messages (i.e. 'MyApp.Listable').
    """

    uid: UUID = Field(default_factory=uuid4)
    """
    The actual identity of the key. Generated automatically; you should not need to pass this.
    """

    def __str__(self) -> str:
        return self.name or str(self.uid)

    # pydantic config
    model_config = ConfigDict(frozen=True)


def capability_key(name: str = '') -> CapabilityKey:
    """Create a new, unique capability key. `name` is only descriptive."""
    return CapabilityKey(name=name)


class CapabilityDefinition(BaseModel):
    """Validated description of a capability: which key it registers under, and which field carries the variant tag."""

    name: Annotated[str, Field(min_length=1)]
    """
    Descriptive name of the capability (i.e. 'MyApp.Listable'). Must not be empty.
    """

    key: Any
    """
    The capability key. Must be hashable.
    """

    subtyping_key: Union[  # noqa: UP007 (Pydantic uses runtime annotations)
        Annotated[str, Field(min_length=1, strict=True)],
        Annotated[int, Field(strict=True)],
    ] = 'type'
    """
    The record field carrying the variant tag. Either a non-empty string or an integer (default: 'type').
    """

    @field_validator('key', mode='after')
    @classmethod
    def _key_must_be_hashable(cls, v: Any) -> Any:
        if v is None or not isinstance(v, Hashable):
            msg = 'CapabilityDefinition: key must be a hashable, non-None value'
            raise ValueError(msg)  # noqa: TRY004 (Pydantic convention is to raise a ValueError)
        return v

    # pydantic config
    model_config = ConfigDict(frozen=True)


class Capability(Generic[ImplT]):
    """A capability bound to its key, subtyping key, and registry.

    `ImplT` is the interface every implementation of this capability provides; `resolve()` is annotated to return it.
    """

    def __init__(
        self,
        name: str,
        subtyping_key: SubtypingKey = 'type',
        *,
        key: CapabilityKeyLike | None = None,
        registry: ImplementationRegistry | None = None,
    ) -> None:
        """Define a capability.

        params:
          name: descriptive name of the capability (i.e. 'MyApp.Listable').
          subtyping_key: the record field holding the variant tag (default: 'type').
          key: use this key instead of generating a fresh `CapabilityKey` from `name`.
            Useful when some implementations were registered with the lower-level `make_registrar()`.
          registry: registry to use. Defaults to the process-wide registry.

        Raises:
          pydantic.ValidationError: if the name is empty, the key is unhashable, or the subtyping key is invalid.
        """
        self._definition = CapabilityDefinition(
            name=name,
            key=key if key is not None else capability_key(name),
            subtyping_key=subtyping_key,
        )
        self._registry = registry
        self.register_impl: Registrar[ImplT] = Registrar(self._definition.key, registry)
        """Registration entry point for this capability. See `Registrar`."""

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def key(self) -> CapabilityKeyLike:
        return self._definition.key  # type: ignore[no-any-return]

    @property
    def subtyping_key(self) -> SubtypingKey:
        return self._definition.subtyping_key

    def variant(self, subtype_id: SubtypeId) -> Callable[[_FactoryT], _FactoryT]:
        """Shortcut for `register_impl.variant()`."""
        return self.register_impl.variant(subtype_id)

    def resolve(self, record: Any) -> ImplT:
        """Build the implementation of this capability for `record`. See `pojopoly.resolve()`."""
        return resolve(self.key, self.subtyping_key, record, registry=self._registry)  # type: ignore[no-any-return]

    def subtypes(self) -> list[SubtypeId]:
        """Subtype ids currently registered for this capability, in registration order."""
        return self.register_impl.registry.subtypes(self.key)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.name!r}, {self.subtyping_key!r})'
