"""Base class for capability implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

if TYPE_CHECKING:
    from .core_definitions import SubtypeId

RecordT = TypeVar('RecordT')


class ImplementationBase(Generic[RecordT]):
    """Base class for implementations of a capability for one record variant.

    Extend this class, set `subtype_id` to the variant tag, implement the capability's operations,
    and pass the class to the capability's registrar. The resolver builds a new instance per call,
    with the record as the only constructor argument.

    Example::

      class ListableForArrayObj(ImplementationBase[ArrayObj]):
          subtype_id = 'array-obj'

          def list(self) -> list[int]:
              return self.v['ary']

      register_listable(ListableForArrayObj)

    If you redefine the constructor, you MUST call `super().__init__(record)`.
    """

    subtype_id: ClassVar[SubtypeId]
    """The value of the subtyping key this implementation handles.

    You MUST set this on every concrete subclass; registration fails without it.
    It only has to be unique among the implementations of one capability.
    """

    def __init__(self, v: RecordT) -> None:
        self._v = v

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Keep the wrapped record read-only from the implementation's point of view."""
        super().__init_subclass__(**kwargs)
        if cls.v is not ImplementationBase.v:
            msg = f"{cls.__name__}: Attempted to override the reserved 'v' property of ImplementationBase"
            raise RuntimeError(msg)

    @property
    def v(self) -> RecordT:
        """The record this implementation was constructed from. Treat it as read-only data."""
        return self._v

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._v!r})'
