from typing import Any, Callable, MutableSequence, Protocol, TypeVar, TypeAlias

T = TypeVar('T')


class SupportsOrder(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass


SequenceT = TypeVar('SequenceT', bound=MutableSequence)

Keyfunc: TypeAlias = Callable[[T], SupportsOrder]
# a visitor returns None / Control.CONTINUE to go on, Control.BREAK to stop
Visitor: TypeAlias = Callable[[MutableSequence[T]], Any]
