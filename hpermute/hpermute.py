from typing import Iterable

from hpermute.heap import Heap, heap_recursive
from hpermute.hptypes import T


def _aslist(elements: Iterable[T]) -> list[T]:
    try:
        iter(elements)
    except (TypeError, ValueError):
        raise TypeError("Elements must be iterable")
    return list(elements)


def hperms(elements: Iterable[T]) -> Heap[list[T]]:
    return Heap(_aslist(elements))


def hpermute(elements: Iterable[T]) -> tuple[tuple[T, ...], ...]:
    # heap_recursive carries no size bound, unlike Heap
    perms = []
    heap_recursive(_aslist(elements), lambda p: perms.append(tuple(p)))
    return tuple(perms)
