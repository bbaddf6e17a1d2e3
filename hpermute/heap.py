"""
Heap's algorithm for generating permutations, as a stateful walker (`Heap`)
and as a recursive visitor function (`heap_recursive`).
"""
import copy
import math
from typing import Generic, MutableSequence

from loguru import logger

from hpermute.control import Control, should_break
from hpermute.hptypes import SequenceT, Visitor

# Maximum number of elements `Heap` will walk. The counters are a plain
# list, so this is not a storage limit: 16! steps is already far past
# anything that can be enumerated. `heap_recursive` has no such bound.
MAXHEAP = 16


def factorial(n: int) -> int:
    """Compute n! (n factorial)."""
    return math.factorial(n)


def _check_mutable(data) -> None:
    for attr in ("__len__", "__getitem__", "__setitem__"):
        if not hasattr(data, attr):
            raise TypeError(
                f"Expected a mutable indexable sequence, got "
                f"{type(data).__name__}"
            )


def _swap(data: MutableSequence, i: int, j: int) -> None:
    data[i], data[j] = data[j], data[i]


class Heap(Generic[SequenceT]):
    """
    Iterative walker over every permutation of `data`, in Heap's order.

    The walker permutes `data` in place: `next_permutation()` returns the
    sequence object itself, while iterating over the walker yields a copy
    of each arrangement. For n elements there are n! permutations; the
    first one produced is the arrangement present when the walker was
    created (or last reset).
    """

    def __init__(self, data: SequenceT):
        _check_mutable(data)
        if len(data) > MAXHEAP:
            raise ValueError(
                f"Heap supports at most {MAXHEAP} elements, got {len(data)}"
            )
        self._data = data
        self._size = len(data)
        # _counters[k] plays the part of the loop variable at recursion
        # level k (prefix length k + 1); _level is the level being scanned
        self._counters = [0] * self._size
        self._level = 0
        self._index = 0
        self._exhausted = False
        logger.debug("Heap walker created over {} elements", self._size)

    def get(self) -> SequenceT:
        return self._data

    def get_mut(self) -> SequenceT:
        return self._data

    def reset(self) -> None:
        """
        Restart the walk. The data is left as it is, so the next cycle
        begins from the current arrangement rather than the original one.
        """
        self._counters = [0] * self._size
        self._level = 0
        self._index = 0
        self._exhausted = False
        logger.debug("Heap walker reset over {} elements", self._size)

    @property
    def remaining(self) -> int:
        return factorial(self._size) - self._index

    def next_permutation(self) -> SequenceT | None:
        """
        Step the data into the next permutation and return it, or return
        None when all permutations have been visited.
        """
        if self._index == 0:
            self._index = 1
            return self._data
        counters = self._counters
        while self._level < self._size:
            level = self._level
            if counters[level] < level:
                if (level + 1) % 2 == 0:
                    _swap(self._data, counters[level], level)
                else:
                    _swap(self._data, 0, level)
                counters[level] += 1
                self._level = 0
                self._index += 1
                return self._data
            counters[level] = 0
            self._level += 1
        # the last permutation visited is not the starting arrangement;
        # only reset() rearms the walker
        if not self._exhausted:
            self._exhausted = True
            logger.debug(
                "Heap walker exhausted after {} permutations", self._index
            )
        return None

    def __iter__(self) -> "Heap[SequenceT]":
        return self

    def __next__(self) -> SequenceT:
        perm = self.next_permutation()
        if perm is None:
            raise StopIteration
        return copy.copy(perm)

    def __length_hint__(self) -> int:
        return self.remaining


def heap_recursive(data: MutableSequence, visitor: Visitor) -> Control:
    """
    Heap's algorithm for generating permutations, recursive version.

    Calls `visitor(data)` once for each of the n! arrangements, starting
    with the arrangement as given. Returning `Control.BREAK` from the
    visitor stops generation at once, leaving `data` in the arrangement
    the visitor last saw; returning None or `Control.CONTINUE` goes on.
    Returns `Control.BREAK` if the visitor stopped the walk early,
    `Control.CONTINUE` otherwise.
    """
    _check_mutable(data)
    if _heap(len(data), data, visitor):
        logger.debug("heap_recursive stopped early by visitor")
        return Control.BREAK
    return Control.CONTINUE


def _heap(k: int, data: MutableSequence, visitor: Visitor) -> bool:
    if k <= 1:
        return should_break(visitor(data))
    for i in range(k - 1):
        if _heap(k - 1, data, visitor):
            return True
        _swap(data, i if k % 2 == 0 else 0, k - 1)
    return _heap(k - 1, data, visitor)
