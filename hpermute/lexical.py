"""
In-place lexicographic successor / predecessor of a sequence.

Both functions only ever compare elements with `<`, optionally through a
`key` function, and return False (leaving the sequence untouched) at the
last / first arrangement instead of wrapping around.
"""
from typing import MutableSequence

from hpermute.hptypes import Keyfunc


def _identity(x):
    return x


def _reverse(seq: MutableSequence, lo: int, hi: int) -> None:
    hi -= 1
    while lo < hi:
        seq[lo], seq[hi] = seq[hi], seq[lo]
        lo += 1
        hi -= 1


def next_permutation(seq: MutableSequence, key: Keyfunc | None = None) -> bool:
    """
    Rearrange `seq` into the next greater permutation in lexicographic
    order. Return False if `seq` is already in descending order.
    """
    key = _identity if key is None else key
    n = len(seq)
    # start of the longest non-increasing suffix
    i = n - 1
    while i > 0 and not key(seq[i - 1]) < key(seq[i]):
        i -= 1
    if i <= 0:
        return False
    pivot = key(seq[i - 1])
    j = n - 1
    while not pivot < key(seq[j]):
        j -= 1
    seq[i - 1], seq[j] = seq[j], seq[i - 1]
    _reverse(seq, i, n)
    return True


def prev_permutation(seq: MutableSequence, key: Keyfunc | None = None) -> bool:
    """
    Rearrange `seq` into the previous permutation in lexicographic order.
    Return False if `seq` is already in ascending order.
    """
    key = _identity if key is None else key
    n = len(seq)
    # start of the longest non-decreasing suffix
    i = n - 1
    while i > 0 and not key(seq[i]) < key(seq[i - 1]):
        i -= 1
    if i <= 0:
        return False
    pivot = key(seq[i - 1])
    j = n - 1
    while not key(seq[j]) < pivot:
        j -= 1
    seq[i - 1], seq[j] = seq[j], seq[i - 1]
    _reverse(seq, i, n)
    return True


class LexicalPermutation:
    """Mixin giving a mutable sequence next/prev permutation methods."""

    def next_permutation(self, key: Keyfunc | None = None) -> bool:
        return next_permutation(self, key)

    def prev_permutation(self, key: Keyfunc | None = None) -> bool:
        return prev_permutation(self, key)


class LexicalList(LexicalPermutation, list):
    pass
