from itertools import permutations

import pytest

from hpermute import Heap, hperms, hpermute


def test_hpermute_1():
    obj = (1, 4, 2, 2)
    res = hpermute(obj)
    assert len(res) == 24
    assert set(res) == set(permutations(obj))
    assert res[0] == obj
    assert obj == (1, 4, 2, 2)


def test_hpermute_order():
    assert hpermute("abc") == (
        ("a", "b", "c"), ("b", "a", "c"), ("c", "a", "b"),
        ("a", "c", "b"), ("b", "c", "a"), ("c", "b", "a")
    )


def test_hpermute_empty():
    assert hpermute(()) == ((),)


def test_hperms_1():
    obj = (1, 4, 2)
    gen = hperms(obj)
    assert isinstance(gen, Heap)
    res = [next(gen)]
    assert len(res[0]) == 3
    for _ in range(5):
        res.append(next(gen))
    try:
        next(gen)
        raise RuntimeError("Should have raised StopIteration")
    except StopIteration:
        pass
    assert set(map(tuple, res)) == set(permutations(obj))


def test_hperms_copies_input():
    obj = [3, 2, 1]
    gen = hperms(obj)
    for _ in gen:
        pass
    assert obj == [3, 2, 1]


@pytest.mark.parametrize("func", (hperms, hpermute))
def test_not_iterable(func):
    with pytest.raises(TypeError, match="iterable"):
        func(5)
