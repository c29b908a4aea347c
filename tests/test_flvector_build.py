import itertools

import pytest

from numcore.errors import LengthMismatchError
from numcore.flonum import FlVector, build_flvector, flvector, flvector_map, for_flvector


def test_for_flvector_with_length_stops_early():
    produced = []

    def values():
        for i in itertools.count():
            produced.append(i)
            yield float(i)

    v = for_flvector(values(), length=3)

    assert v == flvector(0, 1, 2)
    assert produced == [0, 1, 2]


def test_for_flvector_with_length_pads_with_zeros():
    assert for_flvector([1.0, 2.0], length=4) == flvector(1, 2, 0, 0)


def test_for_flvector_zero_length_never_pulls():
    def values():
        raise AssertionError("must not be evaluated")
        yield 0.0

    assert len(for_flvector(values(), length=0)) == 0


@pytest.mark.parametrize("n", [0, 1, 4, 5, 9, 100])
def test_for_flvector_grows_without_length(n):
    v = for_flvector(float(i) ** 2 for i in range(n))
    assert len(v) == n
    assert v.to_list() == [float(i) ** 2 for i in range(n)]


def test_build_flvector():
    assert build_flvector(4, lambda i: i * i) == flvector(0, 1, 4, 9)


def test_flvector_map():
    a = flvector(1, 2, 3)
    b = flvector(4, 5, 6)
    assert flvector_map(lambda x: x + 1, a) == flvector(2, 3, 4)
    assert flvector_map(lambda x, y: x * y + 1, a, b) == flvector(5, 11, 19)
    assert isinstance(flvector_map(abs, FlVector()), FlVector)


def test_flvector_map_length_mismatch():
    with pytest.raises(LengthMismatchError):
        flvector_map(lambda x, y: x + y, flvector(1, 2), flvector(1))
