import copy

import pytest
import numpy as np

from weyl_tools import (root_system, RootSystem, WeightLatticeElem,
                        conjugate_dominant_weight,
                        conjugate_dominant_weight_with_elem)
from weyl_tools.base import (InvalidGeneratorError, MismatchedParentError,
                             RootSystemError)

@pytest.fixture
def a2():
    return root_system("A", 2)

@pytest.fixture
def g2():
    return root_system("G", 2)

def test_construction():
    R = root_system("B", 3)
    assert R.rank == 3
    assert R.type == [("B", 3)]
    assert R.is_finite()
    assert str(R) == "root system of type B3"

    R = root_system([("A", 1), ("G", 2)])
    assert R.rank == 3
    assert R.type_string() == "A1 x G2"

    R = root_system([[2, -2], [-2, 2]])
    assert R.type is None
    assert not R.is_finite()
    assert str(R) == "root system of rank 2"

    assert root_system(R) is R

def test_single_type_pair():
    R = root_system(("A", 2))
    assert R.type == [("A", 2)]
    assert np.array_equal(R.cartan_matrix, np.array([[2, -1], [-1, 2]]))

    assert root_system(["G", 2]).type == [("G", 2)]
    assert root_system(("B", 3)).weyl_group().order() == 48

def test_bad_construction():
    with pytest.raises(ValueError):
        root_system("A")
    with pytest.raises(ValueError):
        root_system([[2, -1], [-1, 2]], 2)
    with pytest.raises(ValueError):
        RootSystem()
    with pytest.raises(RootSystemError):
        root_system([[2, -1], [0, 2]])

def test_redundant_data():
    with pytest.warns(UserWarning):
        R = RootSystem(cartan_matrix=[[2, -1], [-1, 2]], types=[("B", 2)])
    assert R.type is None
    assert R.cartan_matrix[1, 0] == -1

def test_special_weights(g2):
    assert list(g2.weyl_vector()) == [1, 1]
    assert list(g2.fundamental_weight(2)) == [0, 1]
    assert list(g2.simple_root(1)) == [1, 0]

    with pytest.raises(InvalidGeneratorError):
        g2.fundamental_weight(3)
    with pytest.raises(InvalidGeneratorError):
        g2.weyl_vector().reflect(0)

def test_lattice_arithmetic(a2):
    w1 = a2.fundamental_weight(1)
    w2 = a2.fundamental_weight(2)
    assert w1 + w2 == a2.weyl_vector()
    assert (w1 - w1).is_zero()
    assert -w1 == a2.weight([-1, 0])
    assert w1[0] == 1

    other = root_system("A", 2)
    with pytest.raises(MismatchedParentError):
        w1 + other.fundamental_weight(1)
    assert w1 != other.fundamental_weight(1)

    # roots and weights are different lattices
    assert a2.simple_root(1) != a2.weight([1, 0])

def test_bad_vectors(a2):
    with pytest.raises(ValueError):
        a2.weight([1, 0, 0])
    with pytest.raises(ValueError):
        a2.weight([0.5, 0])

def test_reflection(a2):
    wt = a2.weight([1, 0])
    assert wt.reflected(1) == a2.weight([-1, 1])
    assert wt == a2.weight([1, 0])
    assert wt.reflect(1) is wt
    assert wt == a2.weight([-1, 1])
    assert wt.reflect(1) == a2.weight([1, 0])

def test_simple_roots_to_weights(g2):
    # columns of the Cartan matrix
    assert list(g2.simple_root(1).to_weight()) == [2, -1]
    assert list(g2.simple_root(2).to_weight()) == [-3, 2]

def test_root_reflection_matches_weights(g2):
    root = g2.root([2, 1])
    for i in (1, 2):
        assert root.reflected(i).to_weight() == root.to_weight().reflected(i)

def test_signs(a2):
    assert a2.root([1, 1]).is_positive()
    assert a2.root([-1, 0]).is_negative()
    assert not a2.root([1, -1]).is_positive()
    assert not a2.root([0, 0]).is_negative()
    assert a2.weight([0, 2]).is_dominant()
    assert not a2.weight([0, 2]).is_regular()
    assert a2.weyl_vector().is_regular()

def test_copy(a2):
    wt = a2.weight([2, 1])
    for cp in [wt.copy(), copy.copy(wt), copy.deepcopy(wt)]:
        assert cp == wt
        assert cp.root_system is a2
        cp.reflect(1)
        assert wt == a2.weight([2, 1])

def test_conjugate_dominant(a2, g2):
    assert conjugate_dominant_weight(a2.weight([0, -1])) == a2.weight([1, 0])

    for R in (a2, g2):
        rng = np.random.default_rng()
        for _ in range(10):
            wt = R.weight(rng.integers(-5, 6, size=2))
            dom, x = conjugate_dominant_weight_with_elem(wt)
            assert dom.is_dominant()
            assert x * wt == dom
            assert dom == conjugate_dominant_weight(wt)
            assert R.weyl_group()(x.word).word == x.word

def test_weyl_group_is_cached(a2):
    assert a2.weyl_group() is a2.weyl_group()
    assert a2.weyl_group().root_system is a2
