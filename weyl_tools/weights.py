"""Integer vectors in the weight lattice and the root lattice of a
root system, acted on by simple reflections.

Weights are written in the basis of fundamental weights, and roots in
the basis of simple roots. If `C` is the Cartan matrix, with `C[i, j]
= <alpha_i^vee, alpha_j>`, then the simple reflection s_i acts by

- `w -> w - w[i] * C[:, i]` on a weight w, and
- `b -> b - <alpha_i^vee, b> * e_i` on a root b.

Both actions happen in place (`reflect`) or on a copy (`reflected`).
Weyl group elements act with `*`: for a group element x, `x * w`
applies the reflections of x's word from right to left, and `w * x`
from left to right.

"""

import numpy as np

from .base import MismatchedParentError, TitsConeError

# reflections tried before giving up on a dominant conjugate in an
# infinite Weyl group
MAX_CONJUGATION_STEPS = 10000

class _LatticeElem:
    def __init__(self, root_system, vec):
        _vec = np.array(vec)
        if _vec.shape != (root_system.rank,):
            raise ValueError(
                "Expected a vector of length {}, got shape {}".format(
                    root_system.rank, _vec.shape)
            )

        if (_vec.astype(int) != _vec).any():
            raise ValueError("Lattice elements must have integer coordinates")

        self._root_system = root_system
        self.vec = _vec.astype(int)

    @property
    def root_system(self):
        return self._root_system

    @property
    def rank(self):
        return self._root_system.rank

    def _check_compatible(self, other):
        if other.root_system is not self.root_system:
            raise MismatchedParentError(
                "{} and {} belong to different root systems".format(self, other)
            )

    def __getitem__(self, i):
        return int(self.vec[i])

    def __iter__(self):
        return (int(c) for c in self.vec)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.root_system is other.root_system and
                bool((self.vec == other.vec).all()))

    def __hash__(self):
        return hash((type(self), id(self.root_system), tuple(self)))

    def __neg__(self):
        return self.__class__(self.root_system, -self.vec)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._check_compatible(other)
        return self.__class__(self.root_system, self.vec + other.vec)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._check_compatible(other)
        return self.__class__(self.root_system, self.vec - other.vec)

    def copy(self):
        return self.__class__(self.root_system, self.vec.copy())

    # copies share the root system, which is compared by identity
    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def is_zero(self):
        return not self.vec.any()

    def reflect(self, i):
        """Apply the simple reflection s_i to this vector in place, and
        return it.

        """
        self.root_system.check_index(i)
        self._reflect(i)
        return self

    def reflected(self, i):
        """Get the image of this vector under the simple reflection s_i."""
        return self.copy().reflect(i)

    def _reflect(self, i):
        raise NotImplementedError

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, list(self))

class WeightLatticeElem(_LatticeElem):
    """A weight, in the basis of fundamental weights."""

    def _reflect(self, i):
        coeff = self.vec[i - 1]
        if coeff != 0:
            self.vec -= coeff * self.root_system.cartan_matrix[:, i - 1]

    def is_dominant(self):
        return bool((self.vec >= 0).all())

    def is_regular(self):
        return bool((self.vec != 0).all())

class RootSpaceElem(_LatticeElem):
    """An element of the root lattice, in the basis of simple roots."""

    def _reflect(self, i):
        self.vec[i - 1] -= self.root_system.cartan_matrix[i - 1] @ self.vec

    def is_positive(self):
        return not self.is_zero() and bool((self.vec >= 0).all())

    def is_negative(self):
        return not self.is_zero() and bool((self.vec <= 0).all())

    def to_weight(self):
        """Express this root lattice element in the basis of fundamental
        weights.

        """
        return WeightLatticeElem(self.root_system,
                                 self.root_system.cartan_matrix @ self.vec)

def _conjugate_to_dominant(weight, max_steps=None):
    R = weight.root_system
    if max_steps is None:
        max_steps = MAX_CONJUGATION_STEPS

    word = []
    wt = weight.copy()
    s = 1
    while s <= R.rank:
        if wt.vec[s - 1] < 0:
            # in a finite group every weight has a dominant conjugate
            if not R.is_finite() and len(word) >= max_steps:
                raise TitsConeError(
                    "No dominant conjugate of {} found after {} reflections;"
                    " it is probably outside the Tits cone".format(
                        weight, max_steps)
                )
            word.append(s)
            wt._reflect(s)
            s = 1
        else:
            s += 1

    return wt, word

def conjugate_dominant_weight_with_elem(weight, max_steps=None):
    """Find the dominant weight in the Weyl orbit of a weight, together
    with a group element taking the weight to it.

    The weight must lie in the Tits cone (which is automatic for
    finite Weyl groups); otherwise no dominant conjugate exists.

    Parameters
    ----------
    weight : WeightLatticeElem
        Weight to conjugate.
    max_steps : int
        For infinite Weyl groups, the number of reflections to try
        before giving up. Defaults to `MAX_CONJUGATION_STEPS`.

    Returns
    -------
    dominant : WeightLatticeElem
        The unique dominant weight in the orbit of `weight`.
    element : weyl_group.WeylGroupElem
        Element x of the Weyl group with `x * weight == dominant`.

    Raises
    ------
    TitsConeError
        Raised if the Weyl group is infinite and no dominant conjugate
        was found within `max_steps` reflections.

    """
    wt, word = _conjugate_to_dominant(weight, max_steps)

    # the reflections were applied first to last
    return wt, weight.root_system.weyl_group()(word[::-1])

def conjugate_dominant_weight(weight, max_steps=None):
    """Find the dominant weight in the Weyl orbit of a weight. See
    `conjugate_dominant_weight_with_elem`.

    """
    wt, _ = _conjugate_to_dominant(weight, max_steps)
    return wt
