r"""Work with Weyl groups and their elements.

Elements of a Weyl group are stored as reduced words in the simple
reflections \(s_1, \ldots, s_n\) (as lists of 1-based indices). The
word stored for an element is a canonical one: two elements are equal
exactly when their stored words agree, so no multiplication table is
ever needed.

```python
from weyl_tools import weyl_group

W = weyl_group("A", 2)
s1, s2 = W.gens()

s1 * s2 * s1 == s2 * s1 * s2
```

    True

```python
w0 = W.longest_element()
w0, w0.length(), W.order()
```

    (s1 * s2 * s1, 3, 6)

Elements are compared in the Bruhat order with `<`:

```python
W.one() < s1 < s1 * s2 < w0
```

    True

"""
import warnings

import numpy as np
import scipy.special

from .base import (InvalidGeneratorError, MismatchedParentError,
                   InfiniteOrderError)
from .root_system import root_system
from .small_roots import ReflectionTable
from .weights import _LatticeElem, conjugate_dominant_weight_with_elem
from .reduced_expressions import ReducedExpressionIterator
from .utils import words
from . import orbit

_EXCEPTIONAL_ORDERS = {
    ("E", 6): 51840,
    ("E", 7): 2903040,
    ("E", 8): 696729600,
    ("F", 4): 1152,
    ("G", 2): 12,
}

class WeylGroup:
    """The Weyl group of a root system.

    Don't construct this class directly: use `weyl_group(...)` or
    `RootSystem.weyl_group()`, which make sure each root system has
    exactly one Weyl group.

    """
    def __init__(self, root_system):
        self._root_system = root_system
        self._finite = root_system.is_finite()
        self._refl = ReflectionTable(root_system.coxeter_matrix())

    @property
    def root_system(self):
        return self._root_system

    @property
    def rank(self):
        return self._root_system.rank

    @property
    def refl(self):
        """The reflection table of the small roots of this group (see
        `small_roots.ReflectionTable`).

        """
        return self._refl

    def is_finite(self):
        return self._finite

    def check_generator(self, i):
        if not 1 <= i <= self.rank:
            raise InvalidGeneratorError(
                "Invalid generator index {} for {}".format(i, self)
            )

    def __call__(self, word=(), normalize=True):
        """Get the element of this group given by a word.

        Parameters
        ----------
        word : sequence of ints, or str
            Word in the simple reflections, either as a sequence of
            1-based generator indices or as a string like "s1 * s2".
        normalize : bool
            If True (the default), bring the word into normal form. If
            False, the word is stored as given, which is only correct
            if it is already the normal form of a reduced word.

        Returns
        -------
        WeylGroupElem

        """
        if isinstance(word, str):
            word = words.parse_word(word)
        return WeylGroupElem(self, word, normalize=normalize)

    def one(self):
        return WeylGroupElem(self, [], normalize=False)

    def gen(self, i):
        """Get the i-th simple reflection of this group (1-based)."""
        self.check_generator(i)
        return WeylGroupElem(self, [i], normalize=False)

    def gens(self):
        return [self.gen(i) for i in range(1, self.rank + 1)]

    def coxeter_matrix(self):
        return self._root_system.coxeter_matrix()

    def longest_element(self):
        """Get the unique longest element of this group.

        Raises
        ------
        InfiniteOrderError
            Raised if the group is infinite.

        """
        if not self._finite:
            raise InfiniteOrderError(self)

        _, w0 = conjugate_dominant_weight_with_elem(
            -self._root_system.weyl_vector()
        )
        return w0

    def order(self):
        """Get the order of this group.

        If the root system was built from a list of types, the order is
        the product of the classical formulas for each component.
        Otherwise the group is enumerated.

        Raises
        ------
        InfiniteOrderError
            Raised if the group is infinite.

        """
        if not self._finite:
            raise InfiniteOrderError(self)

        types = self._root_system.type
        if types is None:
            warnings.warn(
                "Root system type is unknown; computing the order of {} by"
                " enumerating its elements".format(self),
                RuntimeWarning
            )
            return sum(1 for _ in orbit.WeylIteratorNoCopy(
                self._root_system.weyl_vector()))

        order = 1
        for fam, rk in types:
            if fam == "A":
                order *= scipy.special.factorial(rk + 1, exact=True)
            elif fam == "B" or fam == "C":
                order *= 2**rk * scipy.special.factorial(rk, exact=True)
            elif fam == "D":
                order *= 2**(rk - 1) * scipy.special.factorial(rk, exact=True)
            else:
                order *= _EXCEPTIONAL_ORDERS[(fam, rk)]
        return int(order)

    def __iter__(self):
        """Iterate over all elements of this group, by walking the orbit of
        the Weyl vector. Each element is an independent copy.

        For an infinite group, this iterates forever.

        """
        seed = self._root_system.weyl_vector()
        for state in orbit.WeylIteratorNoCopy(seed):
            yield self(state.element.word)

    def random_element(self, rng=None):
        """Get a random element of this group.

        The element is given by a random subword of the longest
        element, so elements are *not* uniformly distributed.

        Parameters
        ----------
        rng : numpy.random.Generator
            Random generator to use. If None, a new default generator
            is used.

        """
        if rng is None:
            rng = np.random.default_rng()

        word = self.longest_element().word
        keep = rng.random(len(word)) < 2 / 3
        return self([s for s, k in zip(word, keep) if k])

    def __str__(self):
        return "Weyl group of {}".format(self._root_system)

    def __repr__(self):
        return "<{}>".format(self)

class WeylGroupElem:
    """An element of a Weyl group, stored as a reduced word in normal
    form.

    Elements only change through `left_multiply_inplace`; every other
    operation returns a new element.

    """
    def __init__(self, parent, word, normalize=True):
        _word = []
        for s in word:
            if isinstance(s, str) or int(s) != s:
                raise InvalidGeneratorError(
                    "Generator indices must be integers, got {!r}".format(s)
                )
            parent.check_generator(int(s))
            _word.append(int(s))

        self._parent = parent
        if not normalize:
            self._word = _word
            return

        self._word = []
        for s in reversed(_word):
            self._left_multiply(s)

    @property
    def parent(self):
        return self._parent

    @property
    def word(self):
        """The normal form of this element, as a tuple of generator
        indices.

        """
        return tuple(self._word)

    def __getitem__(self, i):
        return self._word[i]

    def __iter__(self):
        return iter(self._word)

    def length(self):
        return len(self._word)

    def is_identity(self):
        return len(self._word) == 0

    def copy(self):
        return WeylGroupElem(self._parent, self._word, normalize=False)

    # copies share the parent, which is compared by identity
    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def _check_parent(self, other):
        if other.parent is not self._parent:
            raise MismatchedParentError(
                "{} and {} must belong to the same Weyl group".format(self, other)
            )

    def explain_left_multiply(self, i):
        """Determine what happens to the word of this element when it is
        multiplied on the left by the simple reflection s_i.

        The left product either has length one more (a letter is
        inserted into the word) or one less (a letter is deleted).

        Parameters
        ----------
        i : int
            Index of a simple reflection.

        Returns
        -------
        insert : bool
            True if a letter is inserted, False if one is deleted.
        position : int
            Position in the word where the insertion or deletion
            happens.
        letter : int
            The simple reflection inserted at (or deleted from) that
            position.

        Raises
        ------
        InvalidGeneratorError
            Raised if i is not between 1 and the rank of the group.

        """
        self._parent.check_generator(i)
        refl = self._parent.refl

        insert_index = 0
        insert_letter = i

        root = i
        for s, letter in enumerate(self._word):
            if letter == root:
                return False, s, letter

            root = refl(letter, root)
            if root == 0:
                # root is no longer small, so we already found the best
                # insertion point
                return True, insert_index, insert_letter

            # letter is a simple root, so if root < letter then root is
            # simple too
            if root < letter:
                insert_index = s + 1
                insert_letter = root

        return True, insert_index, insert_letter

    def _left_multiply(self, i):
        insert, position, letter = self.explain_left_multiply(i)
        if insert:
            self._word.insert(position, letter)
        else:
            del self._word[position]

    def left_multiply_inplace(self, i):
        """Multiply this element on the left by s_i, in place, and return
        it.

        """
        self._left_multiply(i)
        return self

    def left_multiply(self, i):
        """Get the product s_i * self."""
        return self.copy().left_multiply_inplace(i)

    def is_left_descent(self, i):
        insert, _, _ = self.explain_left_multiply(i)
        return not insert

    def left_descents(self):
        return [i for i in range(1, self._parent.rank + 1)
                if self.is_left_descent(i)]

    def inverse(self):
        y = self._parent.one()
        for s in self._word:
            y._left_multiply(s)
        return y

    def _act(self, lattice_elem, letters):
        if lattice_elem.root_system is not self._parent.root_system:
            raise MismatchedParentError(
                "{} and {} have incompatible root systems".format(
                    self, lattice_elem)
            )

        result = lattice_elem.copy()
        for s in letters:
            result._reflect(s)
        return result

    def __mul__(self, other):
        if isinstance(other, _LatticeElem):
            return self._act(other, reversed(self._word))

        if not isinstance(other, WeylGroupElem):
            return NotImplemented

        self._check_parent(other)
        product = other.copy()
        for s in reversed(self._word):
            product._left_multiply(s)
        return product

    def __rmul__(self, other):
        if isinstance(other, _LatticeElem):
            return self._act(other, self._word)
        return NotImplemented

    def __pow__(self, n):
        # repeated left multiplication, not repeated squaring
        if n == 0:
            return self._parent.one()
        if n < 0:
            return (self ** -n).inverse()

        px = self.copy()
        for _ in range(n - 1):
            for s in reversed(self._word):
                px._left_multiply(s)
        return px

    def __lt__(self, other):
        """Check whether this element is smaller than another in the Bruhat
        order, i.e. whether some (not necessarily connected) subword
        of a reduced word for `other` is a reduced word for `self`.

        """
        if not isinstance(other, WeylGroupElem):
            return NotImplemented
        self._check_parent(other)

        if self.length() >= other.length():
            return False
        if self.is_identity():
            return True

        tx = self.copy()
        for i, letter in enumerate(other._word):
            insert, j, _ = tx.explain_left_multiply(letter)
            if not insert:
                del tx._word[j]
                if tx.is_identity():
                    return True

            if tx.length() > other.length() - i - 1:
                return False

        return False

    def __le__(self, other):
        if not isinstance(other, WeylGroupElem):
            return NotImplemented
        return self == other or self < other

    def __gt__(self, other):
        if not isinstance(other, WeylGroupElem):
            return NotImplemented
        return other < self

    def __ge__(self, other):
        if not isinstance(other, WeylGroupElem):
            return NotImplemented
        return other <= self

    def __eq__(self, other):
        if not isinstance(other, WeylGroupElem):
            return NotImplemented
        return self._parent is other._parent and self._word == other._word

    def __hash__(self):
        return hash((id(self._parent), tuple(self._word)))

    def reduced_expressions(self, up_to_commutation=False):
        """Get all reduced words for this element.

        Parameters
        ----------
        up_to_commutation : bool
            If True, only produce one word for each class of words
            related by swapping adjacent commuting generators.

        Returns
        -------
        ReducedExpressionIterator
            Restartable iterable of words (lists of ints). The first
            word is the normal form of this element.

        """
        return ReducedExpressionIterator(self, up_to_commutation)

    def __str__(self):
        return words.format_word(self._word)

    def __repr__(self):
        return str(self)

def weyl_group(data, rank=None):
    """Get the Weyl group of a root system, specified by a family and
    rank, a list of types, a generalized Cartan matrix, or a
    `RootSystem`.

    ```python
    weyl_group("B", 3)
    weyl_group([("A", 2), ("A", 1)])
    weyl_group([[2, -2], [-2, 2]])
    ```

    """
    if isinstance(data, WeylGroup):
        return data
    return root_system(data, rank).weyl_group()
