"""Iterate over the Weyl group orbit of a dominant weight.

The orbit of a dominant weight lambda is in bijection with the
minimal length coset representatives of the stabilizer of lambda, and
these form a tree: every representative is obtained from a shorter
one by a single reflection. The iterators in this module walk this
tree depth first, mutating a single weight in place and using the
current path of reflections both as a backtracking stack and as the
word of a group element. The method follows Stembridge, "Computational
aspects of root systems, Coxeter groups, and Weyl characters" (2001),
sections 4.C and 4.D.

```python
from weyl_tools.orbit import weyl_orbit
from weyl_tools.root_system import root_system

R = root_system("A", 2)
list(weyl_orbit(R, [1, 0]))
```

    [WeightLatticeElem([1, 0]), WeightLatticeElem([-1, 1]), WeightLatticeElem([0, -1])]

"""

from .cartan import is_zero_entry
from .root_system import RootSystem
from .weights import WeightLatticeElem, conjugate_dominant_weight

class WeylIteratorNoCopyState:
    """Current position of a `WeylIteratorNoCopy`.

    Attributes
    ----------
    weight : WeightLatticeElem
        The current weight in the orbit.
    element : weyl_group.WeylGroupElem
        Group element x with `x * weight` equal to the dominant weight
        the walk started from. Its word is the path of reflections
        leading from the dominant weight to `weight`; it is reduced
        (a minimal coset representative) but not necessarily in
        normal form.

    Both attributes are updated in place as the walk continues.

    """
    __slots__ = ("weight", "element")

    def __init__(self, weight, element):
        self.weight = weight
        self.element = element

    def __iter__(self):
        yield self.weight
        yield self.element

    def __repr__(self):
        return "({!r}, {})".format(self.weight, self.element)

class WeylIteratorNoCopy:
    """Iterator over pairs (weight, element) for the Weyl orbit of a
    weight, where `element * weight` is the dominant weight of the
    orbit.

    The same `WeylIteratorNoCopyState` object is returned at every
    step and modified in place afterwards, so copy whatever you want
    to keep.

    A weight which is not dominant is replaced by its dominant
    conjugate. For an infinite Weyl group the weight must then lie in
    the Tits cone; otherwise the constructor raises `TitsConeError`.

    """
    def __init__(self, weight):
        if not isinstance(weight, WeightLatticeElem):
            raise TypeError("Can only iterate over the orbit of a weight")

        if weight.is_dominant():
            self.weight = weight.copy()
        else:
            self.weight = conjugate_dominant_weight(weight)

        self.weyl_group = weight.root_system.weyl_group()
        self._state = None
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self):
        if self._exhausted:
            raise StopIteration

        if self._state is None:
            self._state = WeylIteratorNoCopyState(self.weight.copy(),
                                                  self.weyl_group.one())
            return self._state

        if _iterate_nocopy(self._state) is None:
            self._exhausted = True
            raise StopIteration

        return self._state

def _iterate_nocopy(state):
    wt, path = state.weight, state.element._word

    ai = path[-1] if path else 0
    # compute next descendant index
    di = 0
    while True:
        di = next_descendant_index(ai, di, wt)
        if di != 0:
            break
        if not path:
            return None

        # no descendants left below this point: step back up the tree
        wt._reflect(ai)
        di = path.pop()
        ai = path[-1] if path else 0

    path.append(di)
    wt._reflect(di)
    return state

def next_descendant_index(ai, di, wt):
    """Find the next child of a weight in the tree of the orbit.

    Parameters
    ----------
    ai : int
        The last reflection applied to reach `wt`, or 0 if `wt` is the
        root of the tree (the dominant weight).
    di : int
        The previous child index tried, or 0 to find the first child.
    wt : WeightLatticeElem
        The current weight.

    Returns
    -------
    int
        Index j > di of the simple reflection leading to the next
        child of `wt`, or 0 if there is none.

    """
    rank = wt.rank

    if ai == 0:
        for j in range(di + 1, rank + 1):
            if wt.vec[j - 1] != 0:
                return j
        return 0

    for j in range(di + 1, ai):
        if wt.vec[j - 1] != 0:
            return j

    cartan_matrix = wt.root_system.cartan_matrix
    for j in range(max(ai, di) + 1, rank + 1):
        if is_zero_entry(cartan_matrix, ai, j):
            continue

        reflected = wt.reflected(j)
        if (reflected.vec[ai - 1:j - 1] >= 0).all():
            return j

    return 0

class WeylOrbitIterator:
    """Iterator over the weights in a Weyl group orbit. Each weight
    produced is an independent copy.

    """
    def __init__(self, weight):
        self.nocopy = WeylIteratorNoCopy(weight)

    def __iter__(self):
        return self

    def __next__(self):
        state = next(self.nocopy)
        return state.weight.copy()

def weyl_orbit(data, vec=None):
    """Get an iterator over the Weyl group orbit of a weight.

    ```python
    weyl_orbit(weight)
    weyl_orbit(root_system, [1, 0])
    weyl_orbit(weyl_group, [1, 0])
    ```

    Parameters
    ----------
    data : WeightLatticeElem, RootSystem, or WeylGroup
        Either the weight itself, or the root system (or Weyl group)
        the weight with coordinates `vec` belongs to.
    vec : sequence of ints
        Coordinates of the weight in the basis of fundamental weights.

    Returns
    -------
    WeylOrbitIterator

    """
    if vec is None:
        return WeylOrbitIterator(data)

    R = data if isinstance(data, RootSystem) else data.root_system
    return WeylOrbitIterator(WeightLatticeElem(R, vec))
