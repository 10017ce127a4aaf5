"""Work with root systems, as far as Weyl groups need them.

A `RootSystem` is determined by a generalized Cartan matrix. If it is
built from a list of finite types, it also remembers that list, which
lets its Weyl group compute its order without enumerating it.

```python
from weyl_tools.root_system import root_system

R = root_system("A", 2)
R.weyl_vector()
```

    WeightLatticeElem([1, 1])

"""

import warnings

import numpy as np

from . import cartan
from .weights import WeightLatticeElem, RootSpaceElem
from .base import InvalidGeneratorError

class RootSystem:
    def __init__(self, cartan_matrix=None, types=None):
        """Construct a root system.

        Parameters
        ----------
        cartan_matrix : ndarray of ints
            A generalized Cartan matrix, with entry (i, j) equal to
            <alpha_i^vee, alpha_j>.
        types : iterable of (str, int)
            Irreducible finite types of the components, e.g.
            `[("A", 2), ("B", 3)]`. The Cartan matrix is then the
            block-diagonal matrix of these types in Bourbaki ordering.

        """
        if cartan_matrix is None and types is None:
            raise ValueError("Must provide data to construct a root system")

        if cartan_matrix is not None and types is not None:
            warnings.warn("Redundant root system data specified; ignoring types and"
                          " constructing from Cartan matrix.")
            types = None

        self._type = None
        if types is not None:
            self._type = tuple((fam, int(rk)) for fam, rk in types)
            cartan_matrix = cartan.cartan_matrix(self._type)

        self._cartan_matrix = cartan.validate_cartan_matrix(cartan_matrix)
        self._finite = cartan.is_finite_type(self._cartan_matrix)
        self._weyl_group = None

    @property
    def cartan_matrix(self):
        return self._cartan_matrix

    @property
    def rank(self):
        return len(self._cartan_matrix)

    @property
    def type(self):
        """The list of irreducible types of this root system, or None if
        it was built from a bare Cartan matrix.

        """
        if self._type is None:
            return None
        return list(self._type)

    def is_finite(self):
        return self._finite

    def check_index(self, i):
        if not 1 <= i <= self.rank:
            raise InvalidGeneratorError(
                "Invalid simple root index {} for a root system of rank {}".format(
                    i, self.rank)
            )

    def coxeter_matrix(self):
        return cartan.cartan_to_coxeter_matrix(self._cartan_matrix)

    def weight(self, vec):
        return WeightLatticeElem(self, vec)

    def root(self, vec):
        return RootSpaceElem(self, vec)

    def fundamental_weight(self, i):
        self.check_index(i)
        vec = np.zeros(self.rank, dtype=int)
        vec[i - 1] = 1
        return WeightLatticeElem(self, vec)

    def simple_root(self, i):
        self.check_index(i)
        vec = np.zeros(self.rank, dtype=int)
        vec[i - 1] = 1
        return RootSpaceElem(self, vec)

    def weyl_vector(self):
        """Get the Weyl vector rho, the sum of the fundamental weights.

        This is a strictly dominant weight, so its stabilizer in the
        Weyl group is trivial.

        """
        return WeightLatticeElem(self, np.ones(self.rank, dtype=int))

    def weyl_group(self):
        """Get the Weyl group of this root system.

        The group is built once and cached, so that elements built
        from it can be compared by parent identity.

        """
        if self._weyl_group is None:
            from .weyl_group import WeylGroup
            self._weyl_group = WeylGroup(self)
        return self._weyl_group

    def type_string(self):
        if self._type is None:
            return None
        return " x ".join("{}{}".format(fam, rk) for fam, rk in self._type)

    def __str__(self):
        if self._type is None:
            return "root system of rank {}".format(self.rank)
        return "root system of type {}".format(self.type_string())

    def __repr__(self):
        return "<{}>".format(self)

def root_system(data, rank=None):
    """Construct a root system from a family and rank, a list of types,
    or a generalized Cartan matrix.

    ```python
    root_system("B", 3)
    root_system(("B", 3))
    root_system([("A", 1), ("G", 2)])
    root_system([[2, -2], [-2, 2]])     # affine A1, infinite Weyl group
    ```

    """
    if isinstance(data, str):
        if rank is None:
            raise ValueError("Must provide a rank with a single family")
        return RootSystem(types=[(data, rank)])

    if rank is not None:
        raise ValueError("A rank can only be given together with a family letter")

    if isinstance(data, RootSystem):
        return data

    # a single (family, rank) pair
    if (isinstance(data, (tuple, list)) and len(data) == 2
            and isinstance(data[0], str)):
        return RootSystem(types=[data])

    data = list(data)
    if (len(data) > 0 and isinstance(data[0], (tuple, list))
            and isinstance(data[0][0], str)):
        return RootSystem(types=data)

    return RootSystem(cartan_matrix=data)
