r"""
weyl_tools
==========

`weyl_tools` is a small Python package for computing with Weyl groups
(and, more generally, the Coxeter groups of generalized Cartan
matrices) without ever building a multiplication table.

The package is built on top of [numpy](https://numpy.org) and
[scipy](https://scipy.org), and provides modules to:

- store Weyl group elements as reduced words in a canonical normal
  form, and multiply, invert and compare them

- compare elements in the Bruhat order

- enumerate all reduced words of an element, possibly up to
  commutation of adjacent generators

- iterate over the Weyl group orbit of a weight (and over the whole
  group) lazily, one element at a time

## Example usage

```python
from weyl_tools import weyl_group, weyl_orbit

W = weyl_group("B", 2)
s1, s2 = W.gens()

w0 = W.longest_element()
w0, W.order()
```

    (s2 * s1 * s2 * s1, 8)

```python
list(w0.reduced_expressions())
```

    [[2, 1, 2, 1], [1, 2, 1, 2]]

```python
list(weyl_orbit(W, [0, 1]))
```

    [WeightLatticeElem([0, 1]), WeightLatticeElem([1, -1]), WeightLatticeElem([-1, 1]), WeightLatticeElem([0, -1])]

Infinite groups work too, as long as you don't ask for their order:

```python
W = weyl_group([[2, -2], [-2, 2]])
(W("s1 * s2") ** 3).length()
```

    6
"""

from .base import (WeylGroupError, InvalidGeneratorError,
                   MismatchedParentError, InfiniteOrderError,
                   UnsupportedConfigurationError, RootSystemError,
                   TitsConeError)
from .root_system import RootSystem, root_system
from .weights import (WeightLatticeElem, RootSpaceElem,
                      conjugate_dominant_weight,
                      conjugate_dominant_weight_with_elem)
from .weyl_group import WeylGroup, WeylGroupElem, weyl_group
from .orbit import weyl_orbit
