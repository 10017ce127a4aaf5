"""Translate Weyl group elements to other descriptions of the same group:
Coxeter presentations and (in type A) permutations.

The Weyl group of type A_n is the symmetric group on {1, ..., n+1},
with s_i the transposition (i, i+1). A word s_{w1} s_{w2} ... s_{wk}
is sent to the composite of functions s_{w1} o s_{w2} o ... o s_{wk},
written in one-line notation:

```python
from weyl_tools import weyl_group
from weyl_tools.isomorphisms import to_permutation

W = weyl_group("A", 2)
to_permutation(W("s1 * s2"))
```

    (2, 3, 1)

"""

import numpy as np

from .base import InfiniteOrderError, UnsupportedConfigurationError

def coxeter_relations(weyl_group):
    """Get the relators of the Coxeter presentation of a Weyl group.

    Returns
    -------
    list of lists
        One word (s_i s_j)^m_ij for each i <= j such that s_i s_j has
        finite order m_ij. For i == j this is the word s_i s_i.

    """
    coxeter_matrix = weyl_group.coxeter_matrix()
    rank = len(coxeter_matrix)

    relations = []
    for i in range(1, rank + 1):
        for j in range(i, rank + 1):
            order = coxeter_matrix[i - 1, j - 1]
            if order > 0:
                relations.append([i, j] * int(order))
    return relations

def _type_a_rank(weyl_group):
    if not weyl_group.is_finite():
        raise InfiniteOrderError(weyl_group)

    types = weyl_group.root_system.type
    if types is None:
        raise UnsupportedConfigurationError(
            "Cannot identify {} with a permutation group: its type is"
            " unknown".format(weyl_group)
        )

    if len(types) != 1:
        raise UnsupportedConfigurationError(
            "Permutation isomorphism is not implemented for reducible"
            " root systems"
        )

    family, rank = types[0]
    if family != "A":
        raise UnsupportedConfigurationError(
            "Permutation isomorphism is only implemented in type A,"
            " not type {}".format(family)
        )

    return rank

def to_permutation(x):
    """Get the permutation of {1, ..., n+1} corresponding to an element of
    the Weyl group of type A_n, in one-line notation.

    Raises
    ------
    UnsupportedConfigurationError
        Raised if the Weyl group is not of (irreducible) type A.

    """
    n = _type_a_rank(x.parent)

    perm = list(range(1, n + 2))
    for s in x.word:
        perm[s - 1], perm[s] = perm[s], perm[s - 1]
    return tuple(perm)

def from_permutation(weyl_group, permutation):
    """Get the element of the Weyl group of type A_n corresponding to a
    permutation of {1, ..., n+1} in one-line notation.

    """
    n = _type_a_rank(weyl_group)

    perm = [int(p) for p in permutation]
    if sorted(perm) != list(range(1, n + 2)):
        raise ValueError(
            "{} is not a permutation of 1, ..., {}".format(permutation, n + 1)
        )

    # bubble sort; each swap removes one inversion, so the word is reduced
    word = []
    i = 1
    while i <= n:
        if perm[i - 1] > perm[i]:
            perm[i - 1], perm[i] = perm[i], perm[i - 1]
            word.append(i)
            i = 1
        else:
            i += 1

    return weyl_group(word[::-1])

def permutation_matrix(x):
    """Return the (n+1) x (n+1) permutation matrix of an element of the
    Weyl group of type A_n.

    Entry (i, j) is 1 exactly when the permutation sends j+1 to i+1,
    so the matrix of x * y is the product of the matrices of x and y.

    """
    permutation = to_permutation(x)
    n = len(permutation)
    p_mat = np.zeros((n, n))
    for j, i in enumerate(permutation):
        p_mat[i - 1, j] = 1.

    return p_mat
