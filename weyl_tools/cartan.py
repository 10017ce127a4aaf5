"""Build and inspect (generalized) Cartan matrices, and the Coxeter
data they determine.

Throughout this package a Cartan matrix `C` is an integer matrix with
`C[i, j] = <alpha_i^vee, alpha_j>`, and the simple roots are ordered
as in Bourbaki. So for example in type B2 the second simple root is
the short one:

```python
from weyl_tools import cartan

cartan.cartan_matrix("B", 2)
```

    array([[ 2, -1],
           [-2,  2]])

"""

import numpy as np
import scipy.linalg

from .base import RootSystemError

FAMILIES = "ABCDEFG"

# product C[i, j] * C[j, i] -> order of s_i s_j. Anything else is infinite.
_COXETER_ORDERS = {0: 2, 1: 3, 2: 4, 3: 6}

def _chain(rank):
    matrix = 2 * np.identity(rank, dtype=int)
    matrix[range(rank - 1), range(1, rank)] = -1
    matrix[range(1, rank), range(rank - 1)] = -1
    return matrix

def _check_rank(family, rank):
    if family not in FAMILIES or len(family) != 1:
        raise ValueError(
            "Unknown root system family '{}'; expected one of {}".format(
                family, ", ".join(FAMILIES))
        )

    minimal = {"A": 1, "B": 2, "C": 2, "D": 4}
    fixed = {"E": (6, 7, 8), "F": (4,), "G": (2,)}

    if family in minimal and rank < minimal[family]:
        raise ValueError(
            "Type {} requires rank at least {}, got {}".format(
                family, minimal[family], rank)
        )

    if family in fixed and rank not in fixed[family]:
        raise ValueError(
            "Type {} only exists in rank {}, got {}".format(
                family, " or ".join(str(r) for r in fixed[family]), rank)
        )

def simple_cartan_matrix(family, rank):
    """Get the Cartan matrix of an irreducible root system of finite
    type.

    Parameters
    ----------
    family : str
        One of the letters A-G.
    rank : int
        Rank of the root system.

    Returns
    -------
    ndarray
        (rank x rank) integer Cartan matrix, in Bourbaki ordering.

    Raises
    ------
    ValueError
        Raised if the family is unknown or does not exist in the
        requested rank.

    """
    _check_rank(family, rank)

    if family == "A":
        return _chain(rank)

    if family == "B":
        matrix = _chain(rank)
        matrix[-1, -2] = -2
        return matrix

    if family == "C":
        matrix = _chain(rank)
        matrix[-2, -1] = -2
        return matrix

    if family == "D":
        matrix = _chain(rank)
        matrix[-2, -1] = 0
        matrix[-1, -2] = 0
        matrix[-3, -1] = -1
        matrix[-1, -3] = -1
        return matrix

    if family == "E":
        # 1 - 3 - 4 - 5 - ... with 2 attached to 4
        matrix = 2 * np.identity(rank, dtype=int)
        edges = [(0, 2), (1, 3)] + [(i, i + 1) for i in range(2, rank - 1)]
        for i, j in edges:
            matrix[i, j] = -1
            matrix[j, i] = -1
        return matrix

    if family == "F":
        matrix = _chain(4)
        matrix[2, 1] = -2
        return matrix

    matrix = _chain(2)
    matrix[0, 1] = -3
    return matrix

def cartan_matrix(family_or_types, rank=None):
    """Get the Cartan matrix of a (possibly reducible) root system of
    finite type.

    Parameters
    ----------
    family_or_types : str or iterable of (str, int)
        Either a single family letter (in which case `rank` must be
        given), or a list of `(family, rank)` pairs, one for each
        irreducible component.
    rank : int
        Rank, if a single family letter is given.

    Returns
    -------
    ndarray
        Block-diagonal integer Cartan matrix.

    """
    if isinstance(family_or_types, str):
        if rank is None:
            raise ValueError("Must provide a rank with a single family")
        return simple_cartan_matrix(family_or_types, rank)

    types = list(family_or_types)
    if len(types) == 0:
        raise ValueError("Must provide at least one irreducible type")

    blocks = [simple_cartan_matrix(fam, rk) for fam, rk in types]
    return scipy.linalg.block_diag(*blocks).astype(int)

def validate_cartan_matrix(matrix):
    """Check that a matrix is a generalized Cartan matrix, and return it
    as a read-only integer array.

    Raises
    ------
    RootSystemError
        Raised if the matrix is not square, not integral, does not
        have 2's on the diagonal, has a positive off-diagonal entry,
        or has a zero entry whose transpose is nonzero.

    """
    _matrix = np.array(matrix)
    if _matrix.ndim != 2 or _matrix.shape[0] != _matrix.shape[1]:
        raise RootSystemError("Cartan matrix must be square")

    if _matrix.shape[0] == 0:
        raise RootSystemError("Cartan matrix must be nonempty")

    if (_matrix.astype(int) != _matrix).any():
        raise RootSystemError("Cartan matrix must have integer entries")

    _matrix = _matrix.astype(int)

    if (np.diag(_matrix) != 2).any():
        raise RootSystemError("Cartan matrix must have 2's on the diagonal")

    off_diagonal = _matrix - np.diag(np.diag(_matrix))
    if (off_diagonal > 0).any():
        raise RootSystemError(
            "Off-diagonal entries of a Cartan matrix must be non-positive"
        )

    if ((_matrix == 0) != (_matrix.T == 0)).any():
        raise RootSystemError(
            "Cartan matrix entry (i, j) must vanish iff entry (j, i) does"
        )

    _matrix.flags.writeable = False
    return _matrix

def is_zero_entry(matrix, i, j):
    """Check whether the (i, j) entry of a Cartan matrix vanishes, where
    i and j are 1-based simple root indices.

    """
    return matrix[i - 1, j - 1] == 0

def cartan_to_coxeter_matrix(matrix):
    """Get the Coxeter matrix of the Weyl group of a generalized Cartan
    matrix.

    Infinite orders are recorded as 0, following the convention of a
    Coxeter diagram where a non-positive order means the product of
    two generators has infinite order.

    """
    rank = len(matrix)
    coxeter = np.ones((rank, rank), dtype=int)
    for i in range(rank):
        for j in range(i + 1, rank):
            product = int(matrix[i, j] * matrix[j, i])
            order = _COXETER_ORDERS.get(product, 0)
            coxeter[i, j] = order
            coxeter[j, i] = order
    return coxeter

def coxeter_bilinear_form(coxeter_matrix):
    """Get the symmetric bilinear form preserved by the geometric
    representation of a Coxeter group.

    Entry (i, j) is -cos(pi / m_ij), where m_ij is the order of s_i
    s_j, and -1 if that order is infinite.

    """
    adjusted_cox_matrix = np.array(coxeter_matrix, dtype=float)
    adjusted_cox_matrix[adjusted_cox_matrix <= 0] = 0.5

    return -1 * np.cos(np.pi / adjusted_cox_matrix)

def is_finite_type(matrix, tolerance=1e-8):
    """Determine whether the Weyl group of a generalized Cartan matrix is
    finite.

    A Coxeter group is finite exactly when the bilinear form of its
    geometric representation is positive definite.

    """
    form = coxeter_bilinear_form(cartan_to_coxeter_matrix(matrix))
    return bool((np.linalg.eigvalsh(form) > tolerance).all())
