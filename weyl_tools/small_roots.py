"""small_roots

Compute the small roots of a Coxeter group, and the table describing
how simple reflections permute them.

A positive root of the geometric representation is *small* (or
elementary, or minimal) if it does not dominate any other positive
root. Brink and Howlett showed there are only finitely many small
roots, and that every small root can be reached from a simple root by
applying simple reflections along "short edges", i.e. reflections s_k
with -1 < B(alpha_k, beta) < 0. For finite Coxeter groups every
positive root is small.

The reflection table is what makes it possible to keep group elements
in a normal form without a multiplication table: see
`weyl_group.WeylGroupElem.explain_left_multiply`.

The root search is adapted from the small root computation used to
build geodesic automata for Coxeter groups.

"""

import numpy as np

from .cartan import coxeter_bilinear_form

ROOT_TOLERANCE = 1e-6

def form_gen_root(form, k, root):
    """compute B(alpha_k, beta), where alpha_k is a simple root and beta
    is any root (given in the basis of simple roots)

    """
    return form[k] @ root

def apply_gen_to_root(form, k, root):
    """reflect beta along alpha_k in place"""
    root[k] -= 2 * form_gen_root(form, k, root)

def _root_key(root):
    # adding 0.0 turns -0.0 into 0.0
    return tuple(np.round(root, 6) + 0.0)

def find_small_roots(form):
    """Find the small roots of a Coxeter system, and the action of the
    simple reflections on them.

    Parameters
    ----------
    form : ndarray
        The (n x n) bilinear form of the geometric representation.

    Returns
    -------
    roots : list of ndarray
        The small roots, as vectors in the basis of simple roots. The
        first n roots are the simple roots, in order.
    neighbors : list of list
        `neighbors[r][k]` is the index of the small root s_k(roots[r]),
        or None if that root is negative or not small.

    """
    rank = len(form)
    roots = []
    neighbors = []
    index = {}

    # the simple roots are just the standard basis vectors
    for i in range(rank):
        root = np.zeros(rank)
        root[i] = 1.0
        index[_root_key(root)] = len(roots)
        roots.append(root)
        neighbors.append([None] * rank)

    # breadth-first: the image of a root of depth d under a reflection
    # decreasing depth has already been found.
    i = 0
    while i < len(roots):
        root = roots[i]
        for k in range(rank):
            f = form_gen_root(form, k, root)
            newroot = root.copy()
            apply_gen_to_root(form, k, newroot)

            key = _root_key(newroot)
            if key in index:
                neighbors[i][k] = index[key]
            elif -1 + ROOT_TOLERANCE < f < -ROOT_TOLERANCE:
                # root is new and is a small root
                index[key] = len(roots)
                roots.append(newroot)
                neighbors.append([None] * rank)
                neighbors[i][k] = index[key]
        i += 1

    return roots, neighbors

class ReflectionTable:
    """Read-only table giving the action of simple reflections on the
    small roots of a Coxeter group.

    Small roots are identified by 1-based ids, and the simple roots
    have ids 1, ..., rank. So if `r < s` for a root id r and a simple
    root index s, then r is itself a simple root.

    Calling the table as `table(i, j)` gives the id of the small root
    s_i(beta_j), or 0 if s_i(beta_j) is not a small root (which
    includes the case where it is negative, i.e. beta_j = alpha_i).

    """
    def __init__(self, coxeter_matrix):
        form = coxeter_bilinear_form(coxeter_matrix)
        roots, neighbors = find_small_roots(form)

        self._rank = len(form)
        self._roots = np.array(roots)
        self._roots.flags.writeable = False

        table = np.zeros((self._rank, len(roots)), dtype=int)
        for r, row in enumerate(neighbors):
            for k, target in enumerate(row):
                if target is not None:
                    table[k, r] = target + 1

        table.flags.writeable = False
        self._table = table

    @property
    def rank(self):
        return self._rank

    @property
    def roots(self):
        """The small roots, as rows expressed in the simple root basis of
        the geometric representation.

        """
        return self._roots

    def __len__(self):
        return len(self._roots)

    def __call__(self, i, j):
        return int(self._table[i - 1, j - 1])

    def as_array(self):
        return self._table
