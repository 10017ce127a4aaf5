"""Enumerate the reduced words of a Weyl group element.

Rather than multiplying out candidate words, the enumeration keeps
track of the image of the Weyl vector rho under a prefix of the word:
for a group element u, the product s_j u is shorter than u exactly
when coordinate j of u(rho) is negative. Changing a letter means
reflecting this weight, and backtracking means reflecting it back.

```python
from weyl_tools import weyl_group

W = weyl_group("A", 2)
list(W.longest_element().reduced_expressions())
```

    [[1, 2, 1], [2, 1, 2]]

"""

from .cartan import is_zero_entry

class ReducedExpressionIterator:
    """Iterable over the reduced words of a fixed Weyl group element.

    Each call to `iter()` starts over, and every word produced is a
    new list.

    """
    def __init__(self, element, up_to_commutation=False):
        self.element = element.copy()
        self.up_to_commutation = up_to_commutation

    def __iter__(self):
        word = list(self.element.word)
        yield list(word)

        while True:
            word = self._next_expression(word)
            if word is None:
                return
            yield list(word)

    def _next_expression(self, word):
        """Get the reduced word coming after `word`, or None if `word` is
        the last one.

        """
        if len(word) == 0:
            return None

        R = self.element.parent.root_system
        rk = R.rank
        cartan_matrix = R.cartan_matrix

        next_word = list(word)
        weight = R.weyl_vector().reflect(next_word[0])

        i = 0
        s = rk + 1
        while True:
            # search for a new simple reflection to put at position i
            while s <= rk and weight.vec[s - 1] > 0:
                s += 1

            if s == rk + 1:
                i += 1
                if i == len(next_word):
                    return None
                if i == 0:
                    return next_word

                # revert the reflection at position i and try the next one
                s = next_word[i]
                weight._reflect(s)
                s += 1
                continue

            if (self.up_to_commutation and
                i < len(word) - 1 and
                s < next_word[i + 1] and
                is_zero_entry(cartan_matrix, s, next_word[i + 1])):
                s += 1
                continue

            next_word[i] = s
            weight._reflect(s)
            i -= 1
            s = 1

    def count(self):
        return sum(1 for _ in self)
