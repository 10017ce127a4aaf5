import re

IDENTITY_NAME = "id"

_LETTER = re.compile(r"^s(\d+)$")

def format_word(word):
    """Write a word in the simple reflections as a string like
    "s1 * s2 * s1" (or "id" for the empty word).

    """
    if len(word) == 0:
        return IDENTITY_NAME
    return " * ".join("s{}".format(s) for s in word)

def parse_word(word):
    """Parse a string like "s1 * s2 * s1" (or "s1s2s1", or "id") into a
    list of generator indices.

    """
    stripped = word.strip()
    if stripped in ("", IDENTITY_NAME):
        return []

    letters = []
    for token in re.split(r"[\s*()]+", stripped):
        if not token:
            continue
        for piece in re.findall(r"s\d+|.+?(?=s\d|$)", token):
            match = _LETTER.match(piece)
            if match is None:
                raise ValueError(
                    "Cannot parse '{}' as a word in simple reflections".format(word)
                )
            letters.append(int(match.group(1)))
    return letters

def commutation_class(word, commutes):
    """Get all words obtained from a word by repeatedly swapping adjacent
    commuting letters.

    Parameters
    ----------
    word : sequence of int
        Word in the simple reflections.
    commutes : callable
        `commutes(s, t)` should return True if the generators s and t
        commute.

    Returns
    -------
    frozenset of tuples
        The commutation class of the word (including the word itself).

    """
    start = tuple(word)
    seen = {start}
    todo = [start]
    while todo:
        current = todo.pop()
        for i in range(len(current) - 1):
            s, t = current[i], current[i + 1]
            if s == t or not commutes(s, t):
                continue
            swapped = current[:i] + (t, s) + current[i + 2:]
            if swapped not in seen:
                seen.add(swapped)
                todo.append(swapped)
    return frozenset(seen)
