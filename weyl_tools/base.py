class WeylGroupError(Exception):
    """Base class for errors raised when working with Weyl groups, their
    elements, and the root systems they come from.

    """
    pass

class InvalidGeneratorError(WeylGroupError, ValueError):
    """Thrown if a simple reflection index lies outside the range [1,
    rank] of the group it is used with.

    """
    pass

class MismatchedParentError(WeylGroupError, ValueError):
    """Thrown if two objects which must belong to the same Weyl group (or
    the same root system) do not.

    """
    pass

class InfiniteOrderError(WeylGroupError):
    """Thrown if a computation which only makes sense for a finite Weyl
    group (its order, its longest element, ...) is requested for an
    infinite one.

    """
    def __init__(self, group, message=None):
        self.group = group
        if message is None:
            message = "{} is not finite".format(group)
        WeylGroupError.__init__(self, message)

class UnsupportedConfigurationError(WeylGroupError, NotImplementedError):
    """Thrown if an operation is not implemented for the shape (type,
    ordering, reducibility) of a given Weyl group.

    """
    pass

class RootSystemError(WeylGroupError, ValueError):
    """Thrown if Cartan data does not define a root system.

    """
    pass

class TitsConeError(WeylGroupError, ValueError):
    """Thrown if a weight of an infinite Weyl group has no dominant
    conjugate, i.e. lies outside the Tits cone.

    """
    pass
