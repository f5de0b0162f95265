# Only caller mistakes are exceptions. A full lot or a taken spot is an
# ordinary answer and is reported through core.outcomes instead.


class NavigationError(Exception):
    """
    Base class for all lot navigation errors.
    """
    pass


class InvalidCoordinateError(NavigationError):
    """
    Raised when a caller-supplied coordinate is outside the grid.
    """
    pass
