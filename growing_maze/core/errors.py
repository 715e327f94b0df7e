class MazeError(Exception):
    """Base class for every error raised by growing_maze."""


class ConstructionError(MazeError, ValueError):
    """Bad arguments handed to a constructor (shape, seed, selector weights)."""


class BoundsError(MazeError, IndexError):
    """A face or coordinate outside what the grid can address or write."""


class StateError(MazeError, RuntimeError):
    """An operation requested in a state that does not allow it."""
