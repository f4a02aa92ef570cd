"""
Exception hierarchy shared by the renaming tools.

Every error raised on purpose by the library derives from `RenamerError` so the
command surfaces can catch one type per file and keep a batch going.
"""


class RenamerError(Exception):
    """Base exception for renaming errors."""

    pass


class ValidationError(RenamerError):
    """Bad numeric input, conflicting flags or a missing required option."""

    pass


class NotFoundError(RenamerError):
    """Source file or directory does not exist."""

    pass


class UnsupportedTypeError(RenamerError):
    """File is not of a type the current mode handles."""

    pass


class CollisionError(RenamerError):
    """Target path already exists."""

    def __init__(self, source, target):
        super().__init__(f"Target file already exists: {target}")
        self.source = source
        self.target = target


class TransformError(RenamerError):
    """A transformation stage could not be applied."""

    pass


class StatePreconditionError(RenamerError):
    """Filesystem does not match the state an undo entry expects."""

    pass
