"""Conversion errors."""

__all__ = ["TripleSourceError"]


class TripleSourceError(RuntimeError):
    """Raised when the triple source cannot produce its next triple.

    The original exception is chained as ``__cause__``. The conversion
    is aborted and no partial document is returned.
    """

    def __init__(self, position: int, cause: BaseException):
        super().__init__(
            f"Triple source failed after {position} triples: "
            f"{type(cause).__name__}: {cause}"
        )
        self.position = position
