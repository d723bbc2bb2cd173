"""Error taxonomy shared by the domain and infrastructure layers."""


class InvalidArgument(ValueError):
    """Raised when a caller passes a malformed role spec, scores or k."""


class RuntimeFailure(RuntimeError):
    """
    Raised when the TensorFlow runtime fails to load a graph or run a session.

    The message carries the added context followed by the original error,
    separated by " | ". The original exception is chained as ``__cause__``.
    """

    def __init__(self, context: str, cause: BaseException | None = None) -> None:
        message = context if cause is None else f"{context} | {cause}"
        super().__init__(message)
        self.context = context


class NotFound(FileNotFoundError):
    """Raised when a label file does not exist."""
