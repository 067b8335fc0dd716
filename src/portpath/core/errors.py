"""Exception types for path-string operations."""


class PortPathError(Exception):
    """Base exception for portpath errors."""

    pass


class InvalidArgumentError(PortPathError, ValueError):
    """A required argument was absent."""

    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(f"Argument '{param_name}' must not be None")


class InvalidPathFormatError(PortPathError, ValueError):
    """Error raised when a path contains illegal characters.

    Attributes:
        path: The rejected path.
        illegal_chars: Sorted, de-duplicated illegal characters found in path.
    """

    def __init__(self, path: str, illegal_chars: list[str]):
        self.path = path
        self.illegal_chars = illegal_chars
        shown = ", ".join(repr(c) for c in illegal_chars)
        super().__init__(f"Illegal characters in path {path!r}: {shown}")


class UnsupportedOperationError(PortPathError, NotImplementedError):
    """Operation has no implementation until a resolver collaborator exists.

    Not a transient condition; retrying never succeeds.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"'{operation}' is not supported")


class PathInvariantError(PortPathError, RuntimeError):
    """An internal invariant on root length or normalization was violated."""

    pass


class ConfigError(PortPathError):
    """Invalid configuration value."""

    pass
