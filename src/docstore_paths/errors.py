"""Error raised when a caller hands the path builder unusable input.

There is a single error kind: every failure is a contract violation on the
caller's side (a missing index, an empty type list, ...), surfaced before
any request is sent.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A required argument was missing or empty.

    Attributes:
        argument: Name of the rejected argument (e.g. "index"), if known.
    """

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument

    def __repr__(self) -> str:
        parts = [repr(str(self))]
        if self.argument is not None:
            parts.append(f"argument={self.argument!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


def require_value(value: str | None, argument: str) -> str:
    """Return *value* unchanged, or raise if it is None or empty."""
    if value is None:
        raise InvalidArgument(f"{argument} must not be None", argument=argument)
    if not value:
        raise InvalidArgument(f"{argument} must not be empty", argument=argument)
    return value
