"""The outcome of a request: either a response or an error."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ResponseOrError(Generic[T]):
    """Holds either the response to a request or the error it produced."""

    __slots__ = ("response", "error", "_failed")

    def __init__(self, response: T | None = None, *, error: Any = None) -> None:
        if response is not None and error is not None:
            raise ValueError("a result holds either a response or an error, not both")
        self.response = response
        self.error = error
        self._failed = error is not None

    @classmethod
    def from_response(cls, response: T) -> ResponseOrError[T]:
        """A successful result holding ``response``."""
        return cls(response)

    @classmethod
    def from_error(cls, error: Any) -> ResponseOrError[T]:
        """A failed result holding ``error``."""
        if error is None:
            raise ValueError("an error result needs an error")
        return cls(error=error)

    def is_error(self) -> bool:
        """True if this result holds an error."""
        return self._failed

    def to_json(self) -> str:
        """JSON text of the error if there is one, of the response otherwise."""
        held = self.error if self._failed else self.response
        if held is None:
            raise ValueError("no response to serialize")
        return held.to_json()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseOrError):
            return NotImplemented
        return (self._failed, self.response, self.error) == (
            other._failed,
            other.response,
            other.error,
        )

    def __repr__(self) -> str:
        if self._failed:
            return f"ResponseOrError(error={self.error!r})"
        return f"ResponseOrError(response={self.response!r})"