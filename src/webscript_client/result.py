"""Result values for callers that prefer branching over exception handling.

Example:
    >>> result = attempt(client.fetch_changes, cursor, filters)
    >>> if result.ok:
    ...     process(result.value)
    ... elif result.kind is ErrorKind.REPOSITORY_UNAVAILABLE:
    ...     reschedule()
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from .errors import MalformedResponseError, RepositoryUnavailableError, WebScriptError

T = TypeVar('T')


class ErrorKind(Enum):
    """Tag of a failed Result."""
    REPOSITORY_UNAVAILABLE = "repository_unavailable"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a tagged client error."""
    value: Optional[T] = None
    error: Optional[WebScriptError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        if isinstance(self.error, RepositoryUnavailableError):
            return ErrorKind.REPOSITORY_UNAVAILABLE
        if isinstance(self.error, MalformedResponseError):
            return ErrorKind.MALFORMED_RESPONSE
        return None

    def unwrap(self) -> T:
        """Return the value, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Run a client call and capture its client errors in a Result.

    Only RepositoryUnavailableError and MalformedResponseError are captured;
    anything else propagates.
    """
    try:
        return Result(value=func(*args, **kwargs))
    except (RepositoryUnavailableError, MalformedResponseError) as e:
        return Result(error=e)
