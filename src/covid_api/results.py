"""Tagged success/failure results for upstream calls.

Every call that crosses the network returns one of the two variants below
instead of raising. Callers check the variant with ``isinstance`` before
touching ``value``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful upstream result."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Upstream failure carrying a human-readable cause."""

    error: str


Result = Union[Success[T], Failure]


def failure_from_exception(exc: Exception) -> Failure:
    """Convert an exception raised at a client boundary into a failure value."""
    message = str(exc)
    return Failure(error=message or type(exc).__name__)
