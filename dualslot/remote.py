"""
Remote data: the lifecycle of a single asynchronous request.

A ``RemoteData`` value is always exactly one of four variants:

- ``NotAsked``: no request has been made yet
- ``Loading``: a request is in flight
- ``Failure(error)``: the request finished with an error
- ``Success(value)``: the request finished with a value

Every variant implements ``fold``; the remaining helpers are built on top of it
so no inspection site can forget a variant.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

E = TypeVar('E')
T = TypeVar('T')
F = TypeVar('F')
U = TypeVar('U')
R = TypeVar('R')


class RemoteData(ABC, Generic[E, T]):
    """Base class of the four remote data variants."""

    @abstractmethod
    def fold(
        self,
        *,
        not_asked: Callable[[], R],
        loading: Callable[[], R],
        failure: Callable[[E], R],
        success: Callable[[T], R],
    ) -> R:
        """Dispatch on the variant, calling exactly one handler."""
        ...

    @property
    def tag(self) -> str:
        return self.fold(
            not_asked=lambda: 'not_asked',
            loading=lambda: 'loading',
            failure=lambda _error: 'failure',
            success=lambda _value: 'success',
        )

    def is_not_asked(self) -> bool:
        return self.tag == 'not_asked'

    def is_loading(self) -> bool:
        return self.tag == 'loading'

    def is_failure(self) -> bool:
        return self.tag == 'failure'

    def is_success(self) -> bool:
        return self.tag == 'success'

    def with_default(self, default: T) -> T:
        """Return the success payload, or ``default`` for any other variant."""
        return self.fold(
            not_asked=lambda: default,
            loading=lambda: default,
            failure=lambda _error: default,
            success=lambda value: value,
        )

    def map(self, func: Callable[[T], U]) -> RemoteData[E, U]:
        """Transform the success payload; other variants pass through."""
        return self.fold(
            not_asked=lambda: self,
            loading=lambda: self,
            failure=lambda _error: self,
            success=lambda value: Success(func(value)),
        )

    def map_error(self, func: Callable[[E], F]) -> RemoteData[F, T]:
        """Transform the failure error; other variants pass through."""
        return self.fold(
            not_asked=lambda: self,
            loading=lambda: self,
            failure=lambda error: Failure(func(error)),
            success=lambda _value: self,
        )

    def to_dict(self) -> dict[str, Any]:
        """Describe the variant as a JSON-friendly dict."""
        return self.fold(
            not_asked=lambda: {'state': 'not_asked'},
            loading=lambda: {'state': 'loading'},
            failure=lambda error: {'state': 'failure', 'error': error},
            success=lambda value: {'state': 'success', 'value': value},
        )


@dataclass(frozen=True)
class NotAsked(RemoteData[Any, Any]):
    """No request has been made."""

    def fold(self, *, not_asked, loading, failure, success):
        return not_asked()


@dataclass(frozen=True)
class Loading(RemoteData[Any, Any]):
    """A request is in flight."""

    def fold(self, *, not_asked, loading, failure, success):
        return loading()


@dataclass(frozen=True)
class Failure(RemoteData[E, Any]):
    """The request completed with an error."""

    error: E

    def fold(self, *, not_asked, loading, failure, success):
        return failure(self.error)


@dataclass(frozen=True)
class Success(RemoteData[Any, T]):
    """The request completed with a value."""

    value: T

    def fold(self, *, not_asked, loading, failure, success):
        return success(self.value)


NOT_ASKED: NotAsked = NotAsked()
LOADING: Loading = Loading()

RemoteState = Union[NotAsked, Loading, Failure[E], Success[T]]


def ensure_remote(state: object, operation: str) -> RemoteData:
    """Reject anything that is not one of the four variants."""
    if not isinstance(state, RemoteData):
        raise TypeError(
            f'{operation} expects a RemoteData value (NotAsked, Loading, Failure, Success), '
            f'got {type(state).__name__}: {state!r}'
        )
    return state
