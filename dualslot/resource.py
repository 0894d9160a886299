"""
Foreground/background resource pair.

``DualSlotResource`` keeps the value currently shown to a consumer (the
foreground slot) apart from a refresh that is loading or has finished but has
not been promoted yet (the background slot). All operations return a new
instance; callers own the value and store whichever instance they want to keep.

Every operation is also available as a data-last module function, e.g.
``set_resource(Success(5), init())``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from .log_config import transition_extra
from .remote import LOADING, NOT_ASKED, RemoteData, Success, ensure_remote

E = TypeVar('E')
T = TypeVar('T')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DualSlotResource(Generic[E, T]):
    """Immutable foreground/background pair of remote data slots.

    Build instances with ``init()`` and the transition methods rather than the
    constructor; the slots are private so the slot policy lives here.
    """

    _res: RemoteData[E, T] = NOT_ASKED
    _background: RemoteData[E, T] = NOT_ASKED

    @classmethod
    def init(cls) -> DualSlotResource[E, T]:
        """Both slots NotAsked."""
        return cls()

    # Transitions

    def loading(self) -> DualSlotResource[E, T]:
        """Start a fresh foreground load, dropping any background refresh."""
        return replace(self, _res=LOADING, _background=NOT_ASKED)

    def reloading(self) -> DualSlotResource[E, T]:
        """Start a background refresh; the foreground stays as it is."""
        return replace(self, _background=LOADING)

    def set_resource(self, new_res: RemoteData[E, T]) -> DualSlotResource[E, T]:
        """Assign the foreground; supersedes any pending background refresh."""
        ensure_remote(new_res, 'set_resource')
        return replace(self, _res=new_res, _background=NOT_ASKED)

    def set_only_resource(self, new_res: RemoteData[E, T]) -> DualSlotResource[E, T]:
        ensure_remote(new_res, 'set_only_resource')
        return replace(self, _res=new_res)

    def set_background(self, new_background: RemoteData[E, T]) -> DualSlotResource[E, T]:
        """Record a background result.

        While the foreground is Loading the result completes the initial load
        and lands in the foreground instead. Use ``set_only_background`` to
        always target the background slot.
        """
        ensure_remote(new_background, 'set_background')
        if self._res.is_loading():
            result = replace(self, _res=new_background, _background=NOT_ASKED)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    'Initial load completed through background setter',
                    extra=transition_extra('set_background', new_background, result),
                )
            return result
        return replace(self, _background=new_background)

    def set_only_background(self, new_background: RemoteData[E, T]) -> DualSlotResource[E, T]:
        ensure_remote(new_background, 'set_only_background')
        return replace(self, _background=new_background)

    def map(self, func: Callable[[T], T]) -> DualSlotResource[E, T]:
        """Apply ``func`` to a successful foreground value."""
        return replace(self, _res=self._res.map(func))

    def map_background(self, func: Callable[[T], T]) -> DualSlotResource[E, T]:
        """Apply ``func`` to a successful background value."""
        return replace(self, _background=self._background.map(func))

    def replace_resource_by_background(self) -> DualSlotResource[E, T]:
        """Promote a successful background value into the foreground.

        The background slot is cleared whether or not a promotion happened.
        """
        if self._background.is_success():
            return replace(self, _res=self._background, _background=NOT_ASKED)
        result = replace(self, _background=NOT_ASKED)
        if not self._background.is_not_asked() and logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                'Discarding unpromotable background state',
                extra=transition_extra('replace_resource_by_background', self._background, result),
            )
        return result

    # Queries

    def resource(self) -> RemoteData[E, T]:
        return self._res

    def background_resource(self) -> RemoteData[E, T]:
        return self._background

    def resource_and_background_with_default(self, default: T) -> tuple[T, T]:
        """Return (foreground, background) payloads, ``default`` for non-success slots."""
        return self._res.with_default(default), self._background.with_default(default)

    def has_new_resource(self, compare: Callable[[T, T], bool]) -> bool:
        """Check whether the background holds something worth promoting.

        Args:
            compare: Called as ``compare(background_value, foreground_value)``
                when both slots are successful.

        Returns:
            False if the background is not successful, True if only the
            background is successful, otherwise the result of ``compare``.
        """
        if not isinstance(self._background, Success):
            return False
        if not isinstance(self._res, Success):
            return True
        return bool(compare(self._background.value, self._res.value))

    def is_reloading(self) -> bool:
        return self._background.is_loading()

    def to_dict(self) -> dict[str, Any]:
        return {
            'resource': self._res.to_dict(),
            'background': self._background.to_dict(),
        }


# Data-last function API


def init() -> DualSlotResource[Any, Any]:
    return DualSlotResource.init()


def loading(resource: DualSlotResource[E, T]) -> DualSlotResource[E, T]:
    return resource.loading()


def reloading(resource: DualSlotResource[E, T]) -> DualSlotResource[E, T]:
    return resource.reloading()


def set_resource(new_res: RemoteData[E, T], resource: DualSlotResource[E, T]) -> DualSlotResource[E, T]:
    return resource.set_resource(new_res)


def set_only_resource(new_res: RemoteData[E, T], resource: DualSlotResource[E, T]) -> DualSlotResource[E, T]:
    return resource.set_only_resource(new_res)


def set_background(
    new_background: RemoteData[E, T], resource: DualSlotResource[E, T]
) -> DualSlotResource[E, T]:
    return resource.set_background(new_background)


def set_only_background(
    new_background: RemoteData[E, T], resource: DualSlotResource[E, T]
) -> DualSlotResource[E, T]:
    return resource.set_only_background(new_background)


def map_resource(func: Callable[[T], T], resource: DualSlotResource[E, T]) -> DualSlotResource[E, T]:
    return resource.map(func)


def map_background(func: Callable[[T], T], resource: DualSlotResource[E, T]) -> DualSlotResource[E, T]:
    return resource.map_background(func)


def replace_resource_by_background(resource: DualSlotResource[E, T]) -> DualSlotResource[E, T]:
    return resource.replace_resource_by_background()


def resource_of(resource: DualSlotResource[E, T]) -> RemoteData[E, T]:
    return resource.resource()


def background_resource(resource: DualSlotResource[E, T]) -> RemoteData[E, T]:
    return resource.background_resource()


def resource_and_background_with_default(default: T, resource: DualSlotResource[E, T]) -> tuple[T, T]:
    return resource.resource_and_background_with_default(default)


def has_new_resource(compare: Callable[[T, T], bool], resource: DualSlotResource[E, T]) -> bool:
    return resource.has_new_resource(compare)
