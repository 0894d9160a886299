"""
dualslot - foreground/background remote data for refresh-in-place UIs

This package provides:
- RemoteData: NotAsked / Loading / Failure / Success request lifecycle
- DualSlotResource: a shown value plus a background refresh, promoted on demand
- Structured logging and environment-driven settings
"""

from __future__ import annotations

import logging

from .remote import LOADING, NOT_ASKED, Failure, Loading, NotAsked, RemoteData, RemoteState, Success
from .resource import DualSlotResource, init

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '1.0.0'
__all__ = [
    'DualSlotResource',
    'Failure',
    'LOADING',
    'Loading',
    'NOT_ASKED',
    'NotAsked',
    'RemoteData',
    'RemoteState',
    'Success',
    'init',
]
