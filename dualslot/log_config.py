"""
Logging for slot transitions.

The library itself only attaches a ``NullHandler``; applications that want to
see transitions call ``configure_logging``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .remote import RemoteData
    from .resource import DualSlotResource
    from .runtime_settings import RuntimeSettings

PACKAGE_LOGGER = 'dualslot'

TRANSITION_FIELDS = ('transition', 'state', 'resource')


def transition_extra(transition: str, state: RemoteData, resource: DualSlotResource) -> dict[str, Any]:
    """Build the ``extra=`` payload describing a transition and its result."""
    return {'transition': transition, 'state': state.tag, 'resource': resource.to_dict()}


class TransitionFormatter(logging.Formatter):
    """Render transition records as text or as one JSON object per line."""

    def __init__(self, structured: bool = False):
        super().__init__('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.structured = structured

    def format(self, record: logging.LogRecord) -> str:
        fields = {key: getattr(record, key) for key in TRANSITION_FIELDS if hasattr(record, key)}
        if not self.structured:
            text = super().format(record)
            if 'transition' in fields:
                text += f" [{fields['transition']} -> {fields.get('state', '?')}]"
            return text

        log_data: dict[str, object] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            **fields,
        }
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def configure_logging(settings: RuntimeSettings | None = None) -> logging.Logger:
    """Send ``dualslot`` records to stderr using settings from the environment unless given."""
    if settings is None:
        from .runtime_settings import load_runtime_settings

        settings = load_runtime_settings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    level = getattr(logging, settings.log_level)
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(TransitionFormatter(structured=settings.log_structured))
    logger.handlers = [handler]
    return logger
