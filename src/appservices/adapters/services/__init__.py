"""Resource services (one module per REST resource).

Each service wraps a `RequestDoer` and exposes one coroutine per endpoint.
"""

from appservices.adapters.services.apps import APPS_BASE_PATH, AppsService
from appservices.adapters.services.event_triggers import (
    TRIGGERS_BASE_PATH,
    EventTriggersService,
)

__all__ = [
    "APPS_BASE_PATH",
    "TRIGGERS_BASE_PATH",
    "AppsService",
    "EventTriggersService",
]
