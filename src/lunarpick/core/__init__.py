"""Core modules for lunarpick."""

from lunarpick.core.config import Config
from lunarpick.core.events import EventBus, EventTypes
from lunarpick.core.exceptions import (
    ConfigurationError,
    InvalidDateError,
    LunarPickError,
    OutOfRangeError,
)

__all__ = [
    "Config",
    "EventBus",
    "EventTypes",
    "LunarPickError",
    "ConfigurationError",
    "OutOfRangeError",
    "InvalidDateError",
]
