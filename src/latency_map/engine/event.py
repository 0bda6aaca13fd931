# engine/event.py
from dataclasses import dataclass


@dataclass(frozen=True)
class BaseEvent:
    """Marker base for everything the kernel dispatches. Handlers subscribe by exact type."""
