from stylekit.events.bus import EventBus
from stylekit.events.types import StyleMounted, StyleReused, StylesheetReplaced, ThemeUnchanged

__all__ = [
    "EventBus",
    "StyleMounted",
    "StyleReused",
    "StylesheetReplaced",
    "ThemeUnchanged",
]
