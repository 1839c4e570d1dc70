"""Behavioral options bag carried by ``Options`` items."""

from enum import Flag, auto


class ImageOptions(Flag):
    """Nested behavioral options.

    The resolver treats the bag as opaque and hands it over untouched.
    """

    NONE = 0
    LOW_PRIORITY = auto()
    CACHE_MEMORY_ONLY = auto()
    FORCE_REFRESH = auto()
    BACKGROUND_DECODE = auto()
    BACKGROUND_CALLBACK = auto()
    SCREEN_SCALE = auto()  # Scale by the display's native scale
