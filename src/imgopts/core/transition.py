"""Transition descriptors carried by ``Transition`` option items."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class TransitionStyle(Enum):
    """Animation styles a view layer may apply to a freshly downloaded image."""

    NONE = "none"
    FADE = "fade"
    FLIP_FROM_LEFT = "flip_from_left"
    FLIP_FROM_RIGHT = "flip_from_right"
    FLIP_FROM_TOP = "flip_from_top"
    FLIP_FROM_BOTTOM = "flip_from_bottom"


@dataclass(frozen=True)
class ImageTransition:
    """Animation to run when an image arrives from the network.

    Images served from memory or disk cache are never animated; the view
    layer is responsible for honouring that.

    Attributes:
        style: Which animation to run
        duration: Length of the animation in seconds
    """

    style: TransitionStyle
    duration: float = 0.0

    NONE: ClassVar[ImageTransition]

    @property
    def is_none(self) -> bool:
        return self.style is TransitionStyle.NONE

    @classmethod
    def fade(cls, duration: float) -> ImageTransition:
        return cls(TransitionStyle.FADE, duration)

    @classmethod
    def flip_from_left(cls, duration: float) -> ImageTransition:
        return cls(TransitionStyle.FLIP_FROM_LEFT, duration)

    @classmethod
    def flip_from_right(cls, duration: float) -> ImageTransition:
        return cls(TransitionStyle.FLIP_FROM_RIGHT, duration)

    @classmethod
    def flip_from_top(cls, duration: float) -> ImageTransition:
        return cls(TransitionStyle.FLIP_FROM_TOP, duration)

    @classmethod
    def flip_from_bottom(cls, duration: float) -> ImageTransition:
        return cls(TransitionStyle.FLIP_FROM_BOTTOM, duration)


# "No transition" sentinel
ImageTransition.NONE = ImageTransition(TransitionStyle.NONE)
