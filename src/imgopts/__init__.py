"""imgopts - resolve tagged image-loading options to effective values"""

__version__ = "1.0.0"
__description__ = "Resolve tagged image-loading options to effective values"

from .api import resolve
from .core import (
    DEFAULT_TASK_PRIORITY,
    ImageOptions,
    ImageTransition,
    OptionItem,
    OptionKind,
    OptionsInfo,
    OptionsResolver,
    ResolvedOptions,
    ResolverDefaults,
    TransitionStyle,
    contains_kind,
    first_match,
    same_kind,
)

__all__ = [
    "DEFAULT_TASK_PRIORITY",
    "ImageOptions",
    "ImageTransition",
    "OptionItem",
    "OptionKind",
    "OptionsInfo",
    "OptionsResolver",
    "ResolvedOptions",
    "ResolverDefaults",
    "TransitionStyle",
    "__version__",
    "contains_kind",
    "first_match",
    "resolve",
    "same_kind",
]
