"""Pure option-resolution core: items, ports and the resolver."""

from .config_model import DEFAULT_TASK_PRIORITY, ResolverConfig, ResolverDefaults
from .items import OptionItem, OptionKind, OptionsInfo, contains_kind, first_match, same_kind
from .options import ImageOptions
from .resolver import OptionsResolver, ResolvedOptions
from .transition import ImageTransition, TransitionStyle

__all__ = [
    "DEFAULT_TASK_PRIORITY",
    "ImageOptions",
    "ImageTransition",
    "OptionItem",
    "OptionKind",
    "OptionsInfo",
    "OptionsResolver",
    "ResolvedOptions",
    "ResolverConfig",
    "ResolverDefaults",
    "TransitionStyle",
    "contains_kind",
    "first_match",
    "same_kind",
]
