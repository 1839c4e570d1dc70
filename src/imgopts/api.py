"""Entry point for resolving an options list."""

from __future__ import annotations

from collections.abc import Iterable

from .adapters.defaults import get_default_resolver_defaults
from .core.config_model import ResolverDefaults
from .core.items import OptionItem
from .core.resolver import OptionsResolver


def resolve(
    items: Iterable[OptionItem], defaults: ResolverDefaults | None = None
) -> OptionsResolver:
    """Wrap ``items`` in a resolver.

    Args:
        items: Option items, earliest first.
        defaults: Collaborators to fall back on; the process-wide defaults
            are used when omitted.
    """
    if defaults is None:
        defaults = get_default_resolver_defaults()
    return OptionsResolver(items, defaults)
