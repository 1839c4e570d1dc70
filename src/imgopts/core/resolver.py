"""Resolve an options list into one effective value per axis.

Payload axes use first-match-wins: the earliest item of the kind decides,
and a missing item or a None payload both fall back to the axis default.
Flag axes only ask whether an item of the kind exists anywhere.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .config_model import ResolverDefaults
from .items import OptionItem, OptionKind, OptionsInfo
from .options import ImageOptions
from .transition import ImageTransition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedOptions:
    """Every axis resolved at once, ready to hand to the collaborators."""

    options: ImageOptions
    target_cache: Any
    downloader: Any
    transition: ImageTransition
    download_priority: float
    force_refresh: bool
    cache_memory_only: bool
    background_decode: bool
    callback_dispatch_queue: Any
    scale_factor: float


class OptionsResolver:
    """Typed accessors over an immutable ``OptionsInfo``."""

    def __init__(self, items: Iterable[OptionItem], defaults: ResolverDefaults):
        self._items = items if isinstance(items, OptionsInfo) else OptionsInfo(items)
        self._defaults = defaults

    @property
    def items(self) -> OptionsInfo:
        return self._items

    @property
    def defaults(self) -> ResolverDefaults:
        return self._defaults

    def _resolve(self, kind: OptionKind, default: Callable[[], Any]):
        item = self._items.first_match(OptionItem.probe(kind))
        if item is not None and item.payload is not None:
            return item.payload
        reason = "has no payload" if item is not None else "not set"
        logger.debug("%s %s, using default", kind.name, reason)
        return default()

    @property
    def options(self) -> ImageOptions:
        return self._resolve(OptionKind.OPTIONS, lambda: ImageOptions.NONE)

    @property
    def target_cache(self):
        return self._resolve(
            OptionKind.TARGET_CACHE, self._defaults.cache_provider.default_instance
        )

    @property
    def downloader(self):
        return self._resolve(
            OptionKind.DOWNLOADER, self._defaults.downloader_provider.default_instance
        )

    @property
    def transition(self) -> ImageTransition:
        return self._resolve(OptionKind.TRANSITION, lambda: ImageTransition.NONE)

    @property
    def download_priority(self) -> float:
        # An explicit 0.0 is a real value; zero is only the probe payload
        return self._resolve(
            OptionKind.DOWNLOAD_PRIORITY, lambda: self._defaults.default_priority
        )

    @property
    def force_refresh(self) -> bool:
        return self._items.contains_kind(OptionKind.FORCE_REFRESH)

    @property
    def cache_memory_only(self) -> bool:
        return self._items.contains_kind(OptionKind.CACHE_MEMORY_ONLY)

    @property
    def background_decode(self) -> bool:
        return self._items.contains_kind(OptionKind.BACKGROUND_DECODE)

    @property
    def callback_dispatch_queue(self):
        return self._resolve(
            OptionKind.CALLBACK_DISPATCH_QUEUE, self._defaults.context_provider.main_context
        )

    @property
    def scale_factor(self) -> float:
        return self._resolve(OptionKind.SCALE_FACTOR, self._defaults.scale_provider.native_scale)

    def resolve_all(self) -> ResolvedOptions:
        return ResolvedOptions(
            options=self.options,
            target_cache=self.target_cache,
            downloader=self.downloader,
            transition=self.transition,
            download_priority=self.download_priority,
            force_refresh=self.force_refresh,
            cache_memory_only=self.cache_memory_only,
            background_decode=self.background_decode,
            callback_dispatch_queue=self.callback_dispatch_queue,
            scale_factor=self.scale_factor,
        )
