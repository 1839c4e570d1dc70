"""Core configuration models (structured view)."""

from __future__ import annotations

from dataclasses import dataclass

from .ports import CacheProvider, DisplayScaleProvider, DownloaderProvider, ExecutionContextProvider

# Default relative priority of a download task
DEFAULT_TASK_PRIORITY = 0.5


@dataclass(frozen=True)
class ResolverConfig:
    default_priority: float
    screen_scale: float
    debug: bool


@dataclass(frozen=True)
class ResolverDefaults:
    """Collaborators the resolver falls back on when an axis is unset."""

    cache_provider: CacheProvider
    downloader_provider: DownloaderProvider
    context_provider: ExecutionContextProvider
    scale_provider: DisplayScaleProvider
    default_priority: float = DEFAULT_TASK_PRIORITY
