"""Default collaborators used when a caller injects none.

The cache and downloader themselves live outside this package. What is
provided here is the lazily created, process-wide handle each default
stands for, plus the main-thread context and the configured display scale.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from ..core.config_model import ResolverDefaults
from .config_env import load_resolver_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefaultHandle:
    """Opaque handle naming a process-wide default collaborator."""

    name: str


class SingletonProvider:
    """Create a handle on first request and return the same one afterwards."""

    def __init__(self, factory: Callable[[], object], name: str = "default"):
        self._factory = factory
        self._name = name
        self._instance = None
        self._lock = threading.Lock()

    def default_instance(self):
        with self._lock:
            if self._instance is None:
                logger.debug("Creating default %s", self._name)
                self._instance = self._factory()
            return self._instance

    def reset(self) -> None:
        with self._lock:
            self._instance = None


@dataclass(frozen=True)
class MainThreadContext:
    """Handle for the main (UI) thread. It does not run callbacks itself."""

    thread: threading.Thread


class MainThreadContextProvider:
    def main_context(self) -> MainThreadContext:
        return MainThreadContext(threading.main_thread())


class StaticScaleProvider:
    def __init__(self, scale: float):
        self._scale = scale

    def native_scale(self) -> float:
        return self._scale


def build_resolver_defaults() -> ResolverDefaults:
    """Build defaults from the environment configuration."""
    cfg = load_resolver_config()
    if cfg.debug:
        logging.getLogger("imgopts").setLevel(logging.DEBUG)
    return ResolverDefaults(
        cache_provider=SingletonProvider(lambda: DefaultHandle("cache"), name="cache"),
        downloader_provider=SingletonProvider(
            lambda: DefaultHandle("downloader"), name="downloader"
        ),
        context_provider=MainThreadContextProvider(),
        scale_provider=StaticScaleProvider(cfg.screen_scale),
        default_priority=cfg.default_priority,
    )


# Module-level singleton
_defaults_instance: ResolverDefaults | None = None
_defaults_lock = threading.Lock()


def get_default_resolver_defaults() -> ResolverDefaults:
    """Get the process-wide ResolverDefaults, building it on first call."""
    global _defaults_instance

    with _defaults_lock:
        if _defaults_instance is None:
            _defaults_instance = build_resolver_defaults()
        return _defaults_instance


def set_default_resolver_defaults(defaults: ResolverDefaults) -> None:
    global _defaults_instance

    with _defaults_lock:
        _defaults_instance = defaults


def reset_default_resolver_defaults() -> None:
    """Drop the process-wide defaults (for testing).

    Next call to get_default_resolver_defaults() builds a fresh instance.
    """
    global _defaults_instance

    with _defaults_lock:
        _defaults_instance = None
