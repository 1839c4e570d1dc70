"""Env configuration adapter producing a structured ResolverConfig."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import ResolverConfig


def load_resolver_config() -> ResolverConfig:
    return ResolverConfig(
        default_priority=env_config.DEFAULT_PRIORITY,
        screen_scale=env_config.SCREEN_SCALE,
        debug=env_config.DEBUG,
    )
