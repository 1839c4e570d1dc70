import logging
import threading

from imgopts import resolve
from imgopts.adapters import defaults as defaults_module
from imgopts.adapters.defaults import (
    DefaultHandle,
    MainThreadContext,
    SingletonProvider,
    StaticScaleProvider,
    build_resolver_defaults,
    get_default_resolver_defaults,
    set_default_resolver_defaults,
)
from imgopts.core.config_model import ResolverConfig
from imgopts.core.items import OptionItem
from imgopts.core.ports import (
    CacheProvider,
    DisplayScaleProvider,
    DownloaderProvider,
    ExecutionContextProvider,
)


def test_singleton_provider_creates_once():
    created = []

    def factory():
        created.append(object())
        return created[-1]

    provider = SingletonProvider(factory, name="cache")

    first = provider.default_instance()
    assert provider.default_instance() is first
    assert len(created) == 1

    provider.reset()
    assert provider.default_instance() is not first


def test_build_resolver_defaults_uses_config(monkeypatch):
    monkeypatch.setattr(
        defaults_module,
        "load_resolver_config",
        lambda: ResolverConfig(default_priority=0.75, screen_scale=3.0, debug=False),
    )

    built = build_resolver_defaults()

    assert built.default_priority == 0.75
    assert built.scale_provider.native_scale() == 3.0
    assert built.cache_provider.default_instance() == DefaultHandle("cache")
    assert built.downloader_provider.default_instance() == DefaultHandle("downloader")
    context = built.context_provider.main_context()
    assert isinstance(context, MainThreadContext)
    assert context.thread is threading.main_thread()


def test_default_adapters_satisfy_ports():
    built = build_resolver_defaults()

    assert isinstance(built.cache_provider, CacheProvider)
    assert isinstance(built.downloader_provider, DownloaderProvider)
    assert isinstance(built.context_provider, ExecutionContextProvider)
    assert isinstance(built.scale_provider, DisplayScaleProvider)


def test_process_defaults_are_shared():
    assert get_default_resolver_defaults() is get_default_resolver_defaults()


def test_resolve_uses_process_defaults(defaults):
    set_default_resolver_defaults(defaults)

    resolver = resolve([OptionItem.target_cache(None)])

    assert resolver.defaults is defaults
    assert resolver.target_cache == "default-cache"


def test_resolve_prefers_injected_defaults(defaults):
    set_default_resolver_defaults(build_resolver_defaults())

    resolver = resolve([], defaults)

    assert resolver.downloader == "default-downloader"


def test_static_scale_provider():
    assert StaticScaleProvider(1.5).native_scale() == 1.5


def test_debug_config_raises_package_log_level(monkeypatch):
    package_logger = logging.getLogger("imgopts")
    previous_level = package_logger.level
    monkeypatch.setattr(
        defaults_module,
        "load_resolver_config",
        lambda: ResolverConfig(default_priority=0.5, screen_scale=1.0, debug=True),
    )

    try:
        build_resolver_defaults()
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(previous_level)
