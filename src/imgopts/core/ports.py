"""Core ports (interfaces) for imgopts.

These protocols describe the collaborators the resolver asks for defaults.
The handles they return are opaque here: the cache, the downloader and the
execution context are owned by whoever implements the port.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheProvider(Protocol):
    """Supplies the process-wide default image cache."""

    def default_instance(self):
        """Return the default cache handle."""


@runtime_checkable
class DownloaderProvider(Protocol):
    """Supplies the process-wide default image downloader."""

    def default_instance(self):
        """Return the default downloader handle."""


@runtime_checkable
class ExecutionContextProvider(Protocol):
    """Supplies the context completion callbacks run on by default."""

    def main_context(self):
        """Return the main (UI) execution context handle."""


@runtime_checkable
class DisplayScaleProvider(Protocol):
    """Reports the scale factor of the current display."""

    def native_scale(self) -> float:
        """Return the display's native scale factor."""
