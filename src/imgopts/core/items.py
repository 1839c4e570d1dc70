"""Tagged option items and the ordered list that carries them.

An ``OptionItem`` pairs an ``OptionKind`` discriminant with at most one
payload. Lookups compare kinds only, never payloads: two ``TARGET_CACHE``
items holding different caches are the same kind.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, overload

from .options import ImageOptions
from .transition import ImageTransition


class OptionKind(Enum):
    """Discriminant for every recognized configuration axis."""

    OPTIONS = auto()
    TARGET_CACHE = auto()
    DOWNLOADER = auto()
    TRANSITION = auto()
    DOWNLOAD_PRIORITY = auto()
    FORCE_REFRESH = auto()
    CACHE_MEMORY_ONLY = auto()
    BACKGROUND_DECODE = auto()
    CALLBACK_DISPATCH_QUEUE = auto()
    SCALE_FACTOR = auto()


FLAG_KINDS = frozenset(
    {
        OptionKind.FORCE_REFRESH,
        OptionKind.CACHE_MEMORY_ONLY,
        OptionKind.BACKGROUND_DECODE,
    }
)

# Empty payload used when probing for each kind
_PROBE_PAYLOADS: dict[OptionKind, Any] = {
    OptionKind.OPTIONS: ImageOptions.NONE,
    OptionKind.TARGET_CACHE: None,
    OptionKind.DOWNLOADER: None,
    OptionKind.TRANSITION: ImageTransition.NONE,
    OptionKind.DOWNLOAD_PRIORITY: 0.0,
    OptionKind.FORCE_REFRESH: None,
    OptionKind.CACHE_MEMORY_ONLY: None,
    OptionKind.BACKGROUND_DECODE: None,
    OptionKind.CALLBACK_DISPATCH_QUEUE: None,
    OptionKind.SCALE_FACTOR: 0.0,
}


@dataclass(frozen=True)
class OptionItem:
    """One tagged entry of an options list.

    Attributes:
        kind: Which axis the item configures
        payload: Associated value; always None for flag kinds
    """

    kind: OptionKind
    # Handles may be unhashable; equal items always share a kind
    payload: Any = field(default=None, hash=False)

    def __post_init__(self):
        if not isinstance(self.kind, OptionKind):
            raise TypeError(f"kind must be an OptionKind, got {self.kind!r}")
        if self.kind in FLAG_KINDS and self.payload is not None:
            raise ValueError(f"{self.kind.name} is a flag and takes no payload")

    @property
    def is_flag(self) -> bool:
        return self.kind in FLAG_KINDS

    @classmethod
    def probe(cls, kind: OptionKind) -> OptionItem:
        """Build an empty-payload item of ``kind`` for lookups."""
        return cls(kind, _PROBE_PAYLOADS[kind])

    @classmethod
    def options(cls, options: ImageOptions) -> OptionItem:
        return cls(OptionKind.OPTIONS, options)

    @classmethod
    def target_cache(cls, cache=None) -> OptionItem:
        return cls(OptionKind.TARGET_CACHE, cache)

    @classmethod
    def downloader(cls, downloader=None) -> OptionItem:
        return cls(OptionKind.DOWNLOADER, downloader)

    @classmethod
    def transition(cls, transition: ImageTransition) -> OptionItem:
        return cls(OptionKind.TRANSITION, transition)

    @classmethod
    def download_priority(cls, priority: float) -> OptionItem:
        return cls(OptionKind.DOWNLOAD_PRIORITY, priority)

    @classmethod
    def force_refresh(cls) -> OptionItem:
        return cls(OptionKind.FORCE_REFRESH)

    @classmethod
    def cache_memory_only(cls) -> OptionItem:
        return cls(OptionKind.CACHE_MEMORY_ONLY)

    @classmethod
    def background_decode(cls) -> OptionItem:
        return cls(OptionKind.BACKGROUND_DECODE)

    @classmethod
    def callback_dispatch_queue(cls, context=None) -> OptionItem:
        return cls(OptionKind.CALLBACK_DISPATCH_QUEUE, context)

    @classmethod
    def scale_factor(cls, scale: float) -> OptionItem:
        return cls(OptionKind.SCALE_FACTOR, scale)


def same_kind(a: OptionItem, b: OptionItem) -> bool:
    """Return True if both items configure the same axis, ignoring payloads."""
    return a.kind is b.kind


def first_match(items: Iterable[OptionItem], probe: OptionItem) -> OptionItem | None:
    """Return the earliest item of the probe's kind, or None."""
    for item in items:
        if same_kind(item, probe):
            return item
    return None


def contains_kind(items: Iterable[OptionItem], kind: OptionKind) -> bool:
    """Return True if any item anywhere in ``items`` is of ``kind``."""
    probe = OptionItem.probe(kind)
    return any(same_kind(item, probe) for item in items)


class OptionsInfo(Sequence[OptionItem]):
    """Immutable, ordered list of option items.

    Duplicates are allowed; lookups always see the earliest one.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[OptionItem] = ()):
        items = tuple(items)
        for item in items:
            if not isinstance(item, OptionItem):
                raise TypeError(f"OptionsInfo only holds OptionItem, got {type(item).__name__}")
        self._items = items

    @overload
    def __getitem__(self, index: int) -> OptionItem: ...

    @overload
    def __getitem__(self, index: slice) -> OptionsInfo: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return OptionsInfo(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OptionItem]:
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, OptionsInfo):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"OptionsInfo({list(self._items)!r})"

    def first_match(self, probe: OptionItem) -> OptionItem | None:
        return first_match(self._items, probe)

    def contains_kind(self, kind: OptionKind) -> bool:
        return contains_kind(self._items, kind)
