"""Page inputs consumed by the ad network configs.

The real page services (document info, viewport) live outside this package;
callers hand their current values in through these small value types.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class ViewportSize:
    width: int
    height: int


class Viewport:
    """Viewport service. ``get_size()`` is queried every time a value is needed."""

    def __init__(self, width: int = 0, height: int = 0):
        self._size = ViewportSize(width, height)

    def get_size(self) -> ViewportSize:
        return self._size


@dataclass(frozen=True)
class PageContext:
    canonical_url: str
    viewport: Viewport = field(default_factory=Viewport)


class AutoAdsElement:
    """Attribute reader for the host ``amp-auto-ads`` element."""

    def __init__(self, attributes: Mapping[str, str] | None = None):
        # snapshot; later changes to the source mapping are not seen
        self._attributes = MappingProxyType(dict(attributes or {}))

    @classmethod
    def coerce(cls, element: "AutoAdsElement | Mapping[str, str] | None") -> "AutoAdsElement":
        if isinstance(element, AutoAdsElement):
            return element
        return cls(element)

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    @property
    def attributes(self) -> Mapping[str, str]:
        return self._attributes

    def __repr__(self) -> str:
        return f"AutoAdsElement({dict(self._attributes)!r})"
