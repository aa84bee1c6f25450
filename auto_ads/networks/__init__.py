"""Ad network configs -- per-network rules for amp-auto-ads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from urllib.parse import urlparse

from loguru import logger

from auto_ads.config import AutoAdsSettings, auto_ads_settings
from auto_ads.page import AutoAdsElement, PageContext
from auto_ads.url_builder import build_url


class AdNetworkType(StrEnum):
    ADSENSE = "adsense"
    DOUBLECLICK = "doubleclick"


class OptInStatus(IntEnum):
    """Codes found in the fetched config's ``optInStatus`` list."""

    OPT_IN_STATUS_ANCHOR_ADS = 2
    OPT_IN_STATUS_ANCHOR_ADS_NO_FILL = 4


@dataclass(frozen=True)
class SubsequentSpacing:
    ad_count: int
    spacing: int

    def to_dict(self) -> dict:
        return {"adCount": self.ad_count, "spacing": self.spacing}


@dataclass(frozen=True)
class AdConstraints:
    initial_min_spacing: int
    subsequent_min_spacing: tuple[SubsequentSpacing, ...]
    max_ad_count: int

    def to_dict(self) -> dict:
        return {
            "initialMinSpacing": self.initial_min_spacing,
            "subsequentMinSpacing": [s.to_dict() for s in self.subsequent_min_spacing],
            "maxAdCount": self.max_ad_count,
        }


def viewport_ad_constraints(viewport_height: int) -> AdConstraints:
    """Spacing scales with the viewport: 1x, then 2x after 3 ads, 3x after 6."""
    return AdConstraints(
        initial_min_spacing=viewport_height,
        subsequent_min_spacing=(
            SubsequentSpacing(ad_count=3, spacing=viewport_height * 2),
            SubsequentSpacing(ad_count=6, spacing=viewport_height * 3),
        ),
        max_ad_count=8,
    )


class AdNetworkConfig:
    """Base class for per-network configs.

    Bound to the host element and page at construction; the viewport is
    queried again on every call that needs it.
    """

    network_type: AdNetworkType
    # element attribute carrying the client id for the config URL
    client_attribute: str = ""

    def __init__(
        self,
        element: AutoAdsElement,
        page: PageContext,
        settings: AutoAdsSettings | None = None,
    ):
        self.element = element
        self.page = page
        self.settings = settings or auto_ads_settings

    def is_enabled(self, page_window: object | None = None) -> bool:
        return True

    def is_responsive_enabled(self) -> bool:
        raise NotImplementedError

    def get_config_url(self) -> str:
        canonical_url = self.page.canonical_url
        try:
            hostname = urlparse(canonical_url).hostname
        except ValueError as e:
            logger.debug("[ad-network] no plah, unparseable canonical URL {!r}: {}", canonical_url, e)
            hostname = None

        return build_url(
            self.settings.config_endpoint,
            {
                "client": self.element.get_attribute(self.client_attribute),
                "plah": hostname,
                "ama_t": self.settings.ama_type,
                # last, so truncation only ever eats into the page URL
                "url": canonical_url,
            },
            self.settings.max_url_length,
            required=("ama_t",),
        )

    def get_attributes(self) -> dict[str, str]:
        raise NotImplementedError

    def get_default_ad_constraints(self) -> AdConstraints:
        return viewport_ad_constraints(self.page.viewport.get_size().height)

    def get_sizing(self) -> dict[str, str]:
        return {}

    def get_sticky_ad_attributes(self, config_obj: Mapping | None = None) -> dict[str, str] | None:
        return None

    def _copy_attributes(self, attributes: dict[str, str], names: Mapping[str, str]) -> dict[str, str]:
        """Copy element attributes into ``attributes`` under new names, skipping unset ones."""
        for source, target in names.items():
            value = self.element.get_attribute(source)
            if value:
                attributes[target] = value
        return attributes

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element!r}, canonical_url={self.page.canonical_url!r})"
