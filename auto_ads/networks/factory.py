"""Network config factory -- maps the amp-auto-ads ``type`` to its config class."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from auto_ads.config import AutoAdsSettings
from auto_ads.networks import AdNetworkConfig, AdNetworkType
from auto_ads.networks.adsense import AdSenseNetworkConfig
from auto_ads.networks.doubleclick import DoubleclickNetworkConfig
from auto_ads.page import AutoAdsElement, PageContext

AD_NETWORK_CONFIGS: dict[AdNetworkType, type[AdNetworkConfig]] = {
    AdNetworkType.ADSENSE: AdSenseNetworkConfig,
    AdNetworkType.DOUBLECLICK: DoubleclickNetworkConfig,
}


def get_ad_network_config(
    network_type: str,
    element: AutoAdsElement | Mapping[str, str] | None,
    page: PageContext,
    settings: AutoAdsSettings | None = None,
) -> AdNetworkConfig | None:
    """Return the config for ``network_type``, or None if the type is unknown."""
    try:
        key = AdNetworkType(network_type)
    except ValueError:
        logger.warning("[ad-network] unknown network type: {!r}", network_type)
        return None

    config_cls = AD_NETWORK_CONFIGS[key]
    return config_cls(AutoAdsElement.coerce(element), page, settings)
