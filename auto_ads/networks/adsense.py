"""AdSense network config."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from auto_ads.networks import AdNetworkConfig, AdNetworkType, OptInStatus


class AdSenseNetworkConfig(AdNetworkConfig):
    network_type = AdNetworkType.ADSENSE
    client_attribute = "data-ad-client"

    def is_responsive_enabled(self) -> bool:
        return True

    def get_attributes(self) -> dict[str, str | None]:
        """Ad tag attributes. ``data-ad-client`` is always present, and is None
        when the element does not set it; ``data-ad-host`` only when set.
        """
        attributes = {
            "type": self.network_type.value,
            "data-ad-client": self.element.get_attribute("data-ad-client"),
        }
        return self._copy_attributes(attributes, {"data-ad-host": "data-ad-host"})

    def get_sticky_ad_attributes(self, config_obj: Mapping | None = None) -> dict[str, str] | None:
        """Anchor ad attributes from the fetched config's ``optInStatus``.

        The plain anchor-ads opt-in wins over the no-fill one when both are set.
        """
        if not config_obj:
            return None
        opt_in_status = config_obj.get("optInStatus")
        if not isinstance(opt_in_status, (list, tuple)):
            logger.debug("[ad-network] adsense optInStatus missing or not a list: {!r}", opt_in_status)
            return None

        if OptInStatus.OPT_IN_STATUS_ANCHOR_ADS in opt_in_status:
            return {"no-fill": "false"}
        if OptInStatus.OPT_IN_STATUS_ANCHOR_ADS_NO_FILL in opt_in_status:
            return {"no-fill": "true"}
        return None
