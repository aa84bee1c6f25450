"""DoubleClick network config -- legacy AdSense client, targeting JSON and slot."""

from __future__ import annotations

from auto_ads.networks import AdNetworkConfig, AdNetworkType


class DoubleclickNetworkConfig(AdNetworkConfig):
    network_type = AdNetworkType.DOUBLECLICK
    client_attribute = "data-ad-legacy-client"

    def is_responsive_enabled(self) -> bool:
        return False

    def get_attributes(self) -> dict[str, str]:
        # data-experiment is read by the host page only, never forwarded
        return self._copy_attributes(
            {"type": self.network_type.value},
            {"data-json": "json", "data-slot": "data-slot"},
        )
