"""Auto-ads 전역 설정."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from auto_ads.url_builder import encode_uri_component


class AutoAdsSettings(BaseSettings):
    # 설정 조회 엔드포인트
    config_endpoint: str = "//pagead2.googlesyndication.com/getconfig/ama"
    ama_type: str = "amp"

    # config URL 전체 길이 상한 (base 포함)
    max_url_length: int = Field(default=4096, gt=0)

    model_config = {"env_prefix": "AUTO_ADS_"}

    @model_validator(mode="after")
    def _room_for_ama_marker(self):
        # 최소한 "{endpoint}?ama_t={ama_type}" 는 항상 들어가야 함
        minimum = len(self.config_endpoint) + len("?ama_t=") + len(encode_uri_component(self.ama_type))
        if self.max_url_length < minimum:
            raise ValueError(
                f"max_url_length={self.max_url_length} < {minimum} (endpoint + ama_t 마커)"
            )
        return self


auto_ads_settings = AutoAdsSettings()
