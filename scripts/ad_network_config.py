"""amp-auto-ads 네트워크 설정 확인 — config URL/속성/제약 조건을 JSON으로 출력.

Usage:
    python scripts/ad_network_config.py adsense --canonical-url https://foo.bar/baz \
        --attr data-ad-client=ca-pub-1234
    python scripts/ad_network_config.py doubleclick --canonical-url https://foo.bar/baz \
        --attr data-ad-legacy-client=ca-pub-1234 --attr data-slot=1234/example.com/SLOT_1 \
        --viewport 320x500
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger

from auto_ads.networks.factory import get_ad_network_config
from auto_ads.page import AutoAdsElement, PageContext, Viewport


def _parse_attr(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"name=value 형식이 아님: {raw!r}")
    return name, value


def _parse_viewport(raw: str) -> Viewport:
    try:
        width, height = (int(v) for v in raw.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"WIDTHxHEIGHT 형식이 아님: {raw!r}")
    return Viewport(width, height)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="amp-auto-ads 네트워크 설정 확인")
    parser.add_argument("network", help="네트워크 type (adsense | doubleclick)")
    parser.add_argument("--canonical-url", required=True)
    parser.add_argument("--attr", action="append", type=_parse_attr, default=[],
                        help="요소 속성 name=value (반복 가능)")
    parser.add_argument("--viewport", type=_parse_viewport, default=Viewport(320, 500),
                        help="WIDTHxHEIGHT (기본 320x500)")
    parser.add_argument("--opt-in", type=int, action="append", default=None,
                        help="조회된 설정의 optInStatus 코드 (반복 가능)")
    return parser


def describe(args: argparse.Namespace) -> dict | None:
    element = AutoAdsElement(dict(args.attr))
    page = PageContext(canonical_url=args.canonical_url, viewport=args.viewport)
    config = get_ad_network_config(args.network, element, page)
    if config is None:
        return None

    config_obj = {"optInStatus": args.opt_in} if args.opt_in else None
    return {
        "network": config.network_type.value,
        "config_url": config.get_config_url(),
        "enabled": config.is_enabled(),
        "responsive": config.is_responsive_enabled(),
        "attributes": config.get_attributes(),
        "ad_constraints": config.get_default_ad_constraints().to_dict(),
        "sizing": config.get_sizing(),
        "sticky": config.get_sticky_ad_attributes(config_obj),
    }


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    result = describe(args)
    if result is None:
        logger.error("알 수 없는 네트워크: {}", args.network)
        return 1
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
