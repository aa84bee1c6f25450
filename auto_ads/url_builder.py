"""Length-bounded query URL builder.

Parameters are appended in order. Room for the ``required`` ones is held
back up front and they are always emitted whole; the first other parameter
that does not fit is cut to the room left and the other optional ones
after it are dropped. Callers put the long, least important value last.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping
from urllib.parse import quote

from loguru import logger

# encodeURIComponent leaves these unescaped on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"

# dangling escape left at the cut: "%" or "%X"
_PARTIAL_ESCAPE = re.compile(r"%\w?$")


def encode_uri_component(value: object) -> str:
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def build_url(
    base_url: str,
    query_params: Mapping[str, object | None],
    max_length: int,
    required: Collection[str] = (),
) -> str:
    """Build ``base_url?k=v&...`` no longer than ``max_length`` characters.

    Args:
        base_url: URL without query string
        query_params: ordered params; ``None`` values are skipped
        max_length: hard limit for the whole URL
        required: param names that are never cut or dropped

    Returns:
        The assembled URL

    Raises:
        ValueError: base URL plus the required params alone exceed ``max_length``
    """
    encoded = [
        (key, f"{encode_uri_component(key)}=", encode_uri_component(value))
        for key, value in query_params.items()
        if value is not None
    ]

    # "&" (or the leading "?") plus the param itself, for each required one
    pending_required = sum(
        1 + len(name_and_sep) + len(encoded_value)
        for key, name_and_sep, encoded_value in encoded
        if key in required
    )
    if len(base_url) + pending_required > max_length:
        raise ValueError(
            f"limit {max_length} leaves no room for {base_url!r} and required params {sorted(required)}"
        )

    parts: list[str] = []
    length = len(base_url) + 1  # "?"
    cut = False
    for key, name_and_sep, encoded_value in encoded:
        sep = 1 if parts else 0

        if key in required:
            pending_required -= 1 + len(name_and_sep) + len(encoded_value)
            parts.append(name_and_sep + encoded_value)
            length += sep + len(name_and_sep) + len(encoded_value)
            continue
        if cut:
            continue

        room = max_length - length - pending_required - sep - len(name_and_sep)
        if len(encoded_value) <= room:
            parts.append(name_and_sep + encoded_value)
            length += sep + len(name_and_sep) + len(encoded_value)
            continue

        cut = True
        truncated = _PARTIAL_ESCAPE.sub("", encoded_value[:max(room, 0)])
        if truncated:
            parts.append(name_and_sep + truncated)
            length += sep + len(name_and_sep) + len(truncated)
        logger.debug(
            "[url-builder] '{}' truncated {} -> {} chars (limit {})",
            key, len(encoded_value), len(truncated), max_length,
        )

    if not parts:
        return base_url
    return f"{base_url}?{'&'.join(parts)}"
