"""
Media URL extraction for feed entries
Feeds expose images in several dialects (Media RSS, nested media namespaces,
enclosures) and parsers represent attributes differently. Each strategy below
probes one dialect and returns a URL or None; the first hit wins.
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple

import structlog

logger = structlog.get_logger(__name__)

MediaStrategy = Callable[[Mapping[str, Any]], Optional[str]]

# Attribute encodings seen across parsers: xml2js "$" bags, flattened keys,
# fast-xml-parser "@_" prefixes and feedparser's "href" for enclosures.
_URL_KEYS = ("url", "@_url", "@url", "href")
_VECTOR_TYPES = ("image/svg+xml",)


def _attributes(node: Any) -> Mapping[str, Any]:
    if not isinstance(node, Mapping):
        return {}
    nested = node.get("$")
    if isinstance(nested, Mapping):
        return nested
    return node


def _attr(node: Any, name: str) -> str:
    attrs = _attributes(node)
    for key in (name, f"@_{name}", f"@{name}"):
        value = attrs.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def _url_of(node: Any) -> Optional[str]:
    attrs = _attributes(node)
    for key in _URL_KEYS:
        value = attrs.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _is_image(node: Any) -> bool:
    media_type = _attr(node, "type").lower()
    # vector images in media groups are logos and icons, not article photos
    if media_type in _VECTOR_TYPES:
        return False
    return _attr(node, "medium") == "image" or media_type.startswith("image/")


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _first(item: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = item.get(key)
        if value:
            return value
    return None


def _pick_media(value: Any) -> Optional[str]:
    """Prefer an entry typed as an image, else fall back to the first one"""
    entries = _as_list(value)
    if not entries:
        return None
    chosen = next((entry for entry in entries if _is_image(entry)), entries[0])
    return _url_of(chosen)


def from_media_content(item: Mapping[str, Any]) -> Optional[str]:
    return _pick_media(_first(item, ("media:content", "media_content")))


def from_nested_media(item: Mapping[str, Any]) -> Optional[str]:
    media = item.get("media")
    if not isinstance(media, Mapping):
        return None
    return _pick_media(media.get("content"))


def from_media_thumbnail(item: Mapping[str, Any]) -> Optional[str]:
    thumbnails = _as_list(_first(item, ("media:thumbnail", "media_thumbnail")))
    if not thumbnails:
        return None
    return _url_of(thumbnails[0])


def from_enclosure(item: Mapping[str, Any]) -> Optional[str]:
    for enclosure in _as_list(_first(item, ("enclosure", "enclosures"))):
        if _attr(enclosure, "type").startswith("image/"):
            url = _url_of(enclosure)
            if url:
                return url
    return None


DEFAULT_STRATEGIES: Tuple[Tuple[str, MediaStrategy], ...] = (
    ("media_content", from_media_content),
    ("nested_media", from_nested_media),
    ("media_thumbnail", from_media_thumbnail),
    ("enclosure", from_enclosure),
)


def extract_media_url(item: Mapping[str, Any], strategies=DEFAULT_STRATEGIES) -> str:
    """
    Find a representative image URL for a feed entry.

    Returns an empty string when no strategy matches; never raises.
    """
    for strategy_name, strategy in strategies:
        try:
            url = strategy(item)
        except Exception as e:
            logger.debug("media_strategy_failed", strategy=strategy_name, error=str(e))
            continue
        if url:
            return url
    return ""
