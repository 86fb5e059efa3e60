from __future__ import annotations

import logging
import re

import httpx

from ..recommendations.cache import TTLCache
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

_OG_IMAGE_RE = re.compile(
    r"""property=["']og:image["'][^>]*content=["']([^"']+)["']""", re.IGNORECASE,
)
_TWITTER_IMAGE_RE = re.compile(
    r"""name=["']twitter:image["'][^>]*content=["']([^"']+)["']""", re.IGNORECASE,
)

_image_cache = TTLCache(ttl=DEFAULT_CATALOG_CONFIG.image_ttl)


def extract_image_url(html: str) -> str:
    match = _OG_IMAGE_RE.search(html) or _TWITTER_IMAGE_RE.search(html)
    return match.group(1) if match else ""


def resolve_image(product_url: str, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> str:
    """
    Return the product page's preview image URL.

    Returns ``""`` when there is no URL, no image tag, or the fetch fails.
    Failures are cached like successes so a dead page is not re-fetched
    until the entry expires.
    """
    if not product_url:
        return ""

    cached = _image_cache.get(product_url)
    if cached is not None:
        return cached

    try:
        resp = httpx.get(product_url, timeout=config.image_timeout, follow_redirects=True)
        resp.raise_for_status()
        image_url = extract_image_url(resp.text)
    except httpx.HTTPError:
        logger.warning("Image lookup failed for %s", product_url, exc_info=True)
        image_url = ""

    _image_cache.set(product_url, image_url)
    return image_url


def get_image_cache() -> TTLCache:
    return _image_cache
