from __future__ import annotations

import io
import logging

import pandas as pd

from ..recommendations.cache import TTLCache
from ..recommendations.models import CatalogRow
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

# MakeShop export header names
COL_SYSTEM_CODE = "システム商品コード"
COL_ORIGINAL_CODE = "独自商品コード"
COL_NAME = "商品名"
COL_OPTION_GROUP = "オプショングループ"
COL_PRICE = "販売価格"
COL_QUANTITY = "数量"

CATALOG_COLUMNS = [
    COL_SYSTEM_CODE,
    COL_ORIGINAL_CODE,
    COL_NAME,
    COL_OPTION_GROUP,
    COL_PRICE,
    COL_QUANTITY,
]

_rows_cache = TTLCache(ttl=DEFAULT_CATALOG_CONFIG.rows_ttl)


class CatalogUnavailableError(RuntimeError):
    """The product catalog could not be read."""


def decode_catalog_bytes(raw: bytes) -> str:
    """Decode an export that may be UTF-8 or CP932 (Shift_JIS)."""
    text = raw.decode("utf-8", errors="replace")
    if COL_NAME in text and COL_PRICE in text:
        return text
    return raw.decode("cp932", errors="replace")


def normalize_item_id(code: str | None) -> str:
    c = str(code or "").strip()
    if c.isascii() and c.isdigit():
        return c.zfill(12)
    return c


def build_item_url(system_code: str | None, sku: str | None, shop_base: str) -> str:
    item_id = normalize_item_id(system_code or sku)
    return f"{shop_base}/view/item/{item_id}" if item_id else ""


def parse_catalog(text: str, shop_base: str = DEFAULT_CATALOG_CONFIG.shop_base) -> list[CatalogRow]:
    """Map MakeShop CSV text onto ``CatalogRow`` records."""
    if not text.strip():
        return []

    df = pd.read_csv(
        io.StringIO(text),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
    )
    df.columns = [str(c).strip() for c in df.columns]

    # Missing columns read as empty
    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            df[col] = ""

    for col in (COL_SYSTEM_CODE, COL_ORIGINAL_CODE, COL_NAME, COL_OPTION_GROUP):
        df[col] = df[col].fillna("").astype(str).str.strip()
    for col in (COL_PRICE, COL_QUANTITY):
        df[col] = pd.to_numeric(df[col].astype(str).str.strip(), errors="coerce").fillna(0).astype(int)

    rows: list[CatalogRow] = []
    for rec in df[CATALOG_COLUMNS].to_dict(orient="records"):
        system_code = rec[COL_SYSTEM_CODE]
        sku = rec[COL_ORIGINAL_CODE] or system_code
        name = rec[COL_NAME]
        rows.append(CatalogRow(
            sku=sku,
            system_code=system_code,
            name=name,
            description=f"{name}\n{rec[COL_OPTION_GROUP]}".strip(),
            price=int(rec[COL_PRICE]),
            quantity=int(rec[COL_QUANTITY]),
            url=build_item_url(system_code, sku, shop_base),
        ))
    return rows


def list_products(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[CatalogRow]:
    """Return catalog rows, re-reading the export at most once per TTL."""
    key = str(config.csv_path)
    cached = _rows_cache.get(key)
    if cached is not None:
        return cached

    try:
        raw = config.csv_path.read_bytes()
        rows = parse_catalog(decode_catalog_bytes(raw), config.shop_base)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        logger.error("Failed to load catalog from %s", config.csv_path, exc_info=True)
        raise CatalogUnavailableError(f"catalog unavailable: {exc}") from exc

    logger.info("Loaded %d catalog rows from %s", len(rows), config.csv_path)
    _rows_cache.set(key, rows)
    return rows


def get_rows_cache() -> TTLCache:
    return _rows_cache
