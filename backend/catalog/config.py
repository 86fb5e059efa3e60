from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CSV = Path(__file__).resolve().parent.parent / "data" / "catalog.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the MakeShop product export lives and how long derived data stays fresh.
    """

    csv_path: Path = Path(os.getenv("CATALOG_CSV_PATH", str(_DEFAULT_CSV)))
    shop_base: str = os.getenv("SHOP_BASE_URL", "https://www.alpaca-pc.com")
    rows_ttl: float = 60.0
    image_ttl: float = 6 * 60 * 60.0
    image_timeout: float = 5.0


DEFAULT_CATALOG_CONFIG = CatalogConfig()
