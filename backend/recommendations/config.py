from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class EngineConfig:
    min_target: int = 10000
    comfortable_multiplier: float = 1.35
    headroom_multiplier: float = 1.8
    resolve_images: bool = os.getenv("RESOLVE_IMAGES", "1") not in ("0", "false", "False")


DEFAULT_ENGINE_CONFIG = EngineConfig()
