from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .catalog.images import get_image_cache
from .catalog.loader import CatalogUnavailableError, get_rows_cache
from .recommendations.models import (
    DEFAULT_BUDGET,
    RecommendationRequest,
    RecommendationResponse,
)
from .recommendations.profiles import DEVICE_TYPES, all_profiles
from .recommendations.retrieval import get_recommendations
from .recommendations.scoring import SCREEN_BUCKETS

logger = logging.getLogger(__name__)

app = FastAPI(title="PC Recommendation API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(CatalogUnavailableError)
async def catalog_unavailable(request: Request, exc: CatalogUnavailableError) -> JSONResponse:
    logger.error("Recommendation failed: %s", exc)
    return JSONResponse(status_code=500, content={"ok": False, "error": str(exc)})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "use_cases": [
            {
                "id": p.use_case.value,
                "label": p.label,
                "baseline": dict(p.baseline),
                "requires": {"camera": p.requires.camera, "gpu": p.requires.gpu},
            }
            for p in all_profiles()
        ],
        "devices": list(DEVICE_TYPES),
        "screens": list(SCREEN_BUCKETS),
        "default_budget": DEFAULT_BUDGET,
    }


@app.post("/recommend", response_model=RecommendationResponse)
def recommend(body: RecommendationRequest) -> RecommendationResponse:
    return get_recommendations(body)


# ── Operational endpoints ────────────────────────────────────────────────


@app.get("/cache/stats")
def cache_stats() -> dict:
    return {
        "catalog": get_rows_cache().stats(),
        "images": get_image_cache().stats(),
    }
