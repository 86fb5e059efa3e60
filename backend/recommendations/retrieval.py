from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence

from ..catalog.images import resolve_image
from ..catalog.loader import list_products
from .budget import compute_target_budget
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .extractor import DEFAULT_EXTRACTOR, AttributeExtractor
from .models import (
    CatalogRow,
    Preferences,
    RecommendationMeta,
    RecommendationRequest,
    RecommendationResponse,
    TargetsOut,
)
from .profiles import DEVICE_TYPES, get_profile
from .scoring import SCREEN_BUCKETS
from .selector import dedupe_recommendations, pick_one, prepare_candidates

logger = logging.getLogger(__name__)

NOTE = "予算上限内・在庫ありの商品から、用途別の目安価格を基準に3段階（必要十分／快適／余裕あり）で選定しています。"

ImageResolver = Callable[[str], str]


def _preferences(request: RecommendationRequest) -> Preferences:
    device = (request.device or "any").strip().lower()
    if device not in DEVICE_TYPES:
        device = "any"
    screen = request.screen if request.screen in SCREEN_BUCKETS else None
    return Preferences(
        device=device,
        needs_camera=request.needs_camera,
        needs_keypad=request.needs_keypad,
        screen=screen,
    )


def recommend(
    request: RecommendationRequest,
    rows: Sequence[CatalogRow],
    image_resolver: ImageResolver | None = None,
    extractor: AttributeExtractor = DEFAULT_EXTRACTOR,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> RecommendationResponse:
    """
    Pick up to three products (one per budget tier) from an in-memory catalog.

    Steps:
    - Resolve the use-case profile and compute the tier price anchors.
    - Keep in-stock rows priced within the ceiling and extract attributes.
    - Run one independent best-candidate scan per tier.
    - Drop products already chosen by an earlier tier.
    """
    profile = get_profile(request.use_case)
    preferences = _preferences(request)
    budget = compute_target_budget(profile, request.budget_max, preferences.device, config)

    candidates = prepare_candidates(rows, request.budget_max, extractor)

    picks = [
        pick_one(candidates, center, label, profile, preferences, budget.headroom)
        for label, center in budget.tiers()
    ]
    products = dedupe_recommendations(picks)

    if image_resolver is not None and products:
        with ThreadPoolExecutor(max_workers=len(products)) as pool:
            image_urls = list(pool.map(image_resolver, [p.url for p in products]))
        products = [
            p.model_copy(update={"image_url": image_url})
            for p, image_url in zip(products, image_urls)
        ]

    return RecommendationResponse(
        ok=True,
        meta=RecommendationMeta(
            use_case=profile.use_case.value,
            use_case_label=profile.label,
            budget_max=request.budget_max,
            targets=TargetsOut(
                target=budget.target,
                enough=budget.enough,
                comfortable=budget.comfortable,
                headroom=budget.headroom,
            ),
            note=NOTE,
        ),
        products=products,
    )


def get_recommendations(
    request: RecommendationRequest,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> RecommendationResponse:
    """Load the catalog and run the engine; catalog failures propagate."""
    start_time = time.time()

    rows = list_products()
    response = recommend(
        request,
        rows,
        image_resolver=resolve_image if config.resolve_images else None,
        config=config,
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "use_case=%s budget=%d targets=%s results=%d rows=%d took=%.1fms",
        response.meta.use_case,
        request.budget_max,
        response.meta.targets.model_dump(),
        len(response.products),
        len(rows),
        elapsed_ms,
    )
    return response
