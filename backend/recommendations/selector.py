from __future__ import annotations

from typing import Iterable, NamedTuple

from .extractor import DEFAULT_EXTRACTOR, AttributeExtractor
from .models import (
    AttributeBundle,
    CatalogRow,
    Preferences,
    RecommendationOut,
    ScoredCandidate,
)
from .profiles import UseCaseProfile
from .reasons import to_recommendation
from .scoring import score


class Candidate(NamedTuple):
    row: CatalogRow
    attributes: AttributeBundle


def is_eligible(row: CatalogRow, buyer_ceiling: int) -> bool:
    return row.quantity > 0 and 0 < row.price <= buyer_ceiling


def prepare_candidates(
    rows: Iterable[CatalogRow],
    buyer_ceiling: int,
    extractor: AttributeExtractor = DEFAULT_EXTRACTOR,
) -> list[Candidate]:
    """Keep in-stock rows within budget and extract their attributes once."""
    return [
        Candidate(row, extractor.extract_attributes(f"{row.name}\n{row.description}"))
        for row in rows
        if is_eligible(row, buyer_ceiling)
    ]


def passes_hard_filter(candidate: Candidate, profile: UseCaseProfile) -> bool:
    if profile.requires.camera and not candidate.attributes.features.has_camera:
        return False
    if profile.requires.gpu and not candidate.attributes.has_gpu:
        return False
    return True


def best_candidate(
    candidates: Iterable[Candidate],
    tier_center: int,
    profile: UseCaseProfile,
    preferences: Preferences,
    headroom_center: int,
) -> ScoredCandidate | None:
    """Highest score wins; on ties the first one scanned is kept."""
    best: ScoredCandidate | None = None
    for candidate in candidates:
        if not passes_hard_filter(candidate, profile):
            continue
        features = candidate.attributes.features
        value = score(
            candidate.row,
            candidate.attributes,
            features,
            tier_center,
            profile,
            preferences,
            headroom_center,
        )
        if best is None or value > best.score:
            best = ScoredCandidate(
                row=candidate.row,
                attributes=candidate.attributes,
                features=features,
                score=value,
            )
    return best


def pick_one(
    candidates: list[Candidate],
    tier_center: int,
    tier_label: str,
    profile: UseCaseProfile,
    preferences: Preferences,
    headroom_center: int,
) -> RecommendationOut | None:
    best = best_candidate(candidates, tier_center, profile, preferences, headroom_center)
    if best is None:
        return None
    return to_recommendation(best, tier_label, profile, preferences)


def recommendation_key(rec: RecommendationOut) -> str:
    return rec.sku or rec.url or rec.name


def dedupe_recommendations(
    picks: Iterable[RecommendationOut | None],
) -> list[RecommendationOut]:
    """Drop empty tiers and any product already picked by an earlier tier."""
    seen: set[str] = set()
    out: list[RecommendationOut] = []
    for rec in picks:
        if rec is None:
            continue
        key = recommendation_key(rec)
        if key in seen:
            continue
        seen.add(key)
        out.append(rec)
    return out
