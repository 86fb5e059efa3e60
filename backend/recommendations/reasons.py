from __future__ import annotations

from .models import (
    AttributeBundle,
    DeviceFeatures,
    Preferences,
    RecommendationOut,
    ScoredCandidate,
    SpecsOut,
)
from .profiles import UseCaseProfile

TIER_NAMES: dict[str, str] = {
    "enough": "必要十分",
    "comfortable": "快適",
    "headroom": "余裕あり",
}

_TIER_PHRASES: dict[str, str] = {
    "enough": "予算を抑えつつ、用途に必要な性能を確保しています。",
    "comfortable": "価格と性能のバランスが良く、日常的に快適に使えます。",
    "headroom": "性能に余裕があり、将来の用途の広がりにも対応できます。",
}


def format_storage(gb: int) -> str:
    if gb >= 1024 and gb % 1024 == 0:
        return f"{gb // 1024}TB"
    return f"{gb}GB"


def _spec_highlights(
    attributes: AttributeBundle,
    features: DeviceFeatures,
    preferences: Preferences,
) -> list[str]:
    parts: list[str] = []
    if attributes.cpu_generation is not None:
        parts.append(f"第{attributes.cpu_generation}世代CPU")
    elif attributes.cpu:
        parts.append(attributes.cpu)
    if attributes.memory_gb:
        parts.append(f"メモリ{attributes.memory_gb}GB")
    if attributes.storage_gb:
        parts.append(f"SSD{format_storage(attributes.storage_gb)}")
    if attributes.has_gpu:
        parts.append("独立GPU搭載")
    if features.has_camera:
        parts.append("Webカメラ搭載")
    if preferences.needs_keypad and features.has_keypad:
        parts.append("テンキー付き")
    if preferences.screen and features.screen_inches:
        parts.append(f"{features.screen_inches:g}インチ画面")
    return parts


def build_reason(
    tier: str,
    profile: UseCaseProfile,
    attributes: AttributeBundle,
    features: DeviceFeatures,
    preferences: Preferences,
) -> str:
    """Buyer-facing one-paragraph justification for a tier pick."""
    head = f"{profile.label}向けの「{TIER_NAMES.get(tier, tier)}」枠。"
    highlights = _spec_highlights(attributes, features, preferences)
    body = " / ".join(highlights) + "。" if highlights else ""
    return head + body + _TIER_PHRASES.get(tier, "")


def to_recommendation(
    candidate: ScoredCandidate,
    tier: str,
    profile: UseCaseProfile,
    preferences: Preferences,
) -> RecommendationOut:
    row = candidate.row
    attributes = candidate.attributes
    features = candidate.features
    return RecommendationOut(
        tier=tier,
        sku=row.sku,
        name=row.name,
        price=row.price,
        url=row.url,
        specs=SpecsOut(
            memory_gb=attributes.memory_gb,
            storage_gb=attributes.storage_gb,
            gpu=attributes.has_gpu,
            cpu=attributes.cpu,
            device=features.device,
            camera=features.has_camera,
            keypad=features.has_keypad,
            screen_inches=features.screen_inches,
        ),
        score=round(candidate.score, 4),
        reason=build_reason(tier, profile, attributes, features, preferences),
    )
