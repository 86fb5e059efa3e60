"""
Additive desirability score for one candidate against one tier center.

The magnitudes are calibration constants tuned by inspection; only the
relative order within a single tier's pool matters.
"""
from __future__ import annotations

import math

from .models import AttributeBundle, CatalogRow, DeviceFeatures, Preferences
from .profiles import UseCaseProfile

SCREEN_COMPACT = "13-14"
SCREEN_LARGE = "15+"
SCREEN_BUCKETS = (SCREEN_COMPACT, SCREEN_LARGE)

_LARGE_SCREEN_INCHES = 15.0


def price_proximity(price: int, center: int) -> float:
    """Log-distance bump peaking at price == center, zero beyond ~0.51x / ~1.95x."""
    if price <= 0 or center <= 0:
        return 0.0
    ratio = price / center
    points = max(0.0, 12 - 18 * abs(math.log(ratio)))
    if ratio < 0.55:
        points -= 2
    return points


def _screen_points(screen_pref: str | None, inches: float | None) -> float:
    if screen_pref not in SCREEN_BUCKETS or inches is None:
        return 0.0
    is_large = inches >= _LARGE_SCREEN_INCHES
    wants_large = screen_pref == SCREEN_LARGE
    return 2.0 if is_large == wants_large else -1.0


def _cpu_generation_points(generation: int | None) -> float:
    if generation is None:
        return 0.0
    if generation >= 8:
        return 2.0
    if generation >= 6:
        return 1.0
    return -1.0


def score(
    row: CatalogRow,
    attributes: AttributeBundle,
    features: DeviceFeatures,
    tier_center: int,
    profile: UseCaseProfile,
    preferences: Preferences,
    headroom_center: int,
) -> float:
    s = price_proximity(row.price, tier_center)

    memory = attributes.memory_gb or 0
    storage = attributes.storage_gb or 0

    # Avoidance rules
    if profile.avoid.hdd_only and attributes.hdd_only:
        s -= 8
    if profile.avoid.memory_under_gb is not None and memory < profile.avoid.memory_under_gb:
        s -= 8

    # Minimum spec
    if memory >= profile.min_memory_gb:
        s += 4
    if storage >= profile.min_storage_gb:
        s += 3

    # Headroom tier favours future-proof specs
    if tier_center >= headroom_center:
        if memory >= 16:
            s += 3
        if storage >= 512:
            s += 2

    if profile.requires.gpu:
        s += 10 if attributes.has_gpu else -20
    if profile.requires.camera:
        s += 6 if features.has_camera else -10

    wanted_device = preferences.device
    if wanted_device in ("laptop", "desktop"):
        if features.device == wanted_device:
            s += 4
        elif features.device != "any":
            s -= 3

    if preferences.needs_keypad:
        s += 2 if features.has_keypad else -2
    if preferences.needs_camera:
        s += 2 if features.has_camera else -2

    s += _screen_points(preferences.screen, features.screen_inches)
    s += _cpu_generation_points(attributes.cpu_generation)

    return s
