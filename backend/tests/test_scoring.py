from __future__ import annotations

import pytest

from backend.recommendations.models import (
    AttributeBundle,
    CatalogRow,
    DeviceFeatures,
    Preferences,
)
from backend.recommendations.profiles import get_profile
from backend.recommendations.scoring import price_proximity, score


def _row(price: int) -> CatalogRow:
    return CatalogRow(
        sku="SKU", system_code="1", name="PC", description="PC",
        price=price, quantity=1, url="",
    )


def _score(
    price=20000,
    attrs=None,
    features=None,
    center=20000,
    use_case="office",
    prefs=None,
    headroom=36000,
):
    attrs = attrs or AttributeBundle(memory_gb=8, storage_gb=256)
    features = features or DeviceFeatures()
    return score(
        _row(price), attrs, features, center, get_profile(use_case),
        prefs or Preferences(), headroom,
    )


# ── Price proximity ──────────────────────────────────────────────────────


class TestPriceProximity:
    def test_peak_at_center(self):
        assert price_proximity(20000, 20000) == pytest.approx(12.0)

    def test_symmetric_in_log_space(self):
        assert price_proximity(10000, 15000) == pytest.approx(price_proximity(22500, 15000))

    def test_zero_far_above_center(self):
        assert price_proximity(40000, 20000) == 0.0

    def test_implausibly_cheap_extra_penalty(self):
        assert price_proximity(10000, 20000) == pytest.approx(-2.0)

    def test_degenerate_inputs(self):
        assert price_proximity(0, 20000) == 0.0
        assert price_proximity(20000, 0) == 0.0


# ── Spec rules ───────────────────────────────────────────────────────────


def test_meets_minimum_spec():
    assert _score() == pytest.approx(12 + 4 + 3)


def test_avoidance_penalties():
    attrs = AttributeBundle(memory_gb=4, hdd_only=True)
    assert _score(attrs=attrs) == pytest.approx(12 - 8 - 8)


def test_unknown_memory_counts_as_below_floor():
    attrs = AttributeBundle(storage_gb=256)
    assert _score(attrs=attrs) == pytest.approx(12 - 8 + 3)


def test_headroom_tier_rewards_future_proofing():
    attrs = AttributeBundle(memory_gb=16, storage_gb=512)
    assert _score(price=36000, center=36000, attrs=attrs) == pytest.approx(12 + 4 + 3 + 3 + 2)
    assert _score(price=27000, center=27000, attrs=attrs) == pytest.approx(12 + 4 + 3)


def test_gpu_requirement():
    with_gpu = AttributeBundle(memory_gb=16, storage_gb=512, has_gpu=True)
    without_gpu = AttributeBundle(memory_gb=16, storage_gb=512)
    kwargs = dict(price=100000, center=100000, use_case="game", headroom=180000)
    assert _score(attrs=with_gpu, **kwargs) == pytest.approx(12 + 4 + 3 + 10)
    assert _score(attrs=without_gpu, **kwargs) == pytest.approx(12 + 4 + 3 - 20)


def test_camera_requirement():
    kwargs = dict(price=30000, center=30000, use_case="zoom", headroom=54000)
    assert _score(features=DeviceFeatures(has_camera=True), **kwargs) == pytest.approx(12 + 4 + 3 + 6)
    assert _score(features=DeviceFeatures(has_camera=False), **kwargs) == pytest.approx(12 + 4 + 3 - 10)


# ── Buyer preferences ────────────────────────────────────────────────────


class TestPreferences:
    base = 12 + 4 + 3

    def test_device_match(self):
        prefs = Preferences(device="laptop")
        assert _score(features=DeviceFeatures(device="laptop"), prefs=prefs) == pytest.approx(self.base + 4)
        assert _score(features=DeviceFeatures(device="desktop"), prefs=prefs) == pytest.approx(self.base - 3)
        assert _score(features=DeviceFeatures(device="any"), prefs=prefs) == pytest.approx(self.base)

    def test_device_any_preference_is_neutral(self):
        features = DeviceFeatures(device="desktop")
        assert _score(features=features, prefs=Preferences(device="any")) == pytest.approx(self.base)

    def test_keypad_preference(self):
        prefs = Preferences(needs_keypad=True)
        assert _score(features=DeviceFeatures(has_keypad=True), prefs=prefs) == pytest.approx(self.base + 2)
        assert _score(features=DeviceFeatures(has_keypad=False), prefs=prefs) == pytest.approx(self.base - 2)

    def test_camera_preference(self):
        prefs = Preferences(needs_camera=True)
        assert _score(features=DeviceFeatures(has_camera=True), prefs=prefs) == pytest.approx(self.base + 2)
        assert _score(features=DeviceFeatures(has_camera=False), prefs=prefs) == pytest.approx(self.base - 2)

    def test_screen_preference(self):
        prefs = Preferences(screen="15+")
        assert _score(features=DeviceFeatures(screen_inches=15.6), prefs=prefs) == pytest.approx(self.base + 2)
        assert _score(features=DeviceFeatures(screen_inches=13.3), prefs=prefs) == pytest.approx(self.base - 1)
        assert _score(features=DeviceFeatures(screen_inches=None), prefs=prefs) == pytest.approx(self.base)

    def test_compact_screen_preference(self):
        prefs = Preferences(screen="13-14")
        assert _score(features=DeviceFeatures(screen_inches=14.0), prefs=prefs) == pytest.approx(self.base + 2)
        assert _score(features=DeviceFeatures(screen_inches=15.6), prefs=prefs) == pytest.approx(self.base - 1)


@pytest.mark.parametrize(
    "generation, points",
    [(None, 0), (4, -1), (6, 1), (7, 1), (8, 2), (12, 2)],
)
def test_cpu_generation_bonus(generation, points):
    attrs = AttributeBundle(memory_gb=8, storage_gb=256, cpu_generation=generation)
    assert _score(attrs=attrs) == pytest.approx(12 + 4 + 3 + points)
