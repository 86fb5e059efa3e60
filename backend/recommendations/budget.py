from __future__ import annotations

import math
from dataclasses import dataclass

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .profiles import UseCaseProfile


@dataclass(frozen=True)
class BudgetTierSet:
    target: int
    enough: int
    comfortable: int
    headroom: int

    def tiers(self) -> list[tuple[str, int]]:
        """Tier labels with their center prices, in dedupe order."""
        return [
            ("enough", self.enough),
            ("comfortable", self.comfortable),
            ("headroom", self.headroom),
        ]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def compute_target_budget(
    profile: UseCaseProfile,
    buyer_ceiling: int,
    device: str | None = "any",
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> BudgetTierSet:
    """
    Compute the three price anchors for a request.

    ``target`` is the profile baseline capped by the buyer's ceiling; each
    later tier is lower-bounded by the previous one so the anchors never
    decrease. A zero ceiling falls back to the computed value for the upper
    clamps.
    """
    baseline = profile.baseline_for(device)
    target = min(buyer_ceiling, baseline)

    enough = _clamp(target, config.min_target, buyer_ceiling or target)

    comfortable_raw = _round_half_up(target * config.comfortable_multiplier)
    comfortable = _clamp(comfortable_raw, enough, buyer_ceiling or comfortable_raw)

    headroom_raw = _round_half_up(target * config.headroom_multiplier)
    headroom = _clamp(headroom_raw, comfortable, buyer_ceiling or headroom_raw)

    return BudgetTierSet(
        target=target,
        enough=enough,
        comfortable=comfortable,
        headroom=headroom,
    )
