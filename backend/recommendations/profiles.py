from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class UseCase(str, Enum):
    office = "office"
    zoom = "zoom"
    creator = "creator"
    game = "game"


DEVICE_TYPES = ("laptop", "desktop", "any")


@dataclass(frozen=True)
class Requirements:
    camera: bool = False
    gpu: bool = False


@dataclass(frozen=True)
class Avoidance:
    hdd_only: bool = False
    memory_under_gb: int | None = None


@dataclass(frozen=True)
class UseCaseProfile:
    use_case: UseCase
    label: str
    baseline: Mapping[str, int]
    min_memory_gb: int
    min_storage_gb: int
    requires: Requirements = field(default_factory=Requirements)
    avoid: Avoidance = field(default_factory=Avoidance)

    def baseline_for(self, device: str | None) -> int:
        """Baseline target price for *device*, falling back to ``any``."""
        return self.baseline.get(device or "any", self.baseline["any"])


_PROFILES: Mapping[UseCase, UseCaseProfile] = MappingProxyType({
    UseCase.office: UseCaseProfile(
        use_case=UseCase.office,
        label="事務・普段使い",
        baseline=MappingProxyType({"laptop": 25000, "desktop": 20000, "any": 20000}),
        min_memory_gb=8,
        min_storage_gb=256,
        avoid=Avoidance(hdd_only=True, memory_under_gb=8),
    ),
    UseCase.zoom: UseCaseProfile(
        use_case=UseCase.zoom,
        label="Zoom・オンライン会議",
        baseline=MappingProxyType({"laptop": 30000, "desktop": 25000, "any": 30000}),
        min_memory_gb=8,
        min_storage_gb=256,
        requires=Requirements(camera=True),
        avoid=Avoidance(hdd_only=True, memory_under_gb=8),
    ),
    UseCase.creator: UseCaseProfile(
        use_case=UseCase.creator,
        label="画像・動画編集",
        baseline=MappingProxyType({"laptop": 80000, "desktop": 70000, "any": 80000}),
        min_memory_gb=16,
        min_storage_gb=512,
        avoid=Avoidance(hdd_only=True, memory_under_gb=16),
    ),
    UseCase.game: UseCaseProfile(
        use_case=UseCase.game,
        label="ゲーム",
        baseline=MappingProxyType({"laptop": 100000, "desktop": 90000, "any": 100000}),
        min_memory_gb=16,
        min_storage_gb=512,
        requires=Requirements(gpu=True),
        avoid=Avoidance(hdd_only=True, memory_under_gb=16),
    ),
})

_missing = set(UseCase) - set(_PROFILES)
if _missing:
    raise RuntimeError(f"use cases without a profile: {sorted(u.value for u in _missing)}")


def parse_use_case(value: str | None) -> UseCase:
    """Map a request identifier onto a ``UseCase``; unknown values become ``office``."""
    raw = str(value or "").strip().lower()
    if raw in ("video", "video-call", "video_call", "web-meeting"):
        return UseCase.zoom
    try:
        return UseCase(raw)
    except ValueError:
        return UseCase.office


def get_profile(use_case: UseCase | str | None) -> UseCaseProfile:
    if not isinstance(use_case, UseCase):
        use_case = parse_use_case(use_case)
    return _PROFILES[use_case]


def all_profiles() -> list[UseCaseProfile]:
    return [_PROFILES[u] for u in UseCase]
