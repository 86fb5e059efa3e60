from __future__ import annotations

import pytest

from backend.recommendations.profiles import (
    UseCase,
    all_profiles,
    get_profile,
    parse_use_case,
)


def test_every_use_case_has_a_profile():
    assert [p.use_case for p in all_profiles()] == list(UseCase)


def test_office_profile():
    profile = get_profile("office")
    assert profile.use_case is UseCase.office
    assert profile.baseline["any"] == 20000
    assert profile.min_memory_gb == 8
    assert profile.requires.camera is False
    assert profile.requires.gpu is False
    assert profile.avoid.hdd_only is True


def test_unknown_use_case_falls_back_to_office():
    assert get_profile("spaceship").use_case is UseCase.office
    assert get_profile(None).use_case is UseCase.office
    assert get_profile("").use_case is UseCase.office


def test_video_call_aliases():
    assert parse_use_case("zoom") is UseCase.zoom
    assert parse_use_case("video-call") is UseCase.zoom
    assert parse_use_case(" ZOOM ") is UseCase.zoom


def test_hard_requirements():
    assert get_profile(UseCase.zoom).requires.camera is True
    assert get_profile(UseCase.game).requires.gpu is True
    assert get_profile(UseCase.creator).requires.gpu is False


def test_baseline_falls_back_to_any():
    profile = get_profile("game")
    assert profile.baseline_for("tablet") == profile.baseline["any"]
    assert profile.baseline_for(None) == profile.baseline["any"]
    assert profile.baseline_for("desktop") == profile.baseline["desktop"]


def test_profiles_are_read_only():
    profile = get_profile("office")
    with pytest.raises(TypeError):
        profile.baseline["any"] = 1
    assert get_profile("office").baseline["any"] == 20000
