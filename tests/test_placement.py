from __future__ import annotations

import pytest

from photo_platformer.candidates import make_ground_candidate
from photo_platformer.models import Bounds, Category, PlatformCandidate
from photo_platformer.placement import (
    choose_enemy_platforms,
    find_ground,
    place_entities,
    place_exit,
    place_pickups,
)


def _plat(
    key: str,
    x: float,
    y: float,
    w: float = 0.3,
    *,
    bridge: bool = False,
    category: Category = Category.FURNITURE,
) -> PlatformCandidate:
    return PlatformCandidate(
        key=key,
        label="bridge" if bridge else key,
        category=Category.OTHER if bridge else category,
        confidence=1.0 if bridge else 0.7,
        bounds=Bounds(x, y, w, 0.03),
        is_bridge=bridge,
    )


def test_ground_only_level_places_everything_on_the_ground() -> None:
    placement = place_entities([make_ground_candidate()])

    assert (placement.player.x, placement.player.y) == pytest.approx((0.08, 0.86))
    assert (placement.exit.x, placement.exit.y) == pytest.approx((0.95, 0.86))
    assert [(p.x, p.y, p.type) for p in placement.pickups] == [
        (0.3, pytest.approx(0.86), "coin"),
        (0.5, pytest.approx(0.86), "coin"),
    ]
    assert placement.enemies == ()
    assert placement.enemy_platform_keys == ()


def test_exit_goes_to_right_edge_of_highest_platform() -> None:
    platforms = [
        make_ground_candidate(),
        _plat("mid", 0.1, 0.6),
        _plat("top", 0.5, 0.3, w=0.4),
    ]

    exit_spawn = place_exit(platforms)

    assert exit_spawn.x == pytest.approx(0.85)
    assert exit_spawn.y == pytest.approx(0.24)


def test_exit_x_is_clamped_into_right_band() -> None:
    exit_spawn = place_exit([make_ground_candidate(), _plat("top", 0.0, 0.3, w=0.2)])

    assert exit_spawn.x == pytest.approx(0.7)


def test_first_detected_pickup_is_health_and_rest_are_coins() -> None:
    ground = make_ground_candidate()
    platforms = [ground] + [
        _plat(f"p{i}", 0.1, 0.8 - i * 0.1) for i in range(6)
    ]

    pickups = place_pickups(platforms, ground)

    assert len(pickups) == 5
    assert [p.type for p in pickups] == ["health", "coin", "coin", "coin", "coin"]
    assert pickups[0].x == pytest.approx(0.25)
    assert pickups[0].y == pytest.approx(0.74)


def test_bridges_top_up_pickups_to_four() -> None:
    ground = make_ground_candidate()
    platforms = [
        ground,
        _plat("a", 0.1, 0.8),
        _plat("b1", 0.3, 0.7, w=0.15, bridge=True),
        _plat("b2", 0.3, 0.55, w=0.15, bridge=True),
        _plat("b3", 0.3, 0.4, w=0.15, bridge=True),
        _plat("c", 0.1, 0.3),
    ]

    pickups = place_pickups(platforms, ground)

    assert [p.type for p in pickups] == ["health", "coin", "coin", "coin"]
    assert [p.y for p in pickups] == pytest.approx([0.74, 0.24, 0.64, 0.49])


def test_fallback_pickups_are_added_on_the_ground() -> None:
    ground = make_ground_candidate()
    platforms = [ground, _plat("a", 0.1, 0.8)]

    pickups = place_pickups(platforms, ground)

    assert len(pickups) == 3
    assert pickups[0].type == "health"
    assert (pickups[1].x, pickups[1].y) == pytest.approx((0.3, 0.86))
    assert (pickups[2].x, pickups[2].y) == pytest.approx((0.5, 0.86))


def test_single_bridge_still_gets_fallback_pickups() -> None:
    ground = make_ground_candidate()
    platforms = [ground, _plat("b", 0.3, 0.7, w=0.15, bridge=True)]

    pickups = place_pickups(platforms, ground)

    assert len(pickups) == 3
    assert all(p.type == "coin" for p in pickups)


def test_pickup_x_is_clamped() -> None:
    ground = make_ground_candidate()

    (pickup, *_) = place_pickups([ground, _plat("edge", 0.94, 0.5, w=0.06)], ground)

    assert pickup.x == pytest.approx(0.95)


def test_enemies_go_on_wide_detected_platforms_only() -> None:
    platforms = [
        make_ground_candidate(),
        _plat("narrow", 0.1, 0.8, w=0.15),
        _plat("bridge", 0.3, 0.7, w=0.5, bridge=True),
        _plat("wide1", 0.2, 0.6, w=0.4),
        _plat("wide2", 0.0, 0.4, w=0.2),
        _plat("wide3", 0.5, 0.2, w=0.3),
    ]

    chosen = choose_enemy_platforms(platforms)
    placement = place_entities(platforms)

    assert [p.key for p in chosen] == ["wide1", "wide2"]
    assert placement.enemy_platform_keys == ("wide1", "wide2")
    assert [(e.x, e.y, e.type) for e in placement.enemies] == [
        (pytest.approx(0.4), pytest.approx(0.54), "walker"),
        (pytest.approx(0.1), pytest.approx(0.34), "walker"),
    ]


def test_find_ground_falls_back_to_first_platform() -> None:
    first = _plat("first", 0.0, 0.9)

    assert find_ground([first, _plat("second", 0.0, 0.7)]) is first


def test_place_entities_requires_a_platform() -> None:
    with pytest.raises(ValueError):
        place_entities([])
