from __future__ import annotations

from photo_platformer.candidates import make_ground_candidate
from photo_platformer.dedupe import deduplicate_platforms, sort_bottom_up
from photo_platformer.models import Bounds, Category, PlatformCandidate


def _plat(key: str, x: float, y: float, w: float = 0.3) -> PlatformCandidate:
    return PlatformCandidate(
        key=key,
        label=key,
        category=Category.FURNITURE,
        confidence=0.8,
        bounds=Bounds(x, y, w, 0.03),
    )


def test_sort_bottom_up_orders_by_descending_y_and_keeps_ties_stable() -> None:
    ordered = sort_bottom_up(
        [_plat("a", 0.0, 0.3), _plat("b", 0.0, 0.7), _plat("c", 0.5, 0.3)]
    )

    assert [p.key for p in ordered] == ["b", "a", "c"]


def test_overlapping_candidate_in_same_height_band_is_dropped() -> None:
    upper = _plat("upper", 0.1, 0.50)
    lower = _plat("lower", 0.2, 0.52)

    kept = deduplicate_platforms([upper, lower])

    # The lower one is scanned first, so it wins.
    assert [p.key for p in kept] == ["lower"]


def test_same_height_without_overlap_keeps_both() -> None:
    kept = deduplicate_platforms([_plat("left", 0.0, 0.5), _plat("right", 0.5, 0.5)])

    assert {p.key for p in kept} == {"left", "right"}


def test_touching_edges_do_not_count_as_overlap() -> None:
    kept = deduplicate_platforms(
        [_plat("left", 0.0, 0.5, w=0.25), _plat("right", 0.25, 0.5, w=0.25)]
    )

    assert len(kept) == 2


def test_overlap_at_different_heights_keeps_both() -> None:
    kept = deduplicate_platforms([_plat("a", 0.1, 0.5), _plat("b", 0.1, 0.6)])

    assert [p.key for p in kept] == ["b", "a"]


def test_ground_always_survives_and_shadows_low_wide_candidates() -> None:
    ground = make_ground_candidate()
    floor_rug = _plat("rug", 0.1, 0.90, w=0.6)

    kept = deduplicate_platforms([floor_rug, ground])

    assert kept == [ground]


def test_survivors_are_capped_keeping_the_lowest() -> None:
    candidates = [_plat(f"p{i}", 0.1, 0.05 + i * 0.06) for i in range(15)]

    kept = deduplicate_platforms(candidates)

    assert len(kept) == 10
    assert [p.key for p in kept] == [f"p{i}" for i in range(14, 4, -1)]


def test_cap_is_configurable() -> None:
    candidates = [_plat(f"p{i}", 0.1, 0.1 + i * 0.1) for i in range(5)]

    assert len(deduplicate_platforms(candidates, max_platforms=3)) == 3
