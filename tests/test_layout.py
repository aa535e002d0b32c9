import pytest

from timelineplot.exceptions import ConfigurationError
from timelineplot.layout import (
    CollisionResolver,
    LayoutConfig,
    alternate_side,
    choose_side,
    count_nearby,
    plan_positions,
)
from timelineplot.measure import union_box
from timelineplot.models import BoundingBox, FontSpec, LabelBlock, TextBlock


def make_label(x: float = 100, y: float = 100) -> LabelBlock:
    font = FontSpec(size=20, weight=600)
    return LabelBlock(
        year=TextBlock("2020", x, y, font),
        lines=[TextBlock("Launch", x, y + 22, font)],
    )


@pytest.mark.parametrize("n", [2, 3, 7, 40])
def test_positions_strictly_increasing_within_inset(n: int) -> None:
    total = 1234.5
    positions = plan_positions(n, total, 0.03)
    inset = total * 0.03
    assert len(positions) == n
    assert all(a < b for a, b in zip(positions, positions[1:]))
    assert positions[0] == pytest.approx(inset)
    assert positions[-1] == pytest.approx(total - inset)


def test_single_position_sits_at_inset() -> None:
    assert plan_positions(1, 1000, 0.03) == [pytest.approx(30.0)]


def test_no_positions_for_no_items() -> None:
    assert plan_positions(0, 1000, 0.03) == []


def test_normal_side_policy() -> None:
    config = LayoutConfig(side_policy="normal")
    assert choose_side(0, (0, 0), (0.0, -1.0), [], config) == 1
    assert choose_side(1, (0, 0), (0.0, 1.0), [], config) == -1


def test_alternate_side_policy() -> None:
    config = LayoutConfig(side_policy="alternate", alternate_start=-1)
    sides = [choose_side(i, (0, 0), (0.0, 1.0), [], config) for i in range(4)]
    assert sides == [-1, 1, -1, 1]
    assert alternate_side(2) == 1


def test_crowding_flips_side_when_crowded() -> None:
    config = LayoutConfig(side_policy="crowding", label_offset=100)
    # Tentative anchor for index 0 (side +1) is (0, 100)
    crowded = [BoundingBox(10, 95, 50, 20), BoundingBox(-20, 110, 50, 20)]
    assert count_nearby(crowded, 0, 100, config.crowding_dx, config.crowding_dy) == 2
    assert choose_side(0, (0, 0), (0.0, 1.0), crowded, config) == -1
    # A single neighbour is tolerated
    assert choose_side(0, (0, 0), (0.0, 1.0), crowded[:1], config) == 1


def test_crowding_threshold_is_tunable() -> None:
    config = LayoutConfig(side_policy="crowding", label_offset=100, crowding_threshold=2)
    crowded = [BoundingBox(10, 95, 50, 20), BoundingBox(-20, 110, 50, 20)]
    assert choose_side(0, (0, 0), (0.0, 1.0), crowded, config) == 1


def test_identical_labels_are_pushed_apart(measurer) -> None:
    resolver = CollisionResolver(step=16, max_attempts=10, margin=6)
    box_of = lambda label: union_box(measurer, label.blocks())

    first, first_box = resolver.place(make_label(), (0.0, 1.0), 1, box_of)
    assert first.attempts == 0
    assert first.succeeded

    second, second_box = resolver.place(make_label(), (0.0, 1.0), 1, box_of)
    assert second.attempts > 0
    assert second.succeeded or second.attempts == 10
    assert not first_box.intersects(second_box)
    assert second.offset == (0.0, 16.0 * second.attempts)


def test_exhausted_budget_keeps_last_position(measurer) -> None:
    resolver = CollisionResolver(step=0, max_attempts=5, margin=6)
    box_of = lambda label: union_box(measurer, label.blocks())

    resolver.place(make_label(), (1.0, 0.0), 1, box_of)
    label = make_label()
    resolution, _ = resolver.place(label, (1.0, 0.0), 1, box_of)

    assert resolution.attempts == 5
    assert not resolution.succeeded
    assert label.anchor == (100, 100)
    assert len(resolver.placed) == 2


def test_resolution_is_deterministic(measurer) -> None:
    box_of = lambda label: union_box(measurer, label.blocks())

    def run() -> list[BoundingBox]:
        resolver = CollisionResolver(step=12, max_attempts=20, margin=4)
        for k in range(5):
            resolver.place(make_label(100 + k * 3, 100), (0.6, 0.8), -1, box_of)
        return resolver.placed

    assert run() == run()


def test_committed_boxes_are_inflated() -> None:
    resolver = CollisionResolver(step=1, max_attempts=1, margin=6)
    inflated = resolver.commit(BoundingBox(0, 0, 10, 10))
    assert inflated == BoundingBox(-6, -6, 22, 22)
    assert resolver.placed == [inflated]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_lines": 0},
        {"max_attempts": -1},
        {"inset_fraction": 0.5},
        {"bump_distance": -1},
        {"side_policy": "random"},
        {"alternate_start": 0},
        {"stem_shape": "wavy"},
    ],
)
def test_invalid_config_is_rejected(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        LayoutConfig(**kwargs)
