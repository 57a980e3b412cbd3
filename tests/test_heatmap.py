"""
Tests for roof heatmap synthesis.

Formulas are checked with a zero-offset jitter source so cell values are
exact; range and reproducibility checks use seeded numpy generators.
"""

import pytest

from solar_estimator.analysis.errors import (
    InvalidInputError,
    UnknownVisualizationModeError,
)
from solar_estimator.analysis.heatmap import (
    MODE_FORMULAS,
    MODE_LABELS,
    VisualizationMode,
    grid_size,
    make_rng,
    parse_mode,
    synthesize_heatmap,
)

ALL_MODES = [mode.value for mode in VisualizationMode]


def point_at(points, x, y):
    return next(p for p in points if p.x == x and p.y == y)


@pytest.mark.parametrize(
    "roof_area, expected",
    [(100, 5), (50, 4), (4, 1), (1, 1), (0.01, 1), (0, 0), (10000, 50), (101, 6)],
)
def test_grid_size(roof_area, expected):
    assert grid_size(roof_area) == expected


@pytest.mark.parametrize("mode", ALL_MODES)
def test_hundred_square_metres_gives_25_points(mode):
    points = synthesize_heatmap(100, mode, make_rng(7))
    assert len(points) == 25


@pytest.mark.parametrize("mode", ALL_MODES)
@pytest.mark.parametrize("roof_area", [1, 12.5, 80, 400, 2500])
def test_values_stay_in_range(mode, roof_area):
    points = synthesize_heatmap(roof_area, mode, make_rng(2024))
    assert len(points) == grid_size(roof_area) ** 2
    assert all(0 <= p.value <= 100 for p in points)


def test_zero_area_gives_empty_heatmap():
    assert synthesize_heatmap(0, "annual", make_rng(1)) == []


def test_negative_area_is_rejected():
    with pytest.raises(InvalidInputError):
        synthesize_heatmap(-4, "potential", make_rng(1))


def test_grid_coordinates_and_traversal_order(no_jitter):
    points = synthesize_heatmap(100, "potential", no_jitter)
    coords = [(p.x, p.y) for p in points]
    assert coords[:6] == [(0, 0), (0, 10), (0, 20), (0, 30), (0, 40), (10, 0)]
    assert coords[-1] == (40, 40)


def test_potential_decays_from_center(no_jitter):
    points = synthesize_heatmap(100, "potential", no_jitter)
    assert point_at(points, 0, 0).value == pytest.approx(50)
    assert point_at(points, 20, 20).value == pytest.approx(90)
    assert point_at(points, 40, 0).value == pytest.approx(60)


def test_efficiency_ripple(no_jitter):
    points = synthesize_heatmap(100, "efficiency", no_jitter)
    assert point_at(points, 0, 0).value == pytest.approx(70)
    assert point_at(points, 30, 20).value == pytest.approx(
        50 + 20 * 0.9974949866040544 + 20 * 0.5403023058681398
    )


def test_cost_decreases_toward_higher_indices(no_jitter):
    points = synthesize_heatmap(100, "cost", no_jitter)
    assert point_at(points, 0, 0).value == pytest.approx(100)
    assert point_at(points, 40, 40).value == pytest.approx(60)
    assert point_at(points, 20, 10).value == pytest.approx(85)


def test_annual_mode_energy(no_jitter):
    points = synthesize_heatmap(100, "annual", no_jitter)
    corner = point_at(points, 0, 0)
    middle = point_at(points, 20, 20)

    assert corner.value == pytest.approx(60)
    assert corner.annual_energy == 2880
    assert middle.value == pytest.approx(76)
    assert middle.annual_energy == 3648
    assert all(isinstance(p.annual_energy, int) for p in points)


def test_annual_energy_uses_final_value(constant_jitter):
    points = synthesize_heatmap(100, "annual", constant_jitter(5.0))
    corner = point_at(points, 0, 0)
    assert corner.value == pytest.approx(65)
    assert corner.annual_energy == 3120


@pytest.mark.parametrize("mode", ["potential", "efficiency", "cost"])
def test_annual_energy_only_in_annual_mode(mode):
    points = synthesize_heatmap(100, mode, make_rng(3))
    assert all(p.annual_energy is None for p in points)


def test_jitter_is_clamped_at_both_ends(constant_jitter):
    high = synthesize_heatmap(100, "cost", constant_jitter(5.0))
    assert point_at(high, 0, 0).value == 100

    low = synthesize_heatmap(10000, "potential", constant_jitter(-5.0))
    assert point_at(low, 0, 0).value == 0
    assert all(0 <= p.value <= 100 for p in low)


def test_same_seed_reproduces_heatmap():
    first = synthesize_heatmap(150, "efficiency", make_rng(99))
    second = synthesize_heatmap(150, "efficiency", make_rng(99))
    assert first == second


def test_different_seeds_change_jitter():
    first = synthesize_heatmap(150, "efficiency", make_rng(1))
    second = synthesize_heatmap(150, "efficiency", make_rng(2))
    assert [p.value for p in first] != [p.value for p in second]


def test_jitter_stays_within_five_points(no_jitter):
    exact = synthesize_heatmap(400, "annual", no_jitter)
    jittered = synthesize_heatmap(400, "annual", make_rng(11))
    for a, b in zip(exact, jittered):
        assert abs(a.value - b.value) <= 5


def test_default_rng_is_used_when_none_given():
    points = synthesize_heatmap(100, "potential")
    assert len(points) == 25


def test_unknown_mode_is_rejected():
    with pytest.raises(UnknownVisualizationModeError):
        synthesize_heatmap(100, "sunburn", make_rng(1))
    with pytest.raises(UnknownVisualizationModeError):
        parse_mode(None)


def test_mode_table_covers_every_mode():
    assert set(MODE_FORMULAS) == set(VisualizationMode)
    assert set(MODE_LABELS) == set(VisualizationMode)
    assert parse_mode("annual") is VisualizationMode.ANNUAL
    assert parse_mode(VisualizationMode.COST) is VisualizationMode.COST
