"""Unit tests for the stroke-width solver."""

import math

import pytest

from glyphforge.core import StrokeSolver


@pytest.fixture
def solver() -> StrokeSolver:
    return StrokeSolver(hor_thickness=100.0, ver_thickness=60.0, step=0.5)


class TestIdealThickness:
    """Tests for the angle to width interpolation."""

    def test_horizontal_stroke(self, solver: StrokeSolver) -> None:
        assert solver.ideal_thickness(0) == 60.0

    def test_vertical_stroke(self, solver: StrokeSolver) -> None:
        assert solver.ideal_thickness(90) == 100.0

    def test_diagonal_stroke(self, solver: StrokeSolver) -> None:
        assert solver.ideal_thickness(45) == pytest.approx(80.0)

    def test_out_of_range_is_infinite(self, solver: StrokeSolver) -> None:
        assert solver.ideal_thickness(-1) == math.inf
        assert solver.ideal_thickness(91) == math.inf
        assert solver.ideal_thickness(math.nan) == math.inf

    def test_uniform_thickness(self) -> None:
        solver = StrokeSolver(80.0, 80.0)
        assert {solver.ideal_thickness(angle) for angle in (0, 30, 60, 90)} == {80.0}


class TestSearchHandle:
    """Tests for the grid search."""

    def test_picks_nearest_grid_value(self, solver: StrokeSolver) -> None:
        assert solver.search_handle(lambda h: abs(h - 3.2), 10) == 3.0

    def test_ties_keep_first_candidate(self, solver: StrokeSolver) -> None:
        assert solver.search_handle(lambda h: abs(h - 3.25), 10) == 3.0

    def test_limit_is_a_candidate(self, solver: StrokeSolver) -> None:
        assert solver.search_handle(lambda h: -h, 5) == 5.0

    def test_all_infinite_gives_zero(self, solver: StrokeSolver) -> None:
        assert solver.search_handle(lambda h: math.inf, 10) == 0.0

    def test_non_positive_step(self) -> None:
        with pytest.raises(ValueError, match="step"):
            StrokeSolver(100.0, 60.0, step=0)


class TestStrokeSearch:
    """Tests for the tail and spine searches."""

    def test_tail_search_matches_brute_force(self) -> None:
        """Test that the tail search returns the first minimum of the error grid."""
        solver = StrokeSolver(10.0, 6.0, step=0.5)
        bend, height, other = 20.0, 40.0, 12.0
        candidates = [index * 0.5 for index in range(81)]
        errors = [solver.tail_error(h, other, bend, height) for h in candidates]
        expected = candidates[errors.index(min(errors))]
        assert solver.search_tail_handle(other, bend, height) == expected

    def test_spine_search_stays_in_range(self) -> None:
        solver = StrokeSolver(10.0, 6.0, step=0.5)
        handle = solver.search_spine_handle(10.0, 30.0, 40.0)
        assert 0.0 <= handle <= 40.0
        assert handle % 0.5 == 0.0

    def test_tail_error_is_finite_for_sane_input(self) -> None:
        solver = StrokeSolver(10.0, 6.0)
        assert math.isfinite(solver.tail_error(10.0, 10.0, 20.0, 40.0))
