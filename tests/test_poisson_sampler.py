# ==============================================================================
# File: tests/test_poisson_sampler.py
# Purpose: unit tests for the Poisson-disc sampler and its background grid.
# ==============================================================================
import itertools
import math
import random
import unittest

# Make the project root importable when running the file directly
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from pds_engine.algorithms.sampling import (
    BackgroundGrid,
    as_random_source,
    sample,
    sample_fixed,
    sample_range,
)
from pds_engine.core.config.errors import InvalidConfiguration, SamplingTimeout
from pds_engine.core.types import Point


class ConstantSource:
    """Always returns the same value and counts how often it was asked."""

    def __init__(self, value=0.0):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


def _min_pair_distance(points):
    return min(
        math.hypot(p.x - q.x, p.y - q.y)
        for p, q in itertools.combinations(points, 2)
    )


class TestBackgroundGrid(unittest.TestCase):
    def test_dimensions_follow_cell_size(self):
        grid = BackgroundGrid(10.0, 5.0, 1.0)
        self.assertAlmostEqual(grid.cell_size, 1.0 / math.sqrt(2.0))
        self.assertEqual(grid.cols, 15)  # ceil(10 * sqrt(2))
        self.assertEqual(grid.rows, 8)   # ceil(5 * sqrt(2))

    def test_cells_start_empty_and_store_indices(self):
        grid = BackgroundGrid(4.0, 4.0, 1.0)
        self.assertTrue(all(grid.get(x, y) is None for x in range(grid.cols) for y in range(grid.rows)))
        cx, cy = grid.cell_of(2.0, 3.0)

        grid.put(2.0, 3.0, 0)
        self.assertEqual(grid.get(cx, cy), 0)
        filled = [(x, y) for x in range(grid.cols) for y in range(grid.rows) if grid.get(x, y) is not None]
        self.assertEqual(filled, [(cx, cy)])

    def test_cell_of_stays_in_bounds_near_the_far_edge(self):
        grid = BackgroundGrid(math.sqrt(2.0), math.sqrt(2.0), 1.0)
        cx, cy = grid.cell_of(math.nextafter(grid.width, 0.0), math.nextafter(grid.height, 0.0))
        self.assertLess(cx, grid.cols)
        self.assertLess(cy, grid.rows)

    def test_neighbours_window_is_two_cells_wide(self):
        grid = BackgroundGrid(10.0, 10.0, math.sqrt(2.0))  # cell size 1
        grid.put(5.5, 5.5, 0)
        grid.put(7.5, 5.5, 1)   # two cells away
        grid.put(8.5, 5.5, 2)   # three cells away
        self.assertEqual(sorted(grid.neighbours(5.5, 5.5)), [0, 1])
        # clamped at the border
        self.assertEqual(list(grid.neighbours(0.1, 0.1)), [])


class TestSampler(unittest.TestCase):
    def test_reference_scenario_10x10(self):
        points = sample(1.0, 1.0, 10.0, 10.0, 20, random.Random(1234))

        self.assertEqual(points[0], Point(5.0, 5.0))
        self.assertGreaterEqual(len(points), 30)
        self.assertLessEqual(len(points), 130)
        self.assertGreaterEqual(_min_pair_distance(points), 1.0 - 1e-9)

    def test_all_points_inside_region(self):
        points = sample(0.7, 0.7, 12.0, 5.0, 30, random.Random(7))
        for p in points:
            self.assertTrue(0.0 <= p.x < 12.0, p)
            self.assertTrue(0.0 <= p.y < 5.0, p)

    def test_range_mode_keeps_min_radius_spacing(self):
        points = sample_range(0.5, 1.5, 8.0, 8.0, rng=random.Random(99))
        self.assertGreater(len(points), 1)
        self.assertGreaterEqual(_min_pair_distance(points), 0.5 - 1e-9)
        for p in points:
            self.assertTrue(0.0 <= p.x < 8.0, p)
            self.assertTrue(0.0 <= p.y < 8.0, p)

    def test_range_mode_is_sparser_than_fixed_mode(self):
        fixed = sample_fixed(0.5, 10.0, 10.0, rng=random.Random(3))
        ranged = sample_range(0.5, 2.0, 10.0, 10.0, rng=random.Random(3))
        self.assertLess(len(ranged), len(fixed))

    def test_same_seed_same_points(self):
        a = sample(1.0, 1.5, 10.0, 10.0, 20, random.Random(42))
        b = sample(1.0, 1.5, 10.0, 10.0, 20, random.Random(42))
        self.assertEqual(a, b)

    def test_int_seed_equals_seeded_random(self):
        a = sample(1.0, 1.0, 6.0, 6.0, 20, 5)
        b = sample(1.0, 1.0, 6.0, 6.0, 20, random.Random(5))
        self.assertEqual(a, b)

    def test_different_seeds_differ(self):
        a = sample_fixed(1.0, 10.0, 10.0, rng=1)
        b = sample_fixed(1.0, 10.0, 10.0, rng=2)
        self.assertNotEqual(a, b)

    def test_region_smaller_than_radius_yields_only_seed(self):
        self.assertEqual(sample(1.0, 1.0, 1.0, 1.0, 20, random.Random(0)), [Point(0.5, 0.5)])
        self.assertEqual(sample(2.0, 3.0, 0.5, 1.5, 20, random.Random(0)), [Point(0.25, 0.75)])

    def test_constant_source_walks_along_y(self):
        # angle 0 -> direction (sin 0, cos 0) = (0, 1), distance r, always the first active point
        points = sample(1.0, 1.0, 10.0, 10.0, 1, ConstantSource(0.0))
        self.assertEqual(
            points,
            [Point(5.0, 5.0), Point(5.0, 6.0), Point(5.0, 7.0), Point(5.0, 8.0), Point(5.0, 9.0)],
        )

    def test_random_draw_order(self):
        fixed_src = ConstantSource(0.0)
        range_src = ConstantSource(0.0)
        fixed = sample(1.0, 1.0, 10.0, 10.0, 1, fixed_src)
        ranged = sample(1.0, 2.0, 10.0, 10.0, 1, range_src)

        # radius draw of 0 in range mode picks min_radius, so the layout matches
        self.assertEqual(fixed, ranged)
        # 9 loop iterations, 1 attempt each: index + angle + distance (+ radius)
        self.assertEqual(fixed_src.calls, 9 * 3)
        self.assertEqual(range_src.calls, 9 * 4)

    def test_result_grows_in_acceptance_order(self):
        points = sample(1.0, 1.0, 10.0, 10.0, 20, random.Random(11))
        again = sample(1.0, 1.0, 10.0, 10.0, 20, random.Random(11))
        self.assertEqual(points[0], Point(5.0, 5.0))
        self.assertEqual(len(set(points)), len(points))
        self.assertEqual(points, again)

    def test_numpy_generator_is_accepted(self):
        import numpy as np

        a = sample(1.0, 1.0, 5.0, 5.0, 20, np.random.default_rng(3))
        b = sample(1.0, 1.0, 5.0, 5.0, 20, np.random.default_rng(3))
        self.assertEqual(a, b)
        self.assertGreaterEqual(_min_pair_distance(a), 1.0 - 1e-9)

    def test_numpy_scalar_inputs_match_python_numbers(self):
        import numpy as np

        expected = sample(1.0, None, 10.0, 10.0, 20, random.Random(0))
        points = sample(np.float32(1.0), None, np.float32(10.0), np.float64(10.0), np.int64(20), random.Random(0))
        self.assertEqual(points, expected)
        self.assertTrue(all(type(p.x) is float and type(p.y) is float for p in points))

        self.assertEqual(sample_fixed(1.0, 6.0, 6.0, rng=np.int64(5)), sample_fixed(1.0, 6.0, 6.0, rng=5))

    def test_zero_time_budget_times_out_with_seed(self):
        with self.assertRaises(SamplingTimeout) as ctx:
            sample(1.0, 1.0, 10.0, 10.0, 20, random.Random(0), time_budget_s=0.0)
        self.assertEqual(ctx.exception.points, [Point(5.0, 5.0)])

    def test_generous_time_budget_does_not_change_output(self):
        a = sample(1.0, 1.0, 10.0, 10.0, 20, random.Random(8))
        b = sample(1.0, 1.0, 10.0, 10.0, 20, random.Random(8), time_budget_s=60.0)
        self.assertEqual(a, b)


class TestInvalidConfiguration(unittest.TestCase):
    def test_rejects_bad_inputs(self):
        cases = [
            (0.0, 0.0, 10.0, 10.0, 20),
            (-1.0, -1.0, 10.0, 10.0, 20),
            (1.0, 0.5, 10.0, 10.0, 20),
            (1.0, 1.0, 0.0, 10.0, 20),
            (1.0, 1.0, 10.0, -3.0, 20),
            (1.0, 1.0, 10.0, 10.0, 0),
            (1.0, 1.0, 10.0, 10.0, 2.5),
            (float("nan"), 1.0, 10.0, 10.0, 20),
            (1.0, float("inf"), 10.0, 10.0, 20),
        ]
        for args in cases:
            with self.subTest(args=args):
                with self.assertRaises(InvalidConfiguration):
                    sample(*args, random.Random(0))

    def test_rejects_bad_numpy_scalars(self):
        import numpy as np

        with self.assertRaises(InvalidConfiguration):
            sample(np.float32(-1.0), None, 10.0, 10.0, 20, random.Random(0))
        with self.assertRaises(InvalidConfiguration):
            sample(1.0, None, 10.0, 10.0, np.int64(0), random.Random(0))
        with self.assertRaises(InvalidConfiguration):
            sample(1.0, None, 10.0, 10.0, np.float64(20.0), random.Random(0))

    def test_rejects_bad_time_budget(self):
        for budget in ("1", -1.0, float("nan")):
            with self.subTest(budget=budget):
                with self.assertRaises(InvalidConfiguration):
                    sample(1.0, 1.0, 10.0, 10.0, 20, random.Random(0), time_budget_s=budget)

    def test_error_is_also_a_value_error(self):
        with self.assertRaises(ValueError):
            sample_fixed(0.0, 1.0, 1.0)

    def test_rejects_unusable_random_source(self):
        with self.assertRaises(InvalidConfiguration):
            as_random_source("not a generator")

    def test_no_random_draws_before_validation(self):
        src = ConstantSource(0.0)
        with self.assertRaises(InvalidConfiguration):
            sample(0.0, 0.0, 10.0, 10.0, 20, src)
        self.assertEqual(src.calls, 0)


if __name__ == '__main__':
    unittest.main()
