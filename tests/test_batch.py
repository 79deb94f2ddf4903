"""
Tests for the vectorised distance and bearing helpers.
"""

import unittest

import numpy as np

from greatcircle.geo import (
    GeoPoint,
    distance,
    distance_matrix,
    initial_bearing,
    initial_bearing_matrix,
    path_length,
)

LANDMARKS = [
    GeoPoint(48.858158, 2.294825),  # Eiffel Tower
    GeoPoint(48.804766, 2.120339),  # Versailles
    GeoPoint(48.897728, 2.094977),  # Saint-Germain-en-Laye
    GeoPoint(48.747114, 2.400526),  # Orly
]


class TestDistanceMatrix(unittest.TestCase):
    """Test distance_matrix."""

    def test_shape(self):
        """Test the matrix shape for origins by targets."""
        matrix = distance_matrix(LANDMARKS[:2], LANDMARKS)
        self.assertEqual(matrix.shape, (2, 4))

    def test_diagonal_is_zero(self):
        """Test that each point is zero metres from itself."""
        matrix = distance_matrix(LANDMARKS, LANDMARKS)
        np.testing.assert_array_equal(np.diag(matrix), np.zeros(len(LANDMARKS)))

    def test_matches_scalar_distance(self):
        """Test the matrix against the scalar distance."""
        matrix = distance_matrix(LANDMARKS, LANDMARKS)
        for i, a in enumerate(LANDMARKS):
            for j, b in enumerate(LANDMARKS):
                self.assertAlmostEqual(matrix[i, j], distance(a, b), delta=1e-6)

    def test_is_symmetric(self):
        """Test that the distance matrix is symmetric."""
        matrix = distance_matrix(LANDMARKS, LANDMARKS)
        np.testing.assert_allclose(matrix, matrix.T, rtol=0, atol=1e-6)

    def test_empty_input(self):
        """Test matrices built from no points."""
        self.assertEqual(distance_matrix([], LANDMARKS).shape, (0, 4))


class TestInitialBearingMatrix(unittest.TestCase):
    """Test initial_bearing_matrix."""

    def test_matches_scalar_bearing(self):
        """Test the matrix against the scalar initial bearing."""
        matrix = initial_bearing_matrix(LANDMARKS, LANDMARKS)
        for i, a in enumerate(LANDMARKS):
            for j, b in enumerate(LANDMARKS):
                self.assertAlmostEqual(matrix[i, j], initial_bearing(a, b), delta=1e-9)

    def test_equal_points_have_zero_bearing(self):
        """Test that equal points get a zero bearing."""
        matrix = initial_bearing_matrix(LANDMARKS, LANDMARKS)
        np.testing.assert_array_equal(np.diag(matrix), np.zeros(len(LANDMARKS)))

    def test_range(self):
        """Test that matrix bearings fall within [0, 360)."""
        matrix = initial_bearing_matrix(LANDMARKS, LANDMARKS)
        self.assertTrue(np.all(matrix >= 0.0))
        self.assertTrue(np.all(matrix < 360.0))


class TestPathLength(unittest.TestCase):
    """Test path_length."""

    def test_fewer_than_two_points(self):
        """Test that a path of fewer than two points has zero length."""
        self.assertEqual(path_length([]), 0.0)
        self.assertEqual(path_length(LANDMARKS[:1]), 0.0)

    def test_single_leg_equals_distance(self):
        """Test that a single leg equals the point distance."""
        self.assertAlmostEqual(path_length(LANDMARKS[:2]), distance(*LANDMARKS[:2]), delta=1e-6)

    def test_sum_of_legs(self):
        """Test that path length sums the leg distances."""
        expected = sum(distance(a, b) for a, b in zip(LANDMARKS, LANDMARKS[1:]))
        self.assertAlmostEqual(path_length(LANDMARKS), expected, delta=1e-6)


if __name__ == "__main__":
    unittest.main()
