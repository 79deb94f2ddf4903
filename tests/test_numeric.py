"""
Tests for decimal-place rounding helpers.
"""

import unittest

from greatcircle.numeric import compare, round_to


class TestRoundTo(unittest.TestCase):
    """Test round_to."""

    def test_halves_round_away_from_zero(self):
        """Test that exact halves round away from zero."""
        self.assertEqual(round_to(2.5, 0), 3.0)
        self.assertEqual(round_to(-2.5, 0), -3.0)
        self.assertEqual(round_to(0.5, 0), 1.0)

    def test_just_below_half_rounds_down(self):
        """Test that the largest double below 0.5 rounds towards zero."""
        self.assertEqual(round_to(0.49999999999999994, 0), 0.0)
        self.assertEqual(round_to(-0.49999999999999994, 0), 0.0)

    def test_places(self):
        """Test rounding to several decimal places."""
        self.assertEqual(round_to(245.13460296861962, 4), 245.1346)
        self.assertEqual(round_to(14084.280704919687, 2), 14084.28)


class TestCompare(unittest.TestCase):
    """Test compare."""

    def test_equal_to_places(self):
        """Test values that agree to the given places."""
        self.assertTrue(compare(245.13460296861962, 245.1346, 4))

    def test_different_to_places(self):
        """Test values that differ at the given places."""
        self.assertFalse(compare(245.13460296861962, 245.1346, 6))
        self.assertFalse(compare(1.0, 1.1, 1))


if __name__ == "__main__":
    unittest.main()
