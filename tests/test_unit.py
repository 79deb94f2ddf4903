"""
Tests for the angle units.
"""

import math
import unittest

from greatcircle.unit import Degree, Radian, UnitFloat


class Knot(UnitFloat):
    """A speed unit, used to check that other families are rejected."""

    IS_FAMILY_ROOT = True
    SYMBOL = "kn"


class TestAngleUnits(unittest.TestCase):
    """Test Radian and Degree."""

    def test_degree_is_stored_in_radians(self):
        """Test that a Degree holds its value in radians."""
        self.assertAlmostEqual(float(Degree(180)), math.pi)

    def test_conversion(self):
        """Test conversion between radians and degrees."""
        self.assertAlmostEqual(Radian(math.pi / 2).to(Degree), 90.0)
        self.assertAlmostEqual(Degree(90).to(Radian), math.pi / 2)

    def test_family_root(self):
        """Test that Degree belongs to the Radian family."""
        self.assertIs(Degree.ROOT, Radian)
        self.assertIs(Radian.ROOT, Radian)

    def test_same_family_arithmetic(self):
        """Test adding and subtracting angles of mixed units."""
        total = Degree(45) + Degree(45)
        self.assertIsInstance(total, Degree)
        self.assertAlmostEqual(total.to(Degree), 90.0)
        self.assertAlmostEqual((Degree(90) - Radian(math.pi / 4)).to(Degree), 45.0)
        self.assertAlmostEqual((-Degree(90)).to(Degree), -90.0)

    def test_equality_and_hash(self):
        """Test that equal angles compare equal and hash alike."""
        self.assertTrue(Degree(180) == Radian(float(Degree(180))))
        self.assertFalse(Degree(1) != Degree(1))
        self.assertEqual(len({Degree(10), Degree(10)}), 1)

    def test_str(self):
        """Test the text form of an angle."""
        self.assertEqual(str(Radian(1.5)), "1.5 rad")
        self.assertEqual(repr(Radian(1.5)), "Radian(1.5)")


class TestFamilySafety(unittest.TestCase):
    """Test that angles do not mix with other quantities."""

    def test_add_across_families(self):
        """Test that adding a speed to an angle is rejected."""
        with self.assertRaises(TypeError):
            Degree(1) + Knot(1)

    def test_convert_across_families(self):
        """Test that converting an angle to a speed unit is rejected."""
        with self.assertRaises(TypeError):
            Degree(1).to(Knot)

    def test_compare_with_plain_float(self):
        """Test that comparing an angle with a bare float is rejected."""
        with self.assertRaises(TypeError):
            Degree(1) == 1.0

    def test_add_plain_float(self):
        """Test that adding a bare float to an angle is rejected."""
        with self.assertRaises(TypeError):
            Degree(1) + 1.0


if __name__ == "__main__":
    unittest.main()
