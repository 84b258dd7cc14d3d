"""
Tests for score colour banding.
"""

import unittest

from core.colors import BANDS, band_for, color_for


class TestBandFor(unittest.TestCase):

    def test_band_boundaries(self):
        expected = {
            21: "deep",
            20: "strong",
            11: "strong",
            10: "positive",
            1: "positive",
            0: "negative",
            -5: "negative",
        }
        for score, name in expected.items():
            with self.subTest(score=score):
                self.assertEqual(band_for(score).name, name)

    def test_colors(self):
        self.assertEqual(color_for(100), "#006400")
        self.assertEqual(color_for(15), "#228B22")
        self.assertEqual(color_for(6), "#7FFF00")
        self.assertEqual(color_for(-1), "#FF6347")

    def test_total_over_large_integers(self):
        self.assertEqual(band_for(10 ** 30).name, "deep")
        self.assertEqual(band_for(-(10 ** 30)).name, "negative")

    def test_monotonic(self):
        """Higher scores never land in a lower band."""
        rank = {band.name: i for i, band in enumerate(reversed(BANDS))}
        previous = rank[band_for(-50).name]
        for score in range(-49, 50):
            current = rank[band_for(score).name]
            self.assertGreaterEqual(current, previous)
            previous = current


if __name__ == "__main__":
    unittest.main(verbosity=2)
