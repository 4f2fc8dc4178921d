# tests/math_utils_test.py
import os
import sys
import unittest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from particle_engine.utils.color import Color
from particle_engine.utils.math_utils import MathUtils


class MathUtilsTest(unittest.TestCase):

    def test_clamp(self):
        self.assertEqual(MathUtils.clamp(5, 0, 3), 3)
        self.assertEqual(MathUtils.clamp(-1, 0, 3), 0)
        self.assertEqual(MathUtils.clamp(2, 0, 3), 2)


class ColorTest(unittest.TestCase):

    def test_from_hex(self):
        self.assertEqual(Color.from_hex('#1e1e1e').to_rgb(), (30, 30, 30))
        self.assertEqual(Color.from_hex('ff000080').to_rgba(), (255, 0, 0, 128))
        with self.assertRaises(ValueError):
            Color.from_hex('#123')

    def test_channels_are_clamped(self):
        self.assertEqual(Color(300, -5, 10).to_rgba(), (255, 0, 10, 255))

    def test_with_alpha_keeps_channels(self):
        self.assertEqual(Color.gray().with_alpha(70).to_rgba(), (128, 128, 128, 70))
        self.assertEqual(Color.clear().a, 0)


if __name__ == '__main__':
    unittest.main()
