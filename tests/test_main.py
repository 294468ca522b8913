import math
import unittest

from planar.main import main, run_demo
from planar.schema import DemoSettings
from planar.structs.vector2 import Vector2


class TestDemo(unittest.TestCase):
    def test_run_demo_defaults(self):
        with self.assertLogs("planar.main", level="INFO") as cm:
            out = run_demo(DemoSettings())
        self.assertTrue(out["vector"].equals(Vector2(12, 13)))
        self.assertAlmostEqual(out["normalized"].magnitude(), 1.0, places=7)
        self.assertTrue(out["trend"].equals(Vector2.ONE))
        self.assertAlmostEqual(out["ahead_distance"], 200.0, places=7)
        self.assertAlmostEqual(out["behind_distance"], 100.0, places=7)
        self.assertAlmostEqual(out["angle"], 60.0, places=7)
        self.assertTrue(out["shifted"].equals(Vector2(-8, 3)))
        self.assertAlmostEqual(out["shifted_distance"], math.hypot(20, 10), places=7)
        self.assertTrue(any("immutable" in line for line in cm.output))
        self.assertTrue(any("change denied" in line for line in cm.output))

    def test_run_demo_leaves_vector_untouched(self):
        settings = DemoSettings(start={"x": -3, "y": 4})
        with self.assertLogs("planar.main", level="INFO"):
            out = run_demo(settings)
        self.assertEqual(out["vector"].x, -3)
        self.assertTrue(out["trend"].equals(Vector2(-1, 1)))

    def test_main_returns_zero(self):
        with self.assertLogs("planar.main", level="INFO"):
            self.assertEqual(main(["--x", "3", "--y", "4", "--forward", "5"]), 0)

    def test_main_rejects_invalid_settings(self):
        with self.assertLogs("planar.main", level="ERROR") as cm:
            self.assertEqual(main(["--backward", "-5"]), 2)
        self.assertTrue(any("invalid settings" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
