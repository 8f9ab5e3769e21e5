import unittest

from config import FRAME_DURATION
from managers import FrameClock


class FrameClockTests(unittest.TestCase):
    def setUp(self):
        self.clock = FrameClock()

    def test_default_threshold(self):
        self.assertEqual(self.clock.duration, FRAME_DURATION)
        self.assertEqual(self.clock.accumulator, 0.0)

    def test_two_short_frames_make_one_step(self):
        self.assertFalse(self.clock.tick(20))
        self.assertTrue(self.clock.tick(20))
        self.assertAlmostEqual(self.clock.accumulator, 5.0)

    def test_long_frame_yields_single_step(self):
        self.assertTrue(self.clock.tick(200))
        self.assertAlmostEqual(self.clock.accumulator, 165.0)

    def test_step_count_matches_total_time(self):
        deltas = [16, 17, 20, 9, 33, 34, 12, 30, 25, 18, 16, 16, 16]
        steps = sum(1 for delta in deltas if self.clock.tick(delta))
        self.assertEqual(steps, sum(deltas) // 35)

    def test_never_more_than_one_step_per_tick(self):
        results = [self.clock.tick(100) for _ in range(3)]
        self.assertEqual(results, [True, True, True])

    def test_reset_clears_accumulator(self):
        self.clock.tick(30)
        self.clock.reset()
        self.assertEqual(self.clock.accumulator, 0.0)
        self.assertFalse(self.clock.tick(30))


if __name__ == "__main__":
    unittest.main()
