import unittest

from pulse.rate_limiter import FixedDelayPacing, MinIntervalPacing


class FixedDelayPacingTests(unittest.TestCase):
    def test_sleeps_after_each_call(self):
        sleeps = []
        pacing = FixedDelayPacing(0.75, sleep=sleeps.append)
        pacing.after_call()
        pacing.after_call()
        self.assertEqual(sleeps, [0.75, 0.75])

    def test_zero_delay_never_sleeps(self):
        sleeps = []
        FixedDelayPacing(0, sleep=sleeps.append).after_call()
        self.assertEqual(sleeps, [])

    def test_queries_for(self):
        queries = ["a", "b", "c"]
        self.assertEqual(FixedDelayPacing().queries_for(queries), queries)
        self.assertEqual(FixedDelayPacing(queries_per_platform=2).queries_for(queries), ["a", "b"])

    def test_negative_delay_rejected(self):
        with self.assertRaises(ValueError):
            FixedDelayPacing(-1)


class MinIntervalPacingTests(unittest.TestCase):
    def test_waits_only_for_remaining_interval(self):
        now = [100.0]
        sleeps = []

        def fake_sleep(seconds):
            sleeps.append(seconds)
            now[0] += seconds

        pacing = MinIntervalPacing(1.0, sleep=fake_sleep, clock=lambda: now[0])
        pacing.after_call()
        now[0] += 0.25
        pacing.after_call()
        now[0] += 5
        pacing.after_call()

        self.assertEqual(sleeps, [0.75])


if __name__ == "__main__":
    unittest.main()
