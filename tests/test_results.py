import unittest

from zkcheck.checks.results import Attempt, Result, compute_stats
from zkcheck.formatting import format_alert


class StatsTests(unittest.TestCase):
    def test_odd_count_median(self) -> None:
        stats = compute_stats([Attempt(50), Attempt(200), Attempt(60)])
        self.assertEqual(stats.median_ms, 60)
        self.assertEqual(stats.min_ms, 50)
        self.assertEqual(stats.max_ms, 200)
        self.assertAlmostEqual(stats.mean_ms, 310 / 3)

    def test_even_count_median(self) -> None:
        stats = compute_stats([Attempt(10), Attempt(40), Attempt(20), Attempt(30)])
        self.assertEqual(stats.median_ms, 25)

    def test_empty(self) -> None:
        stats = compute_stats([])
        self.assertEqual((stats.total_ms, stats.median_ms), (0.0, 0.0))


class ResultRenderingTests(unittest.TestCase):
    def test_status_labels(self) -> None:
        self.assertEqual(Result(title="x").status(), "unknown")
        self.assertEqual(Result(title="x", healthy=True).status(), "healthy")
        self.assertEqual(Result(title="x", degraded=True).status(), "degraded")
        self.assertEqual(Result(title="x", down=True).status(), "down")

    def test_string_rendering(self) -> None:
        res = Result(
            title="zk-prod",
            endpoint="zk1:2181,zk2:2181",
            attempts=[Attempt(12.5), Attempt(40.0, error="one or more nodes reported errors")],
            threshold_rtt_ms=100,
            down=True,
        )

        text = str(res)

        self.assertTrue(text.startswith("== zk-prod - zk1:2181,zk2:2181\n"))
        self.assertIn("  Threshold: 100.000ms", text)
        self.assertIn("        All: [12.500ms, 40.000ms (one or more nodes reported errors)]", text)
        self.assertTrue(text.endswith(" Assessment: down"))
        self.assertNotIn("Notice", text)

    def test_notice_line(self) -> None:
        res = Result(title="zk", attempts=[Attempt(1.0)], degraded=True, notice="too slow")
        self.assertIn("     Notice: too slow", str(res))

    def test_format_alert_uses_rendering_verbatim(self) -> None:
        res = Result(title="zk-prod", attempts=[Attempt(1.0)], down=True)
        subject, body = format_alert(res)
        self.assertEqual(subject, "[zkcheck] zk-prod down")
        self.assertEqual(body, str(res))


if __name__ == "__main__":
    unittest.main()
