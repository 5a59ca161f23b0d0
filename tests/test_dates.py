import unittest
from datetime import datetime, timedelta, timezone

from ranchbook.core.dates import describe_age, month_start, to_naive_utc


class DescribeAgeTest(unittest.TestCase):
    def test_boundaries(self):
        now = datetime(2026, 10, 19, 12, 0)
        cases = [
            (0, "0 days"),
            (29, "29 days"),
            (30, "1 month"),
            (65, "2 months"),
            (364, "12 months"),
            (365, "1 year"),
            (400, "1y 1m"),
            (730, "2 years"),
            (1000, "2y 9m"),
        ]
        for days, expected in cases:
            with self.subTest(days=days):
                self.assertEqual(describe_age(now - timedelta(days=days), now=now), expected)

    def test_missing_birth_date(self):
        self.assertEqual(describe_age(None), "unknown")

    def test_partial_day_is_floored(self):
        now = datetime(2026, 10, 19, 12, 0)
        self.assertEqual(describe_age(now - timedelta(days=29, hours=23), now=now), "29 days")


class DateHelpersTest(unittest.TestCase):
    def test_month_start(self):
        self.assertEqual(month_start(datetime(2026, 10, 19, 15, 30)), datetime(2026, 10, 1))

    def test_aware_values_become_naive_utc(self):
        aware = datetime(2026, 10, 19, 5, 0, tzinfo=timezone(timedelta(hours=-5)))
        self.assertEqual(to_naive_utc(aware), datetime(2026, 10, 19, 10, 0))
        self.assertIsNone(to_naive_utc(None))


if __name__ == "__main__":
    unittest.main()
