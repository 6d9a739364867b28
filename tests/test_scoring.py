import unittest

from tetris_scoring import drop_interval_ms, level_for_score, line_clear_score


class ScoringTests(unittest.TestCase):
    def test_line_clear_table(self):
        self.assertEqual([line_clear_score(n, 1) for n in range(6)], [0, 100, 300, 500, 800, 0])
        self.assertEqual(line_clear_score(4, 3), 2400)

    def test_level_from_score(self):
        self.assertEqual(level_for_score(0), 1)
        self.assertEqual(level_for_score(4999), 1)
        self.assertEqual(level_for_score(5000), 2)
        self.assertEqual(level_for_score(12500), 3)

    def test_drop_interval(self):
        self.assertEqual(drop_interval_ms(1), 1000)
        self.assertEqual(drop_interval_ms(2), 950)
        self.assertEqual(drop_interval_ms(19), 100)
        self.assertEqual(drop_interval_ms(40), 100)


if __name__ == "__main__":
    unittest.main()
