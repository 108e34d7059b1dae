import unittest

from nontransitive_dice.core.dice import Die
from nontransitive_dice.core.probability import probability_table, win_probability


class TestProbability(unittest.TestCase):
    def test_classic_pair(self):
        a = Die((2, 2, 4, 4, 9, 9))
        b = Die((1, 1, 6, 6, 8, 8))
        self.assertAlmostEqual(win_probability(a, b), 5 / 9)
        self.assertAlmostEqual(win_probability(b, a), 4 / 9)

    def test_identical_dice_only_draw_on_equal_faces(self):
        d = Die((1, 2, 3, 4, 5, 6))
        self.assertAlmostEqual(win_probability(d, d), 15 / 36)

    def test_non_transitive_cycle(self):
        a = Die((2, 2, 4, 4, 9, 9))
        b = Die((1, 1, 6, 6, 8, 8))
        c = Die((3, 3, 5, 5, 7, 7))
        self.assertGreater(win_probability(a, b), 0.5)
        self.assertGreater(win_probability(b, c), 0.5)
        self.assertGreater(win_probability(c, a), 0.5)

    def test_table_rows_cover_each_pair_once(self):
        dice = [Die((1,) * 6), Die((2,) * 6), Die((1, 1, 1, 2, 2, 2))]
        rows = probability_table(dice)
        self.assertEqual([(r.first, r.second) for r in rows], [(0, 1), (0, 2), (1, 2)])
        for r in rows:
            self.assertAlmostEqual(r.first_wins + r.second_wins + r.draw, 1.0)
        self.assertAlmostEqual(rows[0].second_wins, 1.0)
        self.assertAlmostEqual(rows[1].draw, 0.5)


if __name__ == '__main__':
    unittest.main()
