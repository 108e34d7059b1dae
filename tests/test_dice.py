import unittest

from nontransitive_dice.core.config import GameConfig
from nontransitive_dice.core.dice import DiceConfigError, Die, parse_dice


class TestParseDice(unittest.TestCase):
    def test_parses_valid_collection(self):
        dice = parse_dice(["2,2,4,4,9,9", "6,8,1,1,8,6", "7,5,3,7,5,3"])
        self.assertEqual(len(dice), 3)
        self.assertEqual(dice[1], Die((6, 8, 1, 1, 8, 6)))
        self.assertEqual(str(dice[0]), "2,2,4,4,9,9")
        self.assertEqual(len(dice[2]), 6)

    def test_requires_minimum_dice(self):
        with self.assertRaises(DiceConfigError):
            parse_dice(["1,2,3,4,5,6", "1,2,3,4,5,6"])

    def test_rejects_wrong_face_count(self):
        with self.assertRaises(DiceConfigError) as ctx:
            parse_dice(["1,2,3,4,5", "1,2,3,4,5,6", "1,2,3,4,5,6"])
        self.assertIn("1,2,3,4,5", str(ctx.exception))

    def test_rejects_non_integer_and_negative_faces(self):
        with self.assertRaises(DiceConfigError):
            parse_dice(["1,2,3,4,5,x", "1,2,3,4,5,6", "1,2,3,4,5,6"])
        with self.assertRaises(DiceConfigError):
            parse_dice(["1,2,3,4,5,-6", "1,2,3,4,5,6", "1,2,3,4,5,6"])

    def test_config_changes_limits(self):
        cfg = GameConfig(min_dice=4, faces_per_die=4)
        dice = parse_dice(["1,2,3,4"] * 4, cfg)
        self.assertEqual(len(dice), 4)
        with self.assertRaises(DiceConfigError):
            parse_dice(["1,2,3,4"] * 3, cfg)

    def test_config_error_is_value_error(self):
        self.assertTrue(issubclass(DiceConfigError, ValueError))


if __name__ == '__main__':
    unittest.main()
