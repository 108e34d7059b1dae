import unittest

from nontransitive_dice.channels.console import ConsoleChannel, format_probability_table
from nontransitive_dice.core.dice import Die
from nontransitive_dice.core.engine import GameEngine
from nontransitive_dice.core.protocol import CANCELLED
from nontransitive_dice.core.state import COMPUTER, COUNTERPART, RESOLVED, TIE

DICE = [Die((2, 2, 4, 4, 9, 9)), Die((1, 1, 6, 6, 8, 8)), Die((3, 3, 5, 5, 7, 7))]


class ScriptedInput:
    def __init__(self, answers):
        self.answers = list(answers)

    def __call__(self, prompt=""):
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def make_channel(answers):
    out = []
    return ConsoleChannel(DICE, input_fn=ScriptedInput(answers), output_fn=out.append), out


class TestConsoleChannel(unittest.TestCase):
    """
    Tests for the console dialogue: option parsing, re-prompting on bad input, exit and help keys,
    and rendering of engine events.
    """

    def test_valid_choice_is_returned(self):
        channel, _ = make_channel(["1"])
        self.assertEqual(channel.request_choice(2), 1)

    def test_invalid_input_is_asked_again(self):
        channel, out = make_channel(["abc", "7", "-1", "3"])
        self.assertEqual(channel.request_choice(6), 3)
        self.assertEqual(out.count("Invalid input. Try again."), 3)

    def test_exit_key_cancels(self):
        for key in ("X", "x"):
            channel, _ = make_channel([key])
            self.assertIs(channel.request_choice(2), CANCELLED)

    def test_end_of_input_cancels(self):
        channel, _ = make_channel([])
        self.assertIs(channel.request_choice(2), CANCELLED)

    def test_help_prints_table_and_keeps_asking(self):
        channel, out = make_channel(["?", "0"])
        self.assertEqual(channel.request_choice(2), 0)
        self.assertIn(format_probability_table(DICE)[1], out)
        self.assertTrue(any("55.56%" in line for line in out))

    def test_request_die_maps_menu_position_to_die_index(self):
        channel, out = make_channel(["1"])
        self.assertEqual(channel.request_die(DICE, [0, 2], opponent=1), 2)
        self.assertIn("0 - 2,2,4,4,9,9", out)
        self.assertIn("1 - 3,3,5,5,7,7", out)

    def test_request_die_exit(self):
        channel, _ = make_channel(["x"])
        self.assertIs(channel.request_die(DICE, [0, 1, 2]), CANCELLED)

    def test_commitment_and_reveal_lines(self):
        channel, out = make_channel([])
        channel.notify_commitment("ABCD", "0..1")
        channel.reveal_secret(1, "EF01")
        self.assertEqual(out, [
            "I selected a random value in the range 0..1 (HMAC=ABCD).",
            "My number is 1 (KEY=EF01).",
        ])

    def test_roll_prompt_follows_events(self):
        channel, out = make_channel(["2"])
        channel.notify({"type": "RollStarted", "participant": COUNTERPART, "range": 6})
        channel.request_choice(6)
        self.assertIn("It's time for your throw.", out)
        self.assertIn("Add your number modulo 6.", out)

    def test_result_lines(self):
        channel, out = make_channel([])
        channel.notify({"type": "GameResolved", "winner": COMPUTER, "computer_roll": 9, "counterpart_roll": 1})
        channel.notify({"type": "GameResolved", "winner": COUNTERPART, "computer_roll": 2, "counterpart_roll": 8})
        channel.notify({"type": "GameResolved", "winner": TIE, "computer_roll": 4, "counterpart_roll": 4})
        self.assertEqual(out, ["I win (9 > 1)!", "You win (8 > 2)!", "It's a tie (4 = 4)!"])

    def test_full_game_on_console(self):
        # coin guess, die menu position, then one number per throw
        channel, out = make_channel(["0", "0", "1", "0"])
        outcome = GameEngine(DICE, channel).play()
        self.assertEqual(outcome.status, RESOLVED)
        self.assertIn(outcome.winner, (COMPUTER, COUNTERPART, TIE))
        self.assertTrue(any(line.startswith("My throw is") for line in out))
        self.assertTrue(any(line.startswith("Your throw is") for line in out))

    def test_exit_mid_game_prints_abort(self):
        channel, out = make_channel(["x"])
        outcome = GameEngine(DICE, channel).play()
        self.assertTrue(outcome.is_aborted)
        self.assertEqual(out[-1], "Game aborted. No winner declared.")


if __name__ == '__main__':
    unittest.main()
