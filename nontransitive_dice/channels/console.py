"""
console.py
Interactive terminal channel: prints the house's commitments, reads the counterpart's answers and
renders engine events. Input and output functions are injectable so the dialogue can be tested.
Related modules:
- base.py: InteractionChannel interface.
- core/probability.py: Data behind the '?' help table.
"""

from ..core.probability import probability_table
from ..core.protocol import CANCELLED
from ..core.state import COMPUTER, COUNTERPART, TIE
from .base import InteractionChannel

EXIT_KEY = "X"
HELP_KEY = "?"
TABLE_BORDER = "+------------------+------------------+-------------+-------------+---------+"


def format_probability_table(dice):
    """
    Render the pairwise win chances of all dice as text lines.
    """
    lines = [
        TABLE_BORDER,
        "| Dice 1           | Dice 2           | Dice 1 Wins | Dice 2 Wins | Draw    |",
        TABLE_BORDER,
    ]
    for row in probability_table(dice):
        lines.append(
            f"| {str(dice[row.first]):<16} | {str(dice[row.second]):<16} "
            f"| {row.first_wins * 100:10.2f}% | {row.second_wins * 100:10.2f}% | {row.draw * 100:6.2f}% |"
        )
    lines.append(TABLE_BORDER)
    return lines


class ConsoleChannel(InteractionChannel):
    """
    Console dialogue with a human counterpart.
    'X' (any case) or end of input exits, '?' shows the probability table, anything that is not a
    listed option is rejected and asked again.
    Args:
        dice (list[Die]): Die collection, for the help table.
        input_fn: Reads one line; defaults to input().
        output_fn: Prints one line; defaults to print().
    """
    def __init__(self, dice, input_fn=input, output_fn=print):
        self.dice = dice
        self.input_fn = input_fn
        self.output_fn = output_fn
        self._prompt = "Try to guess my selection."

    def _read(self):
        try:
            return self.input_fn("Your selection: ").strip()
        except EOFError:
            return None

    def _ask(self, options):
        """
        Print the options and loop until the answer is one of their keys.
        Args:
            options (list[tuple[str, str]]): (key, label) pairs; keys are the accepted answers.
        Returns:
            int: Position of the chosen option, or CANCELLED.
        """
        for key, label in options:
            self.output_fn(f"{key} - {label}")
        self.output_fn(f"{EXIT_KEY} - exit")
        self.output_fn(f"{HELP_KEY} - help")
        keys = [key for key, _ in options]
        while True:
            answer = self._read()
            if answer is None or answer.upper() == EXIT_KEY:
                return CANCELLED
            if answer == HELP_KEY:
                self.show_help()
                continue
            if answer in keys:
                return keys.index(answer)
            self.output_fn("Invalid input. Try again.")

    def show_help(self):
        for line in format_probability_table(self.dice):
            self.output_fn(line)

    def notify_commitment(self, digest_hex, range_description):
        self.output_fn(f"I selected a random value in the range {range_description} (HMAC={digest_hex}).")

    def request_choice(self, range_):
        self.output_fn(self._prompt)
        return self._ask([(str(i), str(i)) for i in range(range_)])

    def reveal_secret(self, secret_value, key_hex):
        self.output_fn(f"My number is {secret_value} (KEY={key_hex}).")

    def request_die(self, dice, available, opponent=None):
        self.output_fn("Choose your dice:")
        choice = self._ask([(str(n), str(dice[i])) for n, i in enumerate(available)])
        if choice is CANCELLED:
            return CANCELLED
        return available[choice]

    def notify(self, event):
        t = event.get("type")
        if t == "TurnOrderStarted":
            self.output_fn("Let's determine who makes the first move.")
            self._prompt = "Try to guess my selection."
        elif t == "FirstMoverDecided":
            first = event["first_mover"]
            self.output_fn("You go first!" if first == COUNTERPART else "I make the first move!")
        elif t == "DieSelected":
            who = "I" if event["participant"] == COMPUTER else "You"
            self.output_fn(f"{who} choose the [{event['faces']}] dice.")
        elif t == "RollStarted":
            self.output_fn("It's time for my throw." if event["participant"] == COMPUTER else "It's time for your throw.")
            self._prompt = f"Add your number modulo {event['range']}."
        elif t == "ProtocolResolved" and event.get("stage") == "roll":
            self.output_fn(
                f"The result is {event['choice']} + {event['secret']} = {event['result']} (mod {event['range']})."
            )
        elif t == "RollResolved":
            if event["participant"] == COMPUTER:
                self.output_fn(f"My throw is {event['value']}.")
            else:
                self.output_fn(f"Your throw is {event['value']}.")
        elif t == "GameResolved":
            mine, yours = event["computer_roll"], event["counterpart_roll"]
            if event["winner"] == COUNTERPART:
                self.output_fn(f"You win ({yours} > {mine})!")
            elif event["winner"] == COMPUTER:
                self.output_fn(f"I win ({mine} > {yours})!")
            elif event["winner"] == TIE:
                self.output_fn(f"It's a tie ({mine} = {yours})!")
        elif t == "GameAborted":
            self.output_fn("Game aborted. No winner declared.")
