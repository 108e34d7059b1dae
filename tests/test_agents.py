import random
import unittest

from nontransitive_dice.agents import AGENT_MAP, create_agent
from nontransitive_dice.agents.counter_agent import CounterPickAgent
from nontransitive_dice.agents.random_agent import RandomAgent
from nontransitive_dice.core.dice import Die

DICE = [Die((2, 2, 4, 4, 9, 9)), Die((1, 1, 6, 6, 8, 8)), Die((3, 3, 5, 5, 7, 7))]


class TestAgents(unittest.TestCase):
    """
    Tests for the agent registry and the built-in agents:
      - agents only ever pick an available die,
      - a seeded RandomAgent is reproducible,
      - CounterPickAgent answers the opponent's die with the one that beats it.
    """

    def test_registry_contains_builtin_agents(self):
        self.assertIs(AGENT_MAP["random"], RandomAgent)
        self.assertIs(AGENT_MAP["counter"], CounterPickAgent)
        self.assertIsInstance(create_agent("RANDOM"), RandomAgent)
        with self.assertRaises(ValueError):
            create_agent("unknown")

    def test_random_agent_picks_available_only(self):
        agent = RandomAgent(rng=random.Random(5))
        for _ in range(100):
            self.assertIn(agent.choose_die(DICE, [0, 2], opponent=1), (0, 2))
            self.assertTrue(0 <= agent.choose_number(6) < 6)

    def test_random_agent_is_reproducible_with_seed(self):
        a = RandomAgent(rng=random.Random(42))
        b = RandomAgent(rng=random.Random(42))
        picks_a = [a.choose_die(DICE, [0, 1, 2]) for _ in range(20)]
        picks_b = [b.choose_die(DICE, [0, 1, 2]) for _ in range(20)]
        self.assertEqual(picks_a, picks_b)

    def test_counter_agent_beats_opponent_die(self):
        agent = CounterPickAgent(rng=random.Random(0))
        # A beats B, B beats C, C beats A
        self.assertEqual(agent.choose_die(DICE, [0, 2], opponent=1), 0)
        self.assertEqual(agent.choose_die(DICE, [1, 2], opponent=0), 2)
        self.assertEqual(agent.choose_die(DICE, [0, 1], opponent=2), 1)

    def test_counter_agent_first_pick_is_available(self):
        agent = CounterPickAgent(rng=random.Random(0))
        self.assertIn(agent.choose_die(DICE, [0, 1, 2]), (0, 1, 2))
        self.assertEqual(agent.choose_die(DICE, [1]), 1)


if __name__ == '__main__':
    unittest.main()
