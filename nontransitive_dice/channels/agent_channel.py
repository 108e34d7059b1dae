"""
agent_channel.py
A counterpart driven by an Agent instead of a person, used by the tournament script and tests.
"""

from .base import InteractionChannel


class AgentChannel(InteractionChannel):
    """
    Forwards every request to `agent` and keeps what the house published, so a simulation can
    audit the run afterwards.
    Args:
        agent (Agent): Picks the counterpart's dice and numbers.
    """
    def __init__(self, agent):
        self.agent = agent
        self.digests = []
        self.reveals = []
        self.events = []

    def notify_commitment(self, digest_hex, range_description):
        self.digests.append((digest_hex, range_description))

    def request_choice(self, range_):
        return self.agent.choose_number(range_)

    def reveal_secret(self, secret_value, key_hex):
        self.reveals.append((secret_value, key_hex))

    def request_die(self, dice, available, opponent=None):
        return self.agent.choose_die(dice, available, opponent)

    def notify(self, event):
        self.events.append(event)
