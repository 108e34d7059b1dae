"""
config.py
Defines the GameConfig dataclass, which centralizes the rule options and numeric constraints for the non-transitive dice game.
Related modules:
- dice.py: Uses GameConfig to validate the dice given on the command line.
- engine.py: Uses GameConfig to pick the house agent and seed its randomness.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options for a single game session.
    Fields:
        min_dice (int): Minimum number of dice in the collection (default 3).
        faces_per_die (int): Exact number of faces every die must have.
        house_agent (str): Registry name of the agent that picks the computer's die.
        audit_commitments (bool): If True, every revealed commitment is re-verified by the engine.
        rng_seed (int|None): Seed for the computer's die-picking randomness. Commitments never use it.
    """
    min_dice: int = 3
    faces_per_die: int = 6
    house_agent: str = "random"
    audit_commitments: bool = True
    # None -> a fresh, non-deterministic random.Random for the house agent
    rng_seed: Optional[int] = None
