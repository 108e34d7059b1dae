"""
dice.py
Defines the Die model and the parser that turns command-line arguments into a die collection.
Related modules:
- config.py: GameConfig supplies the minimum dice count and the face count per die.
- probability.py: Compares dice face by face.
- engine.py: Rolls dice through the fairness protocol.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config import GameConfig


class DiceConfigError(ValueError):
    """
    Raised when the dice given on the command line cannot form a valid collection.
    """
    pass


@dataclass(frozen=True)
class Die:
    """
    A single die: an ordered, immutable sequence of non-negative integer faces.
    Args:
        faces (tuple[int, ...]): Face values, in the order they are indexed by a roll.
    """
    faces: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.faces)

    def __str__(self) -> str:
        return ",".join(str(f) for f in self.faces)


def parse_die(arg: str, faces_per_die: int) -> Die:
    """
    Parse one comma-separated die description such as "2,2,4,4,9,9".
    Raises:
        DiceConfigError: If the face count is wrong or a face is not a non-negative integer.
    """
    parts = [p.strip() for p in arg.split(",")]
    if len(parts) != faces_per_die:
        raise DiceConfigError(
            f"Invalid dice configuration: {arg}. Each dice must contain exactly "
            f"{faces_per_die} comma-separated integers."
        )
    faces = []
    for p in parts:
        try:
            face = int(p)
        except ValueError:
            raise DiceConfigError(f"Invalid dice configuration: {arg}. '{p}' is not an integer.") from None
        if face < 0:
            raise DiceConfigError(f"Invalid dice configuration: {arg}. Faces must be non-negative.")
        faces.append(face)
    return Die(tuple(faces))


def parse_dice(args: Sequence[str], config: GameConfig = None) -> List[Die]:
    """
    Build the die collection from command-line arguments, one die per argument.
    Args:
        args (list[str]): Die descriptions.
        config (GameConfig, optional): Rule options; defaults to GameConfig().
    Returns:
        list[Die]: The dice, in argument order. Indices are stable for the whole game.
    Raises:
        DiceConfigError: If fewer than config.min_dice dice are given or a die is malformed.
    """
    config = config or GameConfig()
    if len(args) < config.min_dice:
        raise DiceConfigError(f"You must provide at least {config.min_dice} dice.")
    return [parse_die(arg, config.faces_per_die) for arg in args]
