"""
protocol.py
Implements one commit-reveal exchange between the house and its counterpart.
Related modules:
- commitment.py: KeyedCommitment produces the committed secret.
- engine.py: Runs the protocol once for turn order and once per throw.
- channels/: Supply the notify / request_choice / reveal callbacks.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Union

from .commitment import Commitment, KeyedCommitment, verify


class Cancelled:
    """
    Marker returned instead of a value when the counterpart exits at a prompt.
    Use the CANCELLED singleton rather than creating new instances.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "CANCELLED"

    def __bool__(self):
        return False


CANCELLED = Cancelled()


class VerificationMismatch(Exception):
    """
    Raised when a revealed commitment does not reproduce the published digest,
    or when the combined value does not follow from the revealed numbers.
    """
    pass


@dataclass(frozen=True)
class ProtocolResult:
    """
    Outcome of one protocol run.
    Fields:
        combined_value (int): (counterparty_choice + secret_value) mod range_.
        counterparty_choice (int): The counterpart's own number.
        commitment (Commitment): The house's commitment, already revealed.
        range_ (int): The range the run was made for.
    """
    combined_value: int
    counterparty_choice: int
    commitment: Commitment
    range_: int


def describe_range(range_: int) -> str:
    return f"0..{range_ - 1}"


def audit(result: ProtocolResult) -> None:
    """
    Independently re-check a finished run.
    Raises:
        VerificationMismatch: If the digest or the combined value do not match.
    """
    c = result.commitment
    if not verify(c.key, c.secret_value, c.digest):
        raise VerificationMismatch(f"digest {c.digest_hex} does not match revealed value {c.secret_value}")
    expected = (result.counterparty_choice + c.secret_value) % result.range_
    if expected != result.combined_value:
        raise VerificationMismatch(f"combined value {result.combined_value} != {expected}")


class FairnessProtocol:
    """
    Commit first, ask second, reveal last.
    The digest is handed to notify before request_choice is called, and the key only reaches
    reveal after the combined value is fixed, so neither side can steer the result alone.
    Args:
        commitments (KeyedCommitment, optional): Commitment generator; tests inject one with a forced source.
    """

    def __init__(self, commitments: KeyedCommitment = None):
        self.commitments = commitments or KeyedCommitment()

    def run(self,
            range_: int,
            notify: Callable[[str, str], None],
            request_choice: Callable[[], Union[int, Cancelled]],
            reveal: Callable[[int, str], None]) -> Union[ProtocolResult, Cancelled]:
        """
        Run one exchange for a value in [0, range_).
        Args:
            range_ (int): Size of the value space, > 0.
            notify: Receives (digest_hex, range_description) before the counterpart chooses.
            request_choice: Returns the counterpart's number in [0, range_) or CANCELLED.
            reveal: Receives (secret_value, key_hex) once the combined value is fixed.
        Returns:
            ProtocolResult, or CANCELLED if the counterpart exited (no reveal happens then).
        Raises:
            ValueError: If range_ <= 0 or request_choice returns a number outside the range.
        """
        commitment = self.commitments.generate(range_)
        notify(commitment.digest_hex, describe_range(range_))

        choice = request_choice()
        if choice is CANCELLED:
            logging.debug(f"protocol run over {describe_range(range_)} cancelled before reveal")
            return CANCELLED
        if not 0 <= choice < range_:
            raise ValueError(f"choice {choice} outside {describe_range(range_)}")

        combined = (choice + commitment.secret_value) % range_
        reveal(commitment.secret_value, commitment.key_hex)
        logging.debug(f"protocol run: {choice} + {commitment.secret_value} = {combined} (mod {range_})")
        return ProtocolResult(
            combined_value=combined,
            counterparty_choice=choice,
            commitment=commitment,
            range_=range_,
        )
