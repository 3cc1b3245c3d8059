"""A single transfer of value between two parties."""

from dataclasses import dataclass
from typing import TextIO

from ledgerchain.hashing import hash_message

MAX_VALUE = 0xFFFFFFFF


@dataclass(frozen=True)
class Transaction:
    """A transfer of ``value`` from ``sender`` to ``receiver``."""

    value: int
    sender: str
    receiver: str

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_VALUE:
            raise ValueError(f"transaction value out of range: {self.value}")

    def hashed_message(self) -> str:
        """Return the digest that fingerprints this transaction."""
        return hash_message(self.value, self.sender, self.receiver)

    def verify_hashed_message(self, hashed_message: str) -> bool:
        """Return True if ``hashed_message`` is this transaction's digest."""
        return self.hashed_message() == hashed_message

    def dump_info(self, stream: TextIO) -> None:
        """Write a readable description of the transaction to ``stream``."""
        stream.write(
            f"Sender Name: {self.sender}\n"
            f"Receiver Name: {self.receiver}\n"
            f"Transaction Value: {self.value}\n"
        )