"""An ordered chain of timestamped transactions."""

import re
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, TextIO

from ledgerchain.transaction import MAX_VALUE, Transaction

_VALUE_PATTERN = re.compile(r"\+?[0-9]+")


@dataclass
class Block:
    """One transaction together with the time it was made."""

    transaction: Transaction
    timestamp: str


def _parse_value(word: str) -> int | None:
    if not _VALUE_PATTERN.fullmatch(word):
        return None
    value = int(word)
    return value if value <= MAX_VALUE else None


def _read_records(stream: TextIO) -> Iterator[Block]:
    words = iter(stream.read().split())
    while True:
        record = [word for _, word in zip(range(4), words)]
        if len(record) < 4:
            return
        sender, receiver, raw_value, timestamp = record
        value = _parse_value(raw_value)
        if value is None:
            return
        yield Block(Transaction(value, sender, receiver), timestamp)


class BlockChain:
    """Blocks ordered from the newest to the oldest."""

    def __init__(self, blocks: Iterable[Block]) -> None:
        self._blocks = list(blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def personal_balance(self, name: str) -> int:
        """Return what ``name`` received minus what ``name`` sent."""
        balance = 0
        for block in self._blocks:
            tx = block.transaction
            if tx.receiver == name:
                balance += tx.value
            elif tx.sender == name:
                balance -= tx.value
        return balance

    def append_transaction(
        self, value: int, sender: str, receiver: str, timestamp: str
    ) -> None:
        """Add a new transaction as the newest block."""
        self.append(Transaction(value, sender, receiver), timestamp)

    def append(self, transaction: Transaction, timestamp: str) -> None:
        """Add a copy of ``transaction`` as the newest block."""
        self._blocks.insert(0, Block(replace(transaction), timestamp))

    @classmethod
    def load(cls, stream: TextIO) -> "BlockChain":
        """Read whitespace separated ``sender receiver value timestamp`` records.

        Reading stops at the first incomplete or malformed record.
        """
        blocks = list(_read_records(stream))
        if not blocks:
            raise ValueError("no transaction records found")
        return cls(blocks)

    def dump(self, stream: TextIO) -> None:
        """Write a readable listing of every block to ``stream``."""
        stream.write("BlockChain Info:\n")
        for index, block in enumerate(self._blocks, start=1):
            tx = block.transaction
            stream.write(
                f"{index}.\n"
                f"Sender Name: {tx.sender}\n"
                f"Receiver Name: {tx.receiver}\n"
                f"Transaction Value: {tx.value}\n"
                f"Transaction timestamp: {block.timestamp}\n"
            )

    def dump_hashed(self, stream: TextIO) -> None:
        """Write one digest per line, without a trailing newline."""
        stream.write(
            "\n".join(block.transaction.hashed_message() for block in self._blocks)
        )

    def verify(self, stream: TextIO) -> bool:
        """Return True if ``stream`` holds exactly this chain's digests, in order."""
        digests = stream.read().split()
        return len(digests) == len(self._blocks) and all(
            block.transaction.verify_hashed_message(digest)
            for block, digest in zip(self._blocks, digests)
        )

    def compress(self) -> None:
        """Merge runs of consecutive blocks sharing sender and receiver.

        A merged block keeps the first block's timestamp and sums the values.
        """
        merged: list[Block] = []
        for block in self._blocks:
            tx = block.transaction
            if merged:
                last = merged[-1]
                head = last.transaction
                if head.sender == tx.sender and head.receiver == tx.receiver:
                    last.transaction = replace(
                        head, value=(head.value + tx.value) & MAX_VALUE
                    )
                    continue
            merged.append(Block(tx, block.timestamp))
        self._blocks = merged

    def transform(self, function: Callable[[int], int]) -> None:
        """Replace every transaction value with ``function(value)``."""
        for block in self._blocks:
            tx = block.transaction
            block.transaction = replace(tx, value=function(tx.value) & MAX_VALUE)