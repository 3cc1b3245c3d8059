import io

import pytest

from ledgerchain.hashing import hash_message
from ledgerchain.transaction import Transaction


def test_hashed_message_uses_value_sender_receiver():
    tx = Transaction(42, "alice", "bob")
    assert tx.hashed_message() == hash_message(42, "alice", "bob")


def test_verify_accepts_own_digest():
    tx = Transaction(42, "alice", "bob")
    assert tx.verify_hashed_message(tx.hashed_message()) is True


def test_verify_rejects_other_digest():
    tx = Transaction(42, "alice", "bob")
    other = Transaction(42, "bob", "alice")
    assert tx.verify_hashed_message(other.hashed_message()) is False
    assert tx.verify_hashed_message("") is False


def test_dump_info_format():
    stream = io.StringIO()
    Transaction(7, "alice", "bob").dump_info(stream)
    assert stream.getvalue() == (
        "Sender Name: alice\nReceiver Name: bob\nTransaction Value: 7\n"
    )


@pytest.mark.parametrize("value", [-1, 2**32])
def test_value_out_of_range(value):
    with pytest.raises(ValueError):
        Transaction(value, "alice", "bob")


def test_transaction_is_immutable():
    tx = Transaction(1, "alice", "bob")
    with pytest.raises(AttributeError):
        tx.value = 2
    assert tx.value == 1
    assert tx.hashed_message() == hash_message(1, "alice", "bob")