import string

import pytest

from ledgerchain.hashing import hash_message, usage_message


def test_empty_values_digest_is_fixed_by_key_pattern():
    assert hash_message(0, "", "") == "43210fedcba987654321"


@pytest.mark.parametrize(
    "key,value1,value2",
    [(0, "alice", "bob"), (12345, "x", ""), (4294967295, "", "carol"), (7, "ünï", "çødé")],
)
def test_digest_shape(key, value1, value2):
    digest = hash_message(key, value1, value2)
    assert len(digest) == 20
    assert set(digest) <= set(string.hexdigits.lower())


def test_empty_first_value_leaves_first_half_at_key_pattern():
    assert hash_message(5, "", "bob")[:10] == hash_message(5, "", "")[:10]


def test_empty_second_value_leaves_second_half_at_key_pattern():
    assert hash_message(5, "alice", "")[10:] == hash_message(5, "", "")[10:]


def test_only_low_key_bits_matter():
    assert hash_message(3, "alice", "bob") == hash_message(3 + 16, "alice", "bob")
    assert hash_message(3, "alice", "bob") != hash_message(4, "alice", "bob")


def test_usage_message():
    assert usage_message() == "Usage: ./mtm_blockchain <op> <source> <target> "