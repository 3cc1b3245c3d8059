"""Keyed digest used to fingerprint transactions."""

from itertools import cycle, islice

_OUT_SIZE = 20
_HALF = _OUT_SIZE // 2
_HEX_DIGITS = "0123456789abcdef"


def _mix(data: bytes):
    """Yield (position, mixed byte) pairs for one hashed value."""
    for position, byte in enumerate(islice(cycle(data), len(data) * _OUT_SIZE)):
        yield position, (byte ^ position) & 0xFF


def hash_message(key: int, value1: str, value2: str) -> str:
    """Return a 20 character hexadecimal digest of two strings under a key.

    The first half of the digest depends on ``value1``, the second half on
    ``value2``, and both on the key.
    """
    digest = [(key ^ (_OUT_SIZE - i)) & 0xFF for i in range(_OUT_SIZE)]
    for position, mixed in _mix(value1.encode("utf-8")):
        digest[position % _HALF] ^= mixed
    for position, mixed in _mix(value2.encode("utf-8")):
        digest[_HALF + (position % _OUT_SIZE) // 2] ^= mixed
    return "".join(_HEX_DIGITS[byte & 0x0F] for byte in digest)


def usage_message() -> str:
    """Return the command-line usage text."""
    return "Usage: ./mtm_blockchain <op> <source> <target> "