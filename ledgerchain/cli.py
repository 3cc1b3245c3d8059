"""Command-line entry point: format, hash, compress or verify a ledger file."""

import sys

from ledgerchain.blockchain import BlockChain
from ledgerchain.hashing import usage_message

VERIFY_SUCCESS = "Verification passed\n"
VERIFY_FAIL = "Verification failed\n"

_WRITING_OPERATIONS = ("format", "hash", "compress")


def _write(chain: BlockChain, operation: str, target: str) -> None:
    with open(target, "w", encoding="utf-8", newline="\n") as out:
        if operation == "format":
            chain.dump(out)
        elif operation == "hash":
            chain.dump_hashed(out)
        else:
            chain.compress()
            chain.dump(out)


def main(argv=None) -> int:
    """Run ``<op> <source> <target>`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print(usage_message())
        return 0
    operation, source, target = args

    try:
        with open(source, encoding="utf-8") as stream:
            chain = BlockChain.load(stream)
    except (OSError, ValueError) as error:
        print(f"{source}: {error}", file=sys.stderr)
        return 1

    try:
        if operation in _WRITING_OPERATIONS:
            _write(chain, operation, target)
        elif operation == "verify":
            with open(target, encoding="utf-8") as stream:
                passed = chain.verify(stream)
            print(VERIFY_SUCCESS if passed else VERIFY_FAIL)
        else:
            print(usage_message())
    except OSError as error:
        print(f"{target}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())