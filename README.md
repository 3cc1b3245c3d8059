# ledgerchain

A small ledger of money transfers kept as a chain of blocks. Each block holds
one transaction (a value, a sender and a receiver) and a timestamp. Blocks are
ordered from the newest to the oldest.

With it you can:

- load a chain from a plain text file,
- write it out in a readable format,
- write the hashed message of every transaction,
- check a file of hashed messages against a chain,
- merge consecutive transfers between the same two people.

## Installation

```
pip install .
```

## Input format

The source file holds whitespace-separated records of four fields, usually one
per line:

```
<sender> <receiver> <value> <timestamp>
```

For example:

```
alice bob 10 1000
alice bob 5 1001
bob carol 3 1002
```

The first record in the file becomes the first (newest) block of the chain.
Values are whole numbers from 0 to 4294967295. Reading stops at the first
incomplete record or at a record whose value is not such a number. A file with
no valid record at all is rejected with a `ValueError`.

## Command line

```
ledgerchain <op> <source> <target>
```

`<op>` is one of:

- `format` writes a readable listing of the chain to `<target>`.
- `hash` writes one hashed message per transaction to `<target>`, one per
  line, with no newline after the last one.
- `compress` merges consecutive blocks that have the same sender and receiver,
  adds up their values, and writes the readable listing to `<target>`.
- `verify` reads hashed messages from `<target>` and prints
  `Verification passed` if they are exactly the chain's messages in order, or
  `Verification failed` otherwise.

With the wrong number of arguments or an unknown operation, the command prints
a usage line and exits with status 0. If the source file cannot be read or
holds no valid record, or the target cannot be opened, an error is printed to
standard error and the exit status is 1.

The readable listing looks like this:

```
BlockChain Info:
1.
Sender Name: alice
Receiver Name: bob
Transaction Value: 10
Transaction timestamp: 1000
```

## Library

```python
import io

from ledgerchain.blockchain import BlockChain
from ledgerchain.transaction import Transaction

chain = BlockChain.load(io.StringIO("alice bob 10 1000\nalice bob 5 1001\n"))
print(len(chain))                     # 2
print(chain.personal_balance("bob"))  # 15

chain.compress()                      # one block: value 15, timestamp 1000
out = io.StringIO()
chain.dump(out)
print(out.getvalue())

hashed = Transaction(10, "alice", "bob").hashed_message()
```

`ledgerchain.blockchain`:

- `Block` — a dataclass holding a `transaction` and a `timestamp`.
- `BlockChain(blocks)` — iterable over its blocks, newest first; `len()` gives
  the number of blocks.
  - `load(stream)` (class method) reads records as described above.
  - `personal_balance(name)` returns what `name` received minus what it sent.
  - `append_transaction(value, sender, receiver, timestamp)` and
    `append(transaction, timestamp)` add a new newest block.
  - `dump(stream)` writes the readable listing; `dump_hashed(stream)` writes
    the hashed messages.
  - `verify(stream)` returns `True` if the stream holds exactly the chain's
    hashed messages, in order.
  - `compress()` merges runs of consecutive blocks with the same sender and
    receiver, keeping the first block's timestamp and summing the values.
  - `transform(function)` replaces every value with `function(value)`.
  Values produced by `compress` and `transform` wrap around modulo 2**32.

`ledgerchain.transaction`:

- `Transaction(value, sender, receiver)` — a frozen dataclass; a value outside
  0 to 4294967295 raises `ValueError`.
  - `hashed_message()` returns the transaction's 20-character digest.
  - `verify_hashed_message(hashed_message)` compares a digest with it.
  - `dump_info(stream)` writes the sender, receiver and value.

`ledgerchain.hashing`:

- `hash_message(key, value1, value2)` returns a 20-character lowercase hex
  digest; the first half depends on `value1`, the second on `value2`, and both
  on `key`.
- `usage_message()` returns the command-line usage text.

## What it does not do

The hashed messages are simple fingerprints, not cryptographic signatures, and
blocks are not linked by hashes of one another. Chains live only in memory and
in the text files you give the command; there is no database or network
support.