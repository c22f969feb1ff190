# wordhash

A small collection of hashing and word-search tools, with no dependencies
outside the standard library:

- `wordhash.strhash` – `StringHash`, a case-insensitive polynomial hash
  for strings of letters and digits.
- `wordhash.mt19937` – `MT19937`, the 32-bit Mersenne Twister, giving the
  same sequence as the standard `mt19937` engine for a given seed.
- `wordhash.hashtable` – `HashTable`, an open-addressing hash table with
  lazy deletion and prime-sized growth, driven by a `LinearProber` or a
  `DoubleHashProber`.
- `wordhash.boggle` – board generation from Scrabble letter frequencies
  and a solver for words read in straight lines.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Hashing strings

```python
from wordhash.strhash import StringHash

h = StringHash(debug=True)
h("abc")        # 9953503400
h("ABC")        # same value: upper-case letters hash as lower case
```

The key is split into chunks of six characters taken from its end. Each
chunk is read as a base-36 number (`a`–`z` are 0–25, `0`–`9` are 26–35;
see `letter_digit_to_number`, `chunk_value` and `chunk_values`), and the
five chunk values are combined with five weights, modulo 2**64. Keys
longer than 30 characters raise `ValueError`.

With `debug=True` (the default) the weights are fixed, so results are
reproducible. With `debug=False`, or after calling `generate_r_values()`,
the weights are drawn from an `MT19937` seeded from the clock.

From the command line:

```
wordhash-str abc
```

prints `h(abc)=9953503400`, using the fixed weights.

## Mersenne Twister

```python
from wordhash.mt19937 import MT19937

rng = MT19937(5489)
rng()           # 3499211612, the first output of the standard engine
```

An `MT19937` is also an iterator that never ends.

## Hash table

```python
from wordhash.hashtable import HashTable, DoubleHashProber
from wordhash.strhash import StringHash

table = HashTable(0.7, DoubleHashProber(StringHash()), hash)
table.insert("hi1", 1)
table["hi1"] += 1
"hi1" in table          # True
table.find("hi1")       # ("hi1", 2)
table.remove("hi1")
len(table)              # 0
table.is_empty()        # True
```

- `insert(key, value)` adds a key or replaces the value of an existing
  one. Assigning with `table[key] = value` only replaces an existing
  value and raises `KeyError` for a missing key.
- `at()` and indexing raise `KeyError` for a missing key; `find()` returns
  the stored `(key, value)` pair or `None`. `remove()` does nothing for a
  missing key.
- Removed entries stay as deleted slots until the table grows. The table
  grows to the next prime capacity once its load factor, deleted slots
  included, reaches `resize_alpha` (0.4 by default). `insert` raises
  `RuntimeError` when no free slot is found or the largest capacity has
  been reached.
- The prober defaults to `LinearProber` and the hasher to the built-in
  `hash`. `DoubleHashProber` uses a `StringHash` as its second hash unless
  given another.
- `report_all(out)` writes every occupied bucket (deleted ones included)
  to `out`, or to standard output; `total_probes()` and
  `clear_total_probes()` count probe attempts.

A short demonstration run:

```
wordhash-table-demo
```

## Boggle

```
wordhash-boggle <size> <seed> <dictionary file>
```

prints a `size` x `size` board generated from `seed`, then the number of
words found and the words themselves in sorted order. The dictionary file
holds whitespace-separated words; they must be upper case to match the
board letters.

In code:

```python
from wordhash.boggle import gen_board, parse_dict, boggle, format_board

board = gen_board(4, 42)
print(format_board(board))
words, prefixes = parse_dict("words.txt")
found = boggle(words, prefixes, board)
```

`parse_dict` raises `ValueError` if the file cannot be opened. From each
cell, `boggle` reads to the right, down, and diagonally down-right, and
keeps only the longest dictionary word in each of those directions.
Shorter words along the same line from the same cell are not reported.