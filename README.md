# probetable

This package has a few hashing utilities and a Boggle solver.

- `probetable.hashtable`: `HashTable` is an open-addressing map.
  - Removed entries stay in the table as tombstones.
  - The table grows through a fixed list of prime capacities. It grows once `(live + deleted) / capacity` reaches `resize_alpha`, which defaults to 0.4.
  - Probing is pluggable. Use `LinearProber` (the default) or `DoubleHashProber`. `DoubleHashProber` takes a second hash function and uses `StringHash` when none is given.
  - The module also exports `CAPACITIES` and `DOUBLE_HASH_MOD_VALUES`.
- `probetable.strhash`: `StringHash` is a case-insensitive hash for strings of letters and digits.
  - The key is split into base-36 groups of six characters, counted from the end.
  - The five groups are weighted by five multipliers, the "r-values".
  - Only the last 30 characters of a key affect the result.
  - Results are taken modulo 2**64.
  - `StringHash(debug=True)`, the default, uses fixed r-values.
  - `StringHash(debug=False)` and `generate_r_values(seed=None)` pick random r-values. When no seed is given, the seed comes from the clock.
  - `letter_digit_to_number` maps `a`–`z` to 0–25 and `0`–`9` to 26–35.
- `probetable.mt19937`: `MT19937` is a 32-bit Mersenne Twister.
  - For a given seed it gives the same output as the standard `mt19937` engine.
  - Call the object to get the next value, or iterate over it.
- `probetable.boggle`: board generation, dictionary parsing and a solver.
  - `gen_board(n, seed)` draws letters with Scrabble frequencies.
  - `format_board` and `print_board` render the board.
  - `parse_dict(fname)` returns the set of words and the set of all their proper prefixes. The prefix set includes `""`. It raises `ValueError` if the file cannot be opened.
  - `boggle(dictionary, prefixes, board)` searches from each cell in three directions: right, down, and diagonally down-right. For each start and direction it records the longest dictionary word read in a straight line.

## Install

```
pip install .
```

## Library use

```python
from probetable.hashtable import HashTable, DoubleHashProber
from probetable.strhash import StringHash

table = HashTable(0.7, DoubleHashProber(StringHash()))
table.insert("hi1", 1)
table["hi1"] += 1
print(table.at("hi1"), len(table), "hi1" in table)
table.remove("hi1")
```

**Missing keys**

- `at` and `table[key]` raise `KeyError` for a missing key.
- Assigning with `table[key] = value` only updates a key that is already present. For an absent key it raises `KeyError`. Use `insert` to add a key.
- `find` returns the `(key, value)` pair, or `None` if the key is not there.

**Errors from `insert`**

`insert` raises `RuntimeError` in two cases:

- no free slot can be found;
- the table has no larger capacity to grow into.

**Inspecting the table**

- `empty()` tells whether the table holds any live items.
- `capacity` is the current number of slots.
- `report_all(out)` writes every occupied bucket, deleted ones included, to a text stream.
- `total_probes()` counts probe attempts since the last reset.
- `clear_total_probes()` resets that counter.

Hashing a string with the fixed r-values:

```python
from probetable.strhash import StringHash

StringHash(debug=True)("abc")   # 9953503400
```

## Commands

Hash a string with the fixed r-values:

```
probetable-strhash abc
```

Generate a board, print it, and list the dictionary words found on it in sorted order:

```
probetable-boggle 4 42 words.txt
```

The arguments are:

1. the board size;
2. the seed;
3. a dictionary file, where each whitespace-separated token is one word.

Run a short demonstration of a double-hashing table:

```
probetable-demo
```

## Tests

```
pip install .[test]
pytest
```