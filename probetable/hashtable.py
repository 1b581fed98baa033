"""Open-addressing hash table with pluggable probing strategies."""

from __future__ import annotations

import sys
from collections.abc import Callable, Hashable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol, TextIO

from probetable.strhash import StringHash

_MASK64 = (1 << 64) - 1

# Prime table sizes used as the table grows.
CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

# Moduli for the double-hash step size, chosen just below the table size.
DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class Prober(Protocol):
    """Produces the sequence of table locations to try for a key."""

    def sequence(self, start: int, m: int, key: Any) -> Iterator[int]:
        ...


class LinearProber:
    """Probe consecutive locations starting from the home slot."""

    def sequence(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield at most m locations: start, start+1, ... modulo m."""
        for probes in range(m):
            yield (start + probes) % m


class DoubleHashProber:
    """Probe with a step size derived from a second hash of the key."""

    def __init__(self, h2: Optional[Callable[[Any], int]] = None) -> None:
        self.h2 = StringHash() if h2 is None else h2

    @staticmethod
    def _modulus_for(table_size: int) -> int:
        modulus = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= table_size:
                break
            modulus = value
        return modulus

    def step(self, m: int, key: Any) -> int:
        """Step size used for the key in a table of size m."""
        modulus = self._modulus_for(m)
        return modulus - self.h2(key) % modulus

    def sequence(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield at most m locations: start + i*step modulo m."""
        step = self.step(m, key)
        for probes in range(m):
            yield (start + probes * step) % m


@dataclass
class _HashItem:
    key: Any
    value: Any
    deleted: bool = False


def _default_hash(key: Hashable) -> int:
    return hash(key) & _MASK64


class HashTable:
    """Map keys to values using open addressing and lazy deletion."""

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Optional[Prober] = None,
        hash_func: Optional[Callable[[Any], int]] = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober: Prober = LinearProber() if prober is None else prober
        self._hash = _default_hash if hash_func is None else hash_func
        self._m_index = 0
        self._table: list[Optional[_HashItem]] = [None] * CAPACITIES[0]
        self._total_probes = 0
        self._num_items = 0
        self._num_deleted = 0

    @property
    def capacity(self) -> int:
        """Current number of slots."""
        return CAPACITIES[self._m_index]

    def __len__(self) -> int:
        return self._num_items

    def empty(self) -> bool:
        """True if the table holds no live items."""
        return self._num_items == 0

    def _load(self) -> float:
        return (self._num_items + self._num_deleted) / self.capacity

    def insert(self, key: Any, value: Any) -> None:
        """Add the pair, or replace the value if the key is present.

        Raises RuntimeError if no free location can be found.
        """
        if self._load() >= self._resize_alpha:
            self._resize()
        loc = self._probe(key)
        if loc is None:
            raise RuntimeError("No available locations")
        slot = self._table[loc]
        if slot is None:
            self._table[loc] = _HashItem(key, value)
            self._num_items += 1
        elif slot.key == key:
            if slot.deleted:
                slot.deleted = False
                self._num_deleted -= 1
                self._num_items += 1
            slot.value = value

    def remove(self, key: Any) -> None:
        """Mark the key's item deleted; do nothing if the key is absent."""
        item = self._internal_find(key)
        if item is not None and not item.deleted:
            item.deleted = True
            self._num_deleted += 1
            self._num_items -= 1

    def find(self, key: Any) -> Optional[tuple[Any, Any]]:
        """Return the (key, value) pair, or None if the key is absent."""
        item = self._internal_find(key)
        if item is None:
            return None
        return item.key, item.value

    def at(self, key: Any) -> Any:
        """Return the value for the key; raise KeyError if absent."""
        item = self._internal_find(key)
        if item is None:
            raise KeyError(key)
        return item.value

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        """Replace the value of an existing key; raise KeyError if absent."""
        item = self._internal_find(key)
        if item is None:
            raise KeyError(key)
        item.value = value

    def __contains__(self, key: Any) -> bool:
        return self._internal_find(key) is not None

    def report_all(self, out: TextIO) -> None:
        """Write every occupied bucket, including deleted ones."""
        for index, item in enumerate(self._table):
            if item is not None:
                out.write(
                    f"Bucket {index}: {item.key} {item.value} "
                    f"deleted: {int(item.deleted)}\n"
                )

    def clear_total_probes(self) -> None:
        """Reset the probe counter."""
        self._total_probes = 0

    def total_probes(self) -> int:
        """Number of probe attempts made since the last reset."""
        return self._total_probes

    def _internal_find(self, key: Any) -> Optional[_HashItem]:
        loc = self._probe(key)
        if loc is None:
            return None
        return self._table[loc]

    def _probe(self, key: Any) -> Optional[int]:
        """Location holding the live key, or the first empty slot, or None."""
        m = self.capacity
        start = self._hash(key) % m
        for loc in self._prober.sequence(start, m, key):
            self._total_probes += 1
            slot = self._table[loc]
            if slot is None:
                return loc
            if slot.key == key and not slot.deleted:
                return loc
        # The attempt that reports exhaustion counts as a probe too.
        self._total_probes += 1
        return None

    def _resize(self) -> None:
        if self._load() < self._resize_alpha:
            return
        if self._m_index + 1 >= len(CAPACITIES):
            raise RuntimeError("No more valid capacity sizes available for resizing")
        self._m_index += 1
        new_size = CAPACITIES[self._m_index]
        old_table = self._table
        self._table = [None] * new_size
        self._num_items = 0
        self._num_deleted = 0
        for item in old_table:
            if item is None or item.deleted:
                continue
            start = self._hash(item.key) % new_size
            loc = next(
                (
                    candidate
                    for candidate in self._prober.sequence(start, new_size, item.key)
                    if self._table[candidate] is None
                ),
                None,
            )
            if loc is None:
                raise RuntimeError("Resize failed: could not find a valid spot.")
            self._table[loc] = _HashItem(item.key, item.value)
            self._num_items += 1


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a double-hashing table and print what happens."""
    table = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if table.find("hi1") is not None:
        print("Found hi1")
        table["hi1"] += 1
        print(f"Incremented hi1's value to: {table['hi1']}")
    if table.find("doesnotexist") is None:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(table)}")
    table.remove("hi7")
    table.remove("hi9")
    print(f"HT size: {len(table)}")
    if table.find("hi9") is not None:
        print("Found hi9")
    else:
        print("Did not find hi9")
    table.insert("hi7", 17)
    print(f"size: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())