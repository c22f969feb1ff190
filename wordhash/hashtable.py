"""Open-addressing hash table with pluggable linear or double-hash probing."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Sequence, TextIO, TypeVar

from .strhash import StringHash

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Prime table sizes used as the table grows.
CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

# Moduli for the double-hash step size, chosen according to the table size.
DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class Prober(ABC):
    """Base for probe sequences; ``next`` returns None once every slot was tried."""

    def __init__(self) -> None:
        self.start = 0
        self.m = 0
        self.num_probes = 0

    def init(self, start: int, m: int, key: Any) -> None:
        """Begin a new probe sequence at ``start`` in a table of size ``m``."""
        self.start = start
        self.m = m
        self.num_probes = 0

    @abstractmethod
    def next(self) -> int | None:
        """Return the next table index to try, or None when probing failed."""


class LinearProber(Prober):
    """Probes consecutive slots, wrapping around the table."""

    def next(self) -> int | None:
        if self.num_probes >= self.m:
            return None
        loc = (self.start + self.num_probes) % self.m
        self.num_probes += 1
        return loc


class DoubleHashProber(Prober):
    """Probes with a step size derived from a second hash of the key."""

    def __init__(self, h2: Callable[[Any], int] | None = None) -> None:
        super().__init__()
        self.h2 = h2 if h2 is not None else StringHash()
        self.step = 0
        self.key: Any = None

    @staticmethod
    def _modulus_for(table_size: int) -> int:
        smaller = [v for v in DOUBLE_HASH_MOD_VALUES if v < table_size]
        return smaller[-1] if smaller else DOUBLE_HASH_MOD_VALUES[0]

    def init(self, start: int, m: int, key: Any) -> None:
        super().init(start, m, key)
        modulus = self._modulus_for(m)
        self.step = modulus - self.h2(key) % modulus
        self.key = key

    def next(self) -> int | None:
        if self.num_probes >= self.m:
            return None
        loc = (self.start + self.num_probes * self.step) % self.m
        self.num_probes += 1
        return loc


@dataclass
class _Slot(Generic[K, V]):
    key: K
    value: V
    deleted: bool = False


class HashTable(Generic[K, V]):
    """Map from keys to values stored by open addressing.

    Removed entries are kept as tombstones until the next resize; the table
    grows to the next prime capacity once the fraction of occupied slots,
    tombstones included, reaches ``resize_alpha``.
    """

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Prober | None = None,
        hasher: Callable[[K], int] | None = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hash = hasher if hasher is not None else hash
        self._capacity_index = 0
        self._table: list[_Slot[K, V] | None] = [None] * CAPACITIES[0]
        self._items = 0
        self._occupied = 0
        self._total_probes = 0

    def is_empty(self) -> bool:
        """True when the table holds no live entries."""
        return self._items == 0

    def __len__(self) -> int:
        return self._items

    def _probe(self, key: K) -> int | None:
        capacity = CAPACITIES[self._capacity_index]
        self._prober.init(self._hash(key) % capacity, capacity, key)
        loc = self._prober.next()
        self._total_probes += 1
        while loc is not None:
            slot = self._table[loc]
            if slot is None or (not slot.deleted and slot.key == key):
                return loc
            loc = self._prober.next()
            self._total_probes += 1
        return None

    def _slot_for(self, key: K) -> _Slot[K, V] | None:
        loc = self._probe(key)
        return None if loc is None else self._table[loc]

    def insert(self, key: K, value: V) -> None:
        """Add a key, or replace the value of an existing one.

        Raises RuntimeError when no free slot can be found or the table
        cannot grow any further.
        """
        if self._occupied / CAPACITIES[self._capacity_index] >= self._resize_alpha:
            self._resize()
        loc = self._probe(key)
        if loc is None:
            raise RuntimeError("No free location found for insert")
        slot = self._table[loc]
        if slot is not None:
            slot.value = value
            return
        self._table[loc] = _Slot(key, value)
        self._items += 1
        self._occupied += 1

    def remove(self, key: K) -> None:
        """Mark the entry for key as deleted; do nothing if it is absent."""
        slot = self._slot_for(key)
        if slot is not None and not slot.deleted:
            slot.deleted = True
            self._items -= 1

    def find(self, key: K) -> tuple[K, V] | None:
        """Return the (key, value) pair for key, or None if it is absent."""
        slot = self._slot_for(key)
        return None if slot is None else (slot.key, slot.value)

    def at(self, key: K) -> V:
        """Return the value for key; raise KeyError if it is absent."""
        slot = self._slot_for(key)
        if slot is None:
            raise KeyError("Bad key")
        return slot.value

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        """Replace the value of an existing key; raise KeyError if it is absent."""
        slot = self._slot_for(key)
        if slot is None:
            raise KeyError("Bad key")
        slot.value = value

    def __contains__(self, key: object) -> bool:
        return self._slot_for(key) is not None  # type: ignore[arg-type]

    def _resize(self) -> None:
        if self._capacity_index + 1 >= len(CAPACITIES):
            raise RuntimeError("max reached")
        self._capacity_index += 1
        old_table = self._table
        self._table = [None] * CAPACITIES[self._capacity_index]
        self._items = 0
        self._occupied = 0
        for slot in old_table:
            if slot is not None and not slot.deleted:
                self.insert(slot.key, slot.value)

    def report_all(self, out: TextIO | None = None) -> None:
        """Write every occupied bucket, tombstones included, to out."""
        stream = sys.stdout if out is None else out
        for index, slot in enumerate(self._table):
            if slot is not None:
                stream.write(f"Bucket {index}: {slot.key} {slot.value}\n")

    def clear_total_probes(self) -> None:
        """Reset the probe counter."""
        self._total_probes = 0

    def total_probes(self) -> int:
        """Number of probe attempts made since the last reset."""
        return self._total_probes


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise a double-hashed table and print what happens."""
    table: HashTable[str, int] = HashTable(0.7, DoubleHashProber(StringHash()))
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