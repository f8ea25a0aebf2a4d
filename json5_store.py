# json5_store.py
# Growable sequence storage backing every JSON5 node's children list.
#
# =============================================================================
#  STORAGE STRATEGIES
# =============================================================================
#
# Two interchangeable strategies share one protocol (append / count / len /
# iteration / indexing / release):
#
# 1. VectorStore keeps an explicit capacity and enlarges it by GROWTH_FACTOR
#    whenever an append would overflow, so appends are amortized O(1).
# 2. ListStore defers to the interpreter's own list growth.
#
# A strategy is chosen per parse call by passing its class (or any
# zero-argument factory) as `store=`. There is no module-level allocator
# state.
#
# The empty sequence is represented by None as well as by a fresh store;
# the module-level helpers accept both.
# =============================================================================

from typing import Any, Iterator, List, Optional

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
GROWTH_FACTOR = 1.75


# ---------------------------------------------------------------------------
# VECTOR STRATEGY
# ---------------------------------------------------------------------------
class VectorStore:
    """
    Amortized-growth sequence with a x1.75 enlarge factor.

    Slots beyond the live count are padding. A fresh or released store has
    no backing list at all.
    """
    __slots__ = ("_slots", "_size")

    def __init__(self):
        self._slots: Optional[List[Any]] = None
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots) if self._slots is not None else 0

    def append(self, value) -> int:
        needed = self._size + 1
        if self._slots is None:
            self._slots = [None] * needed
        elif needed > len(self._slots):
            grown = max(needed, int(needed * GROWTH_FACTOR))
            self._slots.extend([None] * (grown - len(self._slots)))
        self._slots[self._size] = value
        self._size = needed
        return needed

    def count(self) -> int:
        return self._size

    def release(self) -> None:
        self._slots = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._size):
            yield self._slots[i]

    def __getitem__(self, index: int):
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("store index out of range")
        return self._slots[index]

    def __repr__(self):
        return f"VectorStore({list(self)!r})"


# ---------------------------------------------------------------------------
# HOST LIST STRATEGY
# ---------------------------------------------------------------------------
class ListStore:
    """Sequence backed by a plain list; growth is the interpreter's."""
    __slots__ = ("_items",)

    def __init__(self):
        self._items: Optional[List[Any]] = None

    @property
    def capacity(self) -> int:
        return len(self._items) if self._items is not None else 0

    def append(self, value) -> int:
        if self._items is None:
            self._items = []
        self._items.append(value)
        return len(self._items)

    def count(self) -> int:
        return len(self._items) if self._items is not None else 0

    def release(self) -> None:
        self._items = None

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items or ())

    def __getitem__(self, index: int):
        if self._items is None:
            raise IndexError("store index out of range")
        return self._items[index]

    def __repr__(self):
        return f"ListStore({list(self)!r})"


# ---------------------------------------------------------------------------
# NONE-TOLERANT HELPERS
# ---------------------------------------------------------------------------
def append(seq, value) -> int:
    """Append to a store and return the new count. `seq` must not be None."""
    return seq.append(value)


def count(seq) -> int:
    """Element count; None counts as the empty sequence."""
    return 0 if seq is None else seq.count()


def release(seq) -> None:
    """Drop backing storage; releasing None or an empty store is a no-op."""
    if seq is not None:
        seq.release()
