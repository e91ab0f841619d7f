"""
clue_table.py
=============
Chained hash table mapping clue text → suspect name.

The table is a fixed array of buckets; each bucket holds a singly linked
chain of HashEntry nodes. New clues are pushed at the head of their chain,
so chains read in reverse insertion order.

Public API summary:
    table = ClueSuspectTable()
    table.insert_or_update(clue, suspect) → None
    table.lookup(clue)                    → suspect | None
    clue in table, len(table), table.suspects(), table.items()
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from config import HASH_CONFIG, HashConfig
from models import HashEntry

logger = logging.getLogger("mansion_mystery.clue_table")

_MASK_64 = (1 << 64) - 1


def hash_clue(clue: str, config: HashConfig = HASH_CONFIG) -> int:
    """
    Return the bucket index for `clue`.

    djb2 over the UTF-8 bytes of the clue (``h = h * 33 + byte`` starting at
    5381 with the default config), truncated to 64 bits at every step and
    reduced modulo ``config.bucket_count`` at the end.

    Example:
        >>> hash_clue("") == 5381 % 101
        True
    """
    h = config.seed
    for byte in clue.encode("utf-8"):
        h = (h * config.multiplier + byte) & _MASK_64
    return h % config.bucket_count


class ClueSuspectTable:
    """
    Fixed-size chained hash table of clue → suspect associations.

    Invariant: at most one entry per distinct clue across all buckets.
    """

    def __init__(self, config: HashConfig = HASH_CONFIG) -> None:
        if config.bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {config.bucket_count}")
        self._config = config
        self._buckets: List[Optional[HashEntry]] = [None] * config.bucket_count
        self._size = 0

    @classmethod
    def from_mapping(
        cls,
        mapping: Dict[str, str],
        config: HashConfig = HASH_CONFIG,
    ) -> "ClueSuspectTable":
        """Build a table holding every pair of `mapping`."""
        table = cls(config)
        for clue, suspect in mapping.items():
            table.insert_or_update(clue, suspect)
        logger.debug("Built clue table with %d entries.", len(table))
        return table

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def bucket_index(self, clue: str) -> int:
        return hash_clue(clue, self._config)

    def _find(self, clue: str) -> Optional[HashEntry]:
        entry = self._buckets[self.bucket_index(clue)]
        while entry is not None:
            if entry.clue == clue:
                return entry
            entry = entry.next
        return None

    def insert_or_update(self, clue: str, suspect: str) -> None:
        """
        Associate `clue` with `suspect`.

        An existing entry for `clue` has its suspect replaced; otherwise a new
        entry is pushed at the head of the clue's bucket chain.
        """
        existing = self._find(clue)
        if existing is not None:
            if existing.suspect != suspect:
                logger.debug(
                    "Clue %r reassigned: %r -> %r", clue, existing.suspect, suspect
                )
            existing.suspect = suspect
            return

        idx = self.bucket_index(clue)
        self._buckets[idx] = HashEntry(clue=clue, suspect=suspect, next=self._buckets[idx])
        self._size += 1

    def lookup(self, clue: str) -> Optional[str]:
        """Return the suspect associated with `clue`, or None when absent."""
        entry = self._find(clue)
        return entry.suspect if entry is not None else None

    # ------------------------------------------------------------------
    # Read-only helpers
    # ------------------------------------------------------------------

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self._find(clue) is not None

    def __len__(self) -> int:
        return self._size

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield every (clue, suspect) pair, bucket by bucket."""
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.clue, entry.suspect
                entry = entry.next

    def suspects(self) -> List[str]:
        """Sorted distinct suspect names present in the table."""
        return sorted({suspect for _, suspect in self.items()})

    def chain(self, index: int) -> List[str]:
        """Clues stored in bucket `index`, head first."""
        clues: List[str] = []
        entry = self._buckets[index]
        while entry is not None:
            clues.append(entry.clue)
            entry = entry.next
        return clues
