"""Thread-safe accumulation of partial fighter records."""

import copy
import threading
from typing import Optional

from ..extraction.models import BIO_FIELDS, ROW_FIELDS, FighterStats
from ..extraction.names import split_name


def _fill_name_from_key(fighter: FighterStats, key: str) -> None:
    """Derive missing name parts from the identity key."""
    if fighter.first_name and fighter.last_name:
        return
    first, last = split_name(key)
    if not fighter.first_name:
        fighter.first_name = first
    if not fighter.last_name:
        fighter.last_name = last


def merge_fighter(existing: FighterStats, partial: FighterStats) -> None:
    """
    Merge a partial record into an existing one in place.

    Row lists are replaced wholesale when the partial's list is non-empty;
    an empty list never erases rows. Scalar fields are only filled when
    the existing value is empty.
    """
    for name in ROW_FIELDS:
        rows = getattr(partial, name)
        if rows:
            setattr(existing, name, copy.deepcopy(rows))

    for name in BIO_FIELDS:
        value = getattr(partial, name)
        if value and not getattr(existing, name):
            setattr(existing, name, value)


class FighterAggregator:
    """Stores one FighterStats per identity key."""

    def __init__(self):
        self._fighters: dict[str, FighterStats] = {}
        self._lock = threading.Lock()

    def upsert(self, key: str, partial: FighterStats) -> bool:
        """
        Add or merge a partial record for key.

        Args:
            key: Normalized fighter name
            partial: Record extracted from a single page

        Returns:
            True if the fighter was new, False if an existing record was
            updated or the key was empty
        """
        if not key:
            return False

        with self._lock:
            existing = self._fighters.get(key)
            if existing is None:
                fighter = copy.deepcopy(partial)
                _fill_name_from_key(fighter, key)
                self._fighters[key] = fighter
                return True

            merge_fighter(existing, partial)
            _fill_name_from_key(existing, key)
            return False

    def get(self, key: str) -> Optional[FighterStats]:
        """Return a copy of the record stored under key."""
        with self._lock:
            fighter = self._fighters.get(key)
            return copy.deepcopy(fighter) if fighter is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._fighters)

    def finalize(self) -> list[FighterStats]:
        """Return copies of all records in insertion order."""
        with self._lock:
            return [copy.deepcopy(f) for f in self._fighters.values()]
