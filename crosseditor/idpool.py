"""Random identifiers, unique within a pool."""

from __future__ import annotations

import random
from typing import Protocol

_LIMIT = 1000


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class IdPool:
    """Hands out random ids in 1..999 that are not yet in use."""

    def __init__(self, rng: _RandRange | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._ids: list[int] = []

    def __contains__(self, num: object) -> bool:
        return num in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def get(self) -> int:
        """Reserve and return a fresh id."""
        if len({n for n in self._ids if 0 < n < _LIMIT}) >= _LIMIT - 1:
            raise RuntimeError("no free identifiers left")
        num = 0
        while num == 0 or num in self._ids:
            num = self._rng.randrange(_LIMIT)
        self._ids.append(num)
        return num

    def add(self, num: int) -> None:
        """Mark ``num`` as used."""
        self._ids.append(num)

    def remove(self, num: int) -> None:
        """Release one use of ``num``; unknown ids are ignored."""
        if num in self._ids:
            self._ids.remove(num)

    def restore(self, old_num: int, new_num: int) -> None:
        """Replace ``old_num`` with ``new_num``."""
        self.remove(old_num)
        self._ids.append(new_num)