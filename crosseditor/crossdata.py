"""Exchange of the edited crossroad with the database."""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from crosseditor.crosses import CrossRegistry
from crosseditor.dbconnection import DbConnection, Record, Status
from crosseditor.dbvalue import DbValue


class CrossData:
    """Loads crossroad lists and single crossroads, and sends edits back."""

    def __init__(self, connection: DbConnection) -> None:
        self.connection = connection
        self.single_rac: Record = {}
        self.on_saved: list[Callable[[Status], None]] = []
        self.on_loaded: list[Callable[[], None]] = []

    def update_region(self, registry: CrossRegistry) -> None:
        """Fill ``registry`` with every crossroad the user may see."""
        registry.set_region(self.connection.fetch_region_crosses())

    def send_current_cross(self, rac: Sequence[int], data: Mapping[str, DbValue]) -> Status:
        """Store ``data`` for crossroad ``rac`` and report the outcome."""
        status = self.connection.send(rac, data)
        for listener in self.on_saved:
            listener(status)
        return status

    def ask_current_cross(self, rac: Sequence[int]) -> Record:
        """Fetch crossroad ``rac``; the first record becomes ``single_rac``."""
        records = self.connection.fetch_cross(rac)
        if records:
            self.single_rac = records[0]
            for listener in self.on_loaded:
                listener()
        return self.single_rac