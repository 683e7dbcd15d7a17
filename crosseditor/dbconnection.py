"""Reading and writing crossroads in the database."""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from crosseditor.auth_state import ANY, AuthState
from crosseditor.dbsettings import ConnectionSettings
from crosseditor.dbvalue import DbValue
from crosseditor.queries import REGIONS_QUERY, crosses_query, get_cross_query, send_cross_query

Connector = Callable[[ConnectionSettings], Any]
Record = dict[str, DbValue]


@dataclass(frozen=True)
class Status:
    """Outcome of an operation: 1 on success, 0 with an error message."""

    v: int = -1
    err: str = ""

    @property
    def ok(self) -> bool:
        return self.v == 1


def _records(cursor: Any) -> list[Record]:
    names = [d[0] for d in cursor.description or ()]
    return [{n: DbValue(v) for n, v in zip(names, row)} for row in cursor.fetchall()]


class DbConnection:
    """Talks to the database through a DB-API connection.

    ``connector`` opens a connection from the settings; its driver must
    accept ``:name`` placeholders.
    """

    def __init__(
        self,
        settings: ConnectionSettings,
        connector: Connector,
        auth: AuthState | None = None,
        on_stage: Callable[[str], None] | None = None,
    ) -> None:
        self.settings = settings
        self._connector = connector
        self.auth = auth
        self._on_stage = on_stage

    def _open(self) -> Any:
        try:
            return self._connector(self.settings)
        except Exception as exc:
            raise ConnectionError(str(exc)) from exc

    @staticmethod
    def _query(conn: Any, sql: str) -> list[Record]:
        try:
            cursor = conn.cursor()
            cursor.execute(sql)
            return _records(cursor)
        except Exception as exc:
            raise ConnectionError(str(exc)) from exc

    def _allowed(self, region: int, area: int) -> bool:
        if self.auth is None:
            return True
        if self.auth.region != ANY and region != self.auth.region:
            return False
        return ANY in self.auth.areas or area in self.auth.areas

    def check(self) -> Status:
        """Try to connect."""
        try:
            with closing(self._connector(self.settings)):
                return Status(1)
        except Exception as exc:
            return Status(0, str(exc))

    def fetch_region_crosses(self) -> list[Record]:
        """Every crossroad the user may see, with region and area names."""
        data: list[Record] = []
        with closing(self._open()) as conn:
            for region in self._query(conn, REGIONS_QUERY):
                blank = DbValue()
                region_id = region.get("region", blank)
                area_id = region.get("area", blank)
                if not self._allowed(region_id.as_int(), area_id.as_int()):
                    continue
                if self._on_stage is not None:
                    self._on_stage(f"{region_id.as_str()}/{area_id.as_str()}")
                for cross in self._query(conn, crosses_query(region_id.as_int(), area_id.as_int())):
                    cross["nameregion"] = region.get("nameregion", blank)
                    cross["namearea"] = region.get("namearea", blank)
                    data.append(cross)
        return data

    def send(self, rac: Sequence[int], data: Mapping[str, DbValue]) -> Status:
        """Store picture, map, extension and state of crossroad ``rac``."""
        def value(key: str, as_bytes: bool) -> Any:
            item = data.get(key, DbValue())
            if item.data is None:
                return None
            return item.as_bytes() if as_bytes else item.as_str()

        try:
            with closing(self._connector(self.settings)) as conn:
                params = {
                    "bottom": value(":bottom", True),
                    "picture": value(":picture", True),
                    "extend": value(":extend", False),
                    "state": value(":state", False),
                }
                cursor = conn.cursor()
                cursor.execute(send_cross_query(rac[0], rac[1], rac[2]), params)
                conn.commit()
        except Exception as exc:
            return Status(0, str(exc))
        return Status(1)

    def fetch_cross(self, rac: Sequence[int]) -> list[Record]:
        """The stored records of crossroad ``rac``."""
        with closing(self._open()) as conn:
            return self._query(conn, get_cross_query(rac[0], rac[1], rac[2]))