"""The crossroads available to the user and the one being edited."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping

from crosseditor.dbvalue import DbValue
from crosseditor.paths import default_paths

MISSING_NAME = "Не существует"


@dataclass(eq=False)
class CrossObject:
    """A crossroad identified by region, area and number."""

    region: int = 0
    area: int = 0
    subarea: int = 0
    number: int = 0
    desc_region: str = ""
    desc_area: str = ""
    desc_subarea: str = ""
    desc_object: str = ""
    ledit: str = ""

    def _key(self) -> tuple[int, int, int]:
        return (self.region, self.area, self.number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossObject):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def path(self) -> str:
        """Relative folder of the crossroad, wrapped in separators."""
        sep = os.sep
        return f"{sep}{self.region}{sep}{self.area}{sep}{self.number}{sep}"

    def name_title(self) -> str:
        """Identifiers and description for display."""
        sep = os.sep
        return f"{self.region}{sep}{self.area}{sep}{self.number} : {self.desc_object}"


@dataclass
class CrossRegistry:
    """Known crossroads plus the identifiers of the current one."""

    crosses: list[CrossObject] = field(default_factory=list)
    last_folder: str = field(default_factory=lambda: str(default_paths().cross))
    on_loaded: list[Callable[[], None]] = field(default_factory=list, repr=False)
    on_selected: list[Callable[[str], None]] = field(default_factory=list, repr=False)
    _current: tuple[int, int, int] = field(default=(0, 0, 0), init=False)

    def clear(self) -> None:
        """Forget every known crossroad."""
        self.crosses.clear()

    def set_current(self, region: int, area: int, cross: int) -> None:
        """Make a crossroad current and announce its title."""
        self._current = (region, area, cross)
        title = f"{region}/{area}/{cross} : {self.name()}"
        for listener in self.on_selected:
            listener(title)

    def current(self) -> tuple[int, int, int]:
        """Region, area and number of the current crossroad."""
        return self._current

    def name(self) -> str:
        """Description of the current crossroad."""
        for obj in self.crosses:
            if obj._key() == self._current:
                return obj.desc_object
        return MISSING_NAME

    def set_region(self, records: Iterable[Mapping[str, DbValue]]) -> None:
        """Replace the known crossroads with database records."""
        self.crosses = [self._from_record(rec) for rec in records]
        self.set_current(*self._current)
        for listener in self.on_loaded:
            listener()

    @staticmethod
    def _from_record(record: Mapping[str, DbValue]) -> CrossObject:
        def get(key: str) -> DbValue:
            return record.get(key, DbValue())

        subarea = get("subarea").as_int()
        return CrossObject(
            region=get("region").as_int(),
            area=get("area").as_int(),
            subarea=subarea,
            number=get("id").as_int(),
            desc_region=get("nameregion").as_str(),
            desc_area=get("namearea").as_str(),
            desc_subarea=str(subarea),
            desc_object=get("describ").as_str(),
            ledit=get("ledit").as_str(),
        )