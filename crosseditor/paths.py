"""Locations of the editor's files and working directories."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar


@dataclass(frozen=True)
class AppPaths:
    """File names and working directories of the editor."""

    tempsys: Path
    apps: Path

    MAP: ClassVar[str] = "map.png"
    TEMPLATE: ClassVar[str] = "template.tmpl"
    SVG: ClassVar[str] = "cross.svg"
    EXTEND: ClassVar[str] = "excross"
    CONNECTION: ClassVar[str] = "con"
    APP_SETTINGS: ClassVar[str] = "app"
    AUTH: ClassVar[str] = "cre"

    @property
    def app(self) -> Path:
        """Root of the editor's own data."""
        return self.apps / "cross_editor"

    @property
    def soft(self) -> Path:
        """Application settings."""
        return self.app / "app"

    @property
    def cross(self) -> Path:
        """Locally stored crossroads."""
        return self.app / "cross"

    @property
    def dump(self) -> Path:
        """Dumps of local crossroads."""
        return self.app / "dump"

    @property
    def temp(self) -> Path:
        """Target of "save as"."""
        return self.app / "temp"

    @property
    def mem(self) -> Path:
        """Saved editing steps."""
        return self.app / "mem"

    def ensure(self) -> None:
        """Create the working directories that do not exist yet.

        The steps directory is left to be created when it is first needed.
        """
        for directory in (
            self.apps,
            self.app,
            self.soft,
            self.cross,
            self.dump,
            self.temp,
            self.tempsys,
        ):
            directory.mkdir(parents=True, exist_ok=True)


def default_paths(home: Path | str | None = None, temp_dir: Path | str | None = None) -> AppPaths:
    """Paths under the user's home and the system temporary directory."""
    home_dir = Path(home) if home is not None else Path.home()
    tmp = Path(temp_dir) if temp_dir is not None else Path(tempfile.gettempdir())
    return AppPaths(tempsys=tmp / "cross_editor", apps=home_dir / ".ASUDD")