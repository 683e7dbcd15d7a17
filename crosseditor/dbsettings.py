"""Database connection settings and their JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from crosseditor.dep import ints_from_json
from crosseditor.paths import AppPaths, default_paths


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _default_file() -> Path:
    return default_paths().soft / AppPaths.CONNECTION


@dataclass
class ConnectionSettings:
    """Where and how to reach the crossroad database."""

    name: str = ""
    ip: str = ""
    port: int = 0
    databasename: str = ""
    username: str = ""
    userpassword: str = field(default="", repr=False)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ConnectionSettings:
        """Settings from a JSON object; missing fields take empty values."""
        return cls(
            name=_text(data.get("name")),
            ip=_text(data.get("ip")),
            port=ints_from_json([data.get("port")])[0],
            databasename=_text(data.get("databasename")),
            username=_text(data.get("username")),
            userpassword=_text(data.get("userpassword")),
        )

    def to_json(self) -> dict[str, Any]:
        """The settings as a JSON object."""
        return {
            "name": self.name,
            "ip": self.ip,
            "port": self.port,
            "databasename": self.databasename,
            "username": self.username,
            "userpassword": self.userpassword,
        }

    def save(self, path: Path | str | None = None) -> None:
        """Write the settings to ``path`` (the application settings file by default)."""
        target = Path(path) if path is not None else _default_file()
        target.write_text(json.dumps(self.to_json(), indent=4, ensure_ascii=False) + "\n", encoding="utf-8")

    @classmethod
    def load(cls, path: Path | str | None = None) -> ConnectionSettings:
        """Read settings from ``path``; empty settings when it cannot be read."""
        source = Path(path) if path is not None else _default_file()
        try:
            data = json.loads(source.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()
        return cls.from_json(data if isinstance(data, dict) else {})