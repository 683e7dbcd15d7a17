"""Per-user application settings and environment."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from crosseditor.paths import AppPaths, default_paths

HOST_AUTH_VAR = "HOST_AUTH_CRE"


def _default_file() -> Path:
    return default_paths().soft / AppPaths.APP_SETTINGS


def _read_object(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


@dataclass
class SystemEnv:
    """Authorisation host, last opened folder and last user."""

    host_auth: str = ""
    last_folder: str = ""
    user_login: str = ""

    @classmethod
    def load(cls, path: Path | str | None = None, environ: Mapping[str, str] | None = None) -> SystemEnv:
        """Read the environment and the saved preferences."""
        env = os.environ if environ is None else environ
        result = cls(host_auth=env.get(HOST_AUTH_VAR, ""))
        data = _read_object(Path(path) if path is not None else _default_file())
        folder = data.get("lastFolder")
        user = data.get("lastUser")
        if isinstance(folder, str) and folder:
            result.last_folder = folder
        if isinstance(user, str) and user:
            result.user_login = user
        return result

    def save(self, path: Path | str | None = None) -> None:
        """Store the last folder and user."""
        target = Path(path) if path is not None else _default_file()
        data = {"lastFolder": self.last_folder, "lastUser": self.user_login}
        target.write_text(json.dumps(data, indent=4, ensure_ascii=False) + "\n", encoding="utf-8")