"""Local files of a crossroad: template, map, picture and extension data."""

from __future__ import annotations

import base64
import io
import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from PIL import Image, UnidentifiedImageError

from crosseditor.paths import AppPaths

_EMPTY_LIMIT = 4
_INDENT = "    "


def _dump(value: Any, level: int = 0) -> str:
    pad = _INDENT * level
    inner = _INDENT * (level + 1)
    if isinstance(value, Mapping):
        items = [f"{inner}{json.dumps(str(k), ensure_ascii=False)}: {_dump(v, level + 1)}" for k, v in value.items()]
        return "{\n" + "".join(f"{item},\n" for item in items)[:-2] + ("\n" if items else "") + pad + "}"
    if isinstance(value, (list, tuple)):
        items = [f"{inner}{_dump(v, level + 1)}" for v in value]
        return "[\n" + "".join(f"{item},\n" for item in items)[:-2] + ("\n" if items else "") + pad + "]"
    return json.dumps(value, ensure_ascii=False)


def _to_json(data: Mapping[str, Any]) -> bytes:
    return (_dump(data) + "\n").encode("utf-8")


def _template_file(directory: Path | str) -> Path:
    return Path(directory) / AppPaths.TEMPLATE


def write_data(path: Path | str, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing what was there."""
    Path(path).write_bytes(data)


def read_data(path: Path | str) -> bytes:
    """Contents of ``path``; empty when it cannot be read."""
    try:
        return Path(path).read_bytes()
    except OSError:
        return b""


def save_template(directory: Path | str, template: Mapping[str, Any]) -> None:
    """Store the editing template in ``directory``."""
    write_data(_template_file(directory), _to_json(template))


def load_template(directory: Path | str) -> dict[str, Any]:
    """The editing template stored in ``directory``; empty when there is none."""
    try:
        data = json.loads(read_data(_template_file(directory)))
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def remove_template(directory: Path | str) -> None:
    """Delete the template stored in ``directory``, if any."""
    _template_file(directory).unlink(missing_ok=True)


def save_to_local(
    rac: Sequence[int],
    root: Path | str,
    map_png: bytes,
    svg: bytes,
    extend: bytes,
    state: bytes,
) -> Path:
    """Store a crossroad's files under ``root``/region/area/number."""
    folder = Path(root).joinpath(*(str(part) for part in rac))
    folder.mkdir(parents=True, exist_ok=True)
    write_data(folder / AppPaths.MAP, map_png)
    write_data(folder / AppPaths.SVG, svg)
    write_data(folder / AppPaths.EXTEND, extend)
    write_data(folder / AppPaths.TEMPLATE, state)
    return folder


def extend_data() -> bytes:
    """Extension data of a crossroad: an empty JSON object."""
    return _to_json({})


def is_empty_template(directory: Path | str) -> bool:
    """True when ``directory`` holds no template with content."""
    try:
        size = _template_file(directory).stat().st_size
    except OSError:
        return True
    return size <= _EMPTY_LIMIT


def is_empty_state(state: Mapping[str, Any]) -> bool:
    """True when the editing state holds nothing."""
    return len(_to_json(state)) <= _EMPTY_LIMIT


def _png(map_png: bytes) -> tuple[int, int, bytes]:
    try:
        with Image.open(io.BytesIO(map_png), formats=["PNG"]) as image:
            image.load()
            buffer = io.BytesIO()
            image.save(buffer, "PNG")
            return image.width, image.height, buffer.getvalue()
    except (UnidentifiedImageError, OSError, ValueError):
        return 0, 0, b""


def build_svg(map_png: bytes, layers: Iterable[ET.Element] = ()) -> bytes:
    """The crossroad picture: the map as background with ``layers`` on top."""
    width, height, png = _png(map_png)
    svg = ET.Element("svg")
    for key, value in (
        ("xlinkn", "http://www.w3.org/1999/xlink"),
        ("xmlns", "http://www.w3.org/2000/svg"),
        ("xmlns:xsl", "http://www.w3.org/1999/XSL/Transform"),
        ("preserveAspectRatio", "none"),
        ("shape-rendering", "auto"),
        ("xmlns:xlink", "http://www.w3.org/1999/xlink"),
        ("width", str(width)),
        ("xmlns:svg", "http://www.w3.org/2000/svg"),
        ("height", str(height)),
        ("viewBox", f"0 0 {width} {height}"),
    ):
        svg.set(key, value)
    encoded = base64.b64encode(png).decode("ascii")
    ET.SubElement(
        svg,
        "image",
        {
            "x": "0",
            "y": "0",
            "width": str(width),
            "height": str(height),
            "xlink:href": f"data:image/png;base64,{encoded}",
        },
    )
    svg.extend(layers)
    return ET.tostring(svg, encoding="utf-8")