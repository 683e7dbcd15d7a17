# crosseditor

A library for the data side of a road intersection editor: plane geometry
for lanes and markings, SVG element builders, local files of an
intersection, and the model used to exchange intersections with a database
and an authorisation service.

## Modules

- `crosseditor.geom` — `Point` and `Line` (the line `a*x + b*y + c = 0`,
  with `perpendicular`, `up` and `down` shifts), `bezier`,
  `line_coefficients`, `length`, `polyline_length`, `point_by_length`,
  `angle` / `angle_rad`, `intersect_lines`, `intersect_segments`,
  `split_at_intersection`, `first_intersection`, `parallel_line`, `rect`,
  `rect_lens`, `point_at_angle`, `arrow_points`, `even_lines`, `mid_lines`
  and `lane_line`. Where no intersection exists, the origin `Point()` is
  returned.
- `crosseditor.svgshapes` — `path_element`, `circle_element`,
  `points_to_path_data` and `center_state` (the hidden phase indicator
  group), all as `xml.etree.ElementTree` elements or path strings.
- `crosseditor.dep` — `pos_to_string` / `pos_from_string` for `"x:y"`
  positions, and `ints_from_json`, `strings_from_json`, `ints_from_strings`.
- `crosseditor.idpool` — `IdPool`, random identifiers in 1..999 that are
  unique within the pool.
- `crosseditor.paths` — `AppPaths` and `default_paths()`: file names and
  working directories (`~/.ASUDD/cross_editor/...` and
  `<tempdir>/cross_editor`); `AppPaths.ensure()` creates them.
- `crosseditor.queries` — `REGIONS_QUERY`, `crosses_query`,
  `get_cross_query`, `send_cross_query`.
- `crosseditor.dbvalue` — `DbValue`, a database cell with `as_int`,
  `as_bytes`, `as_json` and `as_str`.
- `crosseditor.dbsettings` — `ConnectionSettings`, connection parameters
  read from and written to a JSON file.
- `crosseditor.auth_state` — `AuthState`: user, region, areas and
  permissions (`-1` means "all"), with `areas_text`, `permissions_text`,
  `region_text` and `summary`.
- `crosseditor.settings` — `SystemEnv`: the authorisation host from the
  `HOST_AUTH_CRE` environment variable plus the remembered folder and user.
- `crosseditor.crosses` — `CrossObject` and `CrossRegistry`, the
  intersections known to the user and the one currently selected, with
  `on_loaded` / `on_selected` callbacks.
- `crosseditor.dbconnection` — `DbConnection` and `Status`.
- `crosseditor.crossdata` — `CrossData`, filling a registry, fetching one
  intersection and sending it back, with `on_saved` / `on_loaded` callbacks.
- `crosseditor.auth_client` — `login`, `build_auth_payload`,
  `parse_auth_response`, and the exceptions `LoginError` and
  `AuthenticationRequired`.
- `crosseditor.storage` — `write_data`, `read_data`, `save_template`,
  `load_template`, `remove_template`, `save_to_local`, `extend_data`,
  `is_empty_template`, `is_empty_state` and `build_svg`.

## Examples

Geometry:

```python
from crosseditor.geom import Point, intersect_segments, parallel_line

hit = intersect_segments(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
# Point(x=1.0, y=1.0)

edge = parallel_line([Point(0, 0), Point(100, 0)], 10, True)
```

SVG elements:

```python
from crosseditor.geom import Point
from crosseditor.svgshapes import path_element, points_to_path_data

data = points_to_path_data([Point(0, 0), Point(10, 0)], False)  # "M 0,0 L 10,0"
stroke = path_element("path", data, pen=True)
```

Identifiers and positions:

```python
from crosseditor.dep import pos_from_string, pos_to_string
from crosseditor.idpool import IdPool

pool = IdPool()
first = pool.get()     # never 0, never one already in the pool
pool.remove(first)

pos_to_string(pos_from_string("12.5:40"))  # "12.5:40"
```

Local files of an intersection:

```python
from crosseditor.storage import build_svg, extend_data, save_to_local

svg = build_svg(map_png, [stroke])
folder = save_to_local([1, 2, 15], "crosses", map_png, svg, extend_data(), state)
# files land in crosses/1/2/15/
```

Here `map_png` is the PNG background as bytes and `state` the JSON
template as bytes. `build_svg` re-encodes the PNG with Pillow and embeds it
as a base64 `image`; bytes that are not a PNG give a 0×0 picture.

Database access goes through any DB-API connection whose driver accepts
`:name` placeholders (`sqlite3` does, for instance):

```python
from crosseditor.dbconnection import DbConnection
from crosseditor.dbsettings import ConnectionSettings

db = DbConnection(ConnectionSettings(), connector=open_connection)
status = db.check()          # Status(1) or Status(0, "<error>")
records = db.fetch_cross([1, 2, 15])
```

`check` and `send` report failures in the returned `Status`;
`fetch_region_crosses` and `fetch_cross` raise `ConnectionError`.

`login(url, username, password, state)` posts the credentials as JSON and
fills an `AuthState`; HTTP 401 raises `AuthenticationRequired` carrying the
service's reply, other failures raise `LoginError`. Server certificates are
not verified.

## What this package does not do

It has no editor window, scene or command-line program, and no model of the
drawn elements (points, lane lines, traffic lights, cameras, markings,
crosswalks). The editing template is handled as a plain JSON mapping, and
the SVG layers passed to `build_svg` must be built by the caller. No
database driver is bundled: `DbConnection` needs a `connector` that opens a
connection.