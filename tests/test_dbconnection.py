import sqlite3

import pytest

from crosseditor.auth_state import AuthState
from crosseditor.dbconnection import DbConnection, Status
from crosseditor.dbsettings import ConnectionSettings
from crosseditor.dbvalue import DbValue


def _to_char(value, _fmt):
    return None if value is None else str(value)


@pytest.fixture
def db_file(tmp_path):
    path = tmp_path / "public.sqlite"
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE region (region INTEGER, area INTEGER, nameregion TEXT, namearea TEXT);
        CREATE TABLE "cross" (id INTEGER, describ TEXT, subarea INTEGER, region INTEGER, area INTEGER);
        CREATE TABLE svg (id INTEGER, region INTEGER, area INTEGER, bottom BLOB,
                          state TEXT, picture BLOB, extend TEXT, ledit TEXT);
        INSERT INTO region VALUES (1, 1, 'North', 'Centre'), (1, 2, 'North', 'Harbour'), (2, 1, 'South', 'Hills');
        INSERT INTO "cross" VALUES (10, 'Main st', 0, 1, 1), (11, 'Dock rd', 3, 1, 2), (20, 'Hill rd', 0, 2, 1);
        INSERT INTO svg (id, region, area, ledit) VALUES (10, 1, 1, 'noon'), (11, 1, 2, NULL), (20, 2, 1, NULL);
        """
    )
    conn.commit()
    conn.close()
    return path


def _connector(path):
    def connect(_settings):
        conn = sqlite3.connect(":memory:")
        conn.execute("ATTACH DATABASE ? AS public", (str(path),))
        conn.create_function("TO_CHAR", 2, _to_char)
        conn.create_function("NOW", 0, lambda: "now")
        return conn

    return connect


def _failing(_settings):
    raise sqlite3.OperationalError("unable to open")


def _db(path, auth=None, on_stage=None):
    return DbConnection(ConnectionSettings(name="t"), _connector(path), auth=auth, on_stage=on_stage)


def test_check_success(db_file):
    assert _db(db_file).check() == Status(1)


def test_check_failure():
    status = DbConnection(ConnectionSettings(), _failing).check()
    assert status.v == 0
    assert status.err == "unable to open"
    assert not status.ok


def test_fetch_all_crosses(db_file):
    records = _db(db_file, auth=AuthState(region=-1, areas=[-1])).fetch_region_crosses()
    assert sorted(r["id"].as_int() for r in records) == [10, 11, 20]
    main = next(r for r in records if r["id"].as_int() == 10)
    assert main["nameregion"].as_str() == "North"
    assert main["namearea"].as_str() == "Centre"
    assert main["ledit"].as_str() == "noon"


def test_fetch_restricted_by_auth(db_file):
    stages = []
    auth = AuthState(region=1, areas=[2])
    records = _db(db_file, auth=auth, on_stage=stages.append).fetch_region_crosses()
    assert [r["id"].as_int() for r in records] == [11]
    assert stages == ["1/2"]


def test_fetch_failure_raises():
    with pytest.raises(ConnectionError):
        DbConnection(ConnectionSettings(), _failing).fetch_region_crosses()


def test_send_then_fetch(db_file):
    db = _db(db_file)
    data = {
        ":bottom": DbValue(b"png-bytes"),
        ":picture": DbValue(b"<svg/>"),
        ":extend": DbValue(b"{}"),
        ":state": DbValue(b'{"pt": []}'),
    }
    assert db.send((1, 1, 10), data).ok
    [record] = db.fetch_cross((1, 1, 10))
    assert record["bottom"].as_bytes() == b"png-bytes"
    assert record["picture"].as_bytes() == b"<svg/>"
    assert record["state"].as_str() == '{"pt": []}'
    assert record["ledit"].as_str() == "now"


def test_send_failure_reports_status():
    status = DbConnection(ConnectionSettings(), _failing).send((1, 1, 10), {})
    assert status == Status(0, "unable to open")


def test_fetch_unknown_cross_is_empty(db_file):
    assert _db(db_file).fetch_cross((9, 9, 9)) == []