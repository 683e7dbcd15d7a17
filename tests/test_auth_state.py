from crosseditor.auth_state import AuthState


def test_region_text_for_any_region():
    assert AuthState(region=-1).region_text() == "*"
    assert AuthState(region=12).region_text() == "12"


def test_areas_text():
    assert AuthState(areas=[]).areas_text() == ""
    assert AuthState(areas=[3, -1]).areas_text() == "*"
    assert AuthState(areas=[3, 5]).areas_text() == "3 5 "


def test_permissions_text_drops_last():
    state = AuthState(permissions=["read", "write", "admin"])
    assert state.permissions_text() == "read\nwrite\n"
    assert AuthState().permissions_text() == ""


def test_summary_lines():
    state = AuthState(user="ivan", region=-1, areas=[1, 2], permissions=["a", "b"])
    assert state.summary() == "ivan\n-1\n1 2 \na\n"