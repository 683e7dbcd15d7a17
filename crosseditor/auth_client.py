"""Signing in against the authorisation service."""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from typing import Any

from crosseditor.auth_state import ANY, AuthState
from crosseditor.dep import ints_from_strings, strings_from_json

_TIMEOUT = 30


class LoginError(Exception):
    """The sign-in failed."""


class AuthenticationRequired(LoginError):
    """The service rejected the credentials; the message is its reply."""


def build_auth_payload(username: str, password: str) -> bytes:
    """The JSON request body carrying the credentials."""
    doc = {"auth": {"username": username, "password": password}}
    return json.dumps(doc, indent=4, ensure_ascii=False).encode("utf-8")


def _array(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def parse_auth_response(state: AuthState, body: bytes | str) -> AuthState:
    """Fill ``state`` from the service's reply."""
    try:
        doc = json.loads(body)
    except ValueError:
        doc = None
    if not isinstance(doc, (dict, list)) or not doc:
        raise LoginError("empty or malformed reply")
    reply = doc if isinstance(doc, dict) else {}

    status = reply.get("status")
    state.state = status if isinstance(status, bool) else False

    region = reply.get("region")
    region_text = region if isinstance(region, str) else ""
    state.region = ANY if region_text == "*" else ints_from_strings([region_text])[0]

    areas = strings_from_json(_array(reply.get("areas")))
    state.areas = [ANY] if "*" in areas else ints_from_strings(areas)

    state.permissions = strings_from_json(_array(reply.get("privileges")))
    return state


def _context() -> ssl.SSLContext:
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    ctx.options |= ssl.OP_NO_TICKET
    return ctx


def login(url: str, username: str, password: str, state: AuthState) -> AuthState:
    """Sign in at ``url`` and fill ``state`` with the granted rights."""
    state.user = username
    request = urllib.request.Request(
        url,
        data=build_auth_payload(username, password),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with urllib.request.urlopen(request, timeout=_TIMEOUT, context=_context()) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        text = exc.read().decode("utf-8", "replace")
        if exc.code == 401:
            raise AuthenticationRequired(text) from exc
        raise LoginError(f"HTTP {exc.code}: {exc.reason}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise LoginError(str(exc)) from exc
    return parse_auth_response(state, body)