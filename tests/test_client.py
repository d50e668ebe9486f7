from __future__ import annotations

import pytest
import requests

from libcdb.core.client import LibcDbClient
from libcdb.core.errors import RemoteRejection, TransportFailure
from libcdb.core.request import RequestDescriptor

BASE = "https://libc.example/api"


def test_send_posts_json_body_to_base_url(fake_session) -> None:
    fake_session.add("POST", f"{BASE}/find", "[]")
    with LibcDbClient(BASE + "/", timeout=5) as client:
        response = client.send(RequestDescriptor("POST", "find", {"md5": "abc"}))

    assert response.text == "[]"
    assert fake_session.calls == [{"method": "POST", "url": f"{BASE}/find", "timeout": 5, "json": {"md5": "abc"}}]
    assert fake_session.closed


@pytest.mark.parametrize("status_code", [400, 404, 500])
def test_send_rejects_non_success_status(fake_session, status_code: int) -> None:
    fake_session.add("POST", f"{BASE}/libc/nope", "not found", status_code=status_code)
    client = LibcDbClient(BASE)
    with pytest.raises(RemoteRejection) as excinfo:
        client.send(RequestDescriptor("POST", "libc/nope", {"symbols": []}))
    assert excinfo.value.status_code == status_code
    assert excinfo.value.url == f"{BASE}/libc/nope"


def test_transport_errors_are_wrapped(fake_session) -> None:
    fake_session.fail("GET", "https://host/x/foo.so", requests.Timeout("timed out"))
    client = LibcDbClient(BASE)
    with pytest.raises(TransportFailure, match="timed out"):
        client.fetch("https://host/x/foo.so")


def test_fetch_returns_raw_bytes(fake_session) -> None:
    fake_session.add("GET", "https://host/x/foo.so", b"\x7fELF\x00")
    assert LibcDbClient(BASE).fetch("https://host/x/foo.so") == b"\x7fELF\x00"


def test_proxies_are_applied_to_session(fake_session) -> None:
    LibcDbClient(BASE, proxies={"https": "http://127.0.0.1:7890"})
    assert fake_session.proxies == {"https": "http://127.0.0.1:7890"}
