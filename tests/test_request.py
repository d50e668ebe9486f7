from __future__ import annotations

import pytest

from libcdb.core.query import DumpQuery, LookupQuery
from libcdb.core.request import RequestDescriptor, build_request


def test_lookup_request_targets_find() -> None:
    request = build_request(LookupQuery(md5="abc123", download=True))
    assert request == RequestDescriptor("POST", "find", {"md5": "abc123"})


def test_dump_request_interpolates_id() -> None:
    request = build_request(DumpQuery(id="libc6_2.27", symbols=["strncat", "sprintf"]))
    assert request.method == "POST"
    assert request.path == "libc/libc6_2.27"
    assert request.body == {"symbols": ["strncat", "sprintf"]}


def test_build_request_does_not_mutate_query() -> None:
    symbols = {"puts": "0x690"}
    query = LookupQuery(symbols=symbols)
    request = build_request(query)
    request.body["symbols"]["gets"] = "0x1"
    assert query.symbols == {"puts": "0x690"}


def test_build_request_rejects_unknown_query() -> None:
    with pytest.raises(TypeError):
        build_request({"md5": "abc"})  # type: ignore[arg-type]
