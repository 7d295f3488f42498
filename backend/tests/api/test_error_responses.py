"""Error Responses — every failure answers with a JSON envelope.

Invariants:
    - Malformed body → 400 "Invalid JSON: <parse failure>"
    - Uncaught fault → 500 "Bad Things Happened: Something went wrong"
    - Unknown route → 404 "Page Not Found" (ROUTE_NOT_FOUND)
    - links.self is always the request URI, query string included
"""

import logging


# ─── 400 malformed body ──────────────────────────────────────────

async def test_malformed_json_is_bad_request(client):
    res = await client.post(
        "/people", content=b'{"firstName": ',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    body = res.json()
    assert body["message"].startswith("Invalid JSON: ")
    assert "JSON decode error" in body["message"]
    assert body["logref"] == "INVALID_JSON"
    assert body["links"]["self"] == "/people"


async def test_array_body_is_bad_request(client):
    res = await client.post("/people", json=[{"firstName": "Fred"}])
    assert res.status_code == 400
    assert res.json()["logref"] == "INVALID_JSON"


async def test_null_body_is_bad_request(client):
    res = await client.post(
        "/people", content=b"null",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"].startswith("Invalid JSON: ")


async def test_malformed_body_stores_nothing(client):
    await client.post(
        "/people", content=b"{oops", headers={"Content-Type": "application/json"},
    )
    res = await client.get("/people")
    assert res.json() == []


# ─── 500 unhandled fault ─────────────────────────────────────────

async def test_fault_route_is_server_error(client):
    res = await client.get("/people/error")
    assert res.status_code == 500
    assert res.json() == {
        "message": "Bad Things Happened: Something went wrong",
        "logref": "INTERNAL_ERROR",
        "links": {"self": "/people/error"},
    }


async def test_fault_is_logged_with_traceback(client, caplog):
    with caplog.at_level(logging.ERROR, logger="people_api.api.error_handlers"):
        await client.get("/people/error")
    record = next(r for r in caplog.records if r.levelno == logging.ERROR)
    assert record.error_code == "INTERNAL_ERROR"
    assert record.exc_info is not None


# ─── 404 / 405 routing ───────────────────────────────────────────

async def test_unknown_route_is_page_not_found(client):
    res = await client.get("/nowhere")
    assert res.status_code == 404
    assert res.json() == {
        "message": "Page Not Found",
        "logref": "ROUTE_NOT_FOUND",
        "links": {"self": "/nowhere"},
    }


async def test_self_link_keeps_query_string(client):
    res = await client.get("/nowhere?page=2")
    assert res.json()["links"]["self"] == "/nowhere?page=2"


async def test_wrong_method_keeps_status_and_allow_header(client):
    res = await client.delete("/people")
    assert res.status_code == 405
    assert "allow" in res.headers
    body = res.json()
    assert body["message"] == "Method Not Allowed"
    assert body["links"]["self"] == "/people"
