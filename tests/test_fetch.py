import asyncio
from time import perf_counter

import httpx

from webaudit.audit.fetch import build_client, fetch_page


def _fetch(handler, url="https://acme.example/", timeout_ms=5000):
    async def go():
        async with build_client("TestAuditor/1.0", transport=httpx.MockTransport(handler)) as client:
            return await fetch_page(client, url, timeout_ms)

    return asyncio.run(go())


def test_successful_fetch_lowercases_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(
            200,
            headers={"Strict-Transport-Security": "max-age=1", "X-Frame-Options": "DENY"},
            text="<html><title>Hi</title></html>",
        )

    result = _fetch(handler)
    assert result.status_ok
    assert result.error is None
    assert result.status_code == 200
    assert result.body == "<html><title>Hi</title></html>"
    assert result.headers["strict-transport-security"] == "max-age=1"
    assert result.headers["x-frame-options"] == "DENY"
    assert result.elapsed_ms >= 0
    assert seen["ua"] == "TestAuditor/1.0"


def test_redirects_are_followed():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://acme.example/new"})
        return httpx.Response(200, text="moved")

    result = _fetch(handler, url="https://acme.example/old")
    assert result.status_ok
    assert result.final_url == "https://acme.example/new"
    assert result.body == "moved"


def test_http_error_status_is_a_failure():
    result = _fetch(lambda request: httpx.Response(404, text="nope"))
    assert not result.status_ok
    assert result.status_code == 404
    assert result.error == "HTTP 404"
    assert result.body == ""


def test_transport_error_is_a_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = _fetch(handler)
    assert not result.status_ok
    assert result.error == "connection refused"


def test_timeout_is_a_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    result = _fetch(handler, timeout_ms=250)
    assert not result.status_ok
    assert result.error == "Timed out after 250ms"


def test_slow_response_hits_the_deadline():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(2)
        return httpx.Response(200, text="late")

    started = perf_counter()
    result = _fetch(handler, timeout_ms=100)
    assert not result.status_ok
    assert result.error == "Timed out after 100ms"
    assert perf_counter() - started < 1.5


def test_trickling_body_counts_against_one_deadline():
    async def trickle():
        for _ in range(10):
            await asyncio.sleep(0.05)
            yield b"<p>chunk</p>"

    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=trickle())

    result = _fetch(handler, timeout_ms=200)
    assert not result.status_ok
    assert result.error == "Timed out after 200ms"


def test_unencodable_host_is_a_failure():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url)
        return httpx.Response(200, text="unreachable")

    result = _fetch(handler, url="https://xn--.com/")
    assert not result.status_ok
    assert result.error.startswith("Invalid URL")
    assert calls == []
