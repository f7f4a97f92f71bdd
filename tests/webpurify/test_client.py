import httpx
import pytest

from infrastructure.external.webpurify import (
    ApiError,
    InvalidArgumentError,
    ParseError,
    TransportError,
)


@pytest.mark.asyncio
async def test_query_carries_base_params_and_method(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(found="0"))
    await client.check("hello there")

    req = rec.last
    assert req.method == "GET"
    assert req.url.scheme == "http"
    assert req.url.host == "api1.webpurify.com"
    assert req.url.path == "/services/rest/"
    assert rec.params == {
        "api_key": "test-api-key",
        "format": "json",
        "method": "webpurify.live.check",
        "text": "hello there",
    }


@pytest.mark.asyncio
async def test_default_headers_sent(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(found="0"))
    await client.check("x")
    assert rec.last.headers["accept"] == "application/json"
    assert rec.last.headers["user-agent"] == "webpurify-python/1.0"


@pytest.mark.asyncio
async def test_query_values_are_percent_encoded(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(found="0"))
    await client.check("a&b=c")
    raw_query = rec.last.url.query.decode()
    assert "a%26b%3Dc" in raw_query
    assert rec.params["text"] == "a&b=c"


@pytest.mark.asyncio
async def test_enterprise_and_region_select_https_host(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(found="0"), region="ap", enterprise=True)
    await client.check("x")
    assert rec.last.url.scheme == "https"
    assert rec.last.url.host == "api1-ap.webpurify.com"


@pytest.mark.asyncio
@pytest.mark.parametrize("found,expected", [("1", True), ("0", False)])
async def test_check(mock_api, wp_envelope, found, expected):
    client, _ = mock_api(wp_envelope(found=found))
    assert await client.check("badword") is expected


@pytest.mark.asyncio
async def test_check_count(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(found="3"))
    assert await client.check_count("some text") == 3
    assert rec.params["method"] == "webpurify.live.checkcount"


@pytest.mark.asyncio
async def test_replace_sends_symbol_and_returns_text(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(text="you ****", found="1"))
    assert await client.replace("you dang", "*") == "you ****"
    assert rec.params["method"] == "webpurify.live.replace"
    assert rec.params["replacesymbol"] == "*"


@pytest.mark.asyncio
async def test_replace_accepts_whitespace_symbol(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(text="you     "))
    assert await client.replace("you dang", " ") == "you     "
    assert rec.params["replacesymbol"] == " "


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload,expected",
    [({}, []), ({"expletive": "foo"}, ["foo"]), ({"expletive": ["foo", "bar"]}, ["foo", "bar"])],
)
async def test_return_expletives_normalizes_to_list(mock_api, wp_envelope, payload, expected):
    client, rec = mock_api(wp_envelope(found=str(len(expected)), **payload))
    assert await client.return_expletives("text") == expected
    assert rec.params["method"] == "webpurify.live.return"


@pytest.mark.asyncio
@pytest.mark.parametrize("getter", ["get_blacklist", "get_whitelist"])
@pytest.mark.parametrize(
    "payload,expected",
    [({}, []), ({"word": "foo"}, ["foo"]), ({"word": ["foo", "bar"]}, ["foo", "bar"])],
)
async def test_word_lists_normalize_like_expletives(mock_api, wp_envelope, getter, payload, expected):
    client, rec = mock_api(wp_envelope(**payload))
    assert await getattr(client, getter)() == expected
    assert set(rec.params) == {"api_key", "format", "method"}


@pytest.mark.asyncio
async def test_add_to_blacklist_without_deep_search_sends_no_ds(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(success="1"))
    assert await client.add_to_blacklist("frak") is True
    assert rec.params == {
        "api_key": "test-api-key",
        "format": "json",
        "method": "webpurify.live.addtoblacklist",
        "word": "frak",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("deep_search,ds", [(True, "1"), (False, "0")])
async def test_add_to_blacklist_deep_search_flag(mock_api, wp_envelope, deep_search, ds):
    client, rec = mock_api(wp_envelope(success="1"))
    await client.add_to_blacklist("frak", deep_search=deep_search)
    assert rec.params["ds"] == ds


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "op,method",
    [
        ("remove_from_blacklist", "webpurify.live.removefromblacklist"),
        ("add_to_whitelist", "webpurify.live.addtowhitelist"),
        ("remove_from_whitelist", "webpurify.live.removefromwhitelist"),
    ],
)
async def test_word_mutations_report_success(mock_api, wp_envelope, op, method):
    client, rec = mock_api(wp_envelope(success="1"))
    assert await getattr(client, op)("scunthorpe") is True
    assert rec.params["method"] == method
    assert rec.params["word"] == "scunthorpe"


@pytest.mark.asyncio
async def test_word_mutation_failure_flag(mock_api, wp_envelope):
    client, _ = mock_api(wp_envelope(success="0"))
    assert await client.add_to_whitelist("word") is False


@pytest.mark.asyncio
async def test_extra_options_are_forwarded(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(found="0"))
    await client.check("hola", options={"lang": "sp", "semail": None})
    assert rec.params["lang"] == "sp"
    assert "semail" not in rec.params


@pytest.mark.asyncio
async def test_options_may_not_override_reserved_params(mock_api):
    client, rec = mock_api()
    with pytest.raises(InvalidArgumentError):
        await client.check("x", options={"method": "webpurify.live.replace"})
    assert rec.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.check("clean words", options={"text": "something else"}),
        lambda c: c.replace("clean words", "*", options={"replacesymbol": "#"}),
        lambda c: c.remove_from_blacklist("frak", options={"word": "other"}),
    ],
)
async def test_options_may_not_override_call_arguments(mock_api, call):
    client, rec = mock_api()
    with pytest.raises(InvalidArgumentError, match="options may not override"):
        await call(client)
    assert rec.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.check(None),
        lambda c: c.replace("text", ""),
        lambda c: c.add_to_blacklist(""),
        lambda c: c.remove_from_whitelist(7),
        lambda c: c.check("x", options=["lang", "sp"]),
    ],
)
async def test_invalid_arguments_rejected_before_request(mock_api, call):
    client, rec = mock_api()
    with pytest.raises(InvalidArgumentError):
        await call(client)
    assert rec.requests == []


@pytest.mark.asyncio
async def test_fail_envelope_raises_api_error(mock_api, wp_envelope):
    body = wp_envelope("fail", err={"@attributes": {"code": "100", "msg": "Invalid API Key"}})
    client, _ = mock_api(body)
    with pytest.raises(ApiError) as exc_info:
        await client.check("badword")
    assert exc_info.value.message == "Invalid API Key"


@pytest.mark.asyncio
async def test_malformed_json_raises_parse_error(mock_api):
    client, _ = mock_api(raw=b"<html>not json")
    with pytest.raises(ParseError):
        await client.check("badword")


@pytest.mark.asyncio
async def test_http_error_without_envelope_is_transport_error(mock_api):
    client, _ = mock_api(raw=b"Service Unavailable", status_code=503)
    with pytest.raises(TransportError) as exc_info:
        await client.check("badword")
    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error():
    from infrastructure.external.webpurify import WebPurifyClient

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    client = WebPurifyClient({"api_key": "k"}, transport=httpx.MockTransport(refuse))
    with pytest.raises(TransportError, match="Connection refused"):
        await client.get_blacklist()


@pytest.mark.asyncio
async def test_read_timeout_raises_transport_error():
    from infrastructure.external.webpurify import WebPurifyClient

    def stall(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = WebPurifyClient({"api_key": "k", "timeout": 2.5}, transport=httpx.MockTransport(stall))
    with pytest.raises(TransportError) as excinfo:
        await client.check("x")
    assert "timeout" in str(excinfo.value).lower()
    assert excinfo.value.status_code is None
    await client.aclose()


@pytest.mark.asyncio
async def test_call_method_returns_stripped_payload(mock_api, wp_envelope):
    client, rec = mock_api(wp_envelope(found="2", text="x"))
    async with client:
        payload = await client.call_method("webpurify.live.checkcount", {"text": "x"})
    assert payload == {"found": "2", "text": "x"}
    assert client._client is None
