import asyncio
import json

import httpx
import pytest

from app.core.exceptions import ServerError, UpstreamServiceError
from app.core.llm import GroqClient, clean_json_text, parse_json_response


def groq_reply(content):
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


def test_complete_posts_chat_request():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return groq_reply("  {\"ok\": true}  ")

    client = GroqClient(api_key="k", model="m", api_url="https://groq.test/chat", transport=httpx.MockTransport(handler))
    reply = asyncio.run(client.complete("hello", system="be brief", max_tokens=50, temperature=0.2))

    assert reply == '{"ok": true}'
    assert seen["auth"] == "Bearer k"
    assert seen["body"]["model"] == "m"
    assert seen["body"]["messages"] == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hello"},
    ]
    assert seen["body"]["max_tokens"] == 50
    assert seen["body"]["temperature"] == 0.2


def test_complete_without_choices_returns_empty_string():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"choices": []}))
    client = GroqClient(api_key="k", transport=transport)

    assert asyncio.run(client.complete("hello")) == ""


def test_complete_http_error_is_upstream_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(429, json={"error": "slow down"}))
    client = GroqClient(api_key="k", transport=transport)

    with pytest.raises(UpstreamServiceError) as excinfo:
        asyncio.run(client.complete("hello"))
    assert excinfo.value.status_code == 502
    assert "429" in excinfo.value.message


def test_complete_non_json_body_is_upstream_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>Bad gateway</html>"))
    client = GroqClient(api_key="k", transport=transport)

    with pytest.raises(UpstreamServiceError) as excinfo:
        asyncio.run(client.complete("hello"))
    assert excinfo.value.status_code == 502


def test_complete_requires_api_key():
    client = GroqClient(api_key="")

    with pytest.raises(ServerError) as excinfo:
        asyncio.run(client.complete("hello"))
    assert excinfo.value.code == "CONFIGURATION_ERROR"


def test_clean_json_text_strips_fences_and_prose():
    text = 'Here you go:\n```json\n{"type": "blog post"}\n```\nEnjoy'

    assert clean_json_text(text) == '{"type": "blog post"}'


def test_parse_json_response_shapes():
    assert parse_json_response('{"a": 1}') == {"a": 1}
    assert parse_json_response('[1, 2]', expect="array") == [1, 2]
    assert parse_json_response('[1, 2]') is None
    assert parse_json_response('{"a": 1}', expect="array") is None
    assert parse_json_response("not json") is None
    assert parse_json_response("") is None
