import asyncio
import json

import httpx
import pytest

from ai_adapter import inference_pipeline
from ai_adapter.inference_pipeline import InferenceError, extract_text, generate


def _reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _run(coro):
    return asyncio.run(coro)


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_generate_posts_prompt_and_config():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_reply('  {"actionType": "text"}  '))

    async def go():
        async with _client(handler) as client:
            return await generate("draw a cat", api_key="k123", client=client)

    text = _run(go())

    assert text == '{"actionType": "text"}'
    assert seen["url"].path == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert seen["key"] == "k123"
    assert "key" not in seen["url"].params
    assert seen["body"] == {
        "contents": [{"parts": [{"text": "draw a cat"}]}],
        "generationConfig": {"temperature": 0.3, "maxOutputTokens": 300},
    }


def test_generate_custom_model_and_base_url():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        return httpx.Response(200, json=_reply("{}"))

    async def go():
        async with _client(handler) as client:
            return await generate(
                "x",
                api_key="k",
                model="gemini-test",
                base_url="http://llm.local/v1/",
                client=client,
            )

    _run(go())
    assert seen["url"].startswith("http://llm.local/v1/models/gemini-test:generateContent")


def test_generate_non_2xx_raises():
    def handler(request):
        return httpx.Response(503, text="overloaded")

    async def go():
        async with _client(handler) as client:
            return await generate("x", api_key="k", client=client)

    with pytest.raises(InferenceError):
        _run(go())


def test_generate_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def go():
        async with _client(handler) as client:
            return await generate("x", api_key="k", client=client)

    with pytest.raises(InferenceError):
        _run(go())


def test_generate_non_json_body_raises():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    async def go():
        async with _client(handler) as client:
            return await generate("x", api_key="k", client=client)

    with pytest.raises(InferenceError):
        _run(go())


@pytest.mark.parametrize(
    "data",
    [{}, {"candidates": []}, {"candidates": [{"content": {}}]}, None, _reply(None)],
)
def test_extract_text_missing_levels(data):
    assert extract_text(data) == ""


def test_build_payload_overrides():
    payload = inference_pipeline.build_payload("p", temperature=0.0, max_output_tokens=10)
    assert payload["generationConfig"] == {"temperature": 0.0, "maxOutputTokens": 10}
