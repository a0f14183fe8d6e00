"""Inference helpers for the shape assistant.

Calls the Gemini ``generateContent`` REST endpoint with ``httpx`` and returns
the text of the first candidate. There is no retry: any transport failure or
non-2xx answer surfaces as :class:`InferenceError` so the API layer can map it
to a generic error for the caller.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_OUTPUT_TOKENS = 300


class InferenceError(Exception):
    """Raised when the upstream language model call fails."""
    pass


def build_payload(
    prompt: str,
    temperature: float = DEFAULT_TEMPERATURE,
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
) -> dict:
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens,
        },
    }


def extract_text(data: Any) -> str:
    """
    Return ``candidates[0].content.parts[0].text`` from a generateContent
    response, or an empty string when any level is missing.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


async def generate(
    prompt: str,
    *,
    api_key: str,
    model: str = DEFAULT_MODEL,
    base_url: str = DEFAULT_BASE_URL,
    temperature: float = DEFAULT_TEMPERATURE,
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
    timeout: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Send ``prompt`` to the model and return the raw reply text.

    A caller-provided ``client`` is used as is and left open; otherwise a
    short-lived client is created for the single request.
    """
    url = f"{base_url.rstrip('/')}/models/{model}:generateContent"
    payload = build_payload(prompt, temperature, max_output_tokens)
    logger.debug("generate: POST %s model=%s", url, model)

    try:
        if client is not None:
            resp = await client.post(url, headers={"x-goog-api-key": api_key}, json=payload)
        else:
            # httpx's own default (5s) applies unless a timeout is configured
            async with httpx.AsyncClient(timeout=timeout or 5.0) as owned:
                resp = await owned.post(url, headers={"x-goog-api-key": api_key}, json=payload)
    except httpx.HTTPError as exc:
        logger.error("Gemini API transport error: %s", exc)
        raise InferenceError(f"Gemini API transport failure: {exc}") from exc

    if resp.is_error:
        logger.error("Gemini API error: %s %s", resp.status_code, resp.text)
        raise InferenceError(f"Gemini API returned HTTP {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as exc:
        logger.error("Gemini API returned a non-JSON body: %r", resp.text)
        raise InferenceError("Gemini API returned a non-JSON body") from exc

    return extract_text(data).strip()


__all__ = ["InferenceError", "generate", "build_payload", "extract_text"]
