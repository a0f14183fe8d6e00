import re
import json
from typing import Any


def extract_json_object(raw: Any) -> dict:
    """
    Pull the JSON object out of free-text LLM output.

    Markdown code fences are stripped, then the span from the first ``{`` to
    the last ``}`` is decoded with strict JSON. There is no lenient fallback:
    a missing span, a decode error or a non-object value raises ``ValueError``.
    """
    text = raw if isinstance(raw, str) else ""
    # Strip markdown code fences
    text = re.sub(r'```(?:json)?\s*', '', text)
    text = re.sub(r'\s*```', '', text)
    match = re.search(r'\{.*\}', text, flags=re.DOTALL)
    if not match:
        raise ValueError(f"Unable to find JSON object in LLM output: {text!r}")
    json_text = match.group(0)
    try:
        obj = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse JSON: {e}. Raw: {json_text!r}") from e
    if not isinstance(obj, dict):
        raise ValueError(f"LLM output is not a JSON object: {json_text!r}")
    return obj
