import logging

from ai_adapter import inference_pipeline
from ai_adapter.prompts import build_shape_prompt
from shape_api.config import Settings
from shape_api.errors import IntentError
from shape_api.services.json_cleaner import extract_json_object

logger = logging.getLogger(__name__)


async def resolve_shape_intent(message: str, settings: Settings) -> dict:
    """
    Ask the LLM what the user wants drawn and return its JSON reply as is.

    The reply is not checked against any schema; whatever object the model
    produced is handed back to the caller.
    """
    if not settings.gemini_api_key:
        raise IntentError(500, "Gemini API key not configured")

    prompt = build_shape_prompt(message)
    try:
        raw_output = await inference_pipeline.generate(
            prompt,
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout,
        )
    except inference_pipeline.InferenceError:
        # already logged with the upstream body
        raise IntentError(500, "Failed to process request")

    logger.debug("LLM raw_output repr: %r", raw_output)
    try:
        return extract_json_object(raw_output)
    except ValueError:
        logger.error("Failed to parse AI response: %r", raw_output)
        raise IntentError(500, "Failed to parse AI response")


__all__ = ["resolve_shape_intent"]
