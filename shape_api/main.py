import os
import logging
from json.decoder import JSONDecodeError
from typing import Optional

LOG_LEVEL_NAME = os.getenv("SHAPE_API_LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s"
)

from fastapi import Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shape_api.config import Settings, get_settings
from shape_api.errors import IntentError
from shape_api.services.auth import authenticate
from shape_api.services.llm_service import resolve_shape_intent

logger = logging.getLogger(__name__)

app = FastAPI(title="Shape Assistant API")

# Allow the board front-end to call this API
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IntentError)
async def intent_error_handler(request: Request, exc: IntentError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def current_user(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    return authenticate(authorization, settings)


async def _read_message(request: Request) -> str:
    try:
        body = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        raise IntentError(400, "Message is required")
    message = body.get("message") if isinstance(body, dict) else None
    if not isinstance(message, str) or not message.strip():
        raise IntentError(400, "Message is required")
    return message.strip()


@app.post("/api/ai/generate-shape")
async def generate_shape(
    request: Request,
    user_id: str = Depends(current_user),
    settings: Settings = Depends(get_settings),
):
    """Turn a chat message into the LLM's shape/text JSON description."""
    message = await _read_message(request)
    logger.info("generate-shape request from user %s", user_id)
    try:
        intent = await resolve_shape_intent(message, settings)
    except IntentError:
        raise
    except Exception:
        logger.exception("Error in generate-shape endpoint")
        raise IntentError(500, "Internal server error")
    return JSONResponse(intent)


@app.get("/healthz")
def healthz() -> dict:
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=LOG_LEVEL_NAME.lower())
