"""Client side of the intent endpoint.

The endpoint passes the model's JSON through untouched, so the widget
validates it here before acting on it. Replies that fit none of the known
shapes are rejected with ``ValueError``.
"""

import logging
from typing import Literal, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from board.canvas import Color

logger = logging.getLogger(__name__)

INTENT_PATH = "/api/ai/generate-shape"


class ColorModel(BaseModel):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    def to_color(self) -> Color:
        return Color(self.r, self.g, self.b)


class _Intent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    color: Optional[ColorModel] = None
    x: Optional[float] = None
    y: Optional[float] = None


class ShapeIntent(_Intent):
    actionType: Optional[Literal["shape"]] = "shape"
    shapeType: Literal["rectangle", "square", "circle"]
    width: Optional[float] = None
    height: Optional[float] = None
    radius: Optional[float] = None


class TextIntent(_Intent):
    actionType: Literal["text"]
    text: Optional[str] = None


class DimensionRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    needsDimensions: Literal[True]
    shapeType: Literal["rectangle", "square", "circle"]
    color: Optional[ColorModel] = None


Intent = Union[ShapeIntent, TextIntent, DimensionRequest]


def parse_intent(data: dict) -> Intent:
    """Validate an endpoint reply and return the matching intent model."""
    if not isinstance(data, dict):
        raise ValueError(f"Intent reply is not an object: {data!r}")
    try:
        if data.get("actionType") == "text":
            return TextIntent.model_validate(data)
        if data.get("needsDimensions"):
            return DimensionRequest.model_validate(data)
        return ShapeIntent.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Unrecognised intent reply: {exc}") from exc


class IntentRequestError(Exception):
    """Raised when the intent endpoint cannot be reached or answers non-2xx."""
    pass


class IntentClient:
    """Synchronous caller for ``POST /api/ai/generate-shape``."""

    def __init__(
        self,
        base_url: str,
        token: str,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self._client = client or httpx.Client()

    def __call__(self, message: str) -> dict:
        try:
            resp = self._client.post(
                f"{self.base_url}{INTENT_PATH}",
                json={"message": message},
                headers={"Authorization": f"Bearer {self.token}"},
            )
        except httpx.HTTPError as exc:
            raise IntentRequestError(f"Intent endpoint unreachable: {exc}") from exc

        if resp.is_error:
            logger.warning("Intent endpoint returned %s: %s", resp.status_code, resp.text)
            raise IntentRequestError(f"Intent endpoint returned HTTP {resp.status_code}")

        try:
            return resp.json()
        except ValueError as exc:
            raise IntentRequestError("Intent endpoint returned a non-JSON body") from exc

    def close(self) -> None:
        self._client.close()
