from typing import Optional

from shape_api.config import Settings
from shape_api.errors import IntentError


def authenticate(authorization: Optional[str], settings: Settings) -> str:
    """
    Resolve the caller's user id from an ``Authorization: Bearer`` header.

    Raises:
        IntentError: 401 when the header is missing, malformed or the token
            is unknown.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise IntentError(401, "Unauthorized")

    token = authorization.split(" ", 1)[1].strip()
    user_id = settings.api_tokens.get(token)
    if not user_id:
        raise IntentError(401, "Unauthorized")
    return user_id
