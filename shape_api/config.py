import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv

from ai_adapter.inference_pipeline import DEFAULT_BASE_URL, DEFAULT_MODEL

# Load .env from the working directory, if present
load_dotenv()


def _parse_tokens(raw: str) -> Dict[str, str]:
    """Parse ``token:user,token2:user2`` into a token -> user id mapping."""
    tokens: Dict[str, str] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        token, sep, user_id = item.partition(":")
        if not sep or not token.strip() or not user_id.strip():
            raise ValueError(f"Malformed SHAPE_API_TOKENS entry: {item!r}")
        tokens[token.strip()] = user_id.strip()
    return tokens


def _parse_list(raw: str) -> List[str]:
    return [v.strip() for v in raw.split(",") if v.strip()]


@dataclass
class Settings:
    """Runtime configuration for the shape assistant API."""

    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    gemini_base_url: str = DEFAULT_BASE_URL
    gemini_timeout: Optional[float] = None
    api_tokens: Dict[str, str] = field(default_factory=dict)
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build :class:`Settings` from the process environment."""
    timeout = os.getenv("GEMINI_TIMEOUT")
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        gemini_base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
        gemini_timeout=float(timeout) if timeout else None,
        api_tokens=_parse_tokens(os.getenv("SHAPE_API_TOKENS", "")),
        cors_origins=_parse_list(
            os.getenv("SHAPE_API_CORS_ORIGINS", "http://localhost:3000")
        ),
        log_level=os.getenv("SHAPE_API_LOG_LEVEL", "INFO").upper(),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
