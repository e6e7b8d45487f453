import logging
import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-1.5-flash"
LLM_TIMEOUT = 300.0


def _read_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        logger.warning("[Config] Ignoring LLM_TIMEOUT=%r, using %ss", raw, LLM_TIMEOUT)
        return LLM_TIMEOUT
    return value


@dataclass(frozen=True)
class Settings:
    # never rendered by repr()
    gemini_api_key: str = field(default="", repr=False)
    gemini_model: str = GEMINI_MODEL
    gemini_base_url: str = GEMINI_BASE_URL
    llm_timeout: float = LLM_TIMEOUT
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", GEMINI_MODEL),
            gemini_base_url=os.getenv("GEMINI_BASE_URL", GEMINI_BASE_URL),
            llm_timeout=_read_timeout(os.getenv("LLM_TIMEOUT", str(LLM_TIMEOUT))),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
