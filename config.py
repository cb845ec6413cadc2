import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from errors import MissingCredential

# ✅ Load environment variables from .env file
load_dotenv()


def _env(name: str) -> Optional[str]:
    # Empty strings are treated the same as unset variables
    value = os.getenv(name)
    return value or None


def _timeout() -> float:
    raw = _env("HTTP_TIMEOUT_SECONDS")
    if raw is None:
        return 30.0
    try:
        return float(raw)
    except ValueError:
        raise MissingCredential(
            f"HTTP_TIMEOUT_SECONDS must be a number, got {raw!r}",
            error="Invalid configuration",
        )


class Settings(BaseModel):
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    supabase_table: str = "skill_analyses"
    http_timeout: float = 30.0
    strict_analysis: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=_env("GEMINI_API_KEY"),
            gemini_model=_env("GEMINI_MODEL") or "gemini-1.5-flash",
            supabase_url=_env("SUPABASE_URL"),
            supabase_service_role_key=_env("SUPABASE_SERVICE_ROLE_KEY"),
            supabase_table=_env("SUPABASE_TABLE") or "skill_analyses",
            http_timeout=_timeout(),
            strict_analysis=(_env("STRICT_ANALYSIS_VALIDATION") or "").lower() in ("1", "true", "yes"),
        )


# ✅ Read on every request so deployments pick up changed secrets without a restart
def get_settings() -> Settings:
    return Settings.from_env()
