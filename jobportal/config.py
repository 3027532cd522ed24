"""Job Portal: configuration loaded from the environment."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from jobportal.exceptions import ConfigurationError

DEFAULT_AI_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_CHAT_MODEL = "google/gemini-2.5-flash"

# field name -> environment variable
ENV_NAMES = {
    "supabase_url": "SUPABASE_URL",
    "supabase_service_role_key": "SUPABASE_SERVICE_ROLE_KEY",
    "ai_gateway_api_key": "AI_GATEWAY_API_KEY",
    "ai_gateway_url": "AI_GATEWAY_URL",
    "chat_model": "CHAT_MODEL",
}


@dataclass(frozen=True)
class Settings:
    """Runtime configuration. Built once at startup and handed to create_app()."""

    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    ai_gateway_api_key: Optional[str] = None
    ai_gateway_url: str = DEFAULT_AI_GATEWAY_URL
    chat_model: str = DEFAULT_CHAT_MODEL
    http_timeout: float = 60.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None,
            ai_gateway_api_key=os.getenv("AI_GATEWAY_API_KEY") or None,
            ai_gateway_url=os.getenv("AI_GATEWAY_URL", DEFAULT_AI_GATEWAY_URL),
            chat_model=os.getenv("CHAT_MODEL", DEFAULT_CHAT_MODEL),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "60")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def require(self, *fields: str) -> None:
        """Raise ConfigurationError for the first field that is unset."""
        for field in fields:
            if not getattr(self, field):
                raise ConfigurationError(f"{ENV_NAMES.get(field, field.upper())} is not configured")
