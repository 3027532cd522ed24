from fastapi import Header, HTTPException, Request

from jobportal.config import Settings
from jobportal.database import SupabaseStore
from jobportal.exceptions import AuthException, ConfigurationError


def require_user_id(x_user_id: str = Header(None)) -> str:
    if not x_user_id:
        raise AuthException()
    return x_user_id


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> SupabaseStore:
    settings = get_settings(request)
    try:
        settings.require("supabase_url", "supabase_service_role_key")
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return SupabaseStore(
        settings.supabase_url,
        settings.supabase_service_role_key,
        timeout=settings.http_timeout,
        transport=request.app.state.transport,
    )
