"""
Job Portal India: API service
Handles: chat assistant relay, job posting/listing, role lookup, language catalogue

The chat assistant answers every request with {"message"} or {"error"}; the
other endpoints raise HTTPException like any FastAPI route.

Run: uvicorn jobportal.main:app --reload
"""

from typing import Optional

import httpx
from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from jobportal import __version__
from jobportal.config import Settings
from jobportal.database import SupabaseStore
from jobportal.dependencies import get_store, require_user_id
from jobportal.exceptions import PaymentRequiredError, RateLimitError, StoreError
from jobportal.languages import DEFAULT_LANGUAGE, LANGUAGES
from jobportal.logger import configure_logging, get_logger
from jobportal.middleware import cors_headers
from jobportal.models import (
    ChatReply,
    ChatRequest,
    ErrorReply,
    HealthResponse,
    JobCreate,
    JobListing,
    JobListResponse,
    LanguageListResponse,
    ProfileResponse,
)
from jobportal.relay import ChatRelay

logger = get_logger(__name__)

DASHBOARDS = {"employer": "/employer", "employee": "/employee"}

router = APIRouter()


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


# ── Chat assistant ────────────────────────────────────────────────────────────

@router.post(
    "/chat-assistant",
    response_model=ChatReply,
    responses={402: {"model": ErrorReply}, 429: {"model": ErrorReply}, 500: {"model": ErrorReply}},
)
async def chat_assistant(request: Request):
    try:
        payload = await request.json()
        chat = ChatRequest.model_validate(payload)
        relay = ChatRelay.from_settings(request.app.state.settings, request.app.state.transport)
        message = await relay.reply(chat.messages, chat.language)
    except (RateLimitError, PaymentRequiredError) as e:
        logger.warning("AI gateway refused request: %s", e)
        return error_response(str(e), e.status_code)
    except Exception as e:
        logger.exception("Error in chat-assistant: %s", e)
        return error_response(str(e) or "Unknown error", 500)

    return {"message": message}


# ── Jobs ──────────────────────────────────────────────────────────────────────

@router.post("/jobs", response_model=JobListing, status_code=201)
async def post_job(
    job: JobCreate,
    user_id: str = Depends(require_user_id),
    store: SupabaseStore = Depends(get_store),
):
    row = {"employer_id": user_id, **job.model_dump(), "status": "active"}
    try:
        return await store.create_job(row)
    except StoreError as e:
        logger.error("Job posting failed: %s", e)
        raise HTTPException(status_code=e.status_code, detail=f"Job posting failed: {e}")


@router.get("/jobs", response_model=JobListResponse)
async def list_jobs(
    mine: bool = False,
    status: Optional[str] = None,
    x_user_id: str = Header(None),
    store: SupabaseStore = Depends(get_store),
):
    employer_id = None
    if mine:
        employer_id = require_user_id(x_user_id)
    try:
        jobs = await store.list_jobs(employer_id=employer_id, status=status)
    except StoreError as e:
        logger.error("Could not list jobs: %s", e)
        raise HTTPException(status_code=e.status_code, detail=f"Could not list jobs: {e}")
    return {"jobs": jobs, "total": len(jobs)}


# ── Profile ───────────────────────────────────────────────────────────────────

@router.get("/me", response_model=ProfileResponse)
async def get_profile(
    user_id: str = Depends(require_user_id),
    store: SupabaseStore = Depends(get_store),
):
    """Role lookup used by the landing page to pick a dashboard."""
    try:
        profile = await store.get_profile(user_id)
    except StoreError as e:
        logger.error("Error fetching user role: %s", e)
        raise HTTPException(status_code=e.status_code, detail=f"Could not load profile: {e}")
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    role = profile.get("role")
    return {"user_id": user_id, "role": role, "dashboard": DASHBOARDS.get(role)}


# ── Misc ──────────────────────────────────────────────────────────────────────

@router.get("/languages", response_model=LanguageListResponse)
async def list_languages():
    return {
        "languages": [
            {"code": lang.code, "label": lang.label, "speech_locale": lang.speech_locale}
            for lang in LANGUAGES.values()
        ],
        "default": DEFAULT_LANGUAGE,
    }


@router.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "service": "job-portal"}


# ── App ───────────────────────────────────────────────────────────────────────

def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the app. transport replaces the network for outbound httpx calls (tests)."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Job Portal India", version=__version__)
    app.state.settings = settings
    app.state.transport = transport
    app.middleware("http")(cors_headers)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("jobportal.main:app", host="0.0.0.0", port=8000, reload=True)
