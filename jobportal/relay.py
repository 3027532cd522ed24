"""
Chat relay: the job-matching assistant endpoint's core.

Loads the active job listings, renders the system prompt for the requested
language and forwards the conversation to the completion API. Stateless:
nothing from a request outlives it.
"""

from typing import List, Optional

import httpx

from jobportal.config import Settings
from jobportal.database import SupabaseStore
from jobportal.exceptions import StoreError
from jobportal.languages import render_system_prompt
from jobportal.llm_client import CompletionClient
from jobportal.logger import get_logger

logger = get_logger(__name__)

FALLBACK_REPLY = "I'm sorry, I couldn't generate a response."

REQUIRED_SETTINGS = ("ai_gateway_api_key", "supabase_url", "supabase_service_role_key")


def build_messages(system_prompt: str, messages: List[dict]) -> List[dict]:
    return [{"role": "system", "content": system_prompt}, *messages]


class ChatRelay:
    def __init__(self, store: SupabaseStore, completions: CompletionClient):
        self.store = store
        self.completions = completions

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ChatRelay":
        """Build a relay from configuration; raises ConfigurationError if a credential is missing."""
        settings.require(*REQUIRED_SETTINGS)
        store = SupabaseStore(
            settings.supabase_url,
            settings.supabase_service_role_key,
            timeout=settings.http_timeout,
            transport=transport,
        )
        completions = CompletionClient(
            settings.ai_gateway_api_key,
            settings.ai_gateway_url,
            settings.chat_model,
            timeout=settings.http_timeout,
            transport=transport,
        )
        return cls(store, completions)

    async def load_jobs(self) -> List[dict]:
        # Listings are context only; a failed read still lets the assistant answer.
        try:
            return await self.store.fetch_active_jobs()
        except StoreError as e:
            logger.warning("Error fetching jobs: %s", e)
            return []

    async def reply(self, messages: List[dict], language: Optional[str] = None) -> str:
        jobs = await self.load_jobs()
        system_prompt = render_system_prompt(language, jobs)
        logger.info("Relaying %d message(s), language=%s, jobs=%d", len(messages), language, len(jobs))
        content = await self.completions.complete(build_messages(system_prompt, messages))
        return content or FALLBACK_REPLY
