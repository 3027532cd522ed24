"""Chat completion client for the AI gateway (OpenAI-compatible)."""

from typing import List, Optional

import httpx

from jobportal.exceptions import GatewayError, PaymentRequiredError, RateLimitError
from jobportal.logger import get_logger

logger = get_logger(__name__)


class CompletionClient:
    def __init__(
        self,
        api_key: str,
        url: str,
        model: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def complete(self, messages: List[dict]) -> Optional[str]:
        """Send the message list and return the first choice's content, or None if there is none."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={
                    "model": self.model,
                    "messages": messages,
                },
            )

        if response.status_code == 429:
            raise RateLimitError()
        if response.status_code == 402:
            raise PaymentRequiredError()
        if not response.is_success:
            logger.error("AI gateway error: %s %s", response.status_code, response.text)
            raise GatewayError()

        result = response.json()
        choices = result.get("choices") or []
        if not choices:
            return None
        message = choices[0].get("message") or {}
        return message.get("content") or None
