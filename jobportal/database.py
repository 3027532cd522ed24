"""
Job Portal: hosted data store client.

Talks to the PostgREST API in front of the hosted database
({SUPABASE_URL}/rest/v1/<table>). The service role key is sent both as the
apikey header and as a bearer token.
"""

from typing import Any, Dict, List, Optional

import httpx

from jobportal.exceptions import StoreError
from jobportal.logger import get_logger

logger = get_logger(__name__)

JOBS_TABLE = "jobs"
PROFILES_TABLE = "profiles"


class SupabaseStore:
    def __init__(
        self,
        url: str,
        key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.rest_url = f"{url.rstrip('/')}/rest/v1"
        self.key = key
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
        }

    async def _request(self, method: str, table: str, **kwargs) -> Any:
        url = f"{self.rest_url}/{table}"
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
        except httpx.TimeoutException:
            raise StoreError(f"Data store timed out ({table})", status_code=504)
        except httpx.HTTPError as e:
            raise StoreError(f"Data store unavailable ({table}): {e}", status_code=503)

        if response.status_code >= 400:
            raise StoreError(
                f"Data store error {response.status_code} on {table}: {response.text}",
                status_code=502,
            )
        return response.json() if response.content else None

    async def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        descending: bool = True,
    ) -> List[dict]:
        """SELECT * with equality filters and an optional ordering column."""
        params = {"select": "*"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        rows = await self._request("GET", table, params=params)
        return rows or []

    async def insert(self, table: str, row: dict) -> dict:
        rows = await self._request(
            "POST",
            table,
            json=row,
            headers={"Prefer": "return=representation"},
        )
        if isinstance(rows, list):
            return rows[0] if rows else row
        return rows or row

    # --------------- Jobs / profiles ---------------

    async def fetch_active_jobs(self) -> List[dict]:
        return await self.select(JOBS_TABLE, filters={"status": "active"}, order="created_at")

    async def list_jobs(self, employer_id: Optional[str] = None, status: Optional[str] = None) -> List[dict]:
        filters = {}
        if employer_id:
            filters["employer_id"] = employer_id
        if status:
            filters["status"] = status
        return await self.select(JOBS_TABLE, filters=filters, order="created_at")

    async def create_job(self, row: dict) -> dict:
        created = await self.insert(JOBS_TABLE, row)
        logger.info("Job posted: %s (%s)", created.get("title"), created.get("id"))
        return created

    async def get_profile(self, user_id: str) -> Optional[dict]:
        rows = await self.select(PROFILES_TABLE, filters={"id": user_id})
        return rows[0] if rows else None
