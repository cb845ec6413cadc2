import logging
from typing import Any, Dict, List, Optional

import httpx

from errors import StorageError

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Inserts rows through Supabase's PostgREST endpoint (``/rest/v1/<table>``)."""

    def __init__(
        self,
        url: str,
        service_key: str,
        table: str = "skill_analyses",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self.service_key = service_key
        self.timeout = timeout
        self.transport = transport

    async def insert(self, record: Dict[str, Any]) -> List[Dict[str, Any]]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self.endpoint,
                json=record,
                headers={
                    "Authorization": f"Bearer {self.service_key}",
                    "Content-Type": "application/json",
                    "apikey": self.service_key,
                    "Prefer": "return=representation",
                },
            )

        if not response.is_success:
            logger.error("❌ Supabase error %s: %s", response.status_code, response.text)
            raise StorageError(response.text)

        rows = response.json()
        # PostgREST returns a list for inserts; a single object is wrapped to match
        if not isinstance(rows, list):
            rows = [rows]
        return rows
