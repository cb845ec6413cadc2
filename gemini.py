import logging
from typing import Any, Dict, Optional

import httpx

from errors import NoContent, ProviderError

logger = logging.getLogger(__name__)

GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


def extract_text(payload: Any) -> Optional[str]:
    """Return candidates[0].content.parts[0].text, or None if any level is missing.

    A ``text`` that is not a string counts as missing, so the caller reports it
    as ``NoContent`` rather than an internal error.
    """
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = GEMINI_ENDPOINT.format(model=model)
        self.timeout = timeout
        self.transport = transport

    async def generate(self, prompt: str) -> str:
        body: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self.url,
                json=body,
                headers={
                    "Content-Type": "application/json",
                    "X-goog-api-key": self.api_key,
                },
            )

        if not response.is_success:
            logger.error("❌ Gemini API error %s: %s", response.status_code, response.text)
            raise ProviderError(response.text)

        text = extract_text(response.json())
        logger.info("✔️ Gemini content received: %r", text)
        if not text:
            raise NoContent()
        return text
