import json
import logging
from typing import Optional, Any
from datetime import datetime, timezone

import httpx

from ..errors import ServerError, InvalidResponse
from ..settings import settings

logger = logging.getLogger("recipevault.ai")


class GenerationClient:
    """Client for the remote text-generation endpoint.

    One POST per call, no retries. The endpoint answers with a JSON object
    whose wrapper field holds the model's recipe JSON.
    """
    _instance = None

    def __init__(self):
        self.endpoint_url = settings.generation_endpoint_url
        self.max_tokens = settings.generation_max_tokens
        self.timeout_s = settings.generation_timeout_s
        self.last_error: Optional[str] = None
        self.last_error_at: Optional[datetime] = None

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    async def complete(self, prompt: str, client: Optional[httpx.AsyncClient] = None) -> dict[str, Any]:
        """
        Send a prompt and return the decoded top-level JSON object.
        Raises ServerError on non-200, InvalidResponse on a non-object body.
        Transport errors propagate as httpx.HTTPError.
        """
        body = {"prompt": prompt, "max_tokens": self.max_tokens}
        logger.info(f"Requesting generation from {self.endpoint_url} prompt_chars={len(prompt)}")

        try:
            if client is not None:
                response = await client.post(self.endpoint_url, json=body, timeout=self.timeout_s)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_s) as own_client:
                    response = await own_client.post(self.endpoint_url, json=body)
        except httpx.HTTPError as e:
            self._record_error(e)
            raise

        if response.status_code != 200:
            error = ServerError(
                f"Generation endpoint returned {response.status_code}",
                status_code=response.status_code,
            )
            self._record_error(error)
            raise error

        try:
            payload = json.loads(response.content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            error = InvalidResponse(f"Generation endpoint returned non-JSON body: {e}")
            self._record_error(error)
            raise error from e

        if not isinstance(payload, dict):
            error = InvalidResponse("Generation endpoint returned a non-object JSON body")
            self._record_error(error)
            raise error

        return payload

    def _record_error(self, e: Exception) -> None:
        self.last_error = f"{e.__class__.__name__}: {str(e)}"
        self.last_error_at = datetime.now(timezone.utc)
        logger.error(f"Generation request failed: {e}")


# Singleton instance access
generation_client = GenerationClient.get_instance()
