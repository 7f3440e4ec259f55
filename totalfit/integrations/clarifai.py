"""Clarifai food-recognition client.

Posts a base64 image to the ``food-item-recognition`` model's ``outputs``
endpoint, authenticated with ``Authorization: Key <PAT>``.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

import httpx

from totalfit.core.logging_config import get_logger
from totalfit.core.monitoring import log_upstream_call

from .errors import UpstreamApiError, UpstreamRequestError

logger = get_logger(__name__)

PROVIDER = "clarifai"


def build_outputs_request(base64_image: str) -> Dict[str, Any]:
    return {"inputs": [{"data": {"image": {"base64": base64_image}}}]}


def concepts(response: Dict[str, Any], min_value: float = 0.0) -> List[Dict[str, Any]]:
    """Food concepts ``[{name, value}]`` from the first output of a prediction response.

    Args:
        response: Decoded ``outputs`` response
        min_value: Drop concepts scored below this confidence
    """
    outputs = response.get("outputs") or []
    if not outputs:
        return []
    found = (outputs[0].get("data") or {}).get("concepts") or []
    return [
        {"name": concept.get("name"), "value": concept.get("value", 0.0)}
        for concept in found
        if concept.get("value", 0.0) >= min_value
    ]


class ClarifaiClient:
    """Async client for a Clarifai model's ``outputs`` endpoint.

    Args:
        pat: Clarifai personal access token.
        api_url: Model ``outputs`` URL.
        timeout: HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        pat: str,
        *,
        api_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.pat = pat
        self.api_url = api_url
        self._http = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": f"Key {self.pat}",
            "Content-Type": "application/json",
        }

    async def predict(self, base64_image: str) -> Dict[str, Any]:
        """Run food recognition on a base64-encoded image.

        Returns:
            The decoded Clarifai response

        Raises:
            UpstreamApiError: Non-2xx response; ``details`` holds the upstream body
            UpstreamRequestError: Transport failure or non-JSON body
        """
        started = time.time()
        try:
            response = await self._http.post(
                self.api_url, json=build_outputs_request(base64_image), headers=self._headers()
            )
        except httpx.HTTPError as e:
            log_upstream_call(PROVIDER, None, (time.time() - started) * 1000)
            logger.error(f"Clarifai request failed: {e}", exc_info=True)
            raise UpstreamRequestError(f"Clarifai request failed: {e}", provider=PROVIDER) from e
        log_upstream_call(PROVIDER, response.status_code, (time.time() - started) * 1000)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamRequestError(
                "Clarifai API returned a non-JSON body", status_code=response.status_code, provider=PROVIDER
            ) from e

        if not response.is_success:
            description = (payload.get("status") or {}).get("description") if isinstance(payload, dict) else None
            logger.error(f"Clarifai API error status {response.status_code}: {payload}")
            raise UpstreamApiError(
                f"Clarifai API request failed: {description or response.status_code}",
                status_code=response.status_code,
                details=payload,
                provider=PROVIDER,
            )
        return payload
