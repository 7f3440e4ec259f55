"""FatSecret Platform API client.

Every call is a form-encoded ``POST`` to ``server.api`` naming the API method
in the ``method`` field and asking for ``format=json``, signed with OAuth 1.0a
(see ``totalfit.integrations.oauth1``).

Errors
------
- ``UpstreamApiError``: FatSecret answered with a non-2xx status; ``details``
  holds the JSON body when it parses, otherwise the raw text.
- ``FatSecretMethodError``: a 2xx response whose body carries an ``error``
  object (FatSecret reports bad method arguments this way).
- ``UpstreamRequestError``: the request failed or the body was not JSON.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Mapping, Optional

import httpx

from totalfit.core.logging_config import get_logger
from totalfit.core.monitoring import log_upstream_call

from .errors import FatSecretMethodError, UpstreamApiError, UpstreamRequestError
from .oauth1 import OAuth1Signer

logger = get_logger(__name__)

PROVIDER = "fatsecret"


def form_value(value: Any) -> str:
    """Form-field text for a JSON value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


class FatSecretClient:
    """Async client for FatSecret's ``server.api`` endpoint.

    Args:
        consumer_key: OAuth 1.0a consumer key.
        consumer_secret: OAuth 1.0a consumer secret.
        api_url: ``server.api`` URL.
        timeout: HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.AsyncClient``.
        signer: Optional signer, mainly to pin nonce and timestamp in tests.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        *,
        api_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        signer: Optional[OAuth1Signer] = None,
    ) -> None:
        self.api_url = api_url
        self._signer = signer or OAuth1Signer(consumer_key, consumer_secret)
        self._http = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._http.aclose()

    def build_request_data(self, fatsecret_method: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, str]:
        """Form fields for a call: ``method``, ``format=json`` and the caller's parameters."""
        data = {"method": fatsecret_method, "format": "json"}
        data.update({key: form_value(value) for key, value in (params or {}).items() if value is not None})
        return data

    async def call(self, fatsecret_method: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Invoke a FatSecret API method.

        Args:
            fatsecret_method: FatSecret method name, e.g. ``foods.search``
            params: Method arguments

        Returns:
            The decoded JSON response

        Raises:
            UpstreamApiError: Non-2xx response
            FatSecretMethodError: 2xx response carrying an ``error`` object
            UpstreamRequestError: Transport failure or non-JSON body
        """
        data = self.build_request_data(fatsecret_method, params)
        headers = {
            **self._signer.to_header(self._signer.authorize("POST", self.api_url, data)),
            "Content-Type": "application/x-www-form-urlencoded",
        }
        logger.info(f"Proxying FatSecret method {fatsecret_method}")
        logger.debug(f"FatSecret request fields: {sorted(data)}")

        started = time.time()
        try:
            response = await self._http.post(self.api_url, data=data, headers=headers)
        except httpx.HTTPError as e:
            log_upstream_call(PROVIDER, None, (time.time() - started) * 1000)
            logger.error(f"FatSecret request failed: {e}", exc_info=True)
            raise UpstreamRequestError(f"FatSecret request failed: {e}", provider=PROVIDER) from e
        log_upstream_call(PROVIDER, response.status_code, (time.time() - started) * 1000)

        if not response.is_success:
            logger.error(f"FatSecret API error status {response.status_code}: {response.text}")
            try:
                details: Any = response.json()
            except ValueError:
                details = response.text
            raise UpstreamApiError(
                f"FatSecret API returned {response.status_code}",
                status_code=response.status_code,
                details=details,
                provider=PROVIDER,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamRequestError(
                "FatSecret API returned a non-JSON body", status_code=response.status_code, provider=PROVIDER
            ) from e

        if isinstance(payload, dict) and payload.get("error"):
            error = payload["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.error(f"FatSecret API logic error: {message}")
            raise FatSecretMethodError(message or "FatSecret API error", status_code=400, details=error, provider=PROVIDER)

        return payload
