"""OAuth 1.0a request signing (HMAC-SHA1).

FatSecret's REST API authenticates every call with a one-legged OAuth 1.0a
signature: no user token, only the consumer key and secret.

Signing follows RFC 5849:

1. Collect the request parameters (form body and URL query) together with the
   ``oauth_*`` protocol parameters.
2. Percent-encode keys and values (RFC 3986), sort them, join as ``k=v`` with
   ``&``.
3. Build the base string ``METHOD&enc(base_url)&enc(param_string)``.
4. HMAC-SHA1 it with the key ``enc(consumer_secret)&enc(token_secret)`` and
   base64-encode the digest.

Usage
-----
>>> signer = OAuth1Signer("key", "secret")
>>> params = signer.authorize("POST", "https://platform.fatsecret.com/rest/server.api", {"method": "foods.search"})
>>> headers = signer.to_header(params)
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import string
import time
from typing import Callable, Dict, Mapping, Optional
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"
NONCE_LENGTH = 32
_NONCE_ALPHABET = string.ascii_letters + string.digits


def percent_encode(value: object) -> str:
    """RFC 3986 percent-encoding: everything except unreserved characters."""
    return quote(str(value), safe="")


def generate_nonce() -> str:
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(NONCE_LENGTH))


def generate_timestamp() -> str:
    return str(int(time.time()))


def normalize_url(url: str) -> str:
    """Scheme, host and path of ``url``; query and fragment are dropped."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), parts.path, "", ""))


class OAuth1Signer:
    """Signs requests with OAuth 1.0a HMAC-SHA1.

    Args:
        consumer_key: Application key issued by the provider.
        consumer_secret: Application secret issued by the provider.
        token: Optional user access token (omitted for one-legged requests).
        token_secret: Secret paired with ``token``.
        nonce_factory: Callable producing a fresh nonce per request.
        timestamp_factory: Callable producing the request timestamp in seconds.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        token: Optional[str] = None,
        token_secret: str = "",
        *,
        nonce_factory: Callable[[], str] = generate_nonce,
        timestamp_factory: Callable[[], str] = generate_timestamp,
    ) -> None:
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.token = token
        self.token_secret = token_secret
        self._nonce_factory = nonce_factory
        self._timestamp_factory = timestamp_factory

    def signing_key(self) -> str:
        return f"{percent_encode(self.consumer_secret)}&{percent_encode(self.token_secret or '')}"

    def base_string(self, method: str, url: str, params: Mapping[str, object]) -> str:
        """Signature base string for a request.

        Args:
            method: HTTP method
            url: Request URL; its query parameters are signed along with ``params``
            params: Form parameters and ``oauth_*`` parameters (without ``oauth_signature``)
        """
        pairs = [(percent_encode(k), percent_encode(v)) for k, v in params.items()]
        pairs.extend((percent_encode(k), percent_encode(v)) for k, v in parse_qsl(urlsplit(url).query))
        param_string = "&".join(f"{k}={v}" for k, v in sorted(pairs))
        return "&".join([method.upper(), percent_encode(normalize_url(url)), percent_encode(param_string)])

    def sign(self, base_string: str) -> str:
        digest = hmac.new(self.signing_key().encode(), base_string.encode(), hashlib.sha1).digest()
        return base64.b64encode(digest).decode()

    def authorize(self, method: str, url: str, data: Optional[Mapping[str, object]] = None) -> Dict[str, str]:
        """Protocol parameters, signature included, for one request.

        Returns:
            The ``oauth_*`` parameters to send in the ``Authorization`` header
        """
        oauth_params: Dict[str, str] = {
            "oauth_consumer_key": self.consumer_key,
            "oauth_nonce": self._nonce_factory(),
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": self._timestamp_factory(),
            "oauth_version": OAUTH_VERSION,
        }
        if self.token:
            oauth_params["oauth_token"] = self.token

        base = self.base_string(method, url, {**(data or {}), **oauth_params})
        oauth_params["oauth_signature"] = self.sign(base)
        return oauth_params

    @staticmethod
    def to_header(oauth_params: Mapping[str, str]) -> Dict[str, str]:
        """``Authorization`` header carrying the signed ``oauth_*`` parameters."""
        fields = ", ".join(
            f'{percent_encode(k)}="{percent_encode(v)}"'
            for k, v in sorted(oauth_params.items())
            if k.startswith("oauth_")
        )
        return {"Authorization": f"OAuth {fields}"}
