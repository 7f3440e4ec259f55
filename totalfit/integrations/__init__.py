"""
Clients for the third-party APIs TotalFit talks to.

- ``fatsecret``: FatSecret nutrition database (OAuth 1.0a signed)
- ``clarifai``: Clarifai food-recognition model (``Key`` token)
- ``google_oauth``: Google OAuth2 sign-in
"""

from .clarifai import ClarifaiClient, concepts
from .errors import FatSecretMethodError, UpstreamApiError, UpstreamRequestError
from .fatsecret import FatSecretClient
from .google_oauth import GoogleOAuthClient, GoogleTokens, GoogleUserInfo
from .oauth1 import OAuth1Signer

__all__ = [
    "ClarifaiClient",
    "FatSecretClient",
    "FatSecretMethodError",
    "GoogleOAuthClient",
    "GoogleTokens",
    "GoogleUserInfo",
    "OAuth1Signer",
    "UpstreamApiError",
    "UpstreamRequestError",
    "concepts",
]
