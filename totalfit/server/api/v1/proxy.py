"""
Third-party API proxy endpoints.

Forwards nutrition lookups to FatSecret and food-recognition requests to
Clarifai so the provider credentials never reach the browser. Error bodies
use the providers' own shape, ``{"error": "..."}``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from totalfit.core.logging_config import get_logger
from totalfit.core.models.io.proxy import ClarifaiRequest
from totalfit.integrations import FatSecretMethodError, UpstreamApiError, UpstreamRequestError
from totalfit.server.services.deps import ClarifaiClientDep, FatSecretClientDep

logger = get_logger(__name__)

router = APIRouter(tags=["proxy"])

FATSECRET_NOT_CONFIGURED = "FatSecret API keys are not configured on the server. Please check your .env file."
FATSECRET_METHOD_REQUIRED = "`fatsecret_method` is required in the request body"
FATSECRET_UNAVAILABLE = "An internal server error occurred while contacting the FatSecret API."
CLARIFAI_NOT_CONFIGURED = "Clarifai PAT is not configured on the server. Please check your .env file."
CLARIFAI_IMAGE_REQUIRED = "base64Image is required"
CLARIFAI_UNAVAILABLE = "An internal server error occurred while contacting the Clarifai API."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/fatsecret",
    summary="FatSecret Proxy",
    description="Call a FatSecret Platform API method. The body names the method in `fatsecret_method`; "
    "every other field is passed to FatSecret as a method argument.",
    response_description="The FatSecret JSON response.",
    responses={
        200: {"description": "FatSecret response"},
        400: {"description": "Missing method or FatSecret method error"},
        500: {"description": "Credentials missing or FatSecret unreachable"},
    },
)
async def fatsecret_proxy(client: FatSecretClientDep, payload: Dict[str, Any] = Body(default={})) -> Response:
    """
    Proxy a signed call to FatSecret's `server.api`.

    Upstream non-2xx responses are passed through with their status code and
    body; a FatSecret `error` object in a 2xx response becomes a 400.
    """
    if client is None:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, FATSECRET_NOT_CONFIGURED)

    params = dict(payload)
    fatsecret_method = params.pop("fatsecret_method", None)
    if not fatsecret_method:
        return _error(status.HTTP_400_BAD_REQUEST, FATSECRET_METHOD_REQUIRED)

    try:
        data = await client.call(fatsecret_method, params)
    except FatSecretMethodError as e:
        return _error(status.HTTP_400_BAD_REQUEST, e.message)
    except UpstreamRequestError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, FATSECRET_UNAVAILABLE)
    except UpstreamApiError as e:
        if isinstance(e.details, (dict, list)):
            return JSONResponse(status_code=e.status_code, content=e.details)
        return PlainTextResponse(status_code=e.status_code, content=str(e.details or ""))
    return JSONResponse(status_code=status.HTTP_200_OK, content=data)


@router.post(
    "/clarifai",
    summary="Clarifai Food Recognition Proxy",
    description="Run Clarifai's food-item-recognition model on a base64-encoded image.",
    response_description="The Clarifai JSON response.",
    responses={
        200: {"description": "Clarifai response"},
        400: {"description": "Image missing"},
        500: {"description": "PAT missing or Clarifai request failed"},
    },
)
async def clarifai_proxy(request: ClarifaiRequest, client: ClarifaiClientDep) -> Response:
    """
    Proxy an image to Clarifai's `outputs` endpoint.

    Any Clarifai failure is reported as a generic 500.
    """
    if client is None:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, CLARIFAI_NOT_CONFIGURED)
    if not request.base64_image:
        return _error(status.HTTP_400_BAD_REQUEST, CLARIFAI_IMAGE_REQUIRED)

    try:
        data = await client.predict(request.base64_image)
    except UpstreamApiError as e:
        logger.error(f"Clarifai proxy failed: {e.message}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, CLARIFAI_UNAVAILABLE)
    return JSONResponse(status_code=status.HTTP_200_OK, content=data)
