"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version)
used for monitoring and deployment verification.
"""

from fastapi import APIRouter

from totalfit import __version__
from totalfit.core import clock
from totalfit.server.core import constant
from totalfit.server.services.deps import SettingsDep

router = APIRouter()

ENDPOINTS = {
    "fatsecret": f"{constant.API_PREFIX}/fatsecret",
    "clarifai": f"{constant.API_PREFIX}/clarifai",
    "auth": f"{constant.API_PREFIX}/auth",
    "users": f"{constant.API_PREFIX}/users",
    "athletes": f"{constant.API_PREFIX}/athletes",
    "activities": f"{constant.API_PREFIX}/activities",
    "recovery": f"{constant.API_PREFIX}/recovery/daily-update",
}


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check(app_settings: SettingsDep):
    """
    Health check endpoint.

    Returns a status indicator, the deployment environment and the main API
    entry points.
    """
    return {
        "status": "ok",
        "service": constant.SERVICE_NAME,
        "environment": app_settings.environment,
        "timestamp": clock.utc_now().isoformat().replace("+00:00", "Z"),
        "endpoints": ENDPOINTS,
    }


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    """
    Get API version.

    Returns the current semantic version of the API and supported schema version.
    """
    return {"version": __version__, "schema_version": constant.SCHEMA_VERSION}
