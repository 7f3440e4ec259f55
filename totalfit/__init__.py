"""TotalFit.

Backend for the TotalFit fitness-tracking application.

Core subpackages
----------------

- ``totalfit.server``:

  - FastAPI application, route definitions and request middleware.
  - Thin proxy endpoints for the FatSecret nutrition API and the Clarifai
    food-recognition model.
  - Google OAuth2 sign-in routes.

- ``totalfit.injury_analysis``:

  - Body-part workload, injury-risk and recovery calculations for athletes.
  - Exercise/sport to body-part mapping and per-body-part advice.

- ``totalfit.health``:

  - Health score and wellness-risk analysis over manually logged daily metrics.

- ``totalfit.integrations``:

  - HTTP clients for FatSecret (OAuth1.0a signed), Clarifai and Google OAuth2.

- ``totalfit.core``:

  - Logging, monitoring, persistence (SQLModel entities and repositories) and
    request/response schemas.
"""

__version__ = "0.1.0"
