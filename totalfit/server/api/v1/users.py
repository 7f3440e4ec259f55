"""
User endpoints.

Stores Google-authenticated users and serves their profile.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from totalfit.core.database.repositories import UserRepository
from totalfit.core.errors import NotFoundError
from totalfit.core.logging_config import get_logger
from totalfit.core.models.io.common import Envelope
from totalfit.core.models.io.users import UserRead, UserUpsert, UserUpsertResponse
from totalfit.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.post(
    "/upsert",
    response_model=UserUpsertResponse,
    summary="Create or Update User",
    description="Create the user for a Google account, or refresh its profile and tokens.",
    responses={400: {"description": "Google ID or email missing"}},
)
async def upsert_user(request: UserUpsert, session: SessionDep):
    if not request.google_id or not request.email:
        logger.error("User upsert rejected: missing Google ID or email")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Google ID and email are required"}
        )

    try:
        user = await UserRepository(session).upsert_google_user(
            google_id=request.google_id,
            email=request.email,
            name=request.name or "",
            picture_url=request.picture_url,
            access_token=request.access_token,
            refresh_token=request.refresh_token,
        )
    except Exception as e:
        await session.rollback()
        logger.error(f"Error upserting user {request.google_id}: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to save user", "details": str(e)},
        )
    logger.info(f"User upserted: {user.id}")
    return UserUpsertResponse(user=UserRead.model_validate(user))


@router.get(
    "/{user_id}",
    response_model=Envelope[UserRead],
    summary="Get User",
    description="Retrieve a user by ID (the Google account ID).",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: str, session: SessionDep):
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return Envelope(data=UserRead.model_validate(user))
