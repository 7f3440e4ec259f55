"""
User repository.

Data access for Google-authenticated users, including the sign-in upsert.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from totalfit.core.clock import utc_now

from ..entities.users import User
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_google_id(self, google_id: str) -> Optional[User]:
        stmt = select(User).where(User.google_id == google_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert_google_user(
        self,
        *,
        google_id: str,
        email: str,
        name: Optional[str] = None,
        picture_url: Optional[str] = None,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> User:
        """Create or refresh the user row for a Google account.

        A missing ``refresh_token`` keeps the stored one, since Google only
        issues it on the first consent.

        Returns:
            The persisted user
        """
        now = utc_now()
        user = await self.get_by_google_id(google_id)
        if user is None:
            user = User(
                id=google_id,
                google_id=google_id,
                email=email,
                name=name,
                picture_url=picture_url,
                access_token=access_token,
                refresh_token=refresh_token,
                last_sync_at=now,
            )
            return await self.create(user)

        user.email = email
        user.name = name
        user.picture_url = picture_url
        user.access_token = access_token
        if refresh_token:
            user.refresh_token = refresh_token
        user.last_sync_at = now
        return await self.update(user)
