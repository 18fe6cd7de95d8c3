# app/domains/user/service.py
import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models import (
    ChatConversation,
    ChatConversationFile,
    ChatConversationShare,
    ChatMessage,
    GithubAppInstallation,
    GithubAppInstallationRepository,
    OAuthAccount,
    User,
    UserFile,
    UserProject,
    UserTemplate,
    UserTemplateCollection,
)

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_email(self, primary_email: str) -> Optional[User]:
        """Get a user by primary email."""
        result = await self.db.execute(select(User).where(User.primary_email == primary_email))
        return result.scalar_one_or_none()

    async def create_user(self, primary_email: str) -> User:
        """Create a new user."""
        user = User(primary_email=primary_email)

        try:
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
            return user
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise e

    async def list_user_files(self, user_id: int) -> List[UserFile]:
        """Files owned by the user; empty when there are none."""
        stmt = select(UserFile).where(UserFile.user_id == user_id).order_by(UserFile.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user and all associated data in one transaction.

        A store failure is rolled back and reported as False rather than raised,
        so the caller can keep the session intact.

        Returns:
            True once everything is removed, False if the user does not exist or the delete failed
        """
        user = await self.get_user_by_id(user_id)
        if not user:
            return False

        chat_ids = select(ChatConversation.id).where(ChatConversation.user_id == user_id)
        collection_ids = select(UserTemplateCollection.id).where(
            UserTemplateCollection.user_id == user_id
        )
        installation_ids = select(GithubAppInstallation.id).where(
            GithubAppInstallation.user_id == user_id
        )

        try:
            await self.db.execute(
                delete(ChatConversationShare).where(ChatConversationShare.chat_id.in_(chat_ids))
            )
            await self.db.execute(
                delete(ChatConversationFile).where(ChatConversationFile.chat_id.in_(chat_ids))
            )
            await self.db.execute(delete(ChatMessage).where(ChatMessage.chat_id.in_(chat_ids)))
            await self.db.execute(delete(ChatConversation).where(ChatConversation.user_id == user_id))
            await self.db.execute(
                delete(UserTemplate).where(UserTemplate.collection_id.in_(collection_ids))
            )
            await self.db.execute(
                delete(UserTemplateCollection).where(UserTemplateCollection.user_id == user_id)
            )
            await self.db.execute(
                delete(GithubAppInstallationRepository).where(
                    GithubAppInstallationRepository.installation_id.in_(installation_ids)
                )
            )
            await self.db.execute(
                delete(GithubAppInstallation).where(GithubAppInstallation.user_id == user_id)
            )
            await self.db.execute(delete(UserProject).where(UserProject.user_id == user_id))
            await self.db.execute(delete(UserFile).where(UserFile.user_id == user_id))
            await self.db.execute(delete(OAuthAccount).where(OAuthAccount.user_id == user_id))
            await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()
            return True
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete user %s: %s", user_id, str(e))
            return False
