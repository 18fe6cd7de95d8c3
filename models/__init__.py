"""
Models package initialization.
"""

from .base import Base, BaseModel
from .chat_conversation import ChatConversation
from .chat_conversation_file import ChatConversationFile
from .chat_conversation_share import ChatConversationShare
from .chat_message import ChatMessage, MessageActor
from .github_installation import GithubAppInstallation, GithubAppInstallationRepository
from .project import UserProject
from .template import UserTemplate, UserTemplateCollection
from .user import OAuthAccount, OAuthProvider, User
from .user_file import UserFile

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "OAuthAccount",
    "OAuthProvider",
    "UserFile",
    # Chat models
    "ChatConversation",
    "ChatMessage",
    "MessageActor",
    "ChatConversationFile",
    "ChatConversationShare",
    # Template models
    "UserTemplateCollection",
    "UserTemplate",
    # Installations and projects
    "GithubAppInstallation",
    "GithubAppInstallationRepository",
    "UserProject",
]
