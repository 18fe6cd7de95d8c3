"""Resource-specific exceptions."""

from .base import NotFoundError


class ChatNotFoundError(NotFoundError):
    """Raised when a conversation is absent or owned by someone else."""

    def __init__(self, message: str = "Chat conversation not found"):
        super().__init__(message=message)


class CollectionNotFoundError(NotFoundError):
    """Raised when a template collection is absent or owned by someone else."""

    def __init__(self, message: str = "Template collection not found"):
        super().__init__(message=message)


class TemplateNotFoundError(NotFoundError):
    """Raised when a template is absent or outside the requested collection."""

    def __init__(self, message: str = "Template not found"):
        super().__init__(message=message)


class ProjectContextNotFoundError(NotFoundError):
    """Raised when a project or its context does not exist for the user."""

    def __init__(self, message: str = "Project context not found"):
        super().__init__(message=message)
