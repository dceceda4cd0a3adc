class RaqimError(Exception):
    """Base exception for the Raqim service."""


class LLMError(RaqimError):
    """Raised when the chat-completion provider cannot produce a reply."""


class NotFoundError(RaqimError):
    """Raised when a stored record does not exist."""


class MessageNotFoundError(NotFoundError):
    """Raised when a chat message id is unknown or not an assistant reply."""


class WorkflowNotFoundError(NotFoundError):
    """Raised when a workbench workflow id is unknown."""
