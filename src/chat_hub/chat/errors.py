"""Errors raised by the chat service layer."""


class ChatError(Exception):
    """Base class for chat flow failures."""


class InvalidInputError(ChatError):
    """A user name, title or other input failed validation."""


class UserNotFoundError(ChatError):
    def __init__(self, username: str) -> None:
        super().__init__(f"Unknown user: {username}")
        self.username = username


class ConversationNotFoundError(ChatError):
    def __init__(self, title: str) -> None:
        super().__init__(f"Unknown conversation: {title}")
        self.title = title
