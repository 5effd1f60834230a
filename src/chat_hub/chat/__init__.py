"""Chat flows and the HTTP router that exposes them."""

from chat_hub.chat.errors import (
    ChatError,
    ConversationNotFoundError,
    InvalidInputError,
    UserNotFoundError,
)
from chat_hub.chat.service import create_conversation, post_message, register_user, update_profile

__all__ = [
    "ChatError",
    "ConversationNotFoundError",
    "InvalidInputError",
    "UserNotFoundError",
    "create_conversation",
    "post_message",
    "register_user",
    "update_profile",
]
