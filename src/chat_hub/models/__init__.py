"""Data models for chat entities and the activity feed."""

from chat_hub.models.activity import ActivityEvent, ActivityKind
from chat_hub.models.chat import Conversation, Message, User, utcnow

__all__ = [
    "ActivityEvent",
    "ActivityKind",
    "Conversation",
    "Message",
    "User",
    "utcnow",
]
