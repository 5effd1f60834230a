"""Request and response bodies for the chat HTTP endpoints."""

from pydantic import BaseModel

from chat_hub.models.chat import Conversation, Message, User


class NewUser(BaseModel):
    name: str
    bio: str = ""
    language: str = "English"


class ProfileUpdate(BaseModel):
    bio: str | None = None
    language: str | None = None


class NewConversation(BaseModel):
    title: str


class NewMessage(BaseModel):
    content: str  # Raw, untrusted text


class ChatPage(BaseModel):
    """A conversation with its messages in posting order."""

    conversation: Conversation
    messages: list[Message]


class ProfilePage(BaseModel):
    """A user with the messages they authored."""

    user: User
    messages: list[Message]
