"""Chat write flows: message ingestion, registration, conversations, profiles.

Each flow resolves every referenced entity before it mutates anything, so a
lookup failure never leaves a half-applied write behind. Store errors
(duplicates, write-through failures) propagate to the caller unchanged.
"""

import logging
import re

from chat_hub.chat.errors import ConversationNotFoundError, InvalidInputError, UserNotFoundError
from chat_hub.content import clean
from chat_hub.models.chat import Conversation, Message, User
from chat_hub.store.registry import Stores

logger = logging.getLogger(__name__)

# Letters, digits, underscores and spaces
USERNAME_PATTERN = re.compile(r"[\w ]+")
# Letters, digits and underscores
TITLE_PATTERN = re.compile(r"\w+")


def _require_user(stores: Stores, username: str) -> User:
    user = stores.users.get_user(username)
    if user is None:
        raise UserNotFoundError(username)
    return user


def post_message(stores: Stores, username: str, conversation_title: str, raw_content: str) -> Message:
    """Clean and store a new chat message, then add it to the activity feed.

    Args:
        stores: Process stores.
        username: Name of the (already authenticated) author.
        conversation_title: Title of the target conversation.
        raw_content: Untrusted message text as submitted.

    Returns:
        The stored Message.

    Raises:
        UserNotFoundError: Author is not registered.
        ConversationNotFoundError: No conversation has that title.
        WriteThroughError: Persisting the message or its activity event failed.
    """
    author = _require_user(stores, username)
    conversation = stores.conversations.get_conversation_with_title(conversation_title)
    if conversation is None:
        raise ConversationNotFoundError(conversation_title)

    message = Message(
        conversation_id=conversation.id,
        author_id=author.id,
        content=clean(raw_content),
    )
    stores.messages.add_message(message)
    stores.activity.record_message(message, author=author, conversation=conversation)

    logger.info(
        "Stored message %s from %s in %s",
        message.id,
        author.name,
        conversation.title,
    )
    return message


def register_user(stores: Stores, name: str, bio: str = "", language: str = "English") -> User:
    """Create a user and announce it in the activity feed."""
    if not name.strip() or not USERNAME_PATTERN.fullmatch(name):
        raise InvalidInputError("Please enter only letters, numbers, and spaces.")

    user = User(name=name, bio=clean(bio), language=language)
    stores.users.add_user(user)
    stores.activity.record_user(user)

    logger.info("Registered user %s (%s)", user.name, user.id)
    return user


def create_conversation(stores: Stores, owner_username: str, title: str) -> Conversation:
    """Create a conversation owned by ``owner_username``."""
    if not TITLE_PATTERN.fullmatch(title):
        raise InvalidInputError("Please enter only letters and numbers.")

    owner = _require_user(stores, owner_username)
    conversation = Conversation(owner_id=owner.id, title=title)
    stores.conversations.add_conversation(conversation)
    stores.activity.record_conversation(conversation, owner=owner)

    logger.info("Created conversation %s by %s", conversation.title, owner.name)
    return conversation


def update_profile(
    stores: Stores,
    username: str,
    bio: str | None = None,
    language: str | None = None,
) -> User:
    """Replace the editable profile fields of a user. Omitted fields are kept."""
    user = _require_user(stores, username)

    changes: dict[str, str] = {}
    if bio is not None:
        changes["bio"] = clean(bio)
    if language is not None:
        changes["language"] = language
    if not changes:
        return user

    updated = user.model_copy(update=changes)
    stores.users.update_user(updated)
    logger.info("Updated profile of %s: %s", username, ", ".join(sorted(changes)))
    return updated
