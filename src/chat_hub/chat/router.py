"""Chat HTTP routes. Kept thin: parse, call the service layer, map errors."""

from fastapi import APIRouter, Depends, Header, HTTPException, Request

from chat_hub.chat import service
from chat_hub.chat.errors import ConversationNotFoundError, InvalidInputError, UserNotFoundError
from chat_hub.chat.schemas import (
    ChatPage,
    NewConversation,
    NewMessage,
    NewUser,
    ProfilePage,
    ProfileUpdate,
)
from chat_hub.models.activity import ActivityEvent
from chat_hub.models.chat import Conversation, Message, User
from chat_hub.store.errors import DuplicateEntityError, WriteThroughError
from chat_hub.store.registry import Stores

router = APIRouter(prefix="", tags=["chat"])


def get_stores(request: Request) -> Stores:
    """Stores built by the application lifespan."""
    return request.app.state.stores


def current_username(x_username: str = Header(default="")) -> str:
    """Caller identity resolved by the session layer in front of this service."""
    if not x_username:
        raise HTTPException(status_code=401, detail="Not logged in")
    return x_username


def _write_failed(exc: WriteThroughError) -> HTTPException:
    return HTTPException(status_code=503, detail=str(exc))


@router.post("/users", status_code=201)
def register(body: NewUser, stores: Stores = Depends(get_stores)) -> User:
    try:
        return service.register_user(stores, body.name, bio=body.bio, language=body.language)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DuplicateEntityError as exc:
        raise HTTPException(status_code=409, detail="That username is already taken.") from exc
    except WriteThroughError as exc:
        raise _write_failed(exc) from exc


@router.get("/users/{name}")
def profile(name: str, stores: Stores = Depends(get_stores)) -> ProfilePage:
    user = stores.users.get_user(name)
    if user is None:
        raise HTTPException(status_code=404, detail=f"Unknown user: {name}")
    return ProfilePage(user=user, messages=stores.messages.get_messages_by_author(user.id))


@router.patch("/users/{name}")
def edit_profile(
    name: str,
    body: ProfileUpdate,
    stores: Stores = Depends(get_stores),
    username: str = Depends(current_username),
) -> User:
    """Users may only edit their own profile."""
    if username != name:
        raise HTTPException(status_code=403, detail="Cannot edit another user's profile")
    try:
        return service.update_profile(stores, name, bio=body.bio, language=body.language)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except WriteThroughError as exc:
        raise _write_failed(exc) from exc


@router.get("/conversations")
def list_conversations(stores: Stores = Depends(get_stores)) -> list[Conversation]:
    return stores.conversations.get_all_conversations()


@router.post("/conversations", status_code=201)
def new_conversation(
    body: NewConversation,
    stores: Stores = Depends(get_stores),
    username: str = Depends(current_username),
) -> Conversation:
    try:
        return service.create_conversation(stores, username, body.title)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except DuplicateEntityError as exc:
        raise HTTPException(status_code=409, detail="Conversation already exists.") from exc
    except WriteThroughError as exc:
        raise _write_failed(exc) from exc


@router.get("/chat/{title}")
def chat_page(title: str, stores: Stores = Depends(get_stores)) -> ChatPage:
    conversation = stores.conversations.get_conversation_with_title(title)
    if conversation is None:
        raise HTTPException(status_code=404, detail=f"Unknown conversation: {title}")
    messages = stores.messages.get_messages_in_conversation(conversation.id)
    return ChatPage(conversation=conversation, messages=messages)


@router.post("/chat/{title}", status_code=201)
def send_message(
    title: str,
    body: NewMessage,
    stores: Stores = Depends(get_stores),
    username: str = Depends(current_username),
) -> Message:
    try:
        return service.post_message(stores, username, title, body.content)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except ConversationNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except WriteThroughError as exc:
        raise _write_failed(exc) from exc


@router.get("/activity")
def activity_feed(limit: int | None = None, stores: Stores = Depends(get_stores)) -> list[ActivityEvent]:
    return stores.activity.get_feed(limit=limit)
