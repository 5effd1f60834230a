"""Tests for the chat HTTP routes."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from chat_hub.store.registry import Stores

HEADERS = {"X-Username": "test_username"}


def _seed(client: TestClient) -> None:
    """Register test_username and create test_conversation over HTTP."""
    assert client.post("/users", json={"name": "test_username"}).status_code == 201
    response = client.post("/conversations", json={"title": "test_conversation"}, headers=HEADERS)
    assert response.status_code == 201


# -- GET /chat/{title} --


def test_chat_page(client: TestClient):
    """The chat page lists the conversation's messages in order."""
    _seed(client)
    client.post("/chat/test_conversation", json={"content": "first"}, headers=HEADERS)
    client.post("/chat/test_conversation", json={"content": "second"}, headers=HEADERS)

    response = client.get("/chat/test_conversation")

    assert response.status_code == 200
    body = response.json()
    assert body["conversation"]["title"] == "test_conversation"
    assert [m["content"] for m in body["messages"]] == ["first", "second"]


def test_chat_page_unknown_conversation(client: TestClient):
    """Unknown conversation returns 404."""
    response = client.get("/chat/bad_conversation")
    assert response.status_code == 404


# -- POST /chat/{title} --


def test_post_requires_login(client: TestClient, stores: Stores):
    """No caller identity: 401 and nothing stored."""
    _seed(client)
    response = client.post("/chat/test_conversation", json={"content": "hi"})
    assert response.status_code == 401
    assert stores.messages.get_all() == []


def test_post_unknown_user(client: TestClient, stores: Stores):
    """A caller that is not registered gets 401 and nothing is stored."""
    _seed(client)
    response = client.post(
        "/chat/test_conversation", json={"content": "hi"}, headers={"X-Username": "ghost"}
    )
    assert response.status_code == 401
    assert stores.messages.get_all() == []


def test_post_unknown_conversation(client: TestClient, stores: Stores):
    """Posting to a missing conversation returns 404."""
    _seed(client)
    response = client.post("/chat/bad_conversation", json={"content": "hi"}, headers=HEADERS)
    assert response.status_code == 404
    assert stores.messages.get_all() == []


def test_post_cleans_html(client: TestClient):
    """The stored and returned content is sanitized."""
    _seed(client)
    response = client.post(
        "/chat/test_conversation",
        json={"content": "Contains <b>html</b> and <script>JavaScript</script> content."},
        headers=HEADERS,
    )
    assert response.status_code == 201
    assert response.json()["content"] == "Contains <b>html</b> and  content."


def test_post_write_failure_returns_503(client: TestClient, stores: Stores):
    """A write-through failure is reported, not hidden."""
    _seed(client)
    with patch.object(
        stores.messages._persistence, "write_through", side_effect=OSError("disk full")
    ):
        response = client.post(
            "/chat/test_conversation", json={"content": "hi"}, headers=HEADERS
        )
    assert response.status_code == 503
    assert stores.messages.get_all() == []


# -- users --


def test_register_duplicate_user(client: TestClient):
    """Registering a taken name returns 409."""
    client.post("/users", json={"name": "alice"})
    response = client.post("/users", json={"name": "alice"})
    assert response.status_code == 409


def test_register_invalid_name(client: TestClient):
    """Invalid names return 400."""
    response = client.post("/users", json={"name": "<script>"})
    assert response.status_code == 400


def test_profile_page(client: TestClient):
    """The profile shows the user and their messages."""
    _seed(client)
    client.post("/chat/test_conversation", json={"content": "mine"}, headers=HEADERS)

    response = client.get("/users/test_username")

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["name"] == "test_username"
    assert [m["content"] for m in body["messages"]] == ["mine"]


def test_profile_page_unknown_user(client: TestClient):
    """Unknown profile returns 404."""
    assert client.get("/users/ghost").status_code == 404


def test_edit_own_profile(client: TestClient):
    """A user can update their own bio."""
    _seed(client)
    response = client.patch("/users/test_username", json={"bio": "<em>hello</em>"}, headers=HEADERS)
    assert response.status_code == 200
    assert response.json()["bio"] == "<em>hello</em>"


def test_edit_other_profile_forbidden(client: TestClient):
    """Editing someone else's profile returns 403."""
    _seed(client)
    client.post("/users", json={"name": "bob"})
    response = client.patch("/users/bob", json={"bio": "hacked"}, headers=HEADERS)
    assert response.status_code == 403


# -- conversations and activity --


def test_list_conversations(client: TestClient):
    """Conversations are listed in creation order."""
    _seed(client)
    client.post("/conversations", json={"title": "second"}, headers=HEADERS)

    response = client.get("/conversations")

    assert [c["title"] for c in response.json()] == ["test_conversation", "second"]


def test_duplicate_conversation(client: TestClient):
    """A taken title returns 409."""
    _seed(client)
    response = client.post("/conversations", json={"title": "test_conversation"}, headers=HEADERS)
    assert response.status_code == 409


def test_activity_feed(client: TestClient):
    """The feed lists creation events oldest first and honors limit."""
    _seed(client)
    client.post("/chat/test_conversation", json={"content": "hi"}, headers=HEADERS)

    kinds = [e["kind"] for e in client.get("/activity").json()]
    assert kinds == ["user_joined", "conversation_created", "message_sent"]

    limited = client.get("/activity", params={"limit": 1}).json()
    assert [e["kind"] for e in limited] == ["message_sent"]
