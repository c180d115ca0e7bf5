from datetime import timedelta

import pytest

from isupipe.core.config import settings

API = settings.API_PREFIX


@pytest.fixture
def stream(factory):
    owner = factory.user("streamer", icon=b"streamer-icon")
    viewer = factory.user("viewer", dark_mode=True)
    livestream = factory.livestream(owner, title="isucon")
    return owner, viewer, livestream


def test_list_reactions_with_limit_returns_newest(login, factory, stream):
    owner, viewer, livestream = stream
    for i in range(5):
        factory.reaction(viewer, livestream, emoji_name=f":e{i}:", created_at=1700000000 + i * 10)

    response = login(viewer).get(f"{API}/livestreams/{livestream.id}/reaction", params={"limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert [r["emoji_name"] for r in body] == [":e4:", ":e3:"]
    assert [r["created_at"] for r in body] == [1700000040, 1700000030]


def test_list_reactions_shape(login, factory, stream):
    owner, viewer, livestream = stream
    factory.reaction(viewer, livestream, emoji_name=":wave:")

    body = login(viewer).get(f"{API}/livestreams/{livestream.id}/reaction").json()

    assert len(body) == 1
    reaction = body[0]
    assert set(reaction) == {"id", "emoji_name", "user", "livestream", "created_at"}
    assert set(reaction["user"]) == {"id", "name", "display_name", "description", "theme", "icon_hash"}
    assert reaction["user"]["theme"]["dark_mode"] is True
    assert reaction["user"]["icon_hash"] == settings.FALLBACK_IMAGE_HASH
    assert reaction["livestream"]["owner"]["name"] == "streamer"
    assert "user_id" not in reaction and "livestream_id" not in reaction


def test_list_reactions_empty_livestream(login, stream):
    owner, viewer, livestream = stream
    response = login(viewer).get(f"{API}/livestreams/{livestream.id}/reaction")
    assert response.status_code == 200
    assert response.json() == []


def test_list_reactions_rejects_non_integer_limit(login, stream, count_queries):
    owner, viewer, livestream = stream
    client = login(viewer)

    with count_queries() as tables:
        response = client.get(f"{API}/livestreams/{livestream.id}/reaction", params={"limit": "abc"})

    assert response.status_code == 400
    assert response.json() == {"detail": "limit query parameter must be integer"}
    assert sum(tables.values()) == 0


def test_list_reactions_rejects_negative_limit(login, stream):
    owner, viewer, livestream = stream
    response = login(viewer).get(f"{API}/livestreams/{livestream.id}/reaction", params={"limit": -1})
    assert response.status_code == 400
    assert response.json() == {"detail": "limit query parameter must be a non-negative integer"}


def test_list_reactions_empty_limit_means_no_limit(login, factory, stream):
    owner, viewer, livestream = stream
    for i in range(3):
        factory.reaction(viewer, livestream, emoji_name=f":e{i}:", created_at=1700000000 + i)

    response = login(viewer).get(f"{API}/livestreams/{livestream.id}/reaction?limit=")

    assert response.status_code == 200
    assert [r["emoji_name"] for r in response.json()] == [":e2:", ":e1:", ":e0:"]


def test_list_reactions_rejects_non_integer_livestream_id(login, stream):
    owner, viewer, livestream = stream
    response = login(viewer).get(f"{API}/livestreams/abc/reaction")
    assert response.status_code == 400
    assert response.json() == {"detail": "livestream_id in path must be integer"}


def test_list_reactions_requires_session(client, stream):
    owner, viewer, livestream = stream
    response = client.get(f"{API}/livestreams/{livestream.id}/reaction")
    assert response.status_code == 403
    assert response.json() == {"detail": "failed to get session"}


def test_list_reactions_rejects_expired_session(login, stream):
    owner, viewer, livestream = stream
    client = login(viewer, expires_delta=timedelta(seconds=-30))

    response = client.get(f"{API}/livestreams/{livestream.id}/reaction")

    assert response.status_code == 401
    assert response.json() == {"detail": "session has expired"}


def test_post_reaction_uses_session_user(login, stream):
    owner, viewer, livestream = stream
    client = login(viewer)

    response = client.post(f"{API}/livestreams/{livestream.id}/reaction", json={"emoji_name": ":tada:"})

    assert response.status_code == 201
    created = response.json()
    assert created["emoji_name"] == ":tada:"
    assert created["user"]["id"] == viewer.id
    assert created["user"]["name"] == "viewer"
    assert created["livestream"]["id"] == livestream.id
    assert isinstance(created["id"], int)
    assert isinstance(created["created_at"], int)

    listed = client.get(f"{API}/livestreams/{livestream.id}/reaction").json()
    assert [r["id"] for r in listed] == [created["id"]]


def test_post_reaction_ignores_user_in_body(login, stream):
    owner, viewer, livestream = stream

    response = login(viewer).post(
        f"{API}/livestreams/{livestream.id}/reaction",
        json={"emoji_name": ":+1:", "user_id": owner.id},
    )

    assert response.status_code == 201
    assert response.json()["user"]["id"] == viewer.id


def test_post_reaction_rejects_non_integer_livestream_id(login, stream, count_queries):
    owner, viewer, livestream = stream
    client = login(viewer)

    with count_queries() as tables:
        response = client.post(f"{API}/livestreams/abc/reaction", json={"emoji_name": ":tada:"})

    assert response.status_code == 400
    assert response.json() == {"detail": "livestream_id in path must be integer"}
    assert sum(tables.values()) == 0


def test_post_reaction_checks_livestream_id_before_session(client, stream, count_queries):
    with count_queries() as tables:
        response = client.post(f"{API}/livestreams/abc/reaction", json={"emoji_name": ":tada:"})

    assert response.status_code == 400
    assert response.json() == {"detail": "livestream_id in path must be integer"}
    assert sum(tables.values()) == 0


def test_post_reaction_rejects_malformed_body(login, stream):
    owner, viewer, livestream = stream
    client = login(viewer)

    response = client.post(
        f"{API}/livestreams/{livestream.id}/reaction",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "failed to decode the request body as json"}


def test_post_reaction_requires_session(client, stream):
    owner, viewer, livestream = stream
    response = client.post(f"{API}/livestreams/{livestream.id}/reaction", json={"emoji_name": ":tada:"})
    assert response.status_code == 403


def test_post_reaction_on_unknown_livestream_rolls_back(login, db_session, stream):
    from isupipe import models

    owner, viewer, livestream = stream
    response = login(viewer).post(f"{API}/livestreams/9999/reaction", json={"emoji_name": ":tada:"})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("failed to fill reaction:")
    assert db_session.query(models.Reaction).count() == 0
