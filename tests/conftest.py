import hashlib
import os
import re
from collections import Counter
from contextlib import contextmanager

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.orm import Session

from isupipe import models
from isupipe.core.auth import create_session_token
from isupipe.core.config import settings
from isupipe.core.database import Base, engine
from isupipe.main import app

_FROM_TABLE = re.compile(r"\bFROM\s+(\w+)", re.IGNORECASE)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = Session(bind=engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    return TestClient(app)


@pytest.fixture
def login(client):
    def _login(user, expires_delta=None):
        token = create_session_token(user.id, user.name, expires_delta=expires_delta)
        client.cookies.set(settings.SESSION_COOKIE_NAME, token)
        return client
    return _login


@pytest.fixture
def count_queries():
    """Record SELECT statements and count them by the first table in FROM."""
    @contextmanager
    def _count():
        tables = Counter()

        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            if statement.lstrip().upper().startswith("SELECT"):
                match = _FROM_TABLE.search(statement)
                tables[match.group(1) if match else "?"] += 1

        event.listen(engine, "before_cursor_execute", before_cursor_execute)
        try:
            yield tables
        finally:
            event.remove(engine, "before_cursor_execute", before_cursor_execute)

    return _count


@pytest.fixture
def factory(db_session):
    class Factory:
        def user(self, name, dark_mode=False, icon=None):
            user = models.User(name=name, display_name=name.title(), description=f"I am {name}")
            db_session.add(user)
            db_session.flush()
            db_session.add(models.Theme(user_id=user.id, dark_mode=dark_mode))
            if icon is not None:
                db_icon = models.Icon(user_id=user.id, image=icon)
                db_session.add(db_icon)
                db_session.flush()
                db_session.add(models.IconHash(icon_id=db_icon.id, hash=hashlib.sha256(icon).hexdigest()))
            db_session.commit()
            return user

        def livestream(self, owner, title="stream"):
            livestream = models.Livestream(
                user_id=owner.id,
                title=title,
                description=f"{title} description",
                playlist_url=f"https://media.example.com/{title}/playlist.m3u8",
                thumbnail_url=f"https://media.example.com/{title}/thumbnail.jpg",
                start_at=1700000000,
                end_at=1700003600,
            )
            db_session.add(livestream)
            db_session.commit()
            return livestream

        def reaction(self, user, livestream, emoji_name=":+1:", created_at=1700000100):
            reaction = models.Reaction(
                user_id=user.id,
                livestream_id=livestream.id,
                emoji_name=emoji_name,
                created_at=created_at,
            )
            db_session.add(reaction)
            db_session.commit()
            return reaction

    return Factory()
