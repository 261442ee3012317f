import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from selfcare.auth import get_current_user
from selfcare.database import init_db
from selfcare.main import app
from selfcare.models import User
from selfcare.repositories import SqlLogRepository, get_log_repository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repo(engine):
    return SqlLogRepository(sessionmaker(bind=engine, autocommit=False, autoflush=False))


@pytest.fixture
def user():
    return User(id="user-1", email="ada@example.com", name="Ada")


@pytest.fixture
def other_user():
    return User(id="user-2", email="bob@example.com", name="Bob")


@pytest.fixture
def client(repo, user):
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_log_repository] = lambda: repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
