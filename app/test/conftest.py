import os

# point the app at a private in-memory database before anything imports db.session
os.environ['DATABASE_URL'] = 'sqlite://'

import pytest
from fastapi.testclient import TestClient

from db.session import Base, SessionLocal, engine, init_db
from main import app


def address(n: int) -> str:
    """42 character, 0x prefixed address"""
    return '0x' + f'{n:040x}'


@pytest.fixture(autouse=True)
def tables():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)
