import os
import sys
from pathlib import Path

# Keep the application engine away from any real database file
os.environ.setdefault("DATABASE_URL", "sqlite://")

# Add the parent directory to the path so we can import stock_api modules
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from stock_api.core.deps import get_db
from stock_api.core.security import generate_token, hash_password
from stock_api.db.base import Base
from stock_api.main import app
from stock_api.models.stock import Stock
from stock_api.models.user import User


@pytest.fixture(scope="function")
def engine():
    """In-memory database shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Session:
    """Create a fresh database session for each test."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the in-memory database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db: Session, email: str, password: str = "secret") -> User:
    user = User(email=email, password_hash=hash_password(password), token=generate_token())
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def owner(db_session: Session) -> User:
    return make_user(db_session, "owner@example.com")


@pytest.fixture
def stranger(db_session: Session) -> User:
    return make_user(db_session, "stranger@example.com")


@pytest.fixture
def owner_headers(owner: User) -> dict:
    return {"Authorization": f"Bearer {owner.token}"}


@pytest.fixture
def stranger_headers(stranger: User) -> dict:
    return {"Authorization": f"Bearer {stranger.token}"}


@pytest.fixture
def sample_stock(db_session: Session, owner: User) -> Stock:
    """Create a sample stock owned by `owner`."""
    stock = Stock(title="AAPL", text="buy", owner_id=owner.id)
    db_session.add(stock)
    db_session.commit()
    db_session.refresh(stock)
    return stock
