"""Shared fixtures: an in-memory SQLite database and both deployment shapes."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import main
from api import analytics as analytics_function
from api import create_portal_session as portal_function
from api import users as users_function
from profit_api.db.session import Base, get_db
from profit_api.models.payment import Payment  # noqa: F401  registers the table
from profit_api.models.user import User  # noqa: F401

SQLALCHEMY_DATABASE_URL = "sqlite://"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Each entry: deployment app and the path prefix its routes live under
SHAPES = {
    "router": {
        "users": (main.app, ""),
        "analytics": (main.app, ""),
        "billing": (main.app, ""),
    },
    "function": {
        "users": (users_function.app, "/api"),
        "analytics": (analytics_function.app, "/api"),
        "billing": (portal_function.app, "/api"),
    },
}


@pytest.fixture
def db_session():
    """Create a fresh schema for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


class Endpoint:
    """A test client bound to one deployment shape plus its route prefix."""

    def __init__(self, app, prefix):
        self.app = app
        self.prefix = prefix
        self.client = TestClient(app)

    def url(self, path: str) -> str:
        return f"{self.prefix}{path}"

    def override(self, dependency, provider):
        self.app.dependency_overrides[dependency] = provider

    def use_db(self, session):
        def override_get_db():
            yield session
        self.override(get_db, override_get_db)


def _endpoint(request, name):
    app, prefix = SHAPES[request.param][name]
    yield Endpoint(app, prefix)
    app.dependency_overrides.clear()


@pytest.fixture(params=["router", "function"])
def users_endpoint(request):
    yield from _endpoint(request, "users")


@pytest.fixture(params=["router", "function"])
def analytics_endpoint(request):
    yield from _endpoint(request, "analytics")


@pytest.fixture(params=["router", "function"])
def billing_endpoint(request):
    yield from _endpoint(request, "billing")


@pytest.fixture
def client():
    """Client for the router-mounted application."""
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()
