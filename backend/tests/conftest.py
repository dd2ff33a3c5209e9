import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Keep the app's own engine off disk when TestClient runs the startup hook
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from cms.database import create_tables, get_session, install_defaults  # noqa: E402
from cms.entity import EntityTypeManager  # noqa: E402
from cms.filters import TextFormatService  # noqa: E402
from cms.identity import IdentityService  # noqa: E402
from cms.main import app  # noqa: E402
from cms.testing import ContentTypeCreation, NodeCreation, UserCreation  # noqa: E402
from cms.utils.random import Random  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so ALL sessions share the same DB
# 2. check_same_thread=False required for TestClient/threaded access
# 3. Tables are dropped and recreated for every test
# 4. App dependency overridden to use test_engine (see client_fixture)
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    """Override session to use test engine"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="session", scope="function")
def session_fixture():
    """Provide a test database session with the anonymous account and default text formats installed"""
    SQLModel.metadata.drop_all(test_engine)
    create_tables(test_engine)

    with Session(test_engine) as session:
        install_defaults(session)
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Provide a test client with overridden database session"""
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


# ============================================================================
# Collaborators
# ============================================================================


@pytest.fixture
def entity_type_manager(session: Session) -> EntityTypeManager:
    return EntityTypeManager(session)


@pytest.fixture
def identity(entity_type_manager: EntityTypeManager) -> IdentityService:
    return IdentityService(entity_type_manager)


@pytest.fixture
def text_formats(session: Session) -> TextFormatService:
    return TextFormatService(session)


@pytest.fixture
def random_generator() -> Random:
    return Random(seed=20261018)


@pytest.fixture
def content_types(session: Session, random_generator: Random):
    """Create "page" (with body field) and "note" (without) content types"""
    creator = ContentTypeCreation(session, random_generator)
    page = creator.create_content_type({"type": "page", "name": "Basic page"})
    note = creator.create_content_type({"type": "note", "name": "Note", "has_body": False})
    return {"page": page, "note": note}


@pytest.fixture
def user_creation(entity_type_manager, identity, random_generator) -> UserCreation:
    return UserCreation(entity_type_manager, identity, random_generator)


@pytest.fixture
def node_creation(entity_type_manager, identity, text_formats, random_generator, user_creation, content_types):
    """Node fixtures whose test context can provision a logged-in user"""
    return NodeCreation(entity_type_manager, identity, text_formats, random_generator, context=user_creation)


@pytest.fixture
def plain_node_creation(entity_type_manager, identity, text_formats, random_generator, content_types):
    """Node fixtures without a user-provisioning test context"""
    return NodeCreation(entity_type_manager, identity, text_formats, random_generator)
