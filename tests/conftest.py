import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.database.core import get_session_factory
from app.database.models import Base
from app.application import create_app

# Use an in-memory SQLite database for testing
TEST_SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

TEST_BUCKET = "print-bucket"
TEST_REGION = "us-east-1"
PRESIGNED_URL = f"https://{TEST_BUCKET}.s3.amazonaws.com/uploads/1_part.stl?X-Amz-Signature=abc123"


@pytest.fixture(scope="function")
def session_factory():
    """
    Creates a new, isolated in-memory database for each test and returns
    its session factory.
    """
    engine = create_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def disk_settings(tmp_path):
    return Settings(UPLOAD_DIR=tmp_path / "uploads", USD_TO_INR_RATE=83.0)


@pytest.fixture
def s3_settings(tmp_path):
    return Settings(
        AWS_ACCESS_KEY_ID="AKIATEST",
        AWS_SECRET_ACCESS_KEY="secret",
        AWS_REGION=TEST_REGION,
        S3_BUCKET=TEST_BUCKET,
        UPLOAD_DIR=tmp_path / "uploads",
    )


@pytest.fixture
def s3_client():
    """A stand-in for the boto3 S3 client."""
    client = MagicMock()
    client.generate_presigned_url.return_value = PRESIGNED_URL
    return client


@pytest.fixture
def make_client(session_factory):
    """
    Builds a TestClient for a given configuration, with the database
    swapped for the in-memory one.
    """
    clients = []

    def _make(settings, s3_client=None, factory=None):
        app = create_app(settings, s3_client=s3_client, create_tables=False)
        app.dependency_overrides[get_session_factory] = lambda: factory or session_factory
        test_client = TestClient(app)
        test_client.__enter__()
        clients.append((app, test_client))
        return test_client

    yield _make

    for app, test_client in clients:
        test_client.__exit__(None, None, None)
        app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, disk_settings):
    """Client for an app running in local-disk mode."""
    return make_client(disk_settings)


@pytest.fixture
def s3_app_client(make_client, s3_settings, s3_client):
    """Client for an app running in object-store mode."""
    return make_client(s3_settings, s3_client=s3_client)
