import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# keep the module-level engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

from portal.config import get_settings  # noqa: E402
from portal.database import Base, get_db  # noqa: E402
from portal.main import app  # noqa: E402
import portal.models  # noqa: E402,F401


@pytest.fixture
def public_dir(tmp_path, monkeypatch):
    root = tmp_path / "public"
    monkeypatch.setenv("PUBLIC_DIR", str(root))
    monkeypatch.setenv("ENVIRONMENT", "production")
    get_settings.cache_clear()
    yield root
    get_settings.cache_clear()


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(public_dir, db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def upload(client, url, filename="doc.pdf", content=b"%PDF-1.4 test", content_type="application/pdf", **fields):
    return client.post(url, files={"file": (filename, content, content_type)}, data=fields)
