import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Must be set before app.db builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.db import Base  # noqa: E402
from app.models.kv_entry import KeyValueEntry  # noqa: E402,F401
from app.storage import SqlKeyValueStore  # noqa: E402


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite+pysqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def storage(db_session):
    return SqlKeyValueStore(db_session)


@pytest.fixture
def client(session_factory):
    # Import after env is set so the module-level engine uses sqlite
    from app.main import app  # noqa: WPS433
    from app.db import get_db  # noqa: WPS433
    from fastapi.testclient import TestClient  # noqa: WPS433

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
