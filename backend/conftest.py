"""
Pytest configuration file for backend testing.
"""
import os
import sys
from pathlib import Path

import pytest

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Tests never touch the configured PostgreSQL server
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from core.database import Base, get_db  # noqa: E402

# Import all models so cross-module foreign keys resolve before create_all
from modules.staff.models import staff_models  # noqa: E402,F401
from modules.equipment.models import equipment_models  # noqa: E402,F401
from modules.transport.models import transport_models  # noqa: E402,F401
from modules.participants.models import participant_models  # noqa: E402,F401
from modules.events.models import event_models  # noqa: E402,F401
from modules.teams.models import team_models  # noqa: E402,F401
from modules.financials.models import financial_models  # noqa: E402,F401

from tests.factories import bind_factory_session  # noqa: E402


@pytest.fixture
def test_engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session(session_factory):
    """Create a test database session; factories persist through it too."""
    session = session_factory()
    bind_factory_session(session)
    yield session
    bind_factory_session(None)
    session.close()


@pytest.fixture
def client(session_factory, db_session):
    """Test client whose requests each get their own session on the test database"""
    from app.main import app

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
