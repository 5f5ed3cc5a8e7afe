"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any package imports so the settings
singleton picks them up.
"""

import os
import tempfile

os.environ["LOG_DIR"] = os.path.join(tempfile.gettempdir(), "village_site_test_logs")
os.environ["NEWS_PER_PAGE"] = "8"
os.environ["POPULATION_PER_PAGE"] = "8"
os.environ["GALLERY_PER_PAGE"] = "12"
os.environ["CLAMP_NEGATIVE_PAGES"] = "false"

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from tests.models import Base  # noqa: E402


@pytest.fixture
def db():
    """In-memory SQLite session with the test tables created."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
