import os

# Must be set before anything imports shared.core.config
os.environ["DATA_DB_URL"] = "sqlite://"
os.environ["DATA_SERVICE_URL"] = "http://testserver"

import pytest
from fastapi.testclient import TestClient

from shared.core.database import Base, DataSessionLocal, data_engine
from data_service.app.main import app as data_app


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=data_engine)
    Base.metadata.create_all(bind=data_engine)
    yield


@pytest.fixture
def db():
    session = DataSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def data_client():
    return TestClient(data_app)
