import pytest
from fastapi.testclient import TestClient

from demo_customer_app.core.config import Settings
from demo_customer_app.main import create_app


@pytest.fixture
def app_settings():
    return Settings()


@pytest.fixture
def app(app_settings):
    """Новое приложение с пустыми хранилищами на каждый тест"""
    return create_app(app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
