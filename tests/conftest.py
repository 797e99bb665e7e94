import random
from decimal import Decimal

import httpx
import pytest
from fastapi.testclient import TestClient

from storefront.core.session import SessionManager
from storefront.database.products import ProductCatalog
from storefront.main import app
from storefront.models.product import Product
from storefront.routes.deps import get_catalog_service, get_email_client, get_session_manager
from storefront.services.catalog import CatalogService
from storefront.services.email import EmailClient
from storefront.services.image_search import ImageSearchClient

from tests.fakes import FakeApi, search_payload


@pytest.fixture
def products() -> dict[str, Product]:
    return {
        "1": Product(id="1", name="Mug", price=Decimal("100"), image="https://img.example.com/mug.jpg"),
        "2": Product(id="2", name="Lamp", price=Decimal("50"), image="https://img.example.com/lamp.jpg"),
    }


@pytest.fixture
def catalog(products) -> ProductCatalog:
    return ProductCatalog(products)


@pytest.fixture
def search_api() -> FakeApi:
    return FakeApi(lambda request: httpx.Response(200, json=search_payload(3)))


@pytest.fixture
def search_client(search_api) -> ImageSearchClient:
    return ImageSearchClient(
        base_url="https://search.example.com",
        access_key="test-key",
        rng=random.Random(42),
        transport=search_api.transport,
    )


@pytest.fixture
def catalog_service(catalog, search_client) -> CatalogService:
    return CatalogService(catalog=catalog, search_client=search_client)


@pytest.fixture
def email_api() -> FakeApi:
    return FakeApi(lambda request: httpx.Response(200, text="OK"))


@pytest.fixture
def email_client(email_api) -> EmailClient:
    return EmailClient(
        base_url="https://mail.example.com",
        service_id="service_test",
        template_id="template_test",
        public_key="public_test",
        transport=email_api.transport,
    )


@pytest.fixture
def session_manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def client(session_manager, catalog_service, email_client):
    app.dependency_overrides[get_session_manager] = lambda: session_manager
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    app.dependency_overrides[get_email_client] = lambda: email_client
    yield TestClient(app)
    app.dependency_overrides.clear()
