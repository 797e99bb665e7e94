"""Shared route dependencies"""

from typing import Optional

from fastapi import Depends, Header, Request, Response

from ..core.config import settings
from ..core.session import session_manager, SessionManager, UserSession
from ..database.products import product_catalog
from ..services.catalog import CatalogService
from ..services.email import EmailClient
from ..services.image_search import ImageSearchClient

SESSION_HEADER = "X-Session-Id"

# Initialize services lazily (overridden in tests)
catalog_service: Optional[CatalogService] = None
email_client: Optional[EmailClient] = None


def get_session_manager() -> SessionManager:
    """Get the session manager"""
    return session_manager


def get_catalog_service() -> CatalogService:
    """Get or create catalog service"""
    global catalog_service
    if catalog_service is None:
        catalog_service = CatalogService(
            catalog=product_catalog,
            search_client=ImageSearchClient(
                base_url=settings.image_search_base_url,
                access_key=settings.image_search_access_key,
                price_min=settings.search_price_min,
                price_max=settings.search_price_max,
                timeout=settings.http_timeout,
            ),
        )
    return catalog_service


def get_email_client() -> EmailClient:
    """Get or create email client"""
    global email_client
    if email_client is None:
        email_client = EmailClient(
            base_url=settings.email_base_url,
            service_id=settings.email_service_id,
            template_id=settings.email_template_id,
            public_key=settings.email_public_key,
            private_key=settings.email_private_key,
            timeout=settings.http_timeout,
        )
    return email_client


async def close_clients() -> None:
    """Close HTTP clients created by the dependencies"""
    global catalog_service, email_client
    if catalog_service is not None:
        await catalog_service.search_client.close()
        catalog_service = None
    if email_client is not None:
        await email_client.close()
        email_client = None


def get_api_session(
    response: Response,
    x_session_id: Optional[str] = Header(None),
    manager: SessionManager = Depends(get_session_manager),
) -> UserSession:
    """Resolve the API session from the X-Session-Id header"""
    session = manager.get_or_create_session(x_session_id)
    response.headers[SESSION_HEADER] = session.session_id
    return session


def get_page_session(
    request: Request,
    manager: SessionManager = Depends(get_session_manager),
) -> UserSession:
    """Resolve the browser session from its cookie"""
    session_id = request.cookies.get(settings.session_cookie_name)
    return manager.get_or_create_session(session_id)
