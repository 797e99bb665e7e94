"""
Storefront pages

Server-rendered views: home, about, contact, product listing,
product detail and cart. Every page carries the navigation bar with
the cart's line count.
"""

import os
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from ..core.config import settings
from ..core.session import UserSession
from ..models.cart import CartLineNotFoundError, QuantityLimitExceededError
from ..models.contact import ContactMessage
from ..services.bill import compute_bill
from ..services.catalog import CatalogService
from ..services.email import EmailClient, EmailDeliveryError
from .deps import get_catalog_service, get_email_client, get_page_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"], include_in_schema=False)

templates_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=templates_dir)


def _remember(response: Response, session: UserSession) -> Response:
    response.set_cookie(settings.session_cookie_name, session.session_id, httponly=True)
    return response


def render(
    request: Request,
    session: UserSession,
    template: str,
    context: Optional[dict[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """Render a page template for the session"""
    page_context = {
        "title": settings.app_name,
        "cart_count": session.cart.line_count,
    }
    page_context.update(context or {})
    response = templates.TemplateResponse(
        request,
        template,
        page_context,
        status_code=status_code,
    )
    return _remember(response, session)


def redirect(url: str, session: UserSession) -> Response:
    """Redirect after a form post"""
    return _remember(RedirectResponse(url, status_code=303), session)


@router.get("/")
async def home(request: Request, session: UserSession = Depends(get_page_session)):
    """Home page"""
    return render(request, session, "home.html")


@router.get("/about")
async def about(request: Request, session: UserSession = Depends(get_page_session)):
    """About page"""
    return render(request, session, "about.html")


@router.get("/contact")
async def contact(request: Request, session: UserSession = Depends(get_page_session)):
    """Contact form"""
    return render(request, session, "contact.html", {"form": {}})


@router.post("/contact")
async def submit_contact(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    session: UserSession = Depends(get_page_session),
    client: EmailClient = Depends(get_email_client),
):
    """Send the contact form and report the outcome"""
    form = {"name": name, "email": email, "subject": subject, "message": message}

    try:
        contact_message = ContactMessage(**form)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors()})
        return render(
            request,
            session,
            "contact.html",
            {"form": form, "error": f"Please check: {', '.join(fields)}"},
            status_code=422,
        )

    try:
        await client.send(contact_message)
    except EmailDeliveryError as e:
        logger.error(f"Error sending email: {e}")
        return render(
            request,
            session,
            "contact.html",
            {"form": form, "error": "Sorry, your message could not be sent. Please try again later."},
            status_code=502,
        )

    # Successful send resets the form
    return render(
        request,
        session,
        "contact.html",
        {"form": {}, "notice": "Message Sent Successfully!"},
    )


@router.get("/products")
async def product_list(
    request: Request,
    q: Optional[str] = None,
    session: UserSession = Depends(get_page_session),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Product listing with image search"""
    products = await catalog.search(q or "", session.storage)

    return render(request, session, "products.html", {"products": products, "query": q or ""})


@router.get("/product/{product_id}")
async def product_detail(
    request: Request,
    product_id: str,
    session: UserSession = Depends(get_page_session),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Product detail page"""
    product = catalog.find_product(product_id, session.storage)
    if not product:
        return render(request, session, "product_detail.html", {"product": None}, status_code=404)
    return render(request, session, "product_detail.html", {"product": product})


@router.post("/product/{product_id}/add")
async def add_to_cart(
    request: Request,
    product_id: str,
    session: UserSession = Depends(get_page_session),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Add a product to the cart and go to the cart page"""
    product = catalog.find_product(product_id, session.storage)
    if not product:
        return render(request, session, "product_detail.html", {"product": None}, status_code=404)

    session.cart.add_product(product)
    return redirect("/cart", session)


def _render_cart(
    request: Request,
    session: UserSession,
    show_bill: bool = False,
    notice: Optional[str] = None,
    status_code: int = 200,
) -> Response:
    context = {
        "cart": session.cart,
        "bill": compute_bill(session.cart) if show_bill else None,
        "notice": notice,
    }
    return render(request, session, "cart.html", context, status_code=status_code)


@router.get("/cart")
async def cart_page(
    request: Request,
    bill: bool = False,
    session: UserSession = Depends(get_page_session),
):
    """Cart page; with bill=1 the bill summary is shown"""
    return _render_cart(request, session, show_bill=bill)


async def _step_quantity(
    request: Request,
    session: UserSession,
    product_id: str,
    delta: int,
) -> Response:
    try:
        session.cart.update_quantity(product_id, delta)
    except CartLineNotFoundError as e:
        return _render_cart(request, session, notice=str(e), status_code=404)
    except QuantityLimitExceededError as e:
        logger.info(f"Quantity limit reached for {product_id} in session {session.session_id}")
        return _render_cart(request, session, notice=str(e), status_code=409)

    return redirect("/cart", session)


@router.post("/cart/{product_id}/increment")
async def increment(
    request: Request,
    product_id: str,
    session: UserSession = Depends(get_page_session),
):
    """Increase a cart line by one"""
    return await _step_quantity(request, session, product_id, 1)


@router.post("/cart/{product_id}/decrement")
async def decrement(
    request: Request,
    product_id: str,
    session: UserSession = Depends(get_page_session),
):
    """Decrease a cart line by one"""
    return await _step_quantity(request, session, product_id, -1)
