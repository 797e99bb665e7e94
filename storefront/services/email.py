"""
Email Delivery Client

Sends contact form messages through an EmailJS-compatible REST API.
"""

import logging
from typing import Optional, Any

import httpx

from ..models.contact import ContactMessage

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """The message could not be delivered"""
    pass


class EmailClient:
    """Client for the email delivery API"""

    def __init__(
        self,
        base_url: str,
        service_id: Optional[str] = None,
        template_id: Optional[str] = None,
        public_key: Optional[str] = None,
        private_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.private_key = private_key
        self._http_client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def configured(self) -> bool:
        return all([self.service_id, self.template_id, self.public_key])

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def _build_body(self, message: ContactMessage) -> dict[str, Any]:
        body = {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": message.template_params(),
        }
        if self.private_key:
            body["accessToken"] = self.private_key
        return body

    async def send(self, message: ContactMessage) -> None:
        """
        Send a contact form message.

        Raises:
            EmailDeliveryError: If delivery is not configured or the API rejects the message
        """
        if not self.configured:
            raise EmailDeliveryError("Email delivery is not configured")

        url = f"{self.base_url}/api/v1.0/email/send"
        try:
            response = await self._http_client.post(url, json=self._build_body(message))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise EmailDeliveryError(
                f"Email API rejected the message: {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Email API request failed: {e}") from e

        logger.info(f"Contact message from {message.email} sent")
