"""
Email delivery through the Resend REST API.

Sends are plain awaited HTTP calls; nothing is queued or retried. Any failure
is raised as EmailDeliveryError and left to the caller to log.
"""

import httpx
import logging
from typing import Optional

from contact_api.models.email import OutboundEmail

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when the provider rejects a message or cannot be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResendMailer:
    def __init__(self, api_key: Optional[str], api_url: str = "https://api.resend.com/emails",
                 timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        # Swappable for tests (httpx.MockTransport)
        self.transport = transport

    async def send(self, email: OutboundEmail) -> Optional[str]:
        """
        Send one message.

        Args:
            email: Fully built outbound message

        Returns:
            str: Provider message id, when the provider returns one

        Raises:
            EmailDeliveryError: on missing credentials, transport errors or a non-2xx response
        """
        if not self.api_key:
            raise EmailDeliveryError("RESEND_API_KEY is not configured")
        if not email.sender:
            raise EmailDeliveryError("Sender identity (EMAIL_USER) is not configured")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Accept": "application/json",
                    },
                    json=email.to_resend_payload(),
                )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Resend request failed: {str(e)}") from e

        if not response.is_success:
            raise EmailDeliveryError(
                f"Resend API error {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            data = {}
        message_id = data.get("id") if isinstance(data, dict) else None
        logger.debug(f"Resend accepted message {message_id} for {email.subject!r}")
        return message_id
