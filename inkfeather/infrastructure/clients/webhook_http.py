"""HTTP client adapter for the document processing webhook."""

from __future__ import annotations

import logging
import time

import httpx

from inkfeather.core.config import Settings, get_settings
from inkfeather.domain.errors import ProtocolError, TransportError
from inkfeather.domain.models import SubmissionPayload
from inkfeather.domain.ports import WebhookPort

logger = logging.getLogger(__name__)


class WebhookHttpClient(WebhookPort):
    """WebhookPort implementation using httpx (async).

    Sends a single multipart POST per call: no custom headers, no
    authentication, no retries. Only the status code and the raw body text of
    the response are inspected.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

        logger.info(
            "WebhookHttpClient initialized",
            extra={"webhook_url": self.url},
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout_seconds),
            transport=self._transport,
        )

    async def submit(self, payload: SubmissionPayload) -> str:
        """Post the payload to the webhook.

        Args:
            payload: File, metadata and contact fields to send

        Returns:
            str: Raw response body text

        Raises:
            TransportError: If the request could not be sent or completed
            ProtocolError: If the webhook answered with a non-2xx status
        """
        started = time.perf_counter()
        try:
            async with self._client() as client:
                response = await client.post(
                    self.url,
                    data=payload.form_fields(),
                    files=payload.form_files(),
                )
                body = response.text
        except httpx.RequestError as e:
            logger.error(
                "Webhook request failed: %s",
                e,
                extra={"webhook_url": self.url},
            )
            raise TransportError(str(e) or type(e).__name__) from e

        duration_ms = round((time.perf_counter() - started) * 1000, 1)
        if not response.is_success:
            logger.error(
                "Webhook HTTP error: %s",
                response.status_code,
                extra={"http_status": response.status_code, "duration_ms": duration_ms},
            )
            raise ProtocolError(status_code=response.status_code, body=body)

        logger.info(
            "Webhook delivered successfully",
            extra={"http_status": response.status_code, "duration_ms": duration_ms},
        )
        return body


def create_webhook_client(settings: Settings | None = None) -> WebhookHttpClient:
    """Factory function to create WebhookHttpClient from settings."""
    settings = settings or get_settings()
    return WebhookHttpClient(
        url=settings.webhook_url,
        timeout_seconds=settings.WEBHOOK_TIMEOUT_SECONDS,
    )
