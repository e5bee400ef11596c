"""WebhookPort protocol for the document processing service."""

from __future__ import annotations

from typing import Protocol

from inkfeather.domain.models import SubmissionPayload


class WebhookPort(Protocol):
    """Abstraction over the processing webhook used by the controller."""

    async def submit(self, payload: SubmissionPayload) -> str:
        """Post the payload once and return the raw response body.

        Raises:
            TransportError: If the request could not be completed
            ProtocolError: If the response status is not 2xx
        """
        ...
