from __future__ import annotations

import pytest

from inkfeather.domain.controller import UploadFormController
from inkfeather.domain.errors import ProtocolError, TransportError
from inkfeather.domain.models import SelectedFile, SubmissionPayload

MB = 1024 * 1024


def make_file(name: str = "photo.png", content_type: str = "image/png", size: int = 2 * MB) -> SelectedFile:
    return SelectedFile.from_upload(name, content_type, b"\x89PNG" + b"\0" * max(size - 4, 0))


class FakeWebhook:
    """Records every payload and answers with a configured outcome."""

    def __init__(self, status_code: int = 200, body: str = "ok", error: Exception | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls: list[SubmissionPayload] = []

    async def submit(self, payload: SubmissionPayload) -> str:
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        if not 200 <= self.status_code < 300:
            raise ProtocolError(status_code=self.status_code, body=self.body)
        return self.body


@pytest.fixture
def webhook() -> FakeWebhook:
    return FakeWebhook()


@pytest.fixture
def controller(webhook: FakeWebhook) -> UploadFormController:
    return UploadFormController(webhook=webhook)


@pytest.fixture
def offline_webhook() -> FakeWebhook:
    return FakeWebhook(error=TransportError("Connection refused"))
