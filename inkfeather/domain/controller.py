"""Upload form controller.

Owns the single ``FormState`` of one form and drives it through the reducer in
response to UI events: file picks and drops, drag feedback, contact field
edits, submission and reset. The only suspension point is the webhook call
inside ``submit()``.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Callable, Optional, Sequence

from inkfeather.core.config import MAX_UPLOAD_BYTES
from inkfeather.core.logging import bind_submission_id, unbind_submission_id
from inkfeather.core.sanitize import sanitize_email, sanitize_phone
from inkfeather.domain import events
from inkfeather.domain.errors import (
    EmailRequiredError,
    FormError,
    NoFileSelectedError,
    PreconditionError,
    SubmissionInProgressError,
    ValidationError,
)
from inkfeather.domain.models import FormState, SelectedFile, SubmissionPayload, SubmissionStatus
from inkfeather.domain.ports import WebhookPort
from inkfeather.domain.validation import validate_file

logger = logging.getLogger(__name__)

StateListener = Callable[[FormState], None]


class UploadFormController:
    """State machine behind the upload form.

    Args:
        webhook: Port used to deliver the submission
        max_upload_bytes: Largest accepted file size
        listener: Optional callback invoked with every new state, in order;
            may be swapped at any time through the ``listener`` attribute
    """

    def __init__(
        self,
        webhook: WebhookPort,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
        listener: Optional[StateListener] = None,
    ) -> None:
        self._webhook = webhook
        self._max_upload_bytes = max_upload_bytes
        self.listener = listener
        self._state = FormState()
        self._inflight_id: Optional[str] = None

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def can_submit(self) -> bool:
        """Whether the submit control should be enabled."""
        state = self._state
        return (
            state.selected_file is not None
            and bool(state.contact.email.strip())
            and not state.submission.in_progress
            and self._inflight_id is None
        )

    @property
    def button_label(self) -> str:
        submission = self._state.submission
        if submission.in_progress or self._inflight_id is not None:
            return submission.step or "Processing..."
        return "Process Document"

    def dispatch(self, event: events.FormEvent) -> FormState:
        self._state = events.reduce(self._state, event)
        if self.listener is not None:
            self.listener(self._state)
        return self._state

    # --- File acquisition ---

    def drag_enter(self) -> None:
        self.dispatch(events.DragChanged(active=True))

    def drag_over(self) -> None:
        self.dispatch(events.DragChanged(active=True))

    def drag_leave(self) -> None:
        self.dispatch(events.DragChanged(active=False))

    def select_from_picker(self, file: Optional[SelectedFile]) -> bool:
        if file is None:
            return False
        return self._accept(file)

    def select_from_drop(self, files: Sequence[SelectedFile]) -> bool:
        """Accept the first dropped file; any others are ignored."""
        self.dispatch(events.DragChanged(active=False))
        if not files:
            return False
        if len(files) > 1:
            logger.debug("Ignoring %d extra dropped files", len(files) - 1)
        return self._accept(files[0])

    def _accept(self, file: SelectedFile) -> bool:
        try:
            validate_file(file, self._max_upload_bytes)
        except ValidationError as e:
            logger.warning(
                "File rejected: %s",
                e.reason.value,
                extra={
                    "error_code": e.error_code,
                    "uploaded_filename": file.name,
                    "uploaded_content_type": file.content_type,
                    "uploaded_size": file.size,
                },
            )
            self.dispatch(events.FileRejected(message=e.message))
            return False

        self.dispatch(events.FileAccepted(file=file))
        return True

    # --- Contact capture ---

    def set_email(self, value: str) -> None:
        self.dispatch(events.EmailChanged(value=value))

    def set_phone(self, value: str) -> None:
        self.dispatch(events.PhoneChanged(value=value))

    # --- Submission ---

    def _check_preconditions(self) -> None:
        state = self._state
        status = state.submission.status
        if self._inflight_id is not None or not (status == SubmissionStatus.IDLE or status.is_terminal):
            raise SubmissionInProgressError()
        if state.selected_file is None:
            raise NoFileSelectedError()
        if not state.contact.email.strip():
            raise EmailRequiredError()

    def _dispatch_for(self, generation: int, event: events.FormEvent) -> None:
        """Apply a submission event unless the form was reset since it started."""
        if self._state.input_generation != generation:
            logger.info("Dropping %s from a submission reset away", type(event).__name__)
            return
        self.dispatch(event)

    @asynccontextmanager
    async def _in_flight(self):
        """Hold the single-flight slot for the duration of one submission.

        The slot, the in-progress flag and the step label are released on every
        exit path; the terminal status and its message are kept for display.
        Yields the form generation the submission belongs to.
        """
        submission_id = uuid.uuid4().hex
        generation = self._state.input_generation
        token = bind_submission_id(submission_id)
        self._inflight_id = submission_id
        self.dispatch(events.SubmissionStarted())
        try:
            yield generation
        finally:
            self._inflight_id = None
            self._dispatch_for(generation, events.SubmissionSettled())
            unbind_submission_id(token)

    async def submit(self) -> None:
        """Send the selected file and contact details to the webhook once."""
        try:
            self._check_preconditions()
        except PreconditionError as e:
            logger.info("Submit refused: %s", e.error_code, extra={"error_code": e.error_code})
            self.dispatch(events.SubmitRefused(message=e.message))
            return

        async with self._in_flight() as generation:
            try:
                payload = SubmissionPayload.build(self._state.selected_file, self._state.contact)
                logger.info(
                    "Submission started",
                    extra={
                        "uploaded_filename": payload.image.name,
                        "uploaded_size": payload.image.size,
                        "email": sanitize_email(payload.email),
                        "phone": sanitize_phone(payload.phone),
                    },
                )
                self.dispatch(events.PayloadSending())
                await self._webhook.submit(payload)
            except FormError as e:
                logger.error(
                    "Processing failed: %s",
                    e.message,
                    extra={"error_code": e.error_code, "status": "failed"},
                )
                self._dispatch_for(generation, events.SubmissionFailed(reason=e.message))
                return
            except Exception as e:
                logger.exception("Processing failed: %s", e, extra={"status": "failed"})
                self._dispatch_for(generation, events.SubmissionFailed(reason=str(e) or type(e).__name__))
                return

            self._dispatch_for(generation, events.SubmissionSucceeded())
            logger.info("Submission succeeded", extra={"status": "succeeded"})

    # --- Reset ---

    def reset(self) -> None:
        """Clear the form. A submission still in flight keeps its slot but its outcome is dropped."""
        self.dispatch(events.FormReset())
