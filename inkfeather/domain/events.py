"""Form events and the reducer that applies them.

``reduce(state, event)`` is pure: it never performs I/O and always returns a
new ``FormState``. The controller is the only component that dispatches
events.
"""

from __future__ import annotations

from dataclasses import dataclass

from inkfeather.domain.models import (
    ContactInfo,
    FormState,
    SelectedFile,
    SubmissionState,
    SubmissionStatus,
)

PREPARING_LABEL = "Preparing document..."
SENDING_LABEL = "Sending to processing service..."
COMPLETE_LABEL = "Processing complete!"
SUCCESS_MESSAGE = "Document processed successfully! Check your email for results."
FAILURE_PREFIX = "Failed to process document: "


@dataclass(frozen=True)
class DragChanged:
    active: bool


@dataclass(frozen=True)
class FileAccepted:
    file: SelectedFile


@dataclass(frozen=True)
class FileRejected:
    message: str


@dataclass(frozen=True)
class EmailChanged:
    value: str


@dataclass(frozen=True)
class PhoneChanged:
    value: str


@dataclass(frozen=True)
class SubmitRefused:
    message: str


@dataclass(frozen=True)
class SubmissionStarted:
    pass


@dataclass(frozen=True)
class PayloadSending:
    pass


@dataclass(frozen=True)
class SubmissionSucceeded:
    pass


@dataclass(frozen=True)
class SubmissionFailed:
    reason: str


@dataclass(frozen=True)
class SubmissionSettled:
    pass


@dataclass(frozen=True)
class FormReset:
    pass


FormEvent = (
    DragChanged
    | FileAccepted
    | FileRejected
    | EmailChanged
    | PhoneChanged
    | SubmitRefused
    | SubmissionStarted
    | PayloadSending
    | SubmissionSucceeded
    | SubmissionFailed
    | SubmissionSettled
    | FormReset
)


def _with_submission(state: FormState, **changes) -> FormState:
    return state.model_copy(update={"submission": state.submission.model_copy(update=changes)})


def reduce(state: FormState, event: FormEvent) -> FormState:
    if isinstance(event, DragChanged):
        return state.model_copy(update={"drag_active": event.active})

    if isinstance(event, FileAccepted):
        return state.model_copy(
            update={
                "selected_file": event.file,
                "submission": state.submission.model_copy(
                    update={"status": SubmissionStatus.IDLE, "error": "", "success": ""}
                ),
            }
        )

    if isinstance(event, (FileRejected, SubmitRefused)):
        return _with_submission(state, error=event.message, success="")

    if isinstance(event, EmailChanged):
        return state.model_copy(update={"contact": state.contact.model_copy(update={"email": event.value})})

    if isinstance(event, PhoneChanged):
        return state.model_copy(update={"contact": state.contact.model_copy(update={"phone": event.value})})

    if isinstance(event, SubmissionStarted):
        return _with_submission(
            state,
            status=SubmissionStatus.PREPARING,
            in_progress=True,
            step=PREPARING_LABEL,
            error="",
            success="",
        )

    if isinstance(event, PayloadSending):
        return _with_submission(state, status=SubmissionStatus.SENDING, step=SENDING_LABEL)

    if isinstance(event, SubmissionSucceeded):
        return _with_submission(
            state,
            status=SubmissionStatus.SUCCEEDED,
            step=COMPLETE_LABEL,
            error="",
            success=SUCCESS_MESSAGE,
        )

    if isinstance(event, SubmissionFailed):
        return _with_submission(
            state,
            status=SubmissionStatus.FAILED,
            error=f"{FAILURE_PREFIX}{event.reason}",
        )

    if isinstance(event, SubmissionSettled):
        return _with_submission(state, in_progress=False, step="")

    if isinstance(event, FormReset):
        return FormState(
            contact=ContactInfo(),
            submission=SubmissionState(),
            input_generation=state.input_generation + 1,
        )

    raise TypeError(f"Unknown form event: {type(event).__name__}")
