"""Domain models for the upload form.

All models are immutable; the reducer produces a new ``FormState`` for every
event instead of mutating the current one.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    PREPARING = "preparing"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SubmissionStatus.SUCCEEDED, SubmissionStatus.FAILED)


class SelectedFile(BaseModel):
    """A file chosen through the picker or the drop zone."""

    model_config = ConfigDict(frozen=True)

    name: str
    content_type: str
    content: bytes = Field(repr=False)
    size: int = Field(ge=0)

    @classmethod
    def from_upload(cls, name: str, content_type: Optional[str], content: bytes) -> "SelectedFile":
        """Build from the name, declared MIME type and bytes a UI widget hands over."""
        return cls(
            name=name,
            content_type=content_type or "application/octet-stream",
            content=content,
            size=len(content),
        )

    @property
    def size_label(self) -> str:
        return f"{self.size / 1024 / 1024:.2f} MB"


class ContactInfo(BaseModel):
    """Contact details exactly as typed; trimming happens at submit time."""

    model_config = ConfigDict(frozen=True)

    email: str = ""
    phone: str = ""


class SubmissionState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: SubmissionStatus = SubmissionStatus.IDLE
    in_progress: bool = False
    step: str = ""
    error: str = ""
    success: str = ""


class FormState(BaseModel):
    """Everything the upload form holds for one session."""

    model_config = ConfigDict(frozen=True)

    selected_file: Optional[SelectedFile] = None
    contact: ContactInfo = Field(default_factory=ContactInfo)
    submission: SubmissionState = Field(default_factory=SubmissionState)
    drag_active: bool = False
    # Bumped on reset so UI file inputs drop their held value
    input_generation: int = 0


class SubmissionPayload(BaseModel):
    """Multipart body posted to the processing webhook."""

    model_config = ConfigDict(frozen=True)

    image: SelectedFile
    email: str
    phone: str = ""

    @classmethod
    def build(cls, selected_file: SelectedFile, contact: ContactInfo) -> "SubmissionPayload":
        return cls(
            image=selected_file,
            email=contact.email.strip(),
            phone=contact.phone.strip(),
        )

    def form_fields(self) -> dict[str, str]:
        return {
            "filename": self.image.name,
            "filesize": str(self.image.size),
            "email": self.email,
            "phone": self.phone,
        }

    def form_files(self) -> dict[str, tuple[str, bytes, str]]:
        return {
            "image": (self.image.name, self.image.content, self.image.content_type),
        }
