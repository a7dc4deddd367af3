"""Small page-level models: table of contents, contact drafts and theme."""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, Field, computed_field


class TocEntry(BaseModel):
    """A heading linked from a post's table of contents."""

    id: str = Field(..., description="Anchor id of the heading")
    text: str = Field(..., description="Heading text content")
    level: int = Field(..., ge=1, le=3, description="Heading level")


class ContactForm(BaseModel):
    """Raw contact form input, validated later so errors stay user-facing."""

    name: str = ""
    email: str = ""
    message: str = ""
    subject: str = ""


class MailDraft(BaseModel):
    """A pre-filled email handed to the platform mail handler."""

    recipient: str
    subject: str
    body: str

    @computed_field
    @property
    def mailto_url(self) -> str:
        query = f"subject={quote(self.subject)}&body={quote(self.body)}"
        return f"mailto:{self.recipient}?{query}"


class ContactResult(BaseModel):
    """Outcome of a contact submission shown inline under the form."""

    ok: bool
    message: str
    draft: MailDraft | None = None


class Theme(str, Enum):
    """Colour theme of the site."""

    dark = "dark"
    light = "light"

    @property
    def opposite(self) -> Theme:
        return Theme.light if self is Theme.dark else Theme.dark
