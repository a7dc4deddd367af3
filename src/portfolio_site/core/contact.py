"""Contact form: local validation and mail draft composition."""

import logging
import re
import webbrowser
from collections.abc import Callable

from portfolio_site.models.page import ContactForm, ContactResult, MailDraft

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

DEFAULT_SUBJECT = "Message from your portfolio"


def is_valid_email(address: str) -> bool:
    return bool(EMAIL_PATTERN.match(address.strip()))


def validate_contact_form(form: ContactForm) -> list[str]:
    """User-facing messages for every invalid field; empty when valid."""
    errors = []
    if not form.name.strip():
        errors.append("Please enter your name.")
    if not form.email.strip():
        errors.append("Please enter your email address.")
    elif not is_valid_email(form.email):
        errors.append("Please enter a valid email address.")
    if not form.message.strip():
        errors.append("Please write a message.")
    return errors


def compose_mail_draft(
    form: ContactForm,
    recipient: str,
    default_subject: str = DEFAULT_SUBJECT,
) -> MailDraft:
    """Pre-fill an email to ``recipient`` from the form fields."""
    subject = form.subject.strip() or default_subject
    body = (
        f"{form.message.strip()}\n\n"
        f"--\n"
        f"{form.name.strip()} <{form.email.strip()}>"
    )
    return MailDraft(recipient=recipient, subject=subject, body=body)


def submit_contact(
    form: ContactForm,
    recipient: str,
    opener: Callable[[str], object] = webbrowser.open,
    default_subject: str = DEFAULT_SUBJECT,
) -> ContactResult:
    """
    Validate the form and hand a mail draft to the platform mail handler.

    Invalid input is reported in the result, never raised.
    """
    errors = validate_contact_form(form)
    if errors:
        logger.info(f"Contact form rejected: {errors[0]}")
        return ContactResult(ok=False, message=errors[0])

    draft = compose_mail_draft(form, recipient, default_subject)
    opener(draft.mailto_url)
    logger.info(f"Mail draft opened for {recipient}")
    return ContactResult(ok=True, message="Your mail client has been opened with your message.", draft=draft)
