"""Contact form relay: validate a submission and forward it by email."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, NamedTuple

from django.core.mail import EmailMultiAlternatives
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.utils.html import escape, linebreaks
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .conf import ContactConfig, load_contact_config

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
REQUIRED_FIELDS = ("name", "email", "subject", "message")

SUCCESS_MESSAGE = "Thank you for your message! We will get back to you soon."
SEND_FAILURE_MESSAGE = (
    "An error occurred while sending your message. Please try again later."
)


class ContactValidationError(ValueError):
    """Submission rejected before any email is sent."""


class ContactSubmission(NamedTuple):
    name: str
    email: str
    subject: str
    message: str


def parse_submission(data: Any) -> ContactSubmission:
    """Validate decoded JSON and return a ContactSubmission.

    Raises:
        ContactValidationError: a field is missing or blank, or the email
            address is malformed.
    """
    if not isinstance(data, dict):
        raise ContactValidationError("Invalid request body")

    values = {}
    for field_name in REQUIRED_FIELDS:
        value = data.get(field_name)
        if not isinstance(value, str) or not value.strip():
            raise ContactValidationError("All fields are required")
        values[field_name] = value.strip()

    if not EMAIL_RE.match(values["email"]):
        raise ContactValidationError("Invalid email address")

    return ContactSubmission(**values)


def build_message(
    submission: ContactSubmission, config: ContactConfig
) -> EmailMultiAlternatives:
    """Compose the notification email; replies go straight to the submitter."""
    text_body = (
        f"New contact form submission from {config.site_name} website:\n"
        "\n"
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n"
        f"Subject: {submission.subject}\n"
        "\n"
        "Message:\n"
        f"{submission.message}\n"
        "\n"
        "---\n"
        f"This email was sent from the {config.site_name} contact form."
    )
    html_body = (
        "<html><body>"
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {escape(submission.name)}</p>"
        f"<p><strong>Email:</strong> {escape(submission.email)}</p>"
        f"<p><strong>Subject:</strong> {escape(submission.subject)}</p>"
        "<hr><p><strong>Message:</strong></p>"
        f"{linebreaks(submission.message, autoescape=True)}"
        '<hr><p style="color: #666; font-size: 12px;">'
        f"This email was sent from the {escape(config.site_name)} contact form.</p>"
        "</body></html>"
    )
    message = EmailMultiAlternatives(
        subject=f"Contact Form: {submission.subject} - {config.site_name}",
        body=text_body,
        from_email=config.sender_email,
        to=[config.recipient_email],
        reply_to=[submission.email],
    )
    message.attach_alternative(html_body, "text/html")
    return message


def _with_cors(response: HttpResponse) -> HttpResponse:
    for header, value in CORS_HEADERS.items():
        response[header] = value
    return response


def _json(payload: dict[str, Any], status: int) -> HttpResponse:
    return _with_cors(JsonResponse(payload, status=status))


@method_decorator(csrf_exempt, name="dispatch")
class ContactFormView(View):
    """JSON endpoint behind the site's contact form.

    ``config`` is injected through ``as_view(config=...)``; without it the
    settings/environment are read on first use.
    """

    http_method_names = ["post", "options"]
    config: ContactConfig | None = None

    def get_config(self) -> ContactConfig:
        if self.config is None:
            self.config = load_contact_config()
        return self.config

    def options(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        return _with_cors(HttpResponse(status=200))

    def post(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        try:
            data = json.loads(request.body or b"null")
        except (ValueError, UnicodeDecodeError):
            return _json({"success": False, "error": "Invalid request body"}, 400)

        try:
            submission = parse_submission(data)
        except ContactValidationError as e:
            return _json({"success": False, "error": str(e)}, 400)

        config = self.get_config()
        try:
            build_message(submission, config).send()
        except Exception:
            logger.exception("Failed to send contact form email")
            return _json({"success": False, "error": SEND_FAILURE_MESSAGE}, 500)

        logger.info("Contact form email sent to %s", config.recipient_email)
        return _json({"success": True, "message": SUCCESS_MESSAGE}, 200)

    def http_method_not_allowed(
        self, request: HttpRequest, *args: Any, **kwargs: Any
    ) -> HttpResponse:
        return _with_cors(super().http_method_not_allowed(request, *args, **kwargs))
