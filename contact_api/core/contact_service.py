"""
Contact submission handling: message building and dispatch.

One ContactService is built at startup and holds the process-wide state the
route needs (settings, confirmation template, mailer). The template is read
from disk exactly once, in the constructor.
"""

import logging
from pathlib import Path
from typing import Protocol

from contact_api.core.config import Settings
from contact_api.models.contact import ContactSubmission
from contact_api.models.email import OutboundEmail

logger = logging.getLogger(__name__)

NAME_TOKEN = "{(name)}"
TEAM_SUBJECT_PREFIX = "New Contact Form Submission: "


class Mailer(Protocol):
    async def send(self, email: OutboundEmail): ...


def load_template(path: Path) -> str:
    with open(path, "r", encoding="utf-8") as f:
        template = f.read()
    if NAME_TOKEN not in template:
        logger.warning(f"Confirmation template {path} has no {NAME_TOKEN} token")
    logger.info(f"Loaded confirmation template from {path}")
    return template


class ContactService:
    def __init__(self, settings: Settings, mailer: Mailer, template: str):
        self.settings = settings
        self.mailer = mailer
        self.template = template

    @classmethod
    def from_settings(cls, settings: Settings, mailer: Mailer) -> "ContactService":
        return cls(settings, mailer, load_template(settings.template_path))

    def render_confirmation(self, first_name: str) -> str:
        return self.template.replace(NAME_TOKEN, first_name, 1)

    def build_team_notification(self, submission: ContactSubmission) -> OutboundEmail:
        text = "\n".join([
            f"Name: {submission.name}",
            f"Email: {submission.email}",
            f"Phone: {submission.phone}",
            f"Message: {submission.message}",
        ])
        return OutboundEmail(
            sender=self.settings.email_user or "",
            to=self.settings.effective_team_inbox or "",
            subject=f"{TEAM_SUBJECT_PREFIX}{submission.subject}",
            text=text,
            reply_to=submission.email,
        )

    def build_confirmation(self, submission: ContactSubmission) -> OutboundEmail:
        return OutboundEmail(
            sender=self.settings.email_user or "",
            to=submission.email,
            subject=self.settings.confirmation_subject,
            html=self.render_confirmation(submission.first_name),
        )

    async def submit(self, submission: ContactSubmission) -> None:
        """Send the team notification, then the confirmation. The first failure propagates."""
        await self.mailer.send(self.build_team_notification(submission))
        await self.mailer.send(self.build_confirmation(submission))
        logger.info("Contact submission delivered (team notification + confirmation)")
