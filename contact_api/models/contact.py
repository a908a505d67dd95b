"""
Contact form submission model.

Each field is trimmed and sanitized before it is checked, so a validated
ContactSubmission always holds five non-empty, HTML-escaped strings and a
normalized email address.
"""

from typing import Any, Dict, List

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

# Same entity set as validator.js escape()
ESCAPE_TABLE = str.maketrans({
    "&": "&amp;",
    "\"": "&quot;",
    "'": "&#x27;",
    "<": "&lt;",
    ">": "&gt;",
    "/": "&#x2F;",
    "\\": "&#x5C;",
    "`": "&#96;",
})

FIELD_MESSAGES = {
    "name": "Name is required.",
    "email": "Valid email is required.",
    "phone": "Phone is required.",
    "subject": "Subject is required.",
    "message": "Message is required.",
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def escape_html(value: str) -> str:
    return value.translate(ESCAPE_TABLE)


def normalize_email(value: str) -> str:
    """Canonical lower-case form of an address; raises EmailNotValidError on bad syntax"""
    result = validate_email(value, check_deliverability=False)
    return result.normalized.lower()


class ContactSubmission(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    subject: str = ""
    message: str = ""

    @field_validator("name", "phone", "subject", "message", mode="before")
    @classmethod
    def sanitize_text(cls, value: Any, info: ValidationInfo) -> str:
        text = escape_html(_as_text(value).strip())
        if not text:
            raise ValueError(FIELD_MESSAGES[info.field_name])
        return text

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, value: Any) -> str:
        try:
            return normalize_email(_as_text(value).strip())
        except EmailNotValidError:
            raise ValueError(FIELD_MESSAGES["email"])

    @property
    def first_name(self) -> str:
        # Whole name when there is no space
        return self.name.split(" ", 1)[0]


def field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten a pydantic ValidationError into [{field, message}] in field order"""
    errors = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        cause = (error.get("ctx") or {}).get("error")
        message = str(cause) if cause else FIELD_MESSAGES.get(field, error["msg"])
        errors.append({"field": field, "message": message})
    return errors
