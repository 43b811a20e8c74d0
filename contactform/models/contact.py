"""
Contact form models.
Raw submission as posted by the browser, its sanitized form, and the
outcome/log records produced while validating it.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from enum import Enum
import logging


class ContactSubmission(BaseModel):
    """Raw contact form body. Missing fields stay None."""
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class SanitizedSubmission(BaseModel):
    """Trimmed fields, email lowercased"""
    name: str = ""
    email: str = ""
    message: str = ""


class ValidationOutcome(str, Enum):
    VALID = "valid"
    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    MESSAGE_TOO_LONG = "message_too_long"
    SUSPECTED_SPAM = "suspected_spam"

    @property
    def is_valid(self) -> bool:
        return self is ValidationOutcome.VALID


class RequestMetadata(BaseModel):
    """Origin details taken from the request headers"""
    ip: str = "unknown"
    user_agent: str = "unknown"


class LoggedEvent(BaseModel):
    """
    Log record emitted for accepted or spam-flagged submissions.

    The validator only builds it; the endpoint decides where it goes.
    """
    level: int = logging.INFO
    label: str
    data: Dict[str, Any] = {}


class ValidationResult(BaseModel):
    outcome: ValidationOutcome
    submission: SanitizedSubmission
    event: Optional[LoggedEvent] = None


class ContactResponse(BaseModel):
    """Response schema for the contact endpoint"""
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class SubmissionRecord(BaseModel):
    """Full accepted submission as it is written to the log"""
    name: str
    email: str
    message: str
    timestamp: str = Field(default_factory=utc_timestamp)
    ip: str = "unknown"
    userAgent: str = "unknown"
