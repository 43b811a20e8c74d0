"""
Contact submission validation.

Pure functions: nothing here logs or touches the request. The endpoint
receives a ValidationResult and decides what to log and return.
"""

import logging
import re
from typing import Optional

from contactform.core.config import Settings
from contactform.core.spam_filter import is_suspected_spam
from contactform.models.contact import (
    ContactSubmission, SanitizedSubmission, ValidationOutcome, ValidationResult,
    RequestMetadata, LoggedEvent, SubmissionRecord
)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def sanitize_submission(submission: ContactSubmission) -> SanitizedSubmission:
    return SanitizedSubmission(
        name=(submission.name or "").strip(),
        email=(submission.email or "").strip().lower(),
        message=(submission.message or "").strip(),
    )


def is_valid_email(email: str) -> bool:
    """Minimal local@domain.tld shape check, not full RFC 5322."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def message_length(message: str) -> int:
    """Length in UTF-16 code units, so characters outside the BMP count twice."""
    return len(message.encode("utf-16-le", errors="surrogatepass")) // 2


def check_submission(sanitized: SanitizedSubmission, settings: Settings) -> ValidationOutcome:
    """
    Run the validation steps in order and return the first failure.

    Order: required fields, email format, message length, spam heuristics.
    """
    if not sanitized.name or not sanitized.email or not sanitized.message:
        return ValidationOutcome.MISSING_FIELDS

    if not is_valid_email(sanitized.email):
        return ValidationOutcome.INVALID_EMAIL_FORMAT

    if message_length(sanitized.message) > settings.max_message_length:
        return ValidationOutcome.MESSAGE_TOO_LONG

    if is_suspected_spam(sanitized.message, settings):
        return ValidationOutcome.SUSPECTED_SPAM

    return ValidationOutcome.VALID


def build_event(outcome: ValidationOutcome, sanitized: SanitizedSubmission,
                metadata: RequestMetadata) -> Optional[LoggedEvent]:
    if outcome is ValidationOutcome.SUSPECTED_SPAM:
        return LoggedEvent(
            level=logging.WARNING,
            label="Potential spam detected",
            data={"name": sanitized.name, "email": sanitized.email, "ip": metadata.ip},
        )

    if outcome is ValidationOutcome.VALID:
        record = SubmissionRecord(
            name=sanitized.name,
            email=sanitized.email,
            message=sanitized.message,
            ip=metadata.ip,
            userAgent=metadata.user_agent,
        )
        return LoggedEvent(level=logging.INFO, label="Contact form submission", data=record.model_dump())

    return None


def validate_submission(submission: ContactSubmission, metadata: RequestMetadata,
                        settings: Settings) -> ValidationResult:
    """Sanitize, validate and classify one submission."""
    sanitized = sanitize_submission(submission)
    outcome = check_submission(sanitized, settings)
    return ValidationResult(
        outcome=outcome,
        submission=sanitized,
        event=build_event(outcome, sanitized, metadata),
    )
