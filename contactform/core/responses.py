"""
Response building for the contact endpoint: status codes, German user
messages and CORS headers.
"""

from fastapi import status
from fastapi.responses import JSONResponse, Response
from typing import Dict, Tuple

from contactform.core.config import Settings
from contactform.models.contact import ValidationOutcome, ContactResponse

SERVER_ERROR_MESSAGE = "Serverfehler. Bitte versuchen Sie es später erneut."

OUTCOME_RESPONSES: Dict[ValidationOutcome, Tuple[int, str]] = {
    ValidationOutcome.MISSING_FIELDS: (
        status.HTTP_400_BAD_REQUEST,
        "Alle Felder sind erforderlich",
    ),
    ValidationOutcome.INVALID_EMAIL_FORMAT: (
        status.HTTP_400_BAD_REQUEST,
        "Ungültige E-Mail-Adresse",
    ),
    ValidationOutcome.MESSAGE_TOO_LONG: (
        status.HTTP_400_BAD_REQUEST,
        "Nachricht ist zu lang",
    ),
    ValidationOutcome.SUSPECTED_SPAM: (
        status.HTTP_400_BAD_REQUEST,
        "Nachricht konnte nicht gesendet werden. Bitte kontaktieren Sie uns direkt.",
    ),
    ValidationOutcome.VALID: (
        status.HTTP_200_OK,
        "Vielen Dank! Ihre Nachricht wurde erfolgreich empfangen. "
        "Ich werde mich so schnell wie möglich bei Ihnen melden.",
    ),
}


def preflight_response(settings: Settings) -> Response:
    """Empty 200 answering a CORS preflight probe"""
    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            "Access-Control-Allow-Origin": settings.cors_allow_origin,
            "Access-Control-Allow-Methods": settings.cors_allow_methods,
            "Access-Control-Allow-Headers": settings.cors_allow_headers,
            "Access-Control-Max-Age": str(settings.cors_max_age),
        },
    )


def json_response(status_code: int, payload: ContactResponse, settings: Settings) -> JSONResponse:
    # JSONResponse sets Content-Type: application/json
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(exclude_none=True),
        headers={"Access-Control-Allow-Origin": settings.cors_allow_origin},
    )


def outcome_response(outcome: ValidationOutcome, settings: Settings) -> JSONResponse:
    status_code, text = OUTCOME_RESPONSES[outcome]
    if outcome.is_valid:
        payload = ContactResponse(success=True, message=text)
    else:
        payload = ContactResponse(success=False, error=text)
    return json_response(status_code, payload, settings)


def server_error_response(settings: Settings) -> JSONResponse:
    return json_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ContactResponse(success=False, error=SERVER_ERROR_MESSAGE),
        settings,
    )
