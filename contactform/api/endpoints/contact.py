"""
Contact form endpoint.

POST validates a submission and answers with a JSON payload, OPTIONS answers
the browser's CORS preflight. Nothing is stored and no email is sent yet.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from starlette.datastructures import Headers
import logging

from contactform.core.config import Settings, get_settings
from contactform.core.responses import preflight_response, outcome_response, server_error_response
from contactform.core.validator import validate_submission
from contactform.models.contact import ContactSubmission, RequestMetadata

router = APIRouter()
logger = logging.getLogger(__name__)


def get_request_metadata(headers: Headers) -> RequestMetadata:
    """Origin IP and user agent for logging, "unknown" when absent"""
    return RequestMetadata(
        ip=headers.get("x-forwarded-for") or headers.get("x-real-ip") or "unknown",
        user_agent=headers.get("user-agent") or "unknown",
    )


def parse_submission(form_data) -> ContactSubmission:
    """
    Read the form fields from a decoded JSON body.

    A JSON value that is not an object has no fields. A null body is an error.
    """
    if form_data is None:
        raise ValueError("Request body is null")
    if not isinstance(form_data, dict):
        return ContactSubmission()
    return ContactSubmission.model_validate(form_data)


@router.options("/contact")
async def contact_preflight(settings: Settings = Depends(get_settings)) -> Response:
    return preflight_response(settings)


@router.post("/contact")
async def submit_contact(request: Request, settings: Settings = Depends(get_settings)) -> Response:
    """
    Validate a contact form submission.

    Returns:
        200 with a thank-you message when accepted, 400 with the reason when
        rejected, 500 on anything unexpected (malformed body included).
    """
    try:
        form_data = await request.json()
        submission = parse_submission(form_data)

        result = validate_submission(submission, get_request_metadata(request.headers), settings)

        if result.event:
            logger.log(result.event.level, f"{result.event.label}: {result.event.data}")

        # TODO: send the accepted submission by email once a provider is chosen
        return outcome_response(result.outcome, settings)

    except Exception as e:
        logger.error(f"Contact form error: {str(e)}")
        return server_error_response(settings)
