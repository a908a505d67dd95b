"""
Contact form endpoint.

Validates the submission, then sends the team notification followed by the
confirmation email. Delivery failures are logged here and reported to the
client only as a generic 500.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging

from contact_api.core.contact_service import ContactService
from contact_api.core.rate_limit import limiter, contact_rate_limit
from contact_api.models.contact import ContactSubmission, field_errors

router = APIRouter()
logger = logging.getLogger(__name__)


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


@router.post("/contact", status_code=status.HTTP_200_OK)
@limiter.limit(contact_rate_limit)
async def submit_contact(request: Request, service: ContactService = Depends(get_contact_service)):
    """
    Accept a contact form submission.

    Returns:
        200 {"msg"} when both emails were sent
        400 {"errors": [{"field", "message"}]} when validation fails
        500 {"msg"} when either email could not be sent
    """
    # Malformed or non-object bodies validate as empty
    try:
        payload = await request.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    try:
        submission = ContactSubmission.model_validate(payload)
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": field_errors(e)},
        )

    try:
        await service.submit(submission)
    except Exception as e:
        logger.error(f"Error sending email: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Internal server error"},
        )

    return {"msg": "Form submitted successfully!"}
