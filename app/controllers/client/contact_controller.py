"""
Contact Controller - Client requests to be contacted by an agent
"""
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, status
from app.schemas.contact_request import (
    ContactAgentRequest,
    ContactAgentResponse,
    ContactRequestResponse,
)
from app.services.client.contact_request_service import create_contact_request
from app.utils.dependencies import get_current_client_id
from app.utils.errors import MissingFieldError, NotFoundError, DuplicateRequestError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/client", tags=["Client Contact Requests"])


@router.post("/contact-agent", response_model=ContactAgentResponse)
async def contact_agent(
    request: Optional[ContactAgentRequest] = None,
    client_id: str = Depends(get_current_client_id)
):
    """
    Ask an agent to get in touch about a property
    Operators are emailed on success; email failures do not fail the request
    """
    agent_id = request.agent_id if request else None
    property_id = request.property_id if request else None

    try:
        contact_request = await create_contact_request(
            client_id=client_id,
            agent_id=agent_id,
            property_id=property_id
        )
    except (MissingFieldError, DuplicateRequestError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Contact agent error - Client: {client_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send contact request"
        )

    return ContactAgentResponse(
        success=True,
        message="Contact request sent successfully",
        contact_request=ContactRequestResponse(**contact_request),
    )
