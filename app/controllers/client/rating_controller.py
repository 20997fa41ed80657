"""
Rating Controller - Rating form and submission for unlocked agents
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from app.services.client.rating_service import submit_rating, get_rating_page_context
from app.utils.dependencies import get_current_client_id
from app.utils.errors import (
    AgentLockedError,
    DuplicateRatingError,
    InvalidRatingError,
    MissingFieldError,
    NotFoundError,
)
from app.utils.flash import flash
from app.utils.templates import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/client", tags=["Client Ratings"])

DASHBOARD_URL = "/client/dashboard"


def redirect_to(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/rate/{agent_id}", response_class=HTMLResponse)
async def rate_agent_page(
    request: Request,
    agent_id: str,
    client_id: str = Depends(get_current_client_id)
):
    """Show the rating form; only agents the client has unlocked can be rated"""
    try:
        context = await get_rating_page_context(client_id, agent_id)
    except (NotFoundError, AgentLockedError) as e:
        flash(request, str(e), "error")
        return RedirectResponse(url=DASHBOARD_URL, status_code=status.HTTP_302_FOUND)
    except Exception as e:
        logger.error(f"Rate agent page error - Agent: {agent_id}: {str(e)}", exc_info=True)
        flash(request, "Error loading rating page", "error")
        return RedirectResponse(url=DASHBOARD_URL, status_code=status.HTTP_302_FOUND)

    return templates.TemplateResponse(request, "client/rate_agent.html", {
        "title": "Rate Agent",
        "agent": context["agent"],
        "properties": context["properties"],
    })


@router.post("/rate/{agent_id}")
async def submit_agent_rating(
    request: Request,
    agent_id: str,
    rating: Optional[str] = Form(None),
    comment: Optional[str] = Form(None),
    property_id: Optional[str] = Form(None, alias="propertyId"),
    client_id: str = Depends(get_current_client_id)
):
    """Submit a 1-5 rating for an agent on one of their properties"""
    try:
        await submit_rating(
            client_id=client_id,
            agent_id=agent_id,
            property_id=property_id,
            rating_value=rating,
            comment=comment
        )
    except InvalidRatingError as e:
        flash(request, str(e), "error")
        return redirect_to(f"/client/rate/{agent_id}")
    except (MissingFieldError, NotFoundError, DuplicateRatingError) as e:
        flash(request, str(e), "error")
        return redirect_to(DASHBOARD_URL)
    except Exception as e:
        logger.error(f"Submit rating error - Agent: {agent_id}: {str(e)}", exc_info=True)
        flash(request, "Error submitting rating", "error")
        return redirect_to(DASHBOARD_URL)

    flash(request, "Rating submitted successfully!", "success")
    return redirect_to(DASHBOARD_URL)
