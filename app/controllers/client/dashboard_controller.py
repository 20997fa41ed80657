"""
Client Dashboard Controller - Active property listing page
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from app.schemas.dashboard import DashboardFilters
from app.services.client.dashboard_service import get_dashboard_properties
from app.utils.dependencies import get_current_client
from app.utils.flash import flash
from app.utils.templates import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/client", tags=["Client Dashboard"])


@router.get("/dashboard", response_class=HTMLResponse)
async def client_dashboard(
    request: Request,
    state: Optional[str] = None,
    area: Optional[str] = None,
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    property_type: Optional[str] = Query(None, alias="type"),
    client: dict = Depends(get_current_client)
):
    """Show active properties matching the optional filters, newest first"""
    filters = DashboardFilters(
        state=state,
        area=area,
        min_price=min_price,
        max_price=max_price,
        property_type=property_type,
    )

    try:
        properties = await get_dashboard_properties(**filters.model_dump())
    except Exception as e:
        logger.error(f"Dashboard error - Client: {client['id']}: {str(e)}", exc_info=True)
        flash(request, "Error loading dashboard", "error")
        return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)

    return templates.TemplateResponse(request, "client/dashboard.html", {
        "title": "Client Dashboard",
        "properties": properties,
        "client": client,
        "filters": filters,
    })
