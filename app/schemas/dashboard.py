from pydantic import BaseModel
from typing import Optional


class DashboardFilters(BaseModel):
    """Filter values echoed back into the dashboard form"""
    state: Optional[str] = None
    area: Optional[str] = None
    min_price: Optional[str] = None
    max_price: Optional[str] = None
    property_type: Optional[str] = None
