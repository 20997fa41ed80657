"""
Client Dashboard Service - Active property listing with filters
All supplied filters are ANDed, results are ordered newest first
"""
from decimal import Decimal, InvalidOperation
from typing import Optional, List, Dict
from sqlalchemy import select, and_, desc
from sqlalchemy.orm import selectinload
from app.database.connection import AsyncSessionLocal
from app.models.property import Property


def parse_price(value: Optional[str]) -> Optional[Decimal]:
    """Parse a price filter, ignoring blank or non-numeric input"""
    if value is None:
        return None
    value = str(value).strip().replace(",", "")
    if not value:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation:
        return None
    if not price.is_finite():
        return None
    return price


async def get_dashboard_properties(
    state: Optional[str] = None,
    area: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    property_type: Optional[str] = None,
) -> List[Dict]:
    """Get active properties with agent contact fields, filtered and newest first"""
    async with AsyncSessionLocal() as session:
        conditions = [Property.status == "active"]

        if state:
            conditions.append(Property.state.icontains(state, autoescape=True))

        if area:
            conditions.append(Property.area.icontains(area, autoescape=True))

        lower = parse_price(min_price)
        if lower is not None:
            conditions.append(Property.price >= lower)

        upper = parse_price(max_price)
        if upper is not None:
            conditions.append(Property.price <= upper)

        if property_type:
            conditions.append(Property.property_type == property_type)

        stmt = (
            select(Property)
            .options(selectinload(Property.agent))
            .where(and_(*conditions))
            .order_by(desc(Property.created_at))
        )

        result = await session.execute(stmt)
        props = result.scalars().all()

        return [
            {
                "id": prop.id,
                "title": prop.title,
                "description": prop.description,
                "property_type": prop.property_type,
                "state": prop.state,
                "area": prop.area,
                "address": prop.address,
                "price": prop.price,
                "status": prop.status,
                "created_at": prop.created_at.isoformat() if prop.created_at else "",
                "agent": {
                    "id": prop.agent.id,
                    "full_name": prop.agent.full_name,
                    "phone": prop.agent.phone,
                } if prop.agent else None,
            }
            for prop in props
        ]
