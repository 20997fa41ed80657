# Database models
from app.models.user import User
from app.models.property import Property
from app.models.agent_unlock import AgentUnlock
from app.models.contact_request import ContactRequest
from app.models.rating import Rating

__all__ = [
    "User",
    "Property",
    "AgentUnlock",
    "ContactRequest",
    "Rating",
]
