"""
Contact Request Service - Client to agent contact requests
One request per (client, agent, property), guarded by a unique constraint
"""
import logging
import uuid
from typing import Dict
from sqlalchemy.exc import IntegrityError
from app.database.connection import AsyncSessionLocal
from app.models.contact_request import ContactRequest
from app.models.property import Property
from app.models.user import User
from app.services.email_service.notification_service import notify_contact_request
from app.utils.errors import MissingFieldError, NotFoundError, DuplicateRequestError

logger = logging.getLogger(__name__)


def contact_request_to_dict(contact_request: ContactRequest) -> Dict:
    return {
        "id": contact_request.id,
        "client_id": contact_request.client_id,
        "agent_id": contact_request.agent_id,
        "property_id": contact_request.property_id,
        "status": contact_request.status,
        "notes": contact_request.notes,
        "created_at": contact_request.created_at.isoformat() if contact_request.created_at else "",
        "updated_at": contact_request.updated_at.isoformat() if contact_request.updated_at else "",
    }


async def create_contact_request(client_id: str, agent_id: str, property_id: str) -> Dict:
    """
    Create a contact request and notify operators
    Raises MissingFieldError, NotFoundError or DuplicateRequestError
    Notification failures never fail the request
    """
    if not agent_id or not property_id:
        raise MissingFieldError("Missing agent or property ID")

    async with AsyncSessionLocal() as session:
        client = await session.get(User, client_id)
        agent = await session.get(User, agent_id)
        property_obj = await session.get(Property, property_id)

        if not client or not agent or agent.role != "agent" or not property_obj:
            raise NotFoundError("Client, agent, or property not found")

        # Snapshot before commit, used for the notification
        details = {
            "client": {"full_name": client.full_name, "email": client.email, "phone": client.phone},
            "agent": {"full_name": agent.full_name, "email": agent.email},
            "property": {
                "title": property_obj.title,
                "area": property_obj.area,
                "state": property_obj.state,
                "price": property_obj.price,
            },
        }

        new_request = ContactRequest(
            id=str(uuid.uuid4()),
            client_id=client_id,
            agent_id=agent_id,
            property_id=property_id,
            status="pending",
            notes="",
        )
        session.add(new_request)

        try:
            await session.commit()
        except IntegrityError:
            await session.rollback()
            logger.info(f"Duplicate contact request - Client: {client_id}, Agent: {agent_id}, Property: {property_id}")
            raise DuplicateRequestError("You have already contacted this agent for this property")

        await session.refresh(new_request)
        contact_request = contact_request_to_dict(new_request)
        details["requested_at"] = new_request.created_at

    logger.info(f"Contact request created - ID: {contact_request['id']}, Client: {client_id}, Agent: {agent_id}")

    await notify_contact_request(details)

    return contact_request
