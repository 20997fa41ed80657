"""
Rating Service - Client ratings of agents
One rating per (client, agent, property); the agent's average and count
are recomputed from all stored ratings in the same transaction
"""
import logging
import uuid
from typing import Any, Dict, List, Optional
from sqlalchemy import select, func, desc
from sqlalchemy.exc import IntegrityError
from app.database.connection import AsyncSessionLocal
from app.models.property import Property
from app.models.rating import Rating, MIN_RATING, MAX_RATING
from app.models.user import User
from app.services.user_service import user_to_dict, is_agent_unlocked
from app.utils.errors import (
    MissingFieldError,
    NotFoundError,
    DuplicateRatingError,
    InvalidRatingError,
    AgentLockedError,
)

logger = logging.getLogger(__name__)


def parse_rating_value(value: Any) -> int:
    """Parse a submitted rating, raising InvalidRatingError unless it is an integer in range"""
    if value is None or isinstance(value, bool):
        raise InvalidRatingError("Please provide a valid rating (1-5)")

    try:
        rating = int(str(value).strip())
    except ValueError:
        raise InvalidRatingError("Please provide a valid rating (1-5)")

    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidRatingError("Please provide a valid rating (1-5)")

    return rating


async def submit_rating(
    client_id: str,
    agent_id: str,
    property_id: Optional[str],
    rating_value: Any,
    comment: Optional[str] = None
) -> Dict:
    """
    Store a rating and refresh the agent's rating aggregate
    Raises InvalidRatingError, MissingFieldError, NotFoundError or DuplicateRatingError
    """
    rating = parse_rating_value(rating_value)

    if not property_id:
        raise MissingFieldError("Please select the property you are rating")

    comment = comment.strip() if comment else None

    async with AsyncSessionLocal() as session:
        # Lock the agent row so concurrent ratings for one agent are aggregated in turn
        agent_stmt = select(User).where(User.id == agent_id).with_for_update()
        agent_result = await session.execute(agent_stmt)
        agent = agent_result.scalar_one_or_none()

        if not agent or agent.role != "agent":
            await session.rollback()
            raise NotFoundError("Agent not found")

        property_obj = await session.get(Property, property_id)
        if not property_obj or property_obj.agent_id != agent_id:
            await session.rollback()
            raise NotFoundError("Property not found for this agent")

        new_rating = Rating(
            id=str(uuid.uuid4()),
            client_id=client_id,
            agent_id=agent_id,
            property_id=property_id,
            rating=rating,
            comment=comment,
        )
        session.add(new_rating)

        try:
            await session.flush()
        except IntegrityError:
            await session.rollback()
            logger.info(f"Duplicate rating - Client: {client_id}, Agent: {agent_id}, Property: {property_id}")
            raise DuplicateRatingError("You have already rated this agent for this property")

        # Recompute from the full rating set, including the new one
        aggregate_stmt = select(
            func.avg(Rating.rating).label('average'),
            func.count(Rating.id).label('total')
        ).where(Rating.agent_id == agent_id)
        aggregate_result = await session.execute(aggregate_stmt)
        aggregate = aggregate_result.one()

        agent.rating = float(aggregate.average or 0.0)
        agent.total_ratings = aggregate.total or 0

        await session.commit()

        logger.info(
            f"Rating submitted - Agent: {agent_id}, Rating: {rating}, "
            f"New average: {agent.rating:.2f} ({agent.total_ratings} ratings)"
        )

        return {
            "id": new_rating.id,
            "client_id": client_id,
            "agent_id": agent_id,
            "property_id": property_id,
            "rating": rating,
            "comment": comment,
            "agent_rating": agent.rating,
            "agent_total_ratings": agent.total_ratings,
        }


async def get_rating_page_context(client_id: str, agent_id: str) -> Dict:
    """
    Load the agent and their properties for the rating form
    Raises NotFoundError if the agent is unknown, AgentLockedError if not unlocked
    """
    async with AsyncSessionLocal() as session:
        agent = await session.get(User, agent_id)
        if not agent or agent.role != "agent":
            raise NotFoundError("Agent not found")

        agent_data = user_to_dict(agent)

        properties_stmt = select(Property).where(
            Property.agent_id == agent_id
        ).order_by(desc(Property.created_at))
        properties_result = await session.execute(properties_stmt)
        properties: List[Dict] = [
            {
                "id": prop.id,
                "title": prop.title,
                "area": prop.area,
                "state": prop.state,
            }
            for prop in properties_result.scalars().all()
        ]

    if not await is_agent_unlocked(client_id, agent_id):
        raise AgentLockedError("You can only rate agents you have unlocked")

    return {"agent": agent_data, "properties": properties}
