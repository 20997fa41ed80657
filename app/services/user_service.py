from typing import Optional
from sqlalchemy import select
from app.database.connection import AsyncSessionLocal
from app.models.user import User
from app.models.agent_unlock import AgentUnlock


def user_to_dict(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "phone": user.phone,
        "role": user.role,
        "is_active": user.is_active,
        "rating": float(user.rating or 0.0),
        "total_ratings": user.total_ratings or 0,
    }


async def get_user_by_id(user_id: str) -> Optional[dict]:
    """Get user (client or agent) by ID"""
    async with AsyncSessionLocal() as session:
        stmt = select(User).where(User.id == user_id)
        result = await session.execute(stmt)
        user = result.scalar_one_or_none()

        if not user:
            return None

        return user_to_dict(user)


async def is_agent_unlocked(client_id: str, agent_id: str) -> bool:
    """Check whether the client has been granted access to the agent"""
    async with AsyncSessionLocal() as session:
        stmt = select(AgentUnlock).where(
            AgentUnlock.client_id == client_id,
            AgentUnlock.agent_id == agent_id
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
