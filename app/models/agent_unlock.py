from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database.connection import Base


class AgentUnlock(Base):
    """Grants a client access to an agent (contact details, rating)"""
    __tablename__ = "agent_unlocks"

    client_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    agent_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
