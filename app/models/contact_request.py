from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database.connection import Base


class ContactRequest(Base):
    __tablename__ = "contact_requests"

    id = Column(String, primary_key=True)
    client_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    agent_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    property_id = Column(String, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    status = Column(String, nullable=False, default="pending")
    notes = Column(String, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    client = relationship("User", foreign_keys=[client_id])
    agent = relationship("User", foreign_keys=[agent_id])
    property = relationship("Property")

    # One request per (client, agent, property)
    __table_args__ = (
        UniqueConstraint('client_id', 'agent_id', 'property_id', name='uq_contact_request_triple'),
        CheckConstraint("status IN ('pending', 'contacted', 'closed')", name='ck_contact_request_status'),
    )
