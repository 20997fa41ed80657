from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database.connection import Base


MIN_RATING = 1
MAX_RATING = 5


class Rating(Base):
    __tablename__ = "ratings"

    id = Column(String, primary_key=True)
    client_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    agent_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    property_id = Column(String, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    client = relationship("User", foreign_keys=[client_id])
    agent = relationship("User", foreign_keys=[agent_id])
    property = relationship("Property")

    # One rating per (client, agent, property)
    __table_args__ = (
        UniqueConstraint('client_id', 'agent_id', 'property_id', name='uq_rating_triple'),
        CheckConstraint(f"rating >= {MIN_RATING} AND rating <= {MAX_RATING}", name='ck_rating_range'),
    )
