from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.database.connection import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(String, primary_key=True)
    agent_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    property_type = Column(String, nullable=True, index=True)  # Indexed for filtering
    state = Column(String, nullable=True, index=True)
    area = Column(String, nullable=True)
    address = Column(String, nullable=True)
    price = Column(Numeric(14, 2), nullable=False)
    status = Column(String, nullable=False, default="active", index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    agent = relationship("User", backref="properties")

    # Composite index for the dashboard listing (active, newest first)
    __table_args__ = (
        Index('idx_property_status_created', 'status', 'created_at'),
    )
