from sqlalchemy import Column, String, Boolean, Integer, Float, DateTime, CheckConstraint
from sqlalchemy.sql import func
from app.database.connection import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, unique=True, nullable=False, index=True)
    full_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    role = Column(String, nullable=False, index=True)  # "client" or "agent"
    is_active = Column(Boolean, default=True)

    # Agent rating aggregate, recomputed from ratings on every new rating
    rating = Column(Float, nullable=False, default=0.0)
    total_ratings = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("role IN ('client', 'agent')", name="ck_users_role"),
    )
