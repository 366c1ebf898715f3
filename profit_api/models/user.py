from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Integer, String

from profit_api.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    paid = Column(Boolean, default=False, nullable=False)
    stripe_customer_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
