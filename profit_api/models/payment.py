from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String

from profit_api.db.session import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, nullable=False, index=True)  # not unique: one user, many payments
    amount = Column(Integer, nullable=False)  # minor currency units (cents)
    currency = Column(String, nullable=False, default="usd")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
