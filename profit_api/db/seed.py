"""Seed the database with one paid and one free demo user."""

from sqlalchemy.orm import Session

from profit_api.db.init_db import init_db
from profit_api.db.session import SessionLocal
from profit_api.models.user import User
from profit_api.core.logger import logger

DEMO_USERS = [
    {"email": "paid@example.com", "paid": True},
    {"email": "free@example.com", "paid": False},
]


def upsert_user(db: Session, email: str, **fields) -> User:
    """Create the user if missing; existing users are left untouched."""
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        user = User(email=email, **fields)
        db.add(user)
        db.commit()
        db.refresh(user)
    return user


def seed(db: Session) -> list[User]:
    return [upsert_user(db, **fields) for fields in DEMO_USERS]


def main():
    init_db()
    db = SessionLocal()
    try:
        users = seed(db)
    except Exception as e:
        logger.error(f"Error seeding database: {str(e)}", exc_info=True)
        raise
    finally:
        db.close()

    for user in users:
        logger.info(f"Seeded user {user.email}", extra={"user_email": user.email, "paid": user.paid})

if __name__ == "__main__":
    main()
