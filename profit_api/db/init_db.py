from profit_api.db.session import engine, Base
from profit_api.core.logger import logger

def init_db():
    # Registers the tables on Base.metadata
    from profit_api.models.user import User
    from profit_api.models.payment import Payment

    logger.info("Creating tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created successfully")

if __name__ == "__main__":
    init_db()
