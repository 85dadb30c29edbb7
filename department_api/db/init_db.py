import logging
from department_api.core.database import engine
from department_api.models import Base  # Registers all models on the metadata

logger = logging.getLogger(__name__)

async def create_tables():
    """Create all database tables"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created successfully")

    except Exception as e:
        logger.error(f"Error creating tables: {str(e)}")
        raise

async def init_db():
    """Initialize the database"""
    logger.info("Initializing database...")
    await create_tables()
    logger.info("Database initialized successfully")
