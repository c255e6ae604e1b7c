from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
import logging
from app.db.models import Client

logger = logging.getLogger(__name__)

async def get_client(db: AsyncSession, client_id: str) -> Optional[Client]:
    try:
        result = await db.execute(select(Client).where(Client.id == client_id))
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_client: {e}")
        raise

async def get_clients(db: AsyncSession) -> List[Client]:
    """
    All clients, shared across the firm, ordered by first name.
    """
    try:
        result = await db.execute(select(Client).order_by(Client.first_name.asc()))
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_clients: {e}")
        raise
