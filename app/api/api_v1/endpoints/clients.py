from typing import List, Any
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.database import get_db
from app.core.auth import get_current_user
from app.crud import client as client_crud
from app.db.models import User
from app.schemas.client import Client

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[Client])
async def get_clients(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Retrieve clients.
    """
    logger.info(f"Client list requested by user: {current_user.id}")
    return await client_crud.get_clients(db)
