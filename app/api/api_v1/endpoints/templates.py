from typing import List, Any
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.database import get_db
from app.core.auth import get_current_user
from app.crud import template as template_crud
from app.db.models import User
from app.schemas.template import Template

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[Template])
async def get_templates(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Retrieve templates with their ordered task lists. Shared by all lawyers.
    """
    logger.info(f"Template list requested by user: {current_user.id}")
    return await template_crud.get_templates(db)
