from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import SQLAlchemyError
import logging
from app.db.models import Template, TaskTemplate

logger = logging.getLogger(__name__)

async def get_templates(db: AsyncSession) -> List[Template]:
    """
    All templates with their task templates in ascending order.
    """
    try:
        result = await db.execute(
            select(Template)
            .options(selectinload(Template.tasks))
            .order_by(Template.id.asc())
        )
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_templates: {e}")
        raise

async def get_template(db: AsyncSession, template_id: str) -> Optional[Template]:
    try:
        result = await db.execute(select(Template).where(Template.id == template_id))
        return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_template: {e}")
        raise

async def get_task_templates(db: AsyncSession, template_id: str) -> List[TaskTemplate]:
    try:
        result = await db.execute(
            select(TaskTemplate)
            .where(TaskTemplate.template_id == template_id)
            .order_by(TaskTemplate.order.asc())
        )
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_task_templates: {e}")
        raise
