from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload
from sqlalchemy.exc import SQLAlchemyError
import logging
from app.db.models import Case, Task

logger = logging.getLogger(__name__)

async def get_task_for_lawyer(db: AsyncSession, task_id: str, lawyer_id: str) -> Optional[Task]:
    """
    Get a task whose case is owned by the lawyer, with assignee and documents.
    """
    try:
        result = await db.execute(
            select(Task)
            .join(Case, Task.case_id == Case.id)
            .options(joinedload(Task.assignee), selectinload(Task.documents))
            .where(Task.id == task_id, Case.lawyer_id == lawyer_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_task_for_lawyer: {e}")
        raise

async def save_task(db: AsyncSession, task: Task) -> Task:
    try:
        await db.commit()
        logger.info(f"Task updated successfully: {task.id}")
        return task
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error in save_task: {e}")
        raise
