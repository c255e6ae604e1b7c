from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.ext.asyncio import AsyncSession
import logging
from app.core.database import get_db
from app.core.auth import get_current_user
from app.crud import task as task_crud
from app.db.models import User
from app.schemas.task import Task, TaskStatusUpdate
from app.services.task_service import apply_task_status, InvalidTaskTransition

logger = logging.getLogger(__name__)
router = APIRouter()

@router.patch("/{task_id}", response_model=Task)
async def update_task_status(
    *,
    db: AsyncSession = Depends(get_db),
    task_id: str = Path(..., description="The ID of the task to update"),
    task_in: TaskStatusUpdate,
    current_user: User = Depends(get_current_user)
) -> Any:
    """
    Start, complete, block, cancel or reopen a task on one of the caller's cases.
    """
    logger.info(f"Task status update requested for {task_id} by user: {current_user.id}")

    task = await task_crud.get_task_for_lawyer(db, task_id=task_id, lawyer_id=current_user.id)
    if not task:
        logger.warning(f"Task not found for update: {task_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )

    try:
        apply_task_status(task, task_in.status)
    except InvalidTaskTransition as e:
        logger.warning(f"Rejected task transition for {task_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    await task_crud.save_task(db, task)
    return await task_crud.get_task_for_lawyer(db, task_id=task_id, lawyer_id=current_user.id)
