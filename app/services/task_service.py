from datetime import datetime, timezone
from typing import Dict, FrozenSet
import logging

from app.db.models import Task, TaskStatus

logger = logging.getLogger(__name__)

TASK_STATUS_TRANSITIONS: Dict[TaskStatus, FrozenSet[TaskStatus]] = {
    TaskStatus.PENDING: frozenset({
        TaskStatus.IN_PROGRESS, TaskStatus.BLOCKED, TaskStatus.CANCELLED, TaskStatus.COMPLETED,
    }),
    TaskStatus.IN_PROGRESS: frozenset({
        TaskStatus.COMPLETED, TaskStatus.BLOCKED, TaskStatus.PENDING, TaskStatus.CANCELLED,
    }),
    TaskStatus.BLOCKED: frozenset({
        TaskStatus.PENDING, TaskStatus.IN_PROGRESS, TaskStatus.CANCELLED,
    }),
    TaskStatus.COMPLETED: frozenset({TaskStatus.IN_PROGRESS}),
    TaskStatus.CANCELLED: frozenset({TaskStatus.PENDING}),
}


class InvalidTaskTransition(ValueError):
    def __init__(self, current: TaskStatus, requested: TaskStatus):
        super().__init__(f"Cannot move task from {current.value} to {requested.value}")
        self.current = current
        self.requested = requested


def can_transition(current: TaskStatus, requested: TaskStatus) -> bool:
    if current == requested:
        return True
    return requested in TASK_STATUS_TRANSITIONS.get(current, frozenset())


def apply_task_status(task: Task, requested: TaskStatus) -> Task:
    """
    Move a task to a new status in memory; completion is stamped on the way
    into COMPLETED and cleared on the way out.
    """
    current = TaskStatus(task.status)
    if not can_transition(current, requested):
        raise InvalidTaskTransition(current, requested)
    if current == requested:
        return task

    task.status = requested
    if requested == TaskStatus.COMPLETED:
        task.completed_at = datetime.now(timezone.utc)
    elif current == TaskStatus.COMPLETED:
        task.completed_at = None

    logger.debug(f"Task {task.id} moved from {current.value} to {requested.value}")
    return task
