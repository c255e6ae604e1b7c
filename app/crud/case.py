from typing import List, Optional
from datetime import datetime
import uuid
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload
from sqlalchemy.exc import SQLAlchemyError
import logging
from app.db.models import Case, CaseStatus, Priority, Task, TaskStatus, TaskTemplate, Template

logger = logging.getLogger(__name__)


def generate_case_id() -> str:
    return f"case-{uuid.uuid4().hex}"

def generate_task_id() -> str:
    return f"task-{uuid.uuid4().hex}"


def _detail_options():
    return (
        joinedload(Case.client),
        joinedload(Case.lawyer),
        joinedload(Case.template).selectinload(Template.tasks),
        selectinload(Case.tasks).joinedload(Task.assignee),
        selectinload(Case.tasks).selectinload(Task.documents),
        selectinload(Case.documents),
    )


async def get_cases_for_lawyer(db: AsyncSession, lawyer_id: str) -> List[Case]:
    """
    Cases owned by a lawyer with client and template projections, newest first.
    """
    try:
        result = await db.execute(
            select(Case)
            .options(joinedload(Case.client), joinedload(Case.template))
            .where(Case.lawyer_id == lawyer_id)
            .order_by(Case.created_at.desc())
        )
        return list(result.unique().scalars().all())
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_cases_for_lawyer: {e}")
        raise

async def get_case_for_lawyer(db: AsyncSession, case_id: str, lawyer_id: str) -> Optional[Case]:
    """
    Get a case with everything the detail view needs. Cases owned by another
    lawyer come back as None, exactly like missing ones.
    """
    try:
        result = await db.execute(
            select(Case)
            .options(*_detail_options())
            .where(Case.id == case_id, Case.lawyer_id == lawyer_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_case_for_lawyer: {e}")
        raise

async def get_case_summary(db: AsyncSession, case_id: str) -> Optional[Case]:
    try:
        result = await db.execute(
            select(Case)
            .options(joinedload(Case.client), joinedload(Case.template))
            .where(Case.id == case_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_case_summary: {e}")
        raise

async def create_case(
    db: AsyncSession,
    *,
    title: str,
    client_id: str,
    lawyer_id: str,
    description: Optional[str] = None,
    template_id: Optional[str] = None,
    priority: Optional[Priority] = None,
    due_date: Optional[datetime] = None,
) -> Case:
    """
    Insert and commit a new OPEN case.
    """
    logger.info("Starting case creation in CRUD layer")

    try:
        db_case = Case(
            id=generate_case_id(),
            title=title,
            description=description,
            client_id=client_id,
            lawyer_id=lawyer_id,
            template_id=template_id or None,
            priority=priority or Priority.MEDIUM,
            due_date=due_date,
            status=CaseStatus.OPEN,
        )

        db.add(db_case)
        await db.commit()

        logger.info(f"Case created successfully with ID: {db_case.id}")
        return db_case

    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error in create_case: {e}")
        raise

async def create_tasks_from_templates(
    db: AsyncSession,
    case_id: str,
    task_templates: List[TaskTemplate],
    assignee_id: str,
) -> List[Task]:
    """
    Copy task templates onto a case as PENDING, MEDIUM priority tasks and
    commit them in one batch.
    """
    try:
        tasks = [
            Task(
                id=generate_task_id(),
                title=task_template.title,
                description=task_template.description,
                status=TaskStatus.PENDING,
                priority=Priority.MEDIUM,
                order=task_template.order,
                case_id=case_id,
                assignee_id=assignee_id,
                template_id=task_template.id,
            )
            for task_template in task_templates
        ]
        db.add_all(tasks)
        await db.commit()

        logger.info(f"Created {len(tasks)} tasks for case {case_id}")
        return tasks

    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error in create_tasks_from_templates: {e}")
        raise
