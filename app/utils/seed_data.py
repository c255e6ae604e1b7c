"""
Demo data: one lawyer, two clients, the EB1A and H1B templates and two cases
with partially completed task lists.

Every insert is keyed (primary key, or email for users and clients) and
skipped when the row already exists, so seeding twice changes nothing.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Type
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import Base
from app.crud.user import create_user, get_user_by_email
from app.db.models import (
    Case, CaseStatus, Client, Priority, Task, TaskStatus, TaskTemplate, Template, User, UserRole,
)
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

USERS = [
    {
        "id": "user-1",
        "email": "john@example.com",
        "name": "John Doe",
        "role": UserRole.LAWYER,
    },
]

CLIENTS = [
    {
        "id": "client-1",
        "first_name": "Alice",
        "last_name": "Johnson",
        "email": "alice@example.com",
        "phone": "+1-555-0123",
        "nationality": "Canadian",
    },
    {
        "id": "client-2",
        "first_name": "Bob",
        "last_name": "Smith",
        "email": "bob@example.com",
        "phone": "+1-555-0456",
        "nationality": "British",
    },
]

TEMPLATES = [
    {
        "id": "eb1a-template",
        "name": "EB1A - Extraordinary Ability",
        "type": "EB1A",
        "description": "Employment-based petition for individuals with extraordinary ability",
    },
    {
        "id": "h1b-template",
        "name": "H1B - Specialty Occupation",
        "type": "H1B",
        "description": "Temporary worker in specialty occupation",
    },
]

TASK_TEMPLATES = [
    {
        "id": "eb1a-task-1",
        "title": "Initial Client Consultation",
        "description": "Meet with client to assess qualifications and gather preliminary documents",
        "order": 1,
        "template_id": "eb1a-template",
    },
    {
        "id": "eb1a-task-2",
        "title": "Evidence Collection",
        "description": "Gather evidence of extraordinary ability (awards, publications, media coverage)",
        "order": 2,
        "template_id": "eb1a-template",
    },
    {
        "id": "eb1a-task-3",
        "title": "Petition Preparation",
        "description": "Prepare Form I-140 and supporting documentation",
        "order": 3,
        "template_id": "eb1a-template",
    },
    {
        "id": "eb1a-task-4",
        "title": "File Petition",
        "description": "Submit petition to USCIS",
        "order": 4,
        "template_id": "eb1a-template",
    },
    {
        "id": "eb1a-task-5",
        "title": "Monitor Case Status",
        "description": "Track petition status and respond to any requests for evidence",
        "order": 5,
        "template_id": "eb1a-template",
    },
    {
        "id": "h1b-task-1",
        "title": "LCA Filing",
        "description": "File Labor Condition Application with Department of Labor",
        "order": 1,
        "template_id": "h1b-template",
    },
    {
        "id": "h1b-task-2",
        "title": "Gather Supporting Documents",
        "description": "Collect degree certificates, job offer letter, and company documentation",
        "order": 2,
        "template_id": "h1b-template",
    },
    {
        "id": "h1b-task-3",
        "title": "Prepare H1B Petition",
        "description": "Complete Form I-129 and compile supporting evidence",
        "order": 3,
        "template_id": "h1b-template",
    },
    {
        "id": "h1b-task-4",
        "title": "Submit to USCIS",
        "description": "File H1B petition with USCIS during filing season",
        "order": 4,
        "template_id": "h1b-template",
    },
]

CASES = [
    {
        "id": "case-1",
        "title": "EB1A Petition for Alice Johnson",
        "description": "Extraordinary ability petition for software engineer",
        "status": CaseStatus.IN_PROGRESS,
        "priority": Priority.HIGH,
        "due_date": datetime(2025, 12, 31, tzinfo=timezone.utc),
        "client_id": "client-1",
        "lawyer_id": "user-1",
        "template_id": "eb1a-template",
    },
    {
        "id": "case-2",
        "title": "H1B Application for Bob Smith",
        "description": "H1B visa application for data scientist position",
        "status": CaseStatus.OPEN,
        "priority": Priority.MEDIUM,
        "due_date": datetime(2025, 6, 30, tzinfo=timezone.utc),
        "client_id": "client-2",
        "lawyer_id": "user-1",
        "template_id": "h1b-template",
    },
]

TASKS = [
    {
        "id": "case-1-task-1",
        "title": "Initial Client Consultation",
        "description": "Meet with Alice Johnson to assess qualifications",
        "status": TaskStatus.COMPLETED,
        "priority": Priority.HIGH,
        "order": 1,
        "completed_at": datetime(2025, 1, 15, tzinfo=timezone.utc),
        "case_id": "case-1",
        "template_id": "eb1a-task-1",
    },
    {
        "id": "case-1-task-2",
        "title": "Evidence Collection",
        "description": "Gathering software engineering awards and publications",
        "status": TaskStatus.IN_PROGRESS,
        "priority": Priority.HIGH,
        "order": 2,
        "case_id": "case-1",
        "template_id": "eb1a-task-2",
    },
    {
        "id": "case-1-task-3",
        "title": "Petition Preparation",
        "description": "Prepare Form I-140 for Alice Johnson",
        "status": TaskStatus.PENDING,
        "priority": Priority.MEDIUM,
        "order": 3,
        "case_id": "case-1",
        "template_id": "eb1a-task-3",
    },
    {
        "id": "case-2-task-1",
        "title": "LCA Filing",
        "description": "File Labor Condition Application for Bob Smith",
        "status": TaskStatus.COMPLETED,
        "priority": Priority.MEDIUM,
        "order": 1,
        "completed_at": datetime(2025, 2, 1, tzinfo=timezone.utc),
        "case_id": "case-2",
        "template_id": "h1b-task-1",
    },
    {
        "id": "case-2-task-2",
        "title": "Gather Supporting Documents",
        "description": "Collecting degree and job offer documentation",
        "status": TaskStatus.PENDING,
        "priority": Priority.MEDIUM,
        "order": 2,
        "case_id": "case-2",
        "template_id": "h1b-task-2",
    },
]


async def _upsert(db: AsyncSession, model: Type[Base], data: Dict[str, Any], key: str = "id") -> bool:
    """Insert the row unless one with the same key exists. Returns True on insert."""
    column = getattr(model, key)
    result = await db.execute(select(model).where(column == data[key]))
    if result.scalar_one_or_none() is not None:
        return False
    db.add(model(**data))
    return True


async def seed_database(db: AsyncSession) -> Dict[str, int]:
    """
    Insert the demo rows that are missing and commit. Returns the number of
    inserted rows per table.
    """
    created: Dict[str, int] = {}

    # create_user commits on its own; the other rows go in one transaction
    users_created = 0
    for row in USERS:
        if await get_user_by_email(db, email=row["email"]) is None:
            await create_user(db, UserCreate(password=DEMO_PASSWORD, **row))
            users_created += 1
    created[User.__tablename__] = users_created

    batches = [
        (Client, CLIENTS, "email"),
        (Template, TEMPLATES, "id"),
        (TaskTemplate, TASK_TEMPLATES, "id"),
        (Case, CASES, "id"),
        (Task, [dict(row, assignee_id="user-1") for row in TASKS], "id"),
    ]

    try:
        for model, rows, key in batches:
            inserted = 0
            for row in rows:
                if await _upsert(db, model, row, key=key):
                    inserted += 1
            # Later batches reference these rows
            await db.flush()
            created[model.__tablename__] = inserted
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database error in seed_database: {e}")
        raise

    logger.info(f"Seed data created: {created}")
    return created
