import pytest
from sqlalchemy import func, select

from app.core.security import verify_password
from app.crud.user import get_user_by_email
from app.db.models import Case, Task, TaskTemplate, UserRole
from app.utils.seed_data import DEMO_PASSWORD, seed_database

pytestmark = pytest.mark.asyncio


async def test_seed_inserts_demo_rows(test_db):
    created = await seed_database(test_db)
    assert created == {
        "users": 1,
        "clients": 2,
        "templates": 2,
        "task_templates": 9,
        "cases": 2,
        "tasks": 5,
    }


async def test_seed_is_idempotent(test_db):
    await seed_database(test_db)
    created = await seed_database(test_db)
    assert set(created.values()) == {0}

    case_count = (await test_db.execute(select(func.count()).select_from(Case))).scalar_one()
    assert case_count == 2


async def test_seeded_template_task_counts(seeded_db):
    result = await seeded_db.execute(
        select(TaskTemplate.template_id, func.count())
        .group_by(TaskTemplate.template_id)
    )
    assert dict(result.all()) == {"eb1a-template": 5, "h1b-template": 4}

    result = await seeded_db.execute(
        select(Task.case_id, func.count()).group_by(Task.case_id)
    )
    assert dict(result.all()) == {"case-1": 3, "case-2": 2}


async def test_seeded_lawyer_can_sign_in(seeded_db):
    lawyer = await get_user_by_email(seeded_db, email="john@example.com")
    assert lawyer.id == "user-1"
    assert lawyer.role == UserRole.LAWYER
    assert verify_password(DEMO_PASSWORD, lawyer.password_hash)
    assert not verify_password("wrongpassword", lawyer.password_hash)
