from typing import List, Optional
import logging
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import case as case_crud
from app.crud import client as client_crud
from app.crud import template as template_crud
from app.db.models import Case, User
from app.schemas.case import CaseCreate
from app.utils.logging import log_error

logger = logging.getLogger(__name__)


class CaseValidationError(ValueError):
    """Raised before any write when the create input is unusable."""


class TemplateInstantiationError(Exception):
    """
    The case row is committed but its template tasks could not be created.
    """

    def __init__(self, case_id: str, cause: Exception):
        super().__init__(f"Tasks for case {case_id} could not be created: {cause}")
        self.case_id = case_id
        self.cause = cause


class CaseService:
    """Case listing, lookup and creation scoped to the calling lawyer."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_cases(self, lawyer: User) -> List[Case]:
        return await case_crud.get_cases_for_lawyer(self.db, lawyer_id=lawyer.id)

    async def get_case(self, case_id: str, lawyer: User) -> Optional[Case]:
        return await case_crud.get_case_for_lawyer(self.db, case_id=case_id, lawyer_id=lawyer.id)

    async def create_case(self, case_in: CaseCreate, lawyer: User) -> Case:
        """
        Create an OPEN case owned by the caller and, when a template is
        given, copy its task list onto the case.

        The case and its tasks are two separate commits. When the second one
        fails the case is kept and TemplateInstantiationError is raised.
        """
        title = (case_in.title or "").strip()
        if not title or not case_in.client_id:
            raise CaseValidationError("Title and client are required")

        client = await client_crud.get_client(self.db, client_id=case_in.client_id)
        if client is None:
            raise CaseValidationError("Client not found")

        template_id = case_in.template_id or None
        if template_id is not None:
            template = await template_crud.get_template(self.db, template_id=template_id)
            if template is None:
                raise CaseValidationError("Template not found")

        new_case = await case_crud.create_case(
            self.db,
            title=title,
            description=case_in.description,
            client_id=case_in.client_id,
            lawyer_id=lawyer.id,
            template_id=template_id,
            priority=case_in.priority,
            due_date=case_in.due_date,
        )

        if template_id is not None:
            await self.instantiate_template(new_case.id, template_id, lawyer)

        return await case_crud.get_case_summary(self.db, case_id=new_case.id)

    async def instantiate_template(self, case_id: str, template_id: str, lawyer: User) -> int:
        logger.info(f"Instantiating template {template_id} for case {case_id}")
        try:
            task_templates = await template_crud.get_task_templates(self.db, template_id=template_id)
            if not task_templates:
                return 0
            tasks = await case_crud.create_tasks_from_templates(
                self.db,
                case_id=case_id,
                task_templates=task_templates,
                assignee_id=lawyer.id,
            )
            return len(tasks)
        except Exception as e:
            log_error(
                e,
                "Case created without its template tasks",
                case_id=case_id,
                template_id=template_id,
                lawyer_id=lawyer.id,
            )
            raise TemplateInstantiationError(case_id, e) from e
