from typing import List, Optional
from datetime import datetime
from pydantic import field_validator
from app.db.models.case import CaseStatus, Priority
from app.schemas.base import CamelModel
from app.schemas.client import Client, ClientName
from app.schemas.document import Document
from app.schemas.task import Task
from app.schemas.template import Template, TemplateInfo
from app.schemas.user import UserSummary

class CaseCreate(CamelModel):
    # title and client_id are checked by the endpoint so that a missing
    # value answers 400 with the API error shape
    title: Optional[str] = None
    description: Optional[str] = None
    client_id: Optional[str] = None
    template_id: Optional[str] = None
    priority: Optional[Priority] = None
    due_date: Optional[datetime] = None

    @field_validator("description", "template_id", "priority", "due_date", mode="before")
    @classmethod
    def empty_string_is_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

class CaseBase(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    status: CaseStatus
    priority: Priority
    due_date: Optional[datetime] = None
    client_id: str
    lawyer_id: str
    template_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class CaseSummary(CaseBase):
    """Case list row: client name and template name/type projections."""
    client: ClientName
    template: Optional[TemplateInfo] = None

class CaseDetail(CaseBase):
    client: Client
    lawyer: UserSummary
    template: Optional[Template] = None
    tasks: List[Task] = []
    documents: List[Document] = []
