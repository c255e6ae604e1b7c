from typing import List, Optional
from datetime import datetime
from app.db.models.case import Priority
from app.db.models.task import TaskStatus
from app.schemas.base import CamelModel
from app.schemas.document import Document
from app.schemas.user import UserSummary

class Task(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: Priority
    order: int
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    case_id: str
    assignee_id: Optional[str] = None
    template_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    assignee: Optional[UserSummary] = None
    documents: List[Document] = []

class TaskStatusUpdate(CamelModel):
    status: TaskStatus
