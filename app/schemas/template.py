from typing import List, Optional
from datetime import datetime
from app.schemas.base import CamelModel

class TaskTemplate(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    order: int
    is_required: bool
    template_id: str

class TemplateInfo(CamelModel):
    name: str
    type: str

class Template(TemplateInfo):
    id: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    tasks: List[TaskTemplate] = []
