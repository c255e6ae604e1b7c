from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel

class Document(CamelModel):
    id: str
    name: str
    type: str
    path: str
    case_id: str
    task_id: Optional[str] = None
    created_at: Optional[datetime] = None
