from app.db.models.user import User, UserRole
from app.db.models.client import Client
from app.db.models.template import Template, TaskTemplate
from app.db.models.case import Case, CaseStatus, Priority
from app.db.models.task import Task, TaskStatus
from app.db.models.document import Document

# Export all models and enums
__all__ = [
    'User', 'UserRole',
    'Client',
    'Template', 'TaskTemplate',
    'Case', 'CaseStatus', 'Priority',
    'Task', 'TaskStatus',
    'Document',
]
