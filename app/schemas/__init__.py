from app.schemas.user import User, UserCreate, UserLogin, UserSummary, Token
from app.schemas.client import Client, ClientName
from app.schemas.template import Template, TemplateInfo, TaskTemplate
from app.schemas.document import Document
from app.schemas.task import Task, TaskStatusUpdate
from app.schemas.case import CaseCreate, CaseSummary, CaseDetail

# Export all schemas
__all__ = [
    'User', 'UserCreate', 'UserLogin', 'UserSummary', 'Token',
    'Client', 'ClientName',
    'Template', 'TemplateInfo', 'TaskTemplate',
    'Document',
    'Task', 'TaskStatusUpdate',
    'CaseCreate', 'CaseSummary', 'CaseDetail',
]
