from app.core.database import Base
from app.db.models.user import User
from app.db.models.client import Client
from app.db.models.template import Template, TaskTemplate
from app.db.models.case import Case
from app.db.models.task import Task
from app.db.models.document import Document

# All models are imported here for SQLAlchemy to discover them
