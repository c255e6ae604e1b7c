from sqlalchemy import Column, Text, Integer, DateTime, Enum as SQLEnum, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from enum import Enum
from app.core.database import Base
from app.db.models.case import Priority

class TaskStatus(str, Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    BLOCKED = "BLOCKED"
    CANCELLED = "CANCELLED"

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(SQLEnum(TaskStatus, name="task_status"), nullable=False, default=TaskStatus.PENDING)
    priority = Column(SQLEnum(Priority, name="priority"), nullable=False, default=Priority.MEDIUM)
    # Copied from the source TaskTemplate; not unique within a case
    order = Column(Integer, nullable=False, default=0)
    due_date = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    case_id = Column(Text, ForeignKey("cases.id"), nullable=False, index=True)
    assignee_id = Column(Text, ForeignKey("users.id"), nullable=True)
    template_id = Column(Text, ForeignKey("task_templates.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp())
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    # Relationships
    case = relationship("Case", back_populates="tasks")
    assignee = relationship("User", back_populates="assigned_tasks")
    template = relationship("TaskTemplate", back_populates="tasks")
    documents = relationship("Document", back_populates="task")
