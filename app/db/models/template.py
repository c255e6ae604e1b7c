from sqlalchemy import Column, Text, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.core.database import Base

class Template(Base):
    """
    Reusable workflow blueprint for a case type (EB1A, H1B, ...).
    """
    __tablename__ = "templates"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp())

    # Relationships
    tasks = relationship(
        "TaskTemplate",
        back_populates="template",
        order_by="TaskTemplate.order"
    )
    cases = relationship("Case", back_populates="template")

    def __repr__(self):
        return f"<Template(id={self.id}, type={self.type})>"


class TaskTemplate(Base):
    """
    One ordered step of a Template.
    """
    __tablename__ = "task_templates"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    order = Column(Integer, nullable=False)
    is_required = Column(Boolean, nullable=False, default=True)
    template_id = Column(Text, ForeignKey("templates.id"), nullable=False, index=True)

    # Relationships
    template = relationship("Template", back_populates="tasks")
    tasks = relationship("Task", back_populates="template")
