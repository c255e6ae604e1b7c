from sqlalchemy import Column, Text, DateTime, Enum as SQLEnum, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from enum import Enum
from app.core.database import Base

class CaseStatus(str, Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING_REVIEW = "PENDING_REVIEW"
    APPROVED = "APPROVED"
    DENIED = "DENIED"
    CLOSED = "CLOSED"

class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"

class Case(Base):
    __tablename__ = "cases"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(SQLEnum(CaseStatus, name="case_status"), nullable=False, default=CaseStatus.OPEN)
    priority = Column(SQLEnum(Priority, name="priority"), nullable=False, default=Priority.MEDIUM)
    due_date = Column(DateTime(timezone=True), nullable=True)
    client_id = Column(Text, ForeignKey("clients.id"), nullable=False, index=True)
    lawyer_id = Column(Text, ForeignKey("users.id"), nullable=False, index=True)
    template_id = Column(Text, ForeignKey("templates.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), server_default=func.current_timestamp())
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp())

    # Relationships
    client = relationship("Client", back_populates="cases")
    lawyer = relationship("User", back_populates="cases")
    template = relationship("Template", back_populates="cases")
    tasks = relationship("Task", back_populates="case", order_by="Task.order")
    documents = relationship("Document", back_populates="case")
