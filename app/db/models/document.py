from sqlalchemy import Column, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.core.database import Base

class Document(Base):
    __tablename__ = "documents"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    path = Column(Text, nullable=False)
    case_id = Column(Text, ForeignKey("cases.id"), nullable=False, index=True)
    task_id = Column(Text, ForeignKey("tasks.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp())

    # Relationships
    case = relationship("Case", back_populates="documents")
    task = relationship("Task", back_populates="documents")
